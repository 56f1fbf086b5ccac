"""
Console logging for newsagent

Every module logger lives under the "newsagent" logger, which owns the
single console handler.
"""

import logging
from typing import Optional

from ..config import settings

ROOT_LOGGER = "newsagent"
LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)7s %(name)s : %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach the console handler to the newsagent logger and set its level.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL. Defaults to LOG_LEVEL.

    Returns:
        The newsagent root logger
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(console_handler)
        root.propagate = False

    level = level or settings.LOG_LEVEL
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return root


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    if not logging.getLogger(ROOT_LOGGER).handlers:
        configure_logging()
    return logging.getLogger(name)
