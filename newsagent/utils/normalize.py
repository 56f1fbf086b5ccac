from __future__ import annotations

from typing import Any, Optional
from urllib.parse import urlparse


MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 50


def extract_domain(url: Optional[str]) -> str:
    if not url:
        return ""
    try:
        return urlparse(url).hostname or ""
    except ValueError:
        return ""


def clamp_page_size(value: int) -> int:
    return max(MIN_PAGE_SIZE, min(MAX_PAGE_SIZE, value))


def coerce_page_size(value: Any, default: int) -> int:
    """
    Read a caller supplied page size and clamp it to [1, 50].

    Args:
        value: int, numeric string, float or None
        default: used when value is None or an empty string

    Returns:
        int: clamped page size

    Raises:
        ValueError: value is not numeric
    """
    if value is None or value == "":
        return clamp_page_size(default)
    if isinstance(value, bool):
        raise ValueError(f"pageSize must be a number, got {value!r}")
    if isinstance(value, str):
        value = float(value.strip())
    return clamp_page_size(int(value))
