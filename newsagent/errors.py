from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    misconfigured = "Misconfigured"
    invalid_argument = "InvalidArgument"
    upstream_failure = "UpstreamFailure"
    unknown_tool = "UnknownTool"


class NewsAgentError(Exception):
    """Base error carrying the kind reported back to callers."""

    kind: ErrorKind = ErrorKind.upstream_failure

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(NewsAgentError):
    kind = ErrorKind.misconfigured


class InvalidArgumentError(NewsAgentError):
    kind = ErrorKind.invalid_argument


class UpstreamError(NewsAgentError):
    kind = ErrorKind.upstream_failure


class UnknownToolError(NewsAgentError):
    kind = ErrorKind.unknown_tool
