from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import ErrorKind, InvalidArgumentError, NewsAgentError
from ..utils.normalize import clamp_page_size, coerce_page_size


DEFAULT_SEARCH_PAGE_SIZE = 15
DEFAULT_LATEST_PAGE_SIZE = 10
NO_ARTICLES_MESSAGE = "No news articles found."


class ToolName(str, Enum):
    search_news = "search_news"
    get_news = "get_news"


class NewsMode(str, Enum):
    search = "SEARCH"
    latest = "LATEST"


class NewsQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: NewsMode
    searchTerm: Optional[str] = None
    topic: Optional[str] = None
    pageSize: int

    @field_validator("pageSize")
    @classmethod
    def _clamp(cls, value: int) -> int:
        return clamp_page_size(value)

    @classmethod
    def from_arguments(cls, mode: NewsMode, args: Mapping[str, Any]) -> "NewsQuery":
        """
        Build a query from a tool argument bag.

        Raises:
            InvalidArgumentError: searchTerm missing in search mode, or pageSize not numeric
        """
        search_term: Optional[str] = None
        topic: Optional[str] = None
        if mode is NewsMode.search:
            search_term = _text(args.get("searchTerm"))
            if not search_term:
                raise InvalidArgumentError("Missing searchTerm parameter")
            default = DEFAULT_SEARCH_PAGE_SIZE
        else:
            topic = _text(args.get("topic"))
            default = DEFAULT_LATEST_PAGE_SIZE

        raw_page_size = args.get("pageSize")
        try:
            page_size = coerce_page_size(raw_page_size, default)
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidArgumentError(f"Invalid pageSize parameter: {raw_page_size!r}") from e

        return cls(mode=mode, searchTerm=search_term, topic=topic, pageSize=page_size)


def _text(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    return value.strip() or None


class NormalizedArticle(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    title: str
    description: str
    source: str
    url: Optional[str] = None
    publishedAt: Optional[str] = None


class SearchNewsResponse(BaseModel):
    searchTerm: str
    totalResults: int
    articles: List[NormalizedArticle]
    message: Optional[str] = None


class GetNewsResponse(BaseModel):
    topic: str
    totalResults: int
    articles: List[NormalizedArticle]
    message: Optional[str] = None


class ToolError(BaseModel):
    kind: ErrorKind
    message: str


class ToolResult(BaseModel):
    success: bool
    data: Dict[str, Any] = Field(default_factory=dict)
    error: Optional[ToolError] = None

    @classmethod
    def ok(cls, response: BaseModel) -> "ToolResult":
        return cls(success=True, data=response.model_dump(exclude_none=True))

    @classmethod
    def fail(cls, exc: NewsAgentError) -> "ToolResult":
        return cls(success=False, error=ToolError(kind=exc.kind, message=exc.message))

    def to_payload(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, **self.data}
        error = self.error or ToolError(kind=ErrorKind.upstream_failure, message="Unknown error")
        return {"success": False, "error": error.kind.value, "message": error.message}


class CallToolRequest(BaseModel):
    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)
