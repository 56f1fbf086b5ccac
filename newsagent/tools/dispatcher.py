"""
Tool dispatcher shared by the MCP server and the REST routes.

Maps a tool name and argument bag onto one of the news pipelines and turns
every failure into a structured ToolResult, so callers never see a raised
exception from here.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Mapping, Optional, Tuple

from mcp.types import TextContent

from .base import NewsTool
from .news_tool import GetNewsTool, SearchNewsTool
from .schema import NewsMode, NewsQuery, ToolName, ToolResult
from ..config import Settings
from ..errors import (
    ConfigurationError,
    ErrorKind,
    InvalidArgumentError,
    NewsAgentError,
    UnknownToolError,
    UpstreamError,
)
from ..providers.base import NewsProvider
from ..providers.newsapi import NewsAPIProvider
from ..utils.logging import get_logger

logger = get_logger("newsagent.dispatcher")


TOOL_DESCRIPTORS: List[Dict[str, Any]] = [
    {
        "name": ToolName.search_news.value,
        "description": "Search for news articles about a specific topic with enhanced filtering",
        "inputSchema": {
            "type": "object",
            "properties": {
                "searchTerm": {
                    "type": "string",
                    "description": "The topic or keyword to search for",
                },
                "pageSize": {
                    "type": "number",
                    "description": "Number of articles to return (max 50)",
                    "default": 15,
                },
            },
            "required": ["searchTerm"],
        },
    },
    {
        "name": ToolName.get_news.value,
        "description": "Get the latest news headlines, optionally filtered by topic",
        "inputSchema": {
            "type": "object",
            "properties": {
                "topic": {
                    "type": "string",
                    "description": "Optional topic to filter news by",
                },
                "pageSize": {
                    "type": "number",
                    "description": "Number of articles to return (max 50)",
                    "default": 10,
                },
            },
            "required": [],
        },
    },
]


class ToolDispatcher:
    def __init__(self, settings: Settings, provider: Optional[NewsProvider] = None) -> None:
        self.settings = settings
        self.provider: NewsProvider = provider or NewsAPIProvider(settings)
        self._handlers: Dict[ToolName, Tuple[NewsMode, NewsTool]] = {
            ToolName.search_news: (NewsMode.search, SearchNewsTool(self.provider)),
            ToolName.get_news: (NewsMode.latest, GetNewsTool(self.provider)),
        }
        missing = set(ToolName) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler registered for: {sorted(m.value for m in missing)}")

    @staticmethod
    def list_tools() -> List[Dict[str, Any]]:
        return [dict(t) for t in TOOL_DESCRIPTORS]

    @staticmethod
    def resolve(name: str) -> ToolName:
        try:
            return ToolName(name)
        except ValueError:
            raise UnknownToolError(f"Unknown tool: {name}") from None

    async def invoke(self, name: str, args: Optional[Mapping[str, Any]] = None) -> ToolResult:
        """
        Run one tool call.

        Args:
            name: tool name, "search_news" or "get_news"
            args: tool arguments (searchTerm, topic, pageSize)

        Returns:
            ToolResult: success with the response data, or failure with kind and message
        """
        logger.info(f"🔧 Tool call: {name} args={args!r}")

        try:
            tool_name = self.resolve(name)
            if not self.settings.api_configured:
                raise ConfigurationError("NEWS_API_KEY environment variable is not set")
            if args is not None and not isinstance(args, Mapping):
                raise InvalidArgumentError("Tool arguments must be an object")

            mode, tool = self._handlers[tool_name]
            query = NewsQuery.from_arguments(mode, args or {})
            response = await tool.execute(query)

        except (ConfigurationError, InvalidArgumentError, UnknownToolError) as e:
            logger.warning(f"{name} rejected ({e.kind.value}): {e.message}")
            return ToolResult.fail(e)
        except NewsAgentError as e:
            logger.error(f"{name} failed ({e.kind.value}): {e.message}")
            return ToolResult.fail(UpstreamError(e.message))
        except Exception as e:
            logger.exception(f"{name} crashed: {e}")
            return ToolResult.fail(UpstreamError(str(e) or e.__class__.__name__))

        logger.info(f"✅ {name} returned {response.totalResults} articles")
        return ToolResult.ok(response)

    async def call_tool(self, name: str, args: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """MCP-style call: always returns {"content": [{"type": "text", "text": ...}]}."""
        result = await self.invoke(name, args)
        if result.error is not None and result.error.kind is ErrorKind.unknown_tool:
            text = f"Error: Unknown tool {name}"
        else:
            text = json.dumps(result.to_payload(), ensure_ascii=False, indent=2)
        block = TextContent(type="text", text=text)
        return {"content": [block.model_dump(by_alias=True, exclude_none=True)]}
