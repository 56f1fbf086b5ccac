#!/usr/bin/env python3
"""
News Agent MCP Server
search_news / get_news tools backed by newsapi.org
"""

import json
import time
from datetime import datetime, timezone
from typing import Any, Optional

from fastmcp import FastMCP

from . import prompts
from .config import Settings, settings
from .providers.base import NewsProvider
from .tools.dispatcher import ToolDispatcher
from .tools.schema import ToolName
from .utils.logging import configure_logging, get_logger

logger = get_logger("newsagent.main")

STATUS_URI = "newsagent://status"


class ServerState:
    def __init__(self):
        self.startup_time = time.time()

    @property
    def uptime(self) -> float:
        return time.time() - self.startup_time


server_state = ServerState()


def create_mcp_server(settings: Settings, provider: Optional[NewsProvider] = None) -> FastMCP:
    dispatcher = ToolDispatcher(settings, provider)

    mcp = FastMCP(
        name="news-agent",
        instructions="""
News Agent MCP server backed by newsapi.org.

• search_news: keyword search over top headlines and full-text results, merged and de-duplicated (at most 15 articles)
• get_news: latest news for a topic, or the default category when no topic is given
""",
    )

    @mcp.tool(
        name=ToolName.search_news.value,
        description="Search for news articles about a specific topic with enhanced filtering",
    )
    async def search_news(searchTerm: Optional[str] = None, pageSize: Optional[Any] = None) -> str:
        """
        Args:
            searchTerm: The topic or keyword to search for
            pageSize: Number of articles to return (max 50, default 15)
        """
        result = await dispatcher.call_tool(
            ToolName.search_news.value, {"searchTerm": searchTerm, "pageSize": pageSize}
        )
        return result["content"][0]["text"]

    @mcp.tool(
        name=ToolName.get_news.value,
        description="Get the latest news headlines, optionally filtered by topic",
    )
    async def get_news(topic: Optional[str] = None, pageSize: Optional[Any] = None) -> str:
        """
        Args:
            topic: Optional topic to filter news by
            pageSize: Number of articles to return (max 50, default 10)
        """
        result = await dispatcher.call_tool(
            ToolName.get_news.value, {"topic": topic, "pageSize": pageSize}
        )
        return result["content"][0]["text"]

    @mcp.prompt(
        name="search_news_examples",
        description="Training examples for search_news tool - shows how users request news search",
    )
    def search_news_examples() -> str:
        return prompts.search_news_examples()

    @mcp.prompt(
        name="get_news_examples",
        description="Training examples for get_news tool - shows how users request latest headlines",
    )
    def get_news_examples() -> str:
        return prompts.get_news_examples()

    @mcp.resource(
        STATUS_URI,
        name="News Agent Status",
        description="Current news agent status and statistics",
        mime_type="application/json",
    )
    def news_status() -> str:
        return json.dumps(
            {
                "name": "news-agent",
                "status": "operational",
                "apiConfigured": settings.api_configured,
                "uptime": server_state.uptime,
                "availableTools": [t.value for t in ToolName],
                "timestamp": datetime.now(timezone.utc).isoformat(),
            },
            indent=2,
        )

    return mcp


mcp = create_mcp_server(settings)


def main() -> None:
    configure_logging(settings.LOG_LEVEL)
    logger.info("🚀 News Agent MCP Server starting up...")
    if not settings.api_configured:
        logger.warning("⚠️  NEWS_API_KEY is not set, every tool call will report Misconfigured")
    logger.info(f"📦 Tools: {', '.join(t.value for t in ToolName)}")

    try:
        if settings.MCP_TRANSPORT == "stdio":
            mcp.run(transport="stdio")
        else:
            mcp.run(transport=settings.MCP_TRANSPORT, host=settings.HOST, port=settings.PORT)
    except KeyboardInterrupt:
        logger.info("🛑 Server shutdown requested by user (KeyboardInterrupt)")
    finally:
        logger.info(f"👋 News Agent MCP Server ended after {server_state.uptime:.2f}s uptime")


if __name__ == "__main__":
    main()
