from datetime import datetime, timezone

from fastapi import APIRouter, Request

from ..schema import HealthResponse
from ... import __version__
from ...config import Settings
from ...tools.schema import ToolName

router = APIRouter(tags=["health"])

PROMPTS = ["search_news_examples", "get_news_examples"]
RESOURCES = ["newsagent://status"]


def _settings(request: Request) -> Settings:
    return request.app.state.settings


def _uptime(request: Request) -> float:
    return (datetime.now(timezone.utc) - request.app.state.started_at).total_seconds()


@router.get("/")
async def server_info(request: Request) -> dict:
    settings = _settings(request)
    return {
        "name": "News Agent MCP Server",
        "version": __version__,
        "status": "healthy",
        "paymentEnabled": settings.is_payment_configured,
        "endpoints": {
            "tools": {
                "list": "GET /mcp/tools",
                "call": "POST /mcp/tools/call",
            },
            "health": "GET /health",
            "info": "GET /info",
            "news": {
                "search": "GET /mcp/search_news",
                "latest": "GET /mcp/get_news",
            },
        },
        "pricing": settings.pricing(),
        "examples": {
            "search_news": {"get": "/mcp/search_news?searchTerm=technology&pageSize=10"},
            "get_news": {"get": "/mcp/get_news?topic=sports&pageSize=5"},
        },
        "capabilities": {
            "tools": [t.value for t in ToolName],
            "prompts": PROMPTS,
            "resources": RESOURCES,
        },
    }


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        uptime=_uptime(request),
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.get("/info")
async def info(request: Request) -> dict:
    settings = _settings(request)
    pricing = settings.pricing()
    return {
        "name": "News Agent MCP Server",
        "version": __version__,
        "protocol": "Model Context Protocol",
        "description": "MCP server providing news search and retrieval tools",
        "paymentEnabled": settings.is_payment_configured,
        "paymentNetwork": settings.PAYMENT_NETWORK if pricing else None,
        "capabilities": {
            "tools": {
                "search_news": "Search for news articles about a specific topic",
                "get_news": "Get latest news headlines",
            },
            "prompts": {
                "search_news_examples": "Training examples for search_news tool usage",
                "get_news_examples": "Training examples for get_news tool usage",
            },
            "resources": {
                "newsagent://status": "News agent status and statistics",
            },
        },
        "pricing": {
            "tools": {
                "search_news": pricing["search_news"],
                "get_news": pricing["get_news"],
            },
            "jsonRpc": pricing["jsonRpc"],
        } if pricing else None,
    }
