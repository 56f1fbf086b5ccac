from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .payment import install_payment_gate
from .router import api_router
from .. import __version__
from ..config import Settings, settings as default_settings
from ..providers.base import NewsProvider
from ..tools.dispatcher import ToolDispatcher
from ..utils.logging import configure_logging, get_logger

logger = get_logger("newsagent.api")


def log_banner(settings: Settings) -> None:
    logger.info("=" * 60)
    logger.info("🚀 News Agent MCP Server")
    logger.info(f"📡 Listening on http://{settings.HOST}:{settings.PORT}")
    if settings.is_payment_configured:
        logger.info(f"💰 Payment: ENABLED (network {settings.PAYMENT_NETWORK})")
        logger.info(f"   Search News: {settings.SEARCH_NEWS_PRICE}")
        logger.info(f"   Get News: {settings.GET_NEWS_PRICE}")
        logger.info(f"   Tool Call: {settings.JSONRPC_PRICE}")
    else:
        logger.warning("⚠️  Payment not configured. Set FACILITATOR_URL and ADDRESS in .env file")
    if not settings.api_configured:
        logger.warning("⚠️  NEWS_API_KEY is not set, news endpoints will fail")
    logger.info("📰 GET /mcp/search_news?searchTerm=technology&pageSize=10")
    logger.info("📰 GET /mcp/get_news?topic=sports&pageSize=5")
    logger.info("=" * 60)


def create_app(
    settings: Optional[Settings] = None,
    provider: Optional[NewsProvider] = None,
) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log_banner(settings)
        yield
        logger.info("🛑 News Agent API shutting down")

    app = FastAPI(title="News Agent MCP Server", version=__version__, lifespan=lifespan)
    app.state.settings = settings
    app.state.dispatcher = ToolDispatcher(settings, provider)
    app.state.started_at = datetime.now(timezone.utc)
    install_payment_gate(app, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router)
    return app


app = create_app()


def main() -> None:
    configure_logging(default_settings.LOG_LEVEL)
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)


if __name__ == "__main__":
    main()
