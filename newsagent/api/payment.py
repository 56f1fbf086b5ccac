"""
x402 pay-per-call gate for the news routes.

Installed only when both FACILITATOR_URL and ADDRESS are set. Each priced
path answers 402 with the payment requirements until the caller sends a
valid X-PAYMENT header, which is verified and settled by the facilitator.
"""

from typing import List, Tuple

from fastapi import FastAPI
from x402.fastapi.middleware import require_payment

from ..config import Settings
from ..utils.logging import get_logger

logger = get_logger("newsagent.api.payment")


def priced_routes(settings: Settings) -> List[Tuple[List[str], str, str]]:
    # news routes are mounted both at the root and under /mcp
    return [
        (["/mcp/search_news", "/search_news"], settings.SEARCH_NEWS_PRICE, "Search news articles"),
        (["/mcp/get_news", "/get_news"], settings.GET_NEWS_PRICE, "Get latest news headlines"),
        (["/mcp/tools/call"], settings.JSONRPC_PRICE, "Call an MCP news tool"),
    ]


def install_payment_gate(app: FastAPI, settings: Settings) -> bool:
    if not settings.is_payment_configured:
        return False

    for paths, price, description in priced_routes(settings):
        app.middleware("http")(
            require_payment(
                path=paths,
                price=price,
                pay_to_address=settings.ADDRESS,
                network=settings.PAYMENT_NETWORK,
                description=description,
                mime_type="application/json",
                facilitator_config={"url": settings.FACILITATOR_URL},
            )
        )
        logger.info(f"💰 {', '.join(paths)} priced at {price}")
    return True
