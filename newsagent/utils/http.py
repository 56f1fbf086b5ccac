import httpx
from typing import Dict, Optional

from ..config import Settings


def default_headers(settings: Settings) -> Dict[str, str]:
    return {
        "User-Agent": "newsagent-mcp/0.1",
        "Accept": "application/json",
        "Accept-Language": settings.NEWS_LANGUAGE,
    }


def build_async_client(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    timeout = httpx.Timeout(settings.TIMEOUT_SECONDS)
    return httpx.AsyncClient(
        timeout=timeout,
        headers=default_headers(settings),
        follow_redirects=True,
        transport=transport,
    )
