from __future__ import annotations

import asyncio
from typing import Any, Dict, List, Optional, Tuple

import httpx
from pydantic import ValidationError

from .base import RawArticle
from .enums import Endpoint, SortBy
from .schema import NewsAPIResponse
from ..config import Settings
from ..errors import ConfigurationError, UpstreamError
from ..utils.http import build_async_client
from ..utils.logging import get_logger
from ..utils.normalize import clamp_page_size

logger = get_logger("newsagent.providers.newsapi")


class NewsAPIProvider:
    """newsapi.org v2 client. Stateless apart from the settings it was built with."""

    name = "newsapi"

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self.base_url = settings.NEWS_API_BASE_URL.rstrip("/")
        self._transport = transport

    def _require_api_key(self) -> str:
        if not self.settings.NEWS_API_KEY:
            raise ConfigurationError("NEWS_API_KEY environment variable is not set")
        return self.settings.NEWS_API_KEY

    async def fetch_search(self, term: str, limit: int) -> Tuple[List[RawArticle], List[RawArticle]]:
        """
        Query top-headlines and everything concurrently for a search term.

        Args:
            term: search keyword
            limit: page size requested from each endpoint, clamped to [1, 50]

        Returns:
            (headlines, everything): both raw result sets, unmerged

        Raises:
            ConfigurationError: NEWS_API_KEY is not set
            UpstreamError: either request failed
        """
        api_key = self._require_api_key()
        page_size = clamp_page_size(limit)
        headlines_params = {
            "q": term,
            "language": self.settings.NEWS_LANGUAGE,
            "pageSize": page_size,
            "apiKey": api_key,
        }
        everything_params = {
            "q": f'"{term}"',
            "sortBy": SortBy.relevancy.value,
            "language": self.settings.NEWS_LANGUAGE,
            "pageSize": page_size,
            "apiKey": api_key,
        }

        async with build_async_client(self.settings, self._transport) as client:
            results = await asyncio.gather(
                self._get(client, Endpoint.top_headlines, headlines_params),
                self._get(client, Endpoint.everything, everything_params),
                return_exceptions=True,
            )

        for result in results:
            if isinstance(result, BaseException):
                raise result
        headlines, everything = results
        return headlines, everything

    async def fetch_latest(self, topic: Optional[str], limit: int) -> List[RawArticle]:
        """
        Query everything for a topic, or DEFAULT_TOPIC when none is given.

        The upstream page size is left at the provider default; `limit` is
        applied when the results are paginated.
        """
        api_key = self._require_api_key()
        params = {
            "q": topic or self.settings.DEFAULT_TOPIC,
            "apiKey": api_key,
        }
        async with build_async_client(self.settings, self._transport) as client:
            articles = await self._get(client, Endpoint.everything, params)
        return articles

    async def _get(self, client: httpx.AsyncClient, endpoint: Endpoint, params: Dict[str, Any]) -> List[RawArticle]:
        url = f"{self.base_url}/{endpoint.value}"
        try:
            resp = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.error(f"{endpoint.value} request failed: {e!r}")
            raise UpstreamError(f"{endpoint.value} request failed: {e}") from e

        try:
            payload = resp.json()
        except ValueError as e:
            logger.error(f"{endpoint.value} returned non-JSON body (HTTP {resp.status_code})")
            raise UpstreamError(f"{endpoint.value} returned an unreadable response (HTTP {resp.status_code})") from e

        try:
            data = NewsAPIResponse.model_validate(payload)
        except ValidationError as e:
            logger.error(f"{endpoint.value} returned unexpected payload: {e}")
            raise UpstreamError(f"{endpoint.value} returned an unexpected response shape") from e

        if resp.status_code != 200 or data.status == "error":
            message = data.message or f"HTTP {resp.status_code}"
            logger.error(f"{endpoint.value} failed: {data.code or resp.status_code} {message}")
            raise UpstreamError(message)

        results: List[RawArticle] = []
        for it in data.articles:
            results.append(
                {
                    "title": it.title,
                    "description": it.description,
                    "url": it.url,
                    "publishedAt": it.publishedAt,
                }
            )
        return results
