"""
Pytest configuration and shared fixtures.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx
import pytest

from newsagent.config import Settings
from newsagent.providers.newsapi import NewsAPIProvider
from newsagent.tools.dispatcher import ToolDispatcher

BASE_URL = "https://newsapi.test/v2"


# ============================================================
# Settings Fixtures
# ============================================================


@pytest.fixture
def settings():
    """Settings with a credential and a fake upstream base URL."""
    return Settings(_env_file=None, NEWS_API_KEY="test-key", NEWS_API_BASE_URL=BASE_URL)


@pytest.fixture
def unconfigured_settings():
    """Settings without NEWS_API_KEY."""
    return Settings(_env_file=None, NEWS_API_KEY=None, NEWS_API_BASE_URL=BASE_URL)


# ============================================================
# Fake newsapi.org
# ============================================================


def make_article(
    title: Optional[str],
    description: Optional[str] = "Some description",
    url: Optional[str] = "https://www.example.com/story",
    published_at: Optional[str] = "2025-01-15T10:00:00Z",
) -> Dict[str, Any]:
    return {
        "source": {"id": None, "name": "Example"},
        "author": "Reporter",
        "title": title,
        "description": description,
        "url": url,
        "urlToImage": None,
        "publishedAt": published_at,
        "content": None,
    }


class FakeNewsAPI:
    """Routes requests by endpoint name and records every request made."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: Dict[str, Any] = {}
        self.set_articles("top-headlines", [])
        self.set_articles("everything", [])

    def set_articles(self, endpoint: str, articles: List[Dict[str, Any]]) -> None:
        body = {"status": "ok", "totalResults": len(articles), "articles": articles}
        self._routes[endpoint] = lambda: httpx.Response(200, json=body)

    def set_response(self, endpoint: str, status_code: int, **kwargs: Any) -> None:
        self._routes[endpoint] = lambda: httpx.Response(status_code, **kwargs)

    def set_error(self, endpoint: str, error: Exception) -> None:
        self._routes[endpoint] = error

    def requests_to(self, endpoint: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.endswith("/" + endpoint)]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path.rsplit("/", 1)[-1]
        route = self._routes.get(endpoint)
        if route is None:
            return httpx.Response(404, json={"status": "error", "code": "notFound", "message": "no route"})
        if isinstance(route, Exception):
            raise route
        return route()

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_api():
    return FakeNewsAPI()


@pytest.fixture
def provider(settings, fake_api):
    return NewsAPIProvider(settings, transport=fake_api.transport)


@pytest.fixture
def dispatcher(settings, provider):
    return ToolDispatcher(settings, provider)


@pytest.fixture
def unconfigured_dispatcher(unconfigured_settings, fake_api):
    provider = NewsAPIProvider(unconfigured_settings, transport=fake_api.transport)
    return ToolDispatcher(unconfigured_settings, provider)


@pytest.fixture
def technology_scenario(fake_api):
    """
    3 headline + 4 everything articles for "technology": one title shared
    between the sets, two articles without a description.
    """
    headlines = [
        make_article("Technology stocks rally", "Markets climb on tech earnings", "https://news.example.com/a"),
        make_article("Schools adopt new technology", "Classrooms go digital", "https://edu.example.org/b"),
        make_article("Technology outage hits airports", None, "https://travel.example.net/c"),
    ]
    everything = [
        make_article("Schools adopt new technology", "Duplicate from full-text", "https://dup.example.com/b2"),
        make_article("Chip makers expand", "New technology fabs announced", "https://chips.example.com/d"),
        make_article("Technology policy debate", None, "https://policy.example.com/e"),
        make_article("Gardening tips", "Spring planting guide", "https://garden.example.com/f"),
    ]
    fake_api.set_articles("top-headlines", headlines)
    fake_api.set_articles("everything", everything)
    return headlines, everything
