from __future__ import annotations

from .base import NewsTool
from .schema import (
    NO_ARTICLES_MESSAGE,
    GetNewsResponse,
    NewsQuery,
    SearchNewsResponse,
)
from ..providers.base import NewsProvider
from ..utils.aggregate import aggregate_latest, aggregate_search


class SearchNewsTool(NewsTool):
    def __init__(self, provider: NewsProvider) -> None:
        self.provider = provider

    async def execute(self, query: NewsQuery) -> SearchNewsResponse:
        term = query.searchTerm or ""
        headlines, everything = await self.provider.fetch_search(term, query.pageSize)
        articles = aggregate_search(headlines, everything, term, query.pageSize)
        return SearchNewsResponse(
            searchTerm=term,
            totalResults=len(articles),
            articles=articles,
            message=None if articles else NO_ARTICLES_MESSAGE,
        )


class GetNewsTool(NewsTool):
    def __init__(self, provider: NewsProvider) -> None:
        self.provider = provider

    async def execute(self, query: NewsQuery) -> GetNewsResponse:
        raw = await self.provider.fetch_latest(query.topic, query.pageSize)
        articles = aggregate_latest(raw, query.pageSize)
        return GetNewsResponse(
            topic=query.topic or "general",
            totalResults=len(articles),
            articles=articles,
            message=None if articles else NO_ARTICLES_MESSAGE,
        )
