from __future__ import annotations

from typing import List, Optional, Protocol, Tuple, TypedDict


class RawArticle(TypedDict, total=False):
    title: Optional[str]
    description: Optional[str]
    url: Optional[str]
    publishedAt: Optional[str]


class NewsProvider(Protocol):
    name: str

    async def fetch_search(self, term: str, limit: int) -> Tuple[List[RawArticle], List[RawArticle]]: ...

    async def fetch_latest(self, topic: Optional[str], limit: int) -> List[RawArticle]: ...
