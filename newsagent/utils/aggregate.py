from __future__ import annotations

from typing import Callable, Hashable, Iterable, List, Optional, Sequence, TypeVar

from ..providers.base import RawArticle
from ..tools.schema import NormalizedArticle
from .normalize import MAX_PAGE_SIZE, extract_domain

T = TypeVar("T")

SEARCH_RESULT_CAP = 15

NO_TITLE = "No title"
NO_CONTENT = "No content available"
NO_DESCRIPTION = "No description available"


def stable_dedupe(items: Iterable[T], key: Callable[[T], Hashable]) -> List[T]:
    seen = set()
    deduped: List[T] = []
    for it in items:
        k = key(it)
        if k in seen:
            continue
        seen.add(k)
        deduped.append(it)
    return deduped


def is_relevant(article: RawArticle, term: str) -> bool:
    title = article.get("title")
    description = article.get("description")
    if not title or not description:
        return False
    needle = term.lower()
    return needle in title.lower() or needle in description.lower()


def filter_relevant(articles: Iterable[RawArticle], term: str) -> List[RawArticle]:
    return [it for it in articles if is_relevant(it, term)]


def project(articles: Sequence[RawArticle], missing_description: str) -> List[NormalizedArticle]:
    return [
        NormalizedArticle(
            index=i,
            title=it.get("title") or NO_TITLE,
            description=it.get("description") or missing_description,
            source=extract_domain(it.get("url")),
            url=it.get("url"),
            publishedAt=it.get("publishedAt"),
        )
        for i, it in enumerate(articles, start=1)
    ]


def aggregate_search(
    headlines: Sequence[RawArticle],
    everything: Sequence[RawArticle],
    term: str,
    page_size: int,
) -> List[NormalizedArticle]:
    """
    Merge both search result sets into one page.

    Headlines come first so they win title collisions against the
    full-text results. The page never exceeds SEARCH_RESULT_CAP items.
    """
    merged = [*headlines, *everything]
    relevant = filter_relevant(merged, term)
    unique = stable_dedupe(relevant, key=lambda it: it.get("title"))
    return project(unique[:min(page_size, SEARCH_RESULT_CAP)], NO_CONTENT)


def aggregate_latest(articles: Sequence[RawArticle], page_size: Optional[int]) -> List[NormalizedArticle]:
    # provider order is kept as is, no relevance filter
    limit = MAX_PAGE_SIZE if page_size is None else min(page_size, MAX_PAGE_SIZE)
    return project(articles[:limit], NO_DESCRIPTION)
