from __future__ import annotations

from enum import Enum


class Endpoint(str, Enum):
    everything = "everything"
    top_headlines = "top-headlines"


class SortBy(str, Enum):
    relevancy = "relevancy"
    popularity = "popularity"
    published_at = "publishedAt"
