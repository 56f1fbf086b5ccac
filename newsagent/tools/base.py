from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel

from .schema import NewsQuery


class NewsTool(Protocol):
    """One news pipeline: takes a validated query, returns the response model."""

    async def execute(self, query: NewsQuery) -> BaseModel: ...
