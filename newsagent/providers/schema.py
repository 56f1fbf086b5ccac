from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator


class NewsAPISource(BaseModel):
    id: Optional[str] = None
    name: Optional[str] = None


class NewsAPIArticle(BaseModel):
    model_config = ConfigDict(extra="ignore")

    source: Optional[NewsAPISource] = None
    author: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    urlToImage: Optional[str] = None
    publishedAt: Optional[str] = None
    content: Optional[str] = None


class NewsAPIResponse(BaseModel):
    status: Optional[str] = None
    totalResults: Optional[int] = None
    articles: List[NewsAPIArticle] = Field(default_factory=list)
    code: Optional[str] = None
    message: Optional[str] = None

    @field_validator("articles", mode="before")
    @classmethod
    def _null_articles(cls, value):
        return value or []
