"""Canonical article value objects returned to the news client"""

from typing import Optional
from pydantic import BaseModel, Field


class ArticleSource(BaseModel):
    """Publisher of an article"""
    name: str

    class Config:
        frozen = True


class Article(BaseModel):
    """
    Normalized, fully-defaulted news item.

    Every field is populated except ``author``. Serialized with the camelCase
    keys the web client renders (``urlToImage``, ``publishedAt``).
    """
    title: str = Field(min_length=1)
    description: str
    content: str
    source: ArticleSource
    author: Optional[str] = None
    url: str
    url_to_image: str = Field(alias="urlToImage")
    published_at: str = Field(alias="publishedAt")  # ISO-8601
    category: str

    class Config:
        frozen = True
        populate_by_name = True
