"""News API response schemas"""

from typing import List
from pydantic import BaseModel, Field

from ..models.article import Article


class HeadlinesResponse(BaseModel):
    """Normalized headline list"""
    articles: List[Article]


class HeadlinesErrorResponse(BaseModel):
    """Degraded headline response: error message plus a renderable list"""
    error: str
    articles: List[Article] = []


class StructureArticleResponse(BaseModel):
    structured_content: str = Field(alias="structuredContent")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    error: str
