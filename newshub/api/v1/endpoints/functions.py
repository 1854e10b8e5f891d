"""
Edge-function compatible routes
Serves the paths the web client was originally built against
"""

from fastapi import APIRouter

from .news import (
    HEADLINE_RESPONSES,
    STRUCTURE_RESPONSES,
    get_headlines,
    structure_article
)
from ....news.schemas.responses import HeadlinesResponse, StructureArticleResponse

router = APIRouter()

router.add_api_route(
    "/fetch-trending-news",
    get_headlines,
    methods=["GET", "POST"],
    response_model=HeadlinesResponse,
    responses=HEADLINE_RESPONSES,
)
router.add_api_route(
    "/structure-article",
    structure_article,
    methods=["POST"],
    response_model=StructureArticleResponse,
    responses=STRUCTURE_RESPONSES,
)
