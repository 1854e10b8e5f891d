from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import structlog

from ...dependencies import get_headline_service, get_structuring_service
from ....exceptions import NewsHubError
from ....news.schemas.requests import StructureArticleRequest
from ....news.schemas.responses import (
    ErrorResponse,
    HeadlinesErrorResponse,
    HeadlinesResponse,
    StructureArticleResponse
)
from ....news.services.headline_service import HeadlineService
from ....news.services.structuring_service import STRUCTURE_FAILED_MESSAGE, StructuringService

logger = structlog.get_logger(__name__)

router = APIRouter()


def _headlines_error(status_code: int, message: str, headline_service: HeadlineService) -> JSONResponse:
    payload = HeadlinesErrorResponse(error=message, articles=headline_service.fallback_articles())
    return JSONResponse(status_code=status_code, content=payload.model_dump(mode="json", by_alias=True))


HEADLINE_RESPONSES = {
    402: {"model": HeadlinesErrorResponse},
    429: {"model": HeadlinesErrorResponse},
    500: {"model": HeadlinesErrorResponse},
}

STRUCTURE_RESPONSES = {
    402: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.get("/headlines", response_model=HeadlinesResponse, responses=HEADLINE_RESPONSES)
async def get_headlines(headline_service: HeadlineService = Depends(get_headline_service)):
    """
    Get today's headlines from the configured provider.

    Always returns a renderable list. Upstream failures keep their status
    (429, 402, 500) and carry the provider's fallback articles.
    """
    try:
        articles = await headline_service.get_todays_articles()
    except NewsHubError as e:
        logger.error(
            "headlines_failed",
            provider=headline_service.provider_kind.value,
            error=e.message,
            error_code=e.error_code,
            details=e.details,
        )
        return _headlines_error(e.status_code, e.message, headline_service)
    except Exception as e:
        logger.error("headlines_unexpected_error", error=str(e), exc_info=e)
        return _headlines_error(500, str(e) or "Unknown error", headline_service)

    return HeadlinesResponse(articles=articles)


@router.post("/structure", response_model=StructureArticleResponse, responses=STRUCTURE_RESPONSES)
async def structure_article(
    request: StructureArticleRequest,
    structuring_service: StructuringService = Depends(get_structuring_service)
):
    """Restructure one article's text as markdown through the AI gateway"""
    try:
        structured = await structuring_service.structure(request.title, request.content)
    except NewsHubError as e:
        logger.error(
            "structure_article_failed",
            error=e.message,
            error_code=e.error_code,
            details=e.details,
        )
        return JSONResponse(status_code=e.status_code, content=ErrorResponse(error=e.message).model_dump())
    except Exception as e:
        logger.error("structure_article_unexpected_error", error=str(e), exc_info=e)
        return JSONResponse(status_code=500, content=ErrorResponse(error=STRUCTURE_FAILED_MESSAGE).model_dump())

    return StructureArticleResponse(structured_content=structured)

