import structlog

from .fetchers import AiGatewayFetcher
from ..prompts import STRUCTURE_SYSTEM_PROMPT, build_structure_prompt
from ...exceptions import ParseFailure
from ...utils.json_utils import extract_chat_message, loads_body

logger = structlog.get_logger(__name__)

STRUCTURE_FAILED_MESSAGE = "Failed to structure article. Please try again."


class StructuringService:
    def __init__(self, fetcher: AiGatewayFetcher):
        self.fetcher = fetcher

    async def structure(self, title: str, content: str) -> str:
        """
        Ask the AI gateway to restructure an article as markdown.

        The assistant text is returned unmodified. There is no fallback text:
        a missing result raises ParseFailure for the caller to surface.
        """
        logger.info("structure_article_started", title=title, content_length=len(content))
        raw = await self.fetcher.complete(STRUCTURE_SYSTEM_PROMPT, build_structure_prompt(title, content))

        try:
            structured = extract_chat_message(loads_body(raw.body))
        except ParseFailure as e:
            logger.error("structure_article_parse_failed", error=str(e), raw_body=raw.body)
            raise ParseFailure(STRUCTURE_FAILED_MESSAGE, details={"reason": e.message})

        logger.info("structure_article_completed", structured_length=len(structured))
        return structured
