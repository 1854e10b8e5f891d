"""
AI gateway normalizer
Handles chat-completion envelopes whose assistant text embeds a JSON array of
article-shaped objects, usually wrapped in prose or markdown fences
"""

import json
from typing import Any, List, Union

import structlog

from .base_normalizer import BaseNormalizer, text_or_none
from ..fallback import AI_GATEWAY_FALLBACK_ARTICLES
from ...models.article import Article
from ...models.enums import ProviderKind
from ....exceptions import ParseFailure
from ....utils.date_utils import parse_published_date
from ....utils.json_utils import extract_chat_message, extract_json_array, loads_body

logger = structlog.get_logger(__name__)


class AiGatewayNormalizer(BaseNormalizer):
    """Normalizer for AI-generated headline lists"""

    provider_kind = ProviderKind.AI_GATEWAY
    default_source_name = "India News"
    fallback_templates = AI_GATEWAY_FALLBACK_ARTICLES

    def parse(self, raw_body: Union[str, bytes], now: str) -> List[Article]:
        envelope = loads_body(raw_body)
        message = extract_chat_message(envelope)
        logger.debug("ai_gateway_message_received", message=message)

        return self.parse_message(message, now)

    def parse_message(self, message: str, now: str) -> List[Article]:
        """Parse the assistant text itself, bypassing the envelope"""
        records = extract_json_array(message)
        if records is None:
            try:
                records = json.loads(message)
            except json.JSONDecodeError as e:
                raise ParseFailure(f"Assistant message contains no JSON array: {e}")
            except RecursionError:
                raise ParseFailure("Assistant message is nested too deeply")

        records = self.require_list(records, "Assistant message")
        if not records:
            raise ParseFailure("Assistant message contains an empty article array")

        return [self.map_record(record, index, now) for index, record in enumerate(records)]

    def map_record(self, record: Any, index: int, now: str) -> Article:
        if not isinstance(record, dict):
            record = {}

        return self.build_article(
            index,
            now,
            title=record.get("title"),
            description=record.get("description"),
            content=record.get("content"),
            source_name=self._source_name(record.get("source")),
            author=record.get("author"),
            url=record.get("url"),
            image_url=record.get("urlToImage"),
            published_at=parse_published_date(text_or_none(record.get("publishedAt"))),
            category=record.get("category"),
        )

    def _source_name(self, source: Any) -> Any:
        # The prompt asks for a plain string; some models echo {"name": ...}
        if isinstance(source, dict):
            return source.get("name")
        return source
