"""
Search API normalizer
Handles SerpApi news documents (``news_results``) from the google_news engine
and from the classic google news tab
"""

from typing import Any, Dict, List, Optional, Union

import structlog

from .base_normalizer import BaseNormalizer, text_or_none
from ..fallback import SEARCH_API_FALLBACK_ARTICLES
from ...models.article import Article
from ...models.enums import ProviderKind
from ....exceptions import ParseFailure
from ....utils.date_utils import parse_published_date
from ....utils.json_utils import loads_body

logger = structlog.get_logger(__name__)

DEFAULT_RESULT_LIMIT = 20


class SearchApiNormalizer(BaseNormalizer):
    """Normalizer for search-engine news results"""

    provider_kind = ProviderKind.SEARCH_API
    default_source_name = "News Source"
    fallback_templates = SEARCH_API_FALLBACK_ARTICLES

    def __init__(self, result_limit: int = DEFAULT_RESULT_LIMIT):
        self.result_limit = result_limit

    def parse(self, raw_body: Union[str, bytes], now: str) -> List[Article]:
        document = loads_body(raw_body)
        if not isinstance(document, dict):
            raise ParseFailure("Search document is not a JSON object")

        results = document.get("news_results")
        if results is None:
            results = []
        results = self.require_list(results, "news_results")[:self.result_limit]

        if len(results) < self.result_limit:
            logger.info("search_results_below_limit", received=len(results), limit=self.result_limit)

        return [self.map_record(record, index, now) for index, record in enumerate(results)]

    def map_record(self, record: Any, index: int, now: str) -> Article:
        if not isinstance(record, dict):
            record = {}

        source = record.get("source")
        snippet = record.get("snippet")

        return self.build_article(
            index,
            now,
            title=record.get("title"),
            description=snippet,
            content=snippet,
            source_name=source.get("name") if isinstance(source, dict) else source,
            author=self._author(record, source),
            url=record.get("link"),
            image_url=record.get("thumbnail"),
            published_at=self._published_at(record),
            category=record.get("category"),
        )

    def _author(self, record: Dict[str, Any], source: Any) -> Optional[str]:
        author = text_or_none(record.get("author"))
        if author:
            return author

        authors = source.get("authors") if isinstance(source, dict) else None
        if isinstance(authors, list):
            names = [text_or_none(a) for a in authors]
            names = [name for name in names if name]
            if names:
                return ", ".join(names)
        return None

    def _published_at(self, record: Dict[str, Any]) -> Optional[str]:
        for key in ("iso_date", "date"):
            parsed = parse_published_date(record.get(key))
            if parsed:
                return parsed
        return None
