"""
Base normalizer for upstream news payloads
Defines the interface every provider normalizer implements and the shared
field-defaulting rules
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Union

import structlog

from ...models.article import Article
from ...models.enums import ProviderKind
from ..fallback import build_fallback_articles
from ....exceptions import ParseFailure
from ....utils.date_utils import utc_now_iso

logger = structlog.get_logger(__name__)

DEFAULT_DESCRIPTION = "Stay informed with the latest updates."
DEFAULT_CONTENT = "Full details coming soon."
DEFAULT_URL = "#"
DEFAULT_CATEGORY = "general"
PLACEHOLDER_IMAGE_BASE_ID = 1504711434969


def placeholder_image_url(index: int) -> str:
    """Stock image URL that differs per list position"""
    return f"https://images.unsplash.com/photo-{PLACEHOLDER_IMAGE_BASE_ID + index}?w=800&q=80"


def text_or_none(value: Any) -> Optional[str]:
    """
    Usable text from an upstream field.

    Strings that are empty or whitespace-only, containers and null all count
    as missing; numbers are stringified.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.strip():
        return value
    return None


class BaseNormalizer(ABC):
    """Turns one provider's raw response body into canonical articles"""

    provider_kind: ProviderKind
    default_source_name: str
    fallback_templates: Sequence[Dict[str, Any]]

    def normalize(self, raw_body: Union[str, bytes]) -> List[Article]:
        """
        Map a raw body to articles. Never raises.

        Total parse failure yields this provider's fallback set.
        """
        now = utc_now_iso()
        try:
            articles = self.parse(raw_body, now)
        except Exception as e:
            logger.error(
                "normalize_parse_failed",
                provider=self.provider_kind.value,
                error=str(e),
                raw_body=self._preview(raw_body),
            )
            return self.fallback_articles(now)

        logger.info("normalize_completed", provider=self.provider_kind.value, article_count=len(articles))
        return articles

    @abstractmethod
    def parse(self, raw_body: Union[str, bytes], now: str) -> List[Article]:
        """
        Parse a raw body into articles

        Raises:
            ParseFailure: the body has no usable article list
        """
        pass

    def fallback_articles(self, published_at: Optional[str] = None) -> List[Article]:
        return build_fallback_articles(self.fallback_templates, published_at)

    def build_article(
        self,
        index: int,
        now: str,
        title: Any = None,
        description: Any = None,
        content: Any = None,
        source_name: Any = None,
        author: Any = None,
        url: Any = None,
        image_url: Any = None,
        published_at: Any = None,
        category: Any = None,
    ) -> Article:
        """Apply the defaulting rules to one record's extracted fields"""
        description = text_or_none(description)

        return Article(
            title=text_or_none(title) or f"Breaking News {index + 1}",
            description=description or DEFAULT_DESCRIPTION,
            content=text_or_none(content) or description or DEFAULT_CONTENT,
            source={"name": text_or_none(source_name) or self.default_source_name},
            author=text_or_none(author),
            url=text_or_none(url) or DEFAULT_URL,
            url_to_image=text_or_none(image_url) or placeholder_image_url(index),
            published_at=text_or_none(published_at) or now,
            category=text_or_none(category) or DEFAULT_CATEGORY,
        )

    def _preview(self, raw_body: Any, limit: int = 2000) -> str:
        if isinstance(raw_body, bytes):
            raw_body = raw_body.decode("utf-8", errors="replace")
        text = str(raw_body)
        return text if len(text) <= limit else text[:limit] + "..."

    @staticmethod
    def require_list(value: Any, what: str) -> List[Any]:
        if not isinstance(value, list):
            raise ParseFailure(f"{what} is not an array")
        return value
