from typing import List, Optional

import structlog

from .fetchers import UpstreamFetcher, create_fetcher
from .normalizers import BaseNormalizer, get_normalizer
from ..models.article import Article
from ..models.enums import ProviderKind

logger = structlog.get_logger(__name__)


class HeadlineService:
    """Today's headlines: one upstream fetch followed by normalization"""

    def __init__(self, fetcher: UpstreamFetcher, normalizer: BaseNormalizer):
        if fetcher.provider_kind != normalizer.provider_kind:
            raise ValueError(
                f"Fetcher for {fetcher.provider_kind.value} paired with normalizer for {normalizer.provider_kind.value}"
            )
        self.fetcher = fetcher
        self.normalizer = normalizer

    @property
    def provider_kind(self) -> ProviderKind:
        return self.fetcher.provider_kind

    async def get_todays_articles(self) -> List[Article]:
        """
        Fetch and normalize the current headline list.

        Fetch errors (config, rate limit, payment, upstream) propagate; a body
        that cannot be parsed degrades to the provider's fallback set.
        """
        raw = await self.fetcher.fetch()
        articles = self.normalizer.normalize(raw.body)
        logger.info("headlines_ready", provider=self.provider_kind.value, article_count=len(articles))
        return articles

    def fallback_articles(self) -> List[Article]:
        return self.normalizer.fallback_articles()


def create_headline_service(settings, provider_kind: Optional[ProviderKind] = None, client=None) -> HeadlineService:
    provider_kind = ProviderKind(provider_kind or settings.headline_provider)
    fetcher = create_fetcher(provider_kind, settings, client=client)

    if provider_kind == ProviderKind.SEARCH_API:
        normalizer = get_normalizer(provider_kind, result_limit=settings.search_result_limit)
    else:
        normalizer = get_normalizer(provider_kind)

    return HeadlineService(fetcher, normalizer)
