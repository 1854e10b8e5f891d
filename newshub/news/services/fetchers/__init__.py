"""
Upstream fetchers
Each fetcher issues one outbound call to a news provider and returns the raw body
"""

from typing import Optional

import httpx

from .base import RawResponse, UpstreamFetcher
from .ai_gateway import AiGatewayFetcher
from .search_api import SearchApiFetcher
from ...models.enums import ProviderKind


def create_fetcher(provider_kind: ProviderKind, settings, client: Optional[httpx.AsyncClient] = None) -> UpstreamFetcher:
    """Build a fetcher for ``provider_kind`` from explicit settings values"""
    if provider_kind == ProviderKind.AI_GATEWAY:
        return AiGatewayFetcher(
            api_key=settings.ai_gateway_api_key,
            url=settings.ai_gateway_url,
            model=settings.ai_gateway_model,
            article_count=settings.ai_article_count,
            timeout=settings.upstream_timeout_seconds,
            client=client,
        )
    elif provider_kind == ProviderKind.SEARCH_API:
        return SearchApiFetcher(
            api_key=settings.serpapi_api_key,
            url=settings.serpapi_url,
            engine=settings.serpapi_engine,
            query=settings.news_query,
            region=settings.news_region,
            language=settings.news_language,
            result_limit=settings.search_result_limit,
            timeout=settings.upstream_timeout_seconds,
            client=client,
        )
    else:
        raise ValueError(f"Unknown provider: {provider_kind}")


__all__ = [
    'RawResponse',
    'UpstreamFetcher',
    'AiGatewayFetcher',
    'SearchApiFetcher',
    'create_fetcher'
]
