"""
Upstream payload normalizers
Each normalizer maps one provider's response body to canonical articles
"""

from typing import List, Union

from .base_normalizer import BaseNormalizer
from .ai_gateway_normalizer import AiGatewayNormalizer
from .search_api_normalizer import SearchApiNormalizer
from ...models.article import Article
from ...models.enums import ProviderKind


def get_normalizer(provider_kind: ProviderKind, **kwargs) -> BaseNormalizer:
    if provider_kind == ProviderKind.AI_GATEWAY:
        return AiGatewayNormalizer()
    elif provider_kind == ProviderKind.SEARCH_API:
        return SearchApiNormalizer(**kwargs)
    else:
        raise ValueError(f"Unknown provider: {provider_kind}")


def normalize(raw_body: Union[str, bytes], provider_kind: ProviderKind) -> List[Article]:
    return get_normalizer(ProviderKind(provider_kind)).normalize(raw_body)


__all__ = [
    'BaseNormalizer',
    'AiGatewayNormalizer',
    'SearchApiNormalizer',
    'get_normalizer',
    'normalize'
]
