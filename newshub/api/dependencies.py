from fastapi import Depends

from ..config import Settings, get_settings
from ..news.models.enums import ProviderKind
from ..news.services.fetchers import AiGatewayFetcher, create_fetcher
from ..news.services.headline_service import HeadlineService, create_headline_service
from ..news.services.structuring_service import StructuringService


def get_headline_service(settings: Settings = Depends(get_settings)) -> HeadlineService:
    return create_headline_service(settings)


def get_ai_gateway_fetcher(settings: Settings = Depends(get_settings)) -> AiGatewayFetcher:
    return create_fetcher(ProviderKind.AI_GATEWAY, settings)


def get_structuring_service(fetcher: AiGatewayFetcher = Depends(get_ai_gateway_fetcher)) -> StructuringService:
    return StructuringService(fetcher)
