from enum import Enum


class ProviderKind(str, Enum):
    AI_GATEWAY = "ai_gateway"
    SEARCH_API = "search_api"
