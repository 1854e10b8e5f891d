"""
Search API fetcher using SerpApi's news engines
"""

from typing import Any, Dict, Optional

import httpx

from .base import UpstreamFetcher
from ...models.enums import ProviderKind


class SearchApiFetcher(UpstreamFetcher):
    """SerpApi search endpoint returning a ``news_results`` document"""

    provider_kind = ProviderKind.SEARCH_API
    provider_label = "Search API"
    credential_name = "SERPAPI_API_KEY"

    def __init__(
        self,
        api_key: Optional[str],
        url: str = "https://serpapi.com/search.json",
        engine: str = "google_news",
        query: str = "India latest news",
        region: str = "in",
        language: str = "en",
        result_limit: int = 20,
        timeout: Optional[float] = 120.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        super().__init__(api_key, url, timeout=timeout, client=client)
        self.engine = engine
        self.query = query
        self.region = region
        self.language = language
        self.result_limit = result_limit

    def build_request(self, params: Dict[str, Any]) -> Dict[str, Any]:
        query_params = {
            "engine": self.engine,
            "q": params.get("query", self.query),
            "gl": params.get("region", self.region),
            "hl": params.get("language", self.language),
            "num": params.get("num", self.result_limit),
            "api_key": self.api_key,
        }
        return {
            "method": "GET",
            "url": self.url,
            "params": query_params,
            "headers": {"Accept": "application/json"},
        }
