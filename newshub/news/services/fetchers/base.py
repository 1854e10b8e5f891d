"""
Base class for upstream fetchers
One outbound HTTP call per operation; status mapping shared by all providers
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
import structlog

from ...models.enums import ProviderKind
from ....exceptions import ConfigError, PaymentRequiredError, RateLimitError, UpstreamError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RawResponse:
    """Unparsed upstream reply"""
    provider: ProviderKind
    status_code: int
    body: str


class UpstreamFetcher(ABC):
    """Base fetcher for news providers"""

    provider_kind: ProviderKind
    provider_label: str
    credential_name: str

    def __init__(
        self,
        api_key: Optional[str],
        url: str,
        timeout: Optional[float] = 120.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        self.api_key = api_key
        self.url = url
        self.timeout = timeout
        self.client = client

    async def fetch(self, params: Optional[Dict[str, Any]] = None) -> RawResponse:
        """
        Issue the provider's headline request

        Raises:
            ConfigError: no API key was configured
            RateLimitError: upstream answered 429
            PaymentRequiredError: upstream answered 402
            UpstreamError: any other non-2xx or transport failure
        """
        self.require_api_key()
        return await self.send(**self.build_request(params or {}))

    @abstractmethod
    def build_request(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Keyword arguments for ``httpx.AsyncClient.request``"""
        pass

    def require_api_key(self) -> str:
        if not self.api_key:
            logger.error("upstream_credential_missing", provider=self.provider_kind.value, credential=self.credential_name)
            raise ConfigError(
                f"{self.credential_name} is not configured",
                details={"provider": self.provider_kind.value}
            )
        return self.api_key

    async def send(self, method: str, url: str, **kwargs) -> RawResponse:
        logger.info("upstream_request_started", provider=self.provider_kind.value, method=method, url=url)

        try:
            if self.client is not None:
                response = await self.client.request(method, url, **kwargs)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error("upstream_transport_failed", provider=self.provider_kind.value, error=str(e))
            raise UpstreamError(
                f"{self.provider_label} error",
                details={"provider": self.provider_kind.value, "reason": str(e)}
            )

        return self.handle_response(response)

    def handle_response(self, response: httpx.Response) -> RawResponse:
        body = response.text

        if response.is_success:
            logger.debug(
                "upstream_response_received",
                provider=self.provider_kind.value,
                status_code=response.status_code,
                body=body,
            )
            return RawResponse(provider=self.provider_kind, status_code=response.status_code, body=body)

        logger.error(
            "upstream_request_failed",
            provider=self.provider_kind.value,
            status_code=response.status_code,
            body=body,
        )
        details = {"provider": self.provider_kind.value, "status_code": response.status_code}

        if response.status_code == 429:
            raise RateLimitError(details=details)
        if response.status_code == 402:
            raise PaymentRequiredError(details=details)
        raise UpstreamError(f"{self.provider_label} error", details=details)
