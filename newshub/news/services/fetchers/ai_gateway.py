"""
AI gateway fetcher
Chat-completion calls for AI-generated headlines and for the structuring pass
"""

from typing import Any, Dict, Optional

import httpx

from .base import RawResponse, UpstreamFetcher
from ...models.enums import ProviderKind
from ...prompts import build_headline_prompts


class AiGatewayFetcher(UpstreamFetcher):
    """OpenAI-compatible chat-completion gateway"""

    provider_kind = ProviderKind.AI_GATEWAY
    provider_label = "AI gateway"
    credential_name = "AI_GATEWAY_API_KEY"

    def __init__(
        self,
        api_key: Optional[str],
        url: str = "https://ai.gateway.lovable.dev/v1/chat/completions",
        model: str = "google/gemini-2.5-flash",
        article_count: int = 12,
        timeout: Optional[float] = 120.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        super().__init__(api_key, url, timeout=timeout, client=client)
        self.model = model
        self.article_count = article_count

    def build_request(self, params: Dict[str, Any]) -> Dict[str, Any]:
        count = params.get("count", self.article_count)
        system_prompt, user_prompt = build_headline_prompts(count)
        return self._chat_request(system_prompt, user_prompt)

    async def complete(self, system_prompt: str, user_prompt: str) -> RawResponse:
        """Single chat completion with caller-supplied prompts"""
        self.require_api_key()
        return await self.send(**self._chat_request(system_prompt, user_prompt))

    def _chat_request(self, system_prompt: str, user_prompt: str) -> Dict[str, Any]:
        return {
            "method": "POST",
            "url": self.url,
            "headers": {
                "Authorization": f"Bearer {self.api_key}",
                "Content-Type": "application/json",
            },
            "json": {
                "model": self.model,
                "messages": [
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
            },
        }
