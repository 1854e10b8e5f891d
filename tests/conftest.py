import json

import httpx
import pytest
from unittest.mock import MagicMock

from newshub.news.models.enums import ProviderKind


@pytest.fixture
def chat_body():
    """Serialize assistant text into a chat-completion envelope"""
    def _body(content) -> str:
        return json.dumps({
            "id": "chatcmpl-test",
            "object": "chat.completion",
            "choices": [
                {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
            ],
        })

    return _body


@pytest.fixture
def mock_settings():
    settings = MagicMock()
    settings.headline_provider = ProviderKind.AI_GATEWAY
    settings.ai_gateway_api_key = "test-gateway-key"
    settings.ai_gateway_url = "https://gateway.test/v1/chat/completions"
    settings.ai_gateway_model = "google/gemini-2.5-flash"
    settings.ai_article_count = 12
    settings.serpapi_api_key = "test-serpapi-key"
    settings.serpapi_url = "https://serpapi.test/search.json"
    settings.serpapi_engine = "google_news"
    settings.news_query = "India latest news"
    settings.news_region = "in"
    settings.news_language = "en"
    settings.search_result_limit = 20
    settings.upstream_timeout_seconds = 5.0
    return settings


@pytest.fixture
def sample_ai_articles():
    return [
        {
            "title": "RBI Holds Repo Rate Steady",
            "description": "The central bank kept rates unchanged.",
            "content": "The Reserve Bank of India left the repo rate unchanged at its policy meeting.",
            "source": "The Hindu",
            "category": "business",
            "publishedAt": "2025-10-05T10:30:00Z"
        },
        {
            "title": "ISRO Schedules Next Launch",
            "description": "A new satellite launch is planned for next month.",
            "content": "ISRO has announced the date for its next satellite launch from Sriharikota.",
            "source": "NDTV",
            "category": "science",
            "publishedAt": "2025-10-05T09:00:00Z"
        },
    ]


@pytest.fixture
def sample_news_results():
    return [
        {
            "position": 1,
            "title": "Monsoon Session Opens in Parliament",
            "snippet": "Lawmakers gathered for the first day of the session.",
            "source": {"name": "The Indian Express", "authors": ["Asha Rao", "Vikram Singh"]},
            "link": "https://example.in/monsoon-session",
            "thumbnail": "https://example.in/monsoon.jpg",
            "date": "10/05/2025, 07:00 AM, +0000 UTC"
        },
        {
            "position": 2,
            "title": "Sensex Closes Higher",
            "snippet": "Markets ended the day in the green.",
            "source": {"name": "Mint"},
            "link": "https://example.in/sensex",
            "iso_date": "2025-10-05T11:15:00Z"
        },
    ]


@pytest.fixture
def make_client():
    """Build an httpx.AsyncClient whose requests are answered by ``handler``"""
    def _make(handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return client

    return _make
