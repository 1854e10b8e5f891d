import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from newshub import main
from newshub.api.dependencies import get_headline_service, get_structuring_service
from newshub.main import app, cors_error_headers
from newshub.news.services.fetchers import AiGatewayFetcher
from newshub.news.services.headline_service import create_headline_service
from newshub.news.services.structuring_service import StructuringService


@pytest.fixture
def upstream():
    """Mutable upstream reply shared by the fake AI gateway and search API"""
    return {"status": 200, "body": "{}", "requests": []}


@pytest.fixture
def upstream_client(upstream, make_client):
    def handler(request: httpx.Request) -> httpx.Response:
        upstream["requests"].append(request)
        return httpx.Response(upstream["status"], text=upstream["body"])

    return make_client(handler)


@pytest.fixture
async def async_client(mock_settings, upstream_client):
    app.dependency_overrides[get_headline_service] = lambda: create_headline_service(mock_settings, client=upstream_client)
    app.dependency_overrides[get_structuring_service] = lambda: StructuringService(
        AiGatewayFetcher(api_key=mock_settings.ai_gateway_api_key, client=upstream_client)
    )

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


class TestHeadlinesEndpoint:
    @pytest.mark.asyncio
    async def test_returns_normalized_articles(self, async_client, upstream, chat_body, sample_ai_articles):
        upstream["body"] = chat_body("Sure! Here are the stories:\n" + json.dumps(sample_ai_articles))

        response = await async_client.get("/api/v1/news/headlines")

        assert response.status_code == 200
        data = response.json()
        assert set(data.keys()) == {"articles"}
        first = data["articles"][0]
        assert first["title"] == "RBI Holds Repo Rate Steady"
        assert first["source"] == {"name": "The Hindu"}
        assert first["urlToImage"] == "https://images.unsplash.com/photo-1504711434969?w=800&q=80"
        assert first["publishedAt"] == "2025-10-05T10:30:00.000Z"
        assert first["author"] is None
        assert first["url"] == "#"

    @pytest.mark.asyncio
    async def test_unparseable_upstream_reports_success(self, async_client, upstream, chat_body):
        upstream["body"] = chat_body("I'm sorry, I can't browse the news right now.")

        response = await async_client.get("/api/v1/news/headlines")

        assert response.status_code == 200
        data = response.json()
        assert "error" not in data
        assert len(data["articles"]) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,expected_status,message", [
        (429, 429, "Rate limits exceeded. Please try again later."),
        (402, 402, "Payment required. Please add credits to continue."),
        (503, 500, "AI gateway error"),
    ])
    async def test_upstream_errors_keep_status_with_fallback(self, async_client, upstream, status, expected_status, message):
        upstream["status"] = status

        response = await async_client.get("/api/v1/news/headlines")

        assert response.status_code == expected_status
        data = response.json()
        assert data["error"] == message
        assert [a["category"] for a in data["articles"]] == ["technology", "business", "sports"]

    @pytest.mark.asyncio
    async def test_deeply_nested_message_reports_fallback(self, async_client, upstream, chat_body):
        upstream["body"] = chat_body("[" * 200000 + "]" * 200000)

        response = await async_client.get("/api/v1/news/headlines")

        assert response.status_code == 200
        assert [a["category"] for a in response.json()["articles"]] == ["technology", "business", "sports"]

    @pytest.mark.asyncio
    async def test_missing_credential(self, async_client, upstream, mock_settings):
        mock_settings.ai_gateway_api_key = None

        response = await async_client.get("/api/v1/news/headlines")

        assert response.status_code == 500
        assert response.json()["error"] == "AI_GATEWAY_API_KEY is not configured"
        assert upstream["requests"] == []

    @pytest.mark.asyncio
    async def test_edge_function_path(self, async_client, upstream, chat_body):
        upstream["body"] = chat_body('[{"title": "X"}]')

        response = await async_client.post("/functions/v1/fetch-trending-news")

        assert response.status_code == 200
        assert response.json()["articles"][0]["source"]["name"] == "India News"

    @pytest.mark.asyncio
    async def test_cors_headers(self, async_client, upstream, chat_body):
        upstream["body"] = chat_body('[{"title": "X"}]')

        response = await async_client.get("/api/v1/news/headlines", headers={"Origin": "https://client.example"})

        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_cors_preflight(self, async_client):
        response = await async_client.options(
            "/functions/v1/structure-article",
            headers={
                "Origin": "https://client.example",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "authorization, x-client-info, apikey, content-type",
            }
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        allowed = response.headers["access-control-allow-headers"].lower()
        for header in ["authorization", "x-client-info", "apikey", "content-type"]:
            assert header in allowed


class TestStructureEndpoint:
    @pytest.mark.asyncio
    async def test_returns_structured_content(self, async_client, upstream, chat_body):
        upstream["body"] = chat_body("## Summary\nShort.")

        response = await async_client.post(
            "/api/v1/news/structure",
            json={"title": "Headline", "content": "Body text"}
        )

        assert response.status_code == 200
        assert response.json() == {"structuredContent": "## Summary\nShort."}

    @pytest.mark.asyncio
    async def test_description_used_when_content_empty(self, async_client, upstream, chat_body):
        upstream["body"] = chat_body("## Summary\nFrom description.")

        response = await async_client.post(
            "/functions/v1/structure-article",
            json={"title": "Headline", "content": "", "description": "Only a description"}
        )

        assert response.status_code == 200
        sent = json.loads(upstream["requests"][0].content)
        assert "Only a description" in sent["messages"][1]["content"]

    @pytest.mark.asyncio
    async def test_missing_text_rejected(self, async_client, upstream):
        response = await async_client.post("/api/v1/news/structure", json={"title": "Headline"})

        assert response.status_code == 422
        assert upstream["requests"] == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,expected_status", [(429, 429), (402, 402), (500, 500)])
    async def test_upstream_errors(self, async_client, upstream, status, expected_status):
        upstream["status"] = status

        response = await async_client.post(
            "/api/v1/news/structure",
            json={"title": "Headline", "content": "Body"}
        )

        assert response.status_code == expected_status
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_empty_result_is_user_visible_error(self, async_client, upstream):
        upstream["body"] = '{"choices": [{"message": {"content": ""}}]}'

        response = await async_client.post(
            "/api/v1/news/structure",
            json={"title": "Headline", "content": "Body"}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to structure article. Please try again."}

    @pytest.mark.asyncio
    async def test_deeply_nested_upstream_is_user_visible_error(self, async_client, upstream):
        upstream["body"] = "[" * 200000 + "]" * 200000

        response = await async_client.post(
            "/api/v1/news/structure",
            json={"title": "Headline", "content": "Body"},
            headers={"Origin": "https://client.example"}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to structure article. Please try again."}
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.asyncio
    async def test_unexpected_error_is_user_visible_error(self, async_client):
        failing = AsyncMock()
        failing.structure.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_structuring_service] = lambda: failing

        response = await async_client.post(
            "/api/v1/news/structure",
            json={"title": "Headline", "content": "Body"}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to structure article. Please try again."}


class TestUnhandledErrors:
    @pytest.mark.asyncio
    async def test_global_handler_keeps_cors_headers(self):
        def broken_service():
            raise RuntimeError("dependency exploded")

        app.dependency_overrides[get_structuring_service] = broken_service
        transport = ASGITransport(app=app, raise_app_exceptions=False)
        try:
            async with AsyncClient(transport=transport, base_url="http://test") as c:
                response = await c.post(
                    "/api/v1/news/structure",
                    json={"title": "Headline", "content": "Body"},
                    headers={"Origin": "https://client.example"}
                )
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json()["error"] == "Internal server error"
        assert response.headers["access-control-allow-origin"] == "*"
        assert "apikey" in response.headers["access-control-allow-headers"]

    def test_error_headers_echo_listed_origin(self):
        with patch.object(main.settings, "cors_allowed_origins", ["https://client.example"]):
            assert cors_error_headers("https://client.example")["Access-Control-Allow-Origin"] == "https://client.example"
            assert cors_error_headers("https://other.example") == {}


class TestHealthEndpoint:
    @pytest.mark.asyncio
    async def test_health(self, async_client):
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
