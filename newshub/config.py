from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

from .news.models.enums import ProviderKind


class Settings(BaseSettings):

    api_host: str = Field(default="localhost", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Debug mode")

    # Headline provider selection
    headline_provider: ProviderKind = Field(
        default=ProviderKind.AI_GATEWAY,
        description="Upstream used for the headline list: ai_gateway or search_api"
    )

    # AI Gateway (chat completions)
    ai_gateway_api_key: Optional[str] = Field(
        default=None,
        description="AI gateway API key",
        validation_alias=AliasChoices("AI_GATEWAY_API_KEY", "LOVABLE_API_KEY"),
    )
    ai_gateway_url: str = Field(
        default="https://ai.gateway.lovable.dev/v1/chat/completions",
        description="Chat completions endpoint of the AI gateway"
    )
    ai_gateway_model: str = Field(default="google/gemini-2.5-flash", description="Model requested from the AI gateway")
    ai_article_count: int = Field(default=12, description="Number of articles requested from the AI gateway")

    # Search API (SerpApi)
    serpapi_api_key: Optional[str] = Field(
        default=None,
        description="SerpApi API key",
        validation_alias=AliasChoices("SERPAPI_API_KEY", "SERPAPI_KEY"),
    )
    serpapi_url: str = Field(default="https://serpapi.com/search.json", description="SerpApi search endpoint")
    serpapi_engine: str = Field(default="google_news", description="SerpApi engine name")
    news_query: str = Field(default="India latest news", description="Topic query sent to the search API")
    news_region: str = Field(default="in", description="Region (gl) sent to the search API")
    news_language: str = Field(default="en", description="Language (hl) sent to the search API")
    search_result_limit: int = Field(default=20, description="Maximum number of search results kept")

    # Transport
    upstream_timeout_seconds: float = Field(
        default=120.0,
        description="Transport timeout for upstream calls in seconds"
    )

    # CORS
    cors_allowed_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Allowed CORS origins",
        validation_alias=AliasChoices("CORS_ALLOWED_ORIGINS", "ALLOWED_ORIGINS"),
    )
    cors_allowed_headers: list[str] = Field(
        default_factory=lambda: ["authorization", "x-client-info", "apikey", "content-type"],
        description="Allowed CORS request headers",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Log format (json or text)")

    @field_validator("cors_allowed_origins", "cors_allowed_headers", mode="before")
    @classmethod
    def parse_comma_separated(cls, value):
        if value is None:
            return value
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    class Config:
        env_file = [".env", ".env.local"]  # .env.local takes precedence over .env
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
