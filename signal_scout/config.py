"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Configuration
    app_title: str = Field(default="Signal Scout", description="Application title")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(default=True, description="Use JSON log format")
    log_file: str | None = Field(default=None, description="Optional log file path")

    # Aggregation Configuration
    adapter_timeout: float = Field(default=8.0, gt=0, description="Per-platform time budget in seconds")
    http_timeout: float = Field(default=6.0, gt=0, description="Timeout for a single HTTP call")
    retry_backoff: float = Field(default=0.5, ge=0, description="Fixed delay before the single retry")
    max_items_per_platform: int = Field(default=25, ge=1, le=100, description="Items kept per platform")
    max_results: int = Field(default=40, ge=1, description="Maximum results in a response")
    excerpt_length: int = Field(default=280, ge=40, description="Maximum excerpt length in characters")

    # Platform Configuration
    reddit_base_url: str = Field(default="https://www.reddit.com", description="Reddit base URL")
    reddit_user_agent: str = Field(
        default="signal-scout/1.0 (community research)",
        description="User-Agent sent to Reddit; Reddit rejects anonymous clients",
    )
    hackernews_base_url: str = Field(
        default="https://hn.algolia.com/api/v1", description="Hacker News Algolia search API"
    )
    devto_base_url: str = Field(default="https://dev.to", description="Dev.to base URL")
    devto_api_key: str = Field(default="", description="Optional Dev.to API key")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
