"""Configuration management using pydantic-settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LEAD_RABBIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Content formatting
    clean_html: bool = Field(
        default=True,
        description="Decode entities and strip HTML tags before formatting post bodies",
    )
    max_content_chars: int = Field(
        default=40_000,
        ge=1,
        description="Post bodies longer than this are truncated before formatting",
    )

    # Keyword scanning
    default_keywords: list[str] = Field(
        default_factory=list,
        description="Keywords used by the scan endpoint when a request supplies none",
    )

    # Reddit fetching
    reddit_bridges: list[str] = Field(
        default_factory=lambda: [
            "https://rss-bridge.org/bridge01",
            "https://rss.bka.li",
            "https://feed.eugenemolnar.com",
            "https://bridge.suumitsu.eu",
            "https://rssbridge.noc.social",
        ],
        description="RSS-Bridge instances, tried in order until one answers",
    )
    reddit_time_budget_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Time allowed for a whole fetch across all subreddits",
    )
    reddit_bridge_timeout_seconds: float = Field(
        default=3.0,
        gt=0,
        description="Timeout for a single bridge request",
    )
    user_agent: str | None = Field(
        default=None,
        description="User agent for bridge requests (browser-like default if unset)",
    )

    # Web server
    web_host: str = Field(
        default="127.0.0.1",
        description="Host the preview API binds to",
    )
    web_port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port the preview API binds to",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR",
    )
    log_json: bool = Field(
        default=False,
        description="Output logs as JSON (for production)",
    )


def get_settings() -> Settings:
    """Load and return application settings."""
    return Settings()
