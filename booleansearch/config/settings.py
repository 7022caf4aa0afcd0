"""
Settings - Application configuration using Pydantic Settings.

Loads from environment variables and .env files.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    # Scraping proxy (ScraperAPI)
    scraperapi_key: str = ""
    scraperapi_url: str = "http://api.scraperapi.com/"
    upstream_timeout: float = 60.0

    # Search engine request shape
    search_engine_url: str = "https://www.google.com/search"
    search_language: str = "it"
    search_country: str = "it"
    search_num_results: int = Field(default=10, ge=1, le=100)

    # Extraction
    result_cap: int = Field(default=10, ge=1)

    # API
    api_host: str = "0.0.0.0"
    port: int = 10000
    api_debug: bool = False
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def has_api_key(self) -> bool:
        """Whether a scraping proxy key is configured."""
        return bool(self.scraperapi_key.strip())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
