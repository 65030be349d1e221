"""Configuration settings for the AI Insights Hub server."""

from pathlib import Path
from typing import Optional
from functools import lru_cache
from pydantic_settings import BaseSettings


def _find_env_file() -> str:
    """Find .env file - check current dir, then parents (repository root)."""
    current = Path.cwd()

    # Check current directory
    if (current / ".env").exists():
        return str(current / ".env")

    # Check parent directory (when running from server/)
    if (current.parent / ".env").exists():
        return str(current.parent / ".env")

    # Check two levels up (when running from server/insights_hub/)
    if (current.parent.parent / ".env").exists():
        return str(current.parent.parent / ".env")

    # Default to current directory
    return ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server settings
    port: int = 9002
    host: str = "0.0.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # API keys for the generation flows
    anthropic_api_key: str = ""
    tavily_api_key: str = ""

    # LLM settings
    default_model: str = "claude-sonnet-4-20250514"
    news_max_results: int = 8

    # Cache TTLs (in seconds)
    trends_cache_ttl: int = 3600  # 1 hour
    opportunities_cache_ttl: int = 3600  # 1 hour
    resources_cache_ttl: int = 3600  # 1 hour

    # Share one pending generator call between concurrent misses on the same key
    cache_dedupe_in_flight: bool = True

    # Seconds before a generator call is abandoned; None waits forever
    generation_timeout: Optional[float] = None

    # Dashboard defaults
    default_time_period: str = "past 24 hours"
    default_number_of_trends: int = 3
    resources_per_trend: int = 3

    class Config:
        env_file = _find_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
