from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Env vars match regardless of case (``API_KEY`` or ``api_key``).
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    api_key: str
    upstash_redis_rest_url: str
    upstash_redis_rest_token: str
    redis_key_prefix: str = "healthlog"
    default_timezone: str = "Europe/Prague"
    aggregation_days: int = Field(14, ge=1)
    overview_days: int = Field(7, ge=1)
    offload_threshold_days: int = Field(
        90, ge=1, description="Windows longer than this are computed off the event loop"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
