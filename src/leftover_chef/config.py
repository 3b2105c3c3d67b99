"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-4o-mini"
    openai_temperature: float = 0.7
    openai_max_tokens: int = 2000
    openai_timeout_seconds: float = 30.0
    storage_backend: Literal["memory", "file", "supabase"] = "file"
    storage_path: str = ".leftover_chef"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    admin_token: str | None = None
    history_capacity: int = 50
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def remote_generation_enabled(settings: Settings) -> bool:
    """Return True when an OpenAI key is configured."""
    return bool(settings.openai_api_key and settings.openai_api_key.strip())
