"""Application configuration."""

import os

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    google_client_id: str | None = None
    google_client_secret: str | None = None
    jwt_secret: str
    jwt_ttl_days: int = 7
    frontend_url: str = "http://localhost:5173"
    cors_origins: str | None = None
    public_recipe_editor_email: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return level


def parse_cors_origins(raw: str | None, frontend_url: str) -> list[str]:
    """Parse allowed CORS origins from env, defaulting to the frontend."""
    if raw is None or not raw.strip():
        return [frontend_url]
    origins = [chunk.strip().rstrip("/") for chunk in raw.split(",")]
    return [origin for origin in origins if origin] or [frontend_url]
