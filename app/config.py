"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    app_name: str = Field(
        default="Hello API",
        description="Title published in the OpenAPI document",
        min_length=1,
    )
    host: str = Field(
        default="0.0.0.0",
        description="Address the HTTP listener binds to",
        min_length=1,
    )
    port: int = Field(
        default=8080,
        description="Port the HTTP listener binds to",
        gt=0,
        lt=65536,
    )
    log_level: str = Field(
        default="info",
        description="Log level handed to uvicorn when the server starts",
    )
    cors_origins: list[str] = Field(
        default_factory=list,
        description="Origins allowed to call the API from a browser, as a JSON list",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        normalized = str(value).strip().lower()
        if normalized not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}"
            )
        return normalized


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
