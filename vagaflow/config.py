"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./vagaflow.db"

    # Signing key for access tokens
    SECRET_KEY: str = ""
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # API
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "VagaFlow API"
    VERSION: str = "0.1.0"

    ENVIRONMENT: Literal["development", "production", "test"] = "development"
    # Defaults to DEBUG in development and INFO elsewhere
    LOG_LEVEL: str | None = None

    CORS_ORIGINS: list[str] = ["*"]

    RATE_LIMIT_ENABLED: bool = True
    ALLOW_USER_REGISTRATIONS: bool = True

    @field_validator("SECRET_KEY", mode="after")
    @classmethod
    def strip_secret_key(cls, value: str) -> str:
        return value.strip()

    @property
    def log_level(self) -> int:
        if self.LOG_LEVEL:
            return logging.getLevelNamesMapping().get(self.LOG_LEVEL.upper(), logging.INFO)
        return logging.DEBUG if self.ENVIRONMENT == "development" else logging.INFO


def configure_logging(settings: Settings) -> None:
    """
    Configure structlog on top of stdlib logging.

    Production emits one JSON object per line; every other environment gets
    the colored console renderer.
    """
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=settings.log_level)

    renderer: Callable[..., Any] = (
        structlog.processors.JSONRenderer()
        if settings.ENVIRONMENT == "production"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
