"""
Application Settings.

Centralized configuration using Pydantic Settings with environment variable loading.
The asset host prefix is the only value the normalization layer reads; the
GraphQL values are used by the transport when items are fetched.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Sitecore
    # -------------------------------------------------------------------------
    jss_host: str = Field(
        default="/",
        description="Asset host prefix prepended to image paths found in GraphQL markup",
    )

    # -------------------------------------------------------------------------
    # GraphQL
    # -------------------------------------------------------------------------
    graphql_endpoint: str | None = Field(
        default=None,
        description="Sitecore GraphQL endpoint URL",
    )
    sitecore_api_key: SecretStr | None = Field(
        default=None,
        description="Sitecore API key sent with GraphQL requests",
    )
    graphql_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for GraphQL requests in seconds",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "console"] = Field(
        default="json",
        description="Log renderer: JSON lines or human-readable console output",
    )

    @field_validator("graphql_timeout_seconds")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Reject non-positive timeouts."""
        if value <= 0:
            raise ValueError("graphql_timeout_seconds must be positive")
        return value


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload settings if needed.
    """
    return Settings()
