"""
Settings for the ClickUp Dashboard.

Configuration is read from environment variables prefixed with
``CLICKUP_`` (or a local ``.env`` file):

    CLICKUP_API_KEY       Personal API token passed as the Authorization header
    CLICKUP_API_BASE_URL  API root (default: https://api.clickup.com/api/v2)
    CLICKUP_TIMEOUT       Request timeout in seconds (default: 30)
    CLICKUP_LOG_LEVEL     Logging level for the server (default: INFO)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from clickup_dashboard.constants import CLICKUP_API_BASE_URL, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    """Environment-driven configuration."""

    model_config = SettingsConfigDict(
        env_prefix="CLICKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: Optional[SecretStr] = Field(
        default=None,
        description="ClickUp personal API token",
    )
    api_base_url: str = Field(
        default=CLICKUP_API_BASE_URL,
        description="Base URL of the ClickUp v2 API",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Request timeout in seconds",
    )
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO",
        description="Logging level",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        return v.strip().upper() if isinstance(v, str) else v

    def get_api_key(self) -> str | None:
        """Return the API key in plain text, or None if not configured."""
        if self.api_key is None:
            return None
        return self.api_key.get_secret_value() or None


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
