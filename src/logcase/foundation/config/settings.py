"""Environment-based configuration using pydantic-settings.

Provides the defaults for loggers built without explicit options, most
notably the default logger. Supports .env files.

Example:
    >>> from logcase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.level
    <Severity.INFO: 'info'>

    # Or with environment variables:
    # LOGCASE_LEVEL=debug
    # LOGCASE_FORMAT=json
    # LOGCASE_SERVICE=billing
"""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..types import JsonDict, LogFormat, Severity

logger = logging.getLogger("logcase.settings")


class LogcaseSettings(BaseSettings):
    """Logger defaults loaded from LOGCASE_* environment variables.

    Example environment variables:
        LOGCASE_LEVEL=warning
        LOGCASE_FORMAT=json
        LOGCASE_TIMESTAMP=false
        LOGCASE_SERVICE=auth-service
    """

    model_config = SettingsConfigDict(
        env_prefix="LOGCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_default=True,
    )

    level: Severity = Field(default=Severity.INFO, description="Minimum severity passed through")
    format: LogFormat = Field(default=LogFormat.TEXT, description="Rendering pipeline")
    timestamp: bool = Field(default=True, description="Include ISO timestamp in output")
    service: str | None = Field(default=None, description="Service tag included in output")

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level(cls, v: object) -> Severity:
        return Severity.parse(v)  # type: ignore[arg-type]

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: object) -> object:
        """Normalize format name to lowercase."""
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("service", mode="before")
    @classmethod
    def _blank_service(cls, v: object) -> object:
        return None if isinstance(v, str) and not v.strip() else v

    def to_options(self) -> JsonDict:
        """Logger options equivalent to these settings."""
        return self.model_dump(exclude_none=True)


@lru_cache(maxsize=1)
def get_settings() -> LogcaseSettings:
    """Get the global settings instance (cached)."""
    settings = LogcaseSettings()
    logger.debug("loaded logcase settings: %s", settings.to_options())
    return settings


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
