# indexnow_sync/config/schema.py
"""
Configuration schema for indexnow-sync.

Schema hierarchy:
- IndexNowConfig: options for one run (key, site, cache, endpoint)
- LoggingConfig: logging settings

Option names are accepted in snake_case or in the camelCase form used by
build-tool integrations (siteUrl, cacheDir, batchSize).
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from indexnow_sync.submit.submitter import (
    DEFAULT_TIMEOUT,
    INDEXNOW_BATCH_SIZE,
    INDEXNOW_ENDPOINT,
)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {sorted(_LOG_LEVELS)}, got {v!r}")
        return level


class IndexNowConfig(BaseModel):
    """
    Options for an indexnow-sync run.

    Example YAML:
        key: 3f1c0d2e9a8b4c7d
        siteUrl: https://example.com
        enabled: true
        cacheDir: .cache
        logging:
          level: DEBUG
    """

    key: Optional[str] = Field(default=None, description="IndexNow submission key")
    site_url: Optional[str] = Field(
        default=None,
        alias="siteUrl",
        description="Site base URL; overrides the URL declared by the build",
    )
    enabled: bool = Field(default=True, description="Turn submission on or off")
    cache_dir: Optional[str] = Field(
        default=None,
        alias="cacheDir",
        description="Directory for the cache file, relative to the project root",
    )
    endpoint: str = Field(default=INDEXNOW_ENDPOINT, description="IndexNow endpoint URL")
    batch_size: int = Field(
        default=INDEXNOW_BATCH_SIZE,
        alias="batchSize",
        ge=1,
        le=INDEXNOW_BATCH_SIZE,
        description="Maximum URLs per request",
    )
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0, description="Request timeout in seconds")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    @field_validator("key", "site_url", "cache_dir", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty strings like unset values."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


__all__ = ["IndexNowConfig", "LoggingConfig"]
