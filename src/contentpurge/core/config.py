"""contentpurge configuration.

Application settings loaded from environment variables with CONTENTPURGE_ prefix.
Per-run options (space, token, batch size, ...) come from the CLI; these are
the knobs for the HTTP layer, logging and the relation model.

Example:
    >>> from contentpurge.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.base_url
    'https://api.contentful.com'
"""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RELATION_FIELDS = ("seriesMembership", "episodeMembership")


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with CONTENTPURGE_ prefix.

    Example:
        >>> from contentpurge.core.config import Settings
        >>> s = Settings(rate_limit=3.0)
        >>> s.rate_limit
        3.0
        >>> s.default_batch_size
        5
    """

    model_config = SettingsConfigDict(
        env_prefix="CONTENTPURGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Backend
    base_url: str = Field(
        default="https://api.contentful.com",
        description="Content Management API base URL",
    )
    rate_limit: float = Field(default=7.0, gt=0.0, description="Requests per second")
    request_timeout: float = Field(default=30.0, ge=1.0)
    max_retries: int = Field(default=3, ge=0, le=10)

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="console", description="Log format: console or plain")

    # Deletion
    default_batch_size: int = Field(default=5, ge=1, le=1000)
    relation_fields: list[str] = Field(
        default_factory=lambda: list(DEFAULT_RELATION_FIELDS),
        description="Reference fields whose targets are deleted before their parent",
    )


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from contentpurge.core.config import get_settings
        >>> s = get_settings(max_retries=0)
        >>> s.max_retries
        0
    """
    return Settings(**overrides)
