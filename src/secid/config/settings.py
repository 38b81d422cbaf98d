# src/secid/config/settings.py
# Copyright (c) Stacklion.
# SPDX-License-Identifier: MIT
"""secid Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated runtime configuration for the command line and the
    default facade. The domain layer never reads configuration; it receives
    plain values (for example the default ambiguity policy) from callers.

Design:
    - Pydantic v2 BaseSettings reading the process environment and an optional
      `.env` file. Keys without the ``SECID_`` prefix belong to the host
      application and are ignored.
    - Every variable carries the ``SECID_`` prefix.
    - Environment enumeration for coarse behavior toggles (includes TEST).
    - Singleton accessor `get_settings()` with LRU cache.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from secid.domain.enums.validation import OnAmbiguous
from secid.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Environment(str, Enum):
    """Logical runtime environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed configuration for secid.

    Only the CLI and the package-level convenience functions read the
    environment; library callers can build services with explicit values.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical runtime environment.",
        validation_alias="SECID_ENVIRONMENT",
    )

    log_level: LogLevel = Field(
        default="WARNING",
        description="Root log level applied by the CLI at startup.",
        validation_alias="SECID_LOG_LEVEL",
    )

    default_on_ambiguous: OnAmbiguous = Field(
        default=OnAmbiguous.FIRST,
        description=(
            "Ambiguity policy used by `parse` when the caller passes none: "
            "'first', 'raise' or 'all'."
        ),
        validation_alias="SECID_DEFAULT_ON_AMBIGUOUS",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("default_on_ambiguous", mode="before")
    @classmethod
    def _lower_on_ambiguous(cls, value: object) -> object:
        """Accept policy names in any case."""
        return value.strip().lower() if isinstance(value, str) else value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
        logger.info(
            "Settings initialized",
            extra={
                "extra": {
                    "environment": settings.environment.value,
                    "log_level": settings.log_level,
                    "default_on_ambiguous": settings.default_on_ambiguous.value,
                }
            },
        )
        return settings
    except ValidationError as exc:
        logger.exception("Invalid secid configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
