"""
Runtime configuration for eitherfx.

Settings are read from environment variables once and cached. Everything has
a safe default, so the library works without any environment at all.
"""

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

PACKAGE_LOGGER = "eitherfx"

_VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def parse_bool_env(key: str, default: bool = False) -> bool:
    """Parse boolean environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def parse_env_var(key: str, default: str | None = None) -> str | None:
    """Parse environment variable with optional default."""
    return os.environ.get(key, default)


class EitherSettings(BaseModel):
    """Validated, immutable library settings."""

    model_config = ConfigDict(frozen=True)

    trace_scopes: bool = Field(
        default=False,
        description="Log scope start, abort and completion at DEBUG level",
    )
    log_level: str | None = Field(
        default=None,
        description="Level applied to the eitherfx logger by configure_logging",
    )
    annotate_recovery_failures: bool = Field(
        default=True,
        description="Add a note naming the original failure when a recovery handler raises",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str | None) -> str | None:
        """Normalise and validate the log level name."""
        if v is None or not v.strip():
            return None
        level = v.strip().upper()
        if level not in _VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of {', '.join(_VALID_LOG_LEVELS)}"
            )
        return level

    @classmethod
    def from_env(cls) -> "EitherSettings":
        """Load settings from EITHERFX_* environment variables."""
        return cls(
            trace_scopes=parse_bool_env("EITHERFX_TRACE_SCOPES"),
            log_level=parse_env_var("EITHERFX_LOG_LEVEL"),
            annotate_recovery_failures=parse_bool_env(
                "EITHERFX_ANNOTATE_RECOVERY", default=True
            ),
        )


@lru_cache(maxsize=1)
def get_settings() -> EitherSettings:
    """Process-wide settings, loaded from the environment on first use."""
    return EitherSettings.from_env()


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()


def configure_logging(settings: EitherSettings | None = None) -> logging.Logger:
    """Apply the configured level to the package logger and return it."""
    settings = settings or get_settings()
    logger = logging.getLogger(PACKAGE_LOGGER)
    if settings.log_level is not None:
        logger.setLevel(settings.log_level)
    return logger


__all__ = [
    "PACKAGE_LOGGER",
    "EitherSettings",
    "configure_logging",
    "get_settings",
    "parse_bool_env",
    "parse_env_var",
    "reset_settings",
]
