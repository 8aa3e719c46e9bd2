"""
Configuration Management
========================

Settings for wiring the query service, read from ``PAYMENT_QUERIES_*``
environment variables or a ``.env`` file.
"""

from __future__ import annotations

from datetime import UTC, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class QuerySettings(BaseSettings):
    """Runtime settings for payment queries"""

    model_config = SettingsConfigDict(
        env_prefix="PAYMENT_QUERIES_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field("INFO", description="Logging level name")
    timezone: str = Field("UTC", description="IANA timezone of the system clock")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        name = value.strip()
        _resolve_timezone(name)
        return name

    @property
    def zone(self) -> tzinfo:
        return _resolve_timezone(self.timezone)


def _resolve_timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {name!r}") from e
