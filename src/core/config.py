"""Application settings.

Read from environment variables prefixed with ``DRILLS_`` and from an optional
``.env`` file in the working directory.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Central configuration shared by the CLI commands."""

    model_config = SettingsConfigDict(
        env_prefix="DRILLS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    log_level: str = Field(
        default="WARNING",
        description="Root log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    fibonacci_slow_threshold: int = Field(
        default=35,
        ge=0,
        description="Sequence indices above this value log a slow-recursion warning.",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        name = value.strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"unknown log level {value!r}")
        return name
