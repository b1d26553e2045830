"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables prefixed with CERTINFO_
  - Fall back to a .env file
  - Validate types and constraints when the settings are built

Only AppSettings is a BaseSettings instance. ParserSettings is a plain
BaseModel populated via env_nested_delimiter="__", so the env var
CERTINFO_PARSER__DATE_FORMATS maps to parser.date_formats (a JSON list).
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from certinfo.domain.dates import DEFAULT_DATE_FORMATS

# Project root .env, independent of the working directory.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# %z or %Z not preceded by an escaping %.
_TZ_DIRECTIVE = re.compile(r"(?<!%)%[zZ]")


class ParserSettings(BaseModel):
    """
    Cert info parser configuration.

    date_formats are strptime formats tried in order; the first match wins.
    Parsed dates are always read as UTC, so formats carrying their own
    offset (%z, %Z) are rejected.
    """

    date_formats: tuple[str, ...] = Field(
        default=DEFAULT_DATE_FORMATS,
        description="Ordered strptime formats for start/expire dates",
    )

    @field_validator("date_formats")
    @classmethod
    def validate_date_formats(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("At least one date format is required")
        for fmt in value:
            if _TZ_DIRECTIVE.search(fmt):
                raise ValueError(
                    f"Date format must not carry a timezone directive (%z/%Z): {fmt!r}"
                )
        return value


class AppSettings(BaseSettings):
    """
    Root settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="CERTINFO_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    parser: ParserSettings = Field(default_factory=lambda: ParserSettings())
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level
