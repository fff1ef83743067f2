"""Runtime settings for local-details.

Values come from the environment or a ``.env`` file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("console", "json")
VALID_GENRE_MODES = ("text", "enum")


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="WARNING",
        description="Minimum log level written to stderr",
    )
    log_format: str = Field(
        default="console",
        description="Log renderer: 'console' or 'json'",
    )
    details_filename: str = Field(
        default="details.json",
        description="File name written in the working directory on confirmation",
    )
    genre_mode: str = Field(
        default="text",
        description="Genre prompt: 'text' (comma-separated) or 'enum' (multi-select)",
    )
    editor: Optional[str] = Field(
        default=None,
        description="Editor command for the description prompt (falls back to $EDITOR)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        upper = v.upper()
        if upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}, got {v!r}")
        return upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        lower = v.lower()
        if lower not in VALID_LOG_FORMATS:
            raise ValueError(f"log_format must be one of {VALID_LOG_FORMATS}, got {v!r}")
        return lower

    @field_validator("genre_mode")
    @classmethod
    def validate_genre_mode(cls, v: str) -> str:
        lower = v.lower()
        if lower not in VALID_GENRE_MODES:
            raise ValueError(f"genre_mode must be one of {VALID_GENRE_MODES}, got {v!r}")
        return lower


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
