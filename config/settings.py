#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Settings - Centralized configuration management
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    LOG_LEVEL,
    LIPSUM_SEED,
    LIPSUM_MIN_WORDS,
    LIPSUM_MAX_WORDS,
    LIPSUM_MAX_PARAGRAPHS,
    DEFAULT_OUTPUT_FORMAT,
    SUPPORTED_OUTPUT_FORMATS,
)


# Base directory
BASE_DIR = Path(__file__).resolve().parent.parent

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings (environment variables use the TEXPAGES_ prefix)"""

    model_config = SettingsConfigDict(
        env_prefix="TEXPAGES_",
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **values):
        from texpages.exceptions import InvalidConfigurationError

        try:
            super().__init__(**values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc']) or 'settings'}: {error['msg']}"
                for error in e.errors()
            )
            raise InvalidConfigurationError(f"Invalid settings: {problems}") from e

    # ========== Logging ==========
    log_level: str = LOG_LEVEL
    log_file: Optional[str] = None

    # ========== Filler text ==========
    lipsum_seed: int = LIPSUM_SEED  # Same seed -> same generated paragraphs
    lipsum_min_words: int = LIPSUM_MIN_WORDS
    lipsum_max_words: int = LIPSUM_MAX_WORDS
    lipsum_max_paragraphs: int = LIPSUM_MAX_PARAGRAPHS

    # ========== Output ==========
    default_output_format: str = DEFAULT_OUTPUT_FORMAT  # html | json

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        from texpages.exceptions import InvalidConfigurationError

        level = value.upper()
        if level not in VALID_LOG_LEVELS:
            raise InvalidConfigurationError(
                f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}, got {value!r}"
            )
        return level

    @field_validator("default_output_format")
    @classmethod
    def _check_output_format(cls, value: str) -> str:
        from texpages.exceptions import InvalidConfigurationError

        fmt = value.lower()
        if fmt not in SUPPORTED_OUTPUT_FORMATS:
            raise InvalidConfigurationError(
                f"default_output_format must be one of {SUPPORTED_OUTPUT_FORMATS}, got {value!r}"
            )
        return fmt

    @model_validator(mode="after")
    def _check_lipsum_ranges(self) -> "Settings":
        from texpages.exceptions import InvalidConfigurationError

        if self.lipsum_min_words < 1:
            raise InvalidConfigurationError(
                f"lipsum_min_words must be positive, got {self.lipsum_min_words}"
            )
        if self.lipsum_min_words > self.lipsum_max_words:
            raise InvalidConfigurationError(
                f"lipsum_min_words ({self.lipsum_min_words}) exceeds "
                f"lipsum_max_words ({self.lipsum_max_words})"
            )
        if self.lipsum_max_paragraphs < 1:
            raise InvalidConfigurationError(
                f"lipsum_max_paragraphs must be positive, got {self.lipsum_max_paragraphs}"
            )
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings loaded from the environment."""
    return Settings()
