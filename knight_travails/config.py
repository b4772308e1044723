"""
Configuration module for knight_travails.

Unrecognised values fall back to the defaults with a warning, so a stray
environment variable never stops the package from importing.
"""

import logging
import warnings
from typing import Any, Literal

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings

load_dotenv()

OutputFormat = Literal["text", "uci", "json"]
OUTPUT_FORMATS: tuple[str, ...] = ("text", "uci", "json")


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"

    # Default --format of the knight-travails command
    DEFAULT_OUTPUT_FORMAT: OutputFormat = "text"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> str:
        """
        >>> Settings(LOG_LEVEL="debug").LOG_LEVEL
        'DEBUG'
        """
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            warnings.warn(f"Unknown LOG_LEVEL {value!r}, using INFO", stacklevel=2)
            return "INFO"
        return level

    @field_validator("DEFAULT_OUTPUT_FORMAT", mode="before")
    @classmethod
    def normalize_output_format(cls, value: Any) -> str:
        output_format = str(value).strip().lower()
        if output_format not in OUTPUT_FORMATS:
            warnings.warn(f"Unknown DEFAULT_OUTPUT_FORMAT {value!r}, using text", stacklevel=2)
            return "text"
        return output_format


settings = Settings()
