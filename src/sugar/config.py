"""
Configuration — typed settings loaded from the environment or a .env file.

The switch builder and the adapters have no configuration of their own;
settings only control how the library's structlog output is rendered
when an application asks sugar.logs to configure it.

Environment variables use the SUGAR_ prefix:

    SUGAR_LOG_LEVEL=DEBUG
    SUGAR_LOG_FORMAT=json
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SugarSettings(BaseSettings):
    """
    Library settings.

    Load order (highest priority first):
      1. Environment variables
      2. .env file in the working directory
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="SUGAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="WARNING", description="Minimum level for library log events")
    log_format: Literal["console", "json"] = Field(default="console", description="Renderer for log events")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard level names in any case, normalised to upper case."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> SugarSettings:
    """Load settings once and reuse them."""
    return SugarSettings()
