"""
markdown-render - Configuration Module

Environment driven settings with Pydantic.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .presets import DEFAULT_STYLE_ID

_FALSY_VALUES = {"", "0", "false", "no", "off"}


class LogFormat(str, Enum):
    """Log output formats."""
    JSON = "json"
    CONSOLE = "console"


class RenderSettings(BaseSettings):
    """Runtime settings read from the environment on every invocation."""

    model_config = SettingsConfigDict(
        env_prefix="",
        extra="ignore",
        populate_by_name=True,
    )

    no_open: bool = Field(default=False, alias="MARKDOWN_RENDER_NO_OPEN")
    default_style: str = Field(default=DEFAULT_STYLE_ID, alias="MARKDOWN_RENDER_STYLE")
    log_level: str = Field(default="WARNING", alias="MARKDOWN_RENDER_LOG_LEVEL")
    log_format: LogFormat = Field(default=LogFormat.CONSOLE, alias="MARKDOWN_RENDER_LOG_FORMAT")
    debug: bool = Field(default=False, alias="DEBUG")

    @field_validator("no_open", "debug", mode="before")
    @classmethod
    def parse_flag(cls, v: Any) -> Any:
        # Any value other than an explicit "off" spelling enables the flag
        if isinstance(v, str):
            return v.strip().lower() not in _FALSY_VALUES
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper() or "WARNING"
        return v

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_format(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v


def load_settings() -> RenderSettings:
    """
    Load settings from the current environment.

    Raises:
        ConfigurationError: when an environment value cannot be parsed
    """
    try:
        return RenderSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration. {e}") from e
