"""
config.py

Configuration models used throughout the navigator handoff package.

Defines Pydantic models that provide structured, validated configuration data
for the deep-link options and the optional return callback.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv()

TRUTHY = {"1", "true", "yes", "on"}
VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in TRUTHY


class Settings(BaseModel):
    """Typed configuration loaded from environment variables."""

    default_optimize: bool = Field(default_factory=lambda: _env_flag("NAVIGATOR_OPTIMIZE"))
    default_navigate: bool = Field(default_factory=lambda: _env_flag("NAVIGATOR_NAVIGATE"))

    callback_scheme: str = Field(default_factory=lambda: os.getenv("NAVIGATOR_CALLBACK_SCHEME", ""))
    callback_prompt: str = Field(default_factory=lambda: os.getenv("NAVIGATOR_CALLBACK_PROMPT", ""))

    log_level: str = Field(
        default_factory=lambda: os.getenv("NAVIGATOR_LOG_LEVEL", "INFO"),
        validate_default=True,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        level = (v or "INFO").upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"NAVIGATOR_LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


class RouteConfig(BaseModel):
    """
    Per-run options for a single deep link.

    Attributes:
        optimize (bool):
            Ask Navigator to reorder the stops for the shortest trip.

        navigate (bool):
            Start turn-by-turn guidance as soon as Navigator opens.

        callback_scheme (Optional[str]):
            Scheme Navigator opens when the trip completes. Empty or None
            means no callback is sent.

        callback_prompt (Optional[str]):
            Text Navigator shows before invoking the callback.
    """

    optimize: bool = Field(default=False, description="Let Navigator optimize stop order.")
    navigate: bool = Field(default=False, description="Start navigating immediately.")
    callback_scheme: Optional[str] = Field(default=None, description="Return-to-app scheme.")
    callback_prompt: Optional[str] = Field(default=None, description="Prompt shown before the callback.")

    @classmethod
    def from_settings(cls, source: Optional[Settings] = None) -> "RouteConfig":
        source = source or settings
        return cls(
            optimize=source.default_optimize,
            navigate=source.default_navigate,
            callback_scheme=source.callback_scheme or None,
            callback_prompt=source.callback_prompt or None,
        )


settings = Settings()
