"""
Configuration models for env-scream.

All settings live on a single Pydantic model with defaults. The tool does not
read its own settings from the environment; callers that need different
values construct a ``DetectorConfig`` directly.
"""

from __future__ import annotations

import logging
import threading

from pydantic import BaseModel, Field, field_validator


class DetectorConfig(BaseModel):
    """Settings for scream detection and reporting."""

    env_filename: str = Field(
        default=".env", description="Reference file looked up in the working directory"
    )
    placeholder_value: str = Field(
        default="your_value_here",
        description="Value suggested for missing variables in the report",
    )
    rule_width: int = Field(default=40, gt=0, description="Width of the header rule")
    log_level: str = Field(default="WARNING", description="Diagnostic log level")
    encoding: str = Field(default="utf-8", description="Encoding for log and .env reads")

    model_config = {"extra": "forbid"}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("env_filename")
    @classmethod
    def validate_env_filename(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("env_filename must not be empty")
        return v


_config: DetectorConfig | None = None
_config_lock = threading.Lock()


def get_config() -> DetectorConfig:
    """Return the process-wide default configuration."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = DetectorConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration (used by tests)."""
    global _config
    with _config_lock:
        _config = None
