"""Configuration settings and loading."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tuplesmith.errors import ConfigValidationError, ErrorContext
from tuplesmith.observability import configure_logging
from tuplesmith.tuples.layout import to_canonical_string, to_string

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"text", "json"}


class TuplesmithConfig(BaseSettings):
    """Configuration for callers of the tuplesmith core.

    The core functions never read this object on their own; callers pass
    the relevant values (``spectrum_limit``, display settings) explicitly.
    """

    model_config = SettingsConfigDict(
        env_prefix="TUPLESMITH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"
    log_format: str = "text"
    display_separator: str = " "
    display_width: int = 2
    spectrum_limit: int = 5_000_000

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = str(v).upper()
        if level not in VALID_LOG_LEVELS:
            raise ConfigValidationError(
                message=f"Invalid log level: {v}. Valid: {sorted(VALID_LOG_LEVELS)}",
                field="log_level",
                value=v,
                context=ErrorContext(extra={"valid_levels": sorted(VALID_LOG_LEVELS)}),
            )
        return level

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        if v not in VALID_LOG_FORMATS:
            raise ConfigValidationError(
                message=f"Invalid log format: {v}. Valid: {sorted(VALID_LOG_FORMATS)}",
                field="log_format",
                value=v,
                context=ErrorContext(extra={"valid_formats": sorted(VALID_LOG_FORMATS)}),
            )
        return v

    @field_validator("display_width", "spectrum_limit", mode="after")
    @classmethod
    def validate_non_negative(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            raise ConfigValidationError(
                message=f"{info.field_name} must be >= 0",
                field=info.field_name,
                value=v,
            )
        return v

    @property
    def effective_spectrum_limit(self) -> int | None:
        """The spectrum limit to hand to spectrum functions (None = unlimited)."""
        return self.spectrum_limit or None

    def format_tuple(self, numbers: Sequence[int] | None, canonical: bool = False) -> str:
        """Render a tuple with the configured separator and padding."""
        render = to_canonical_string if canonical else to_string
        return render(numbers, sep=self.display_separator, width=self.display_width)


def load_config(config_path: str | Path | None = None) -> TuplesmithConfig:
    """Load configuration from file and environment, then set up logging.

    Priority: env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ConfigValidationError(
                    message=f"Configuration must be a YAML mapping, got {type(loaded).__name__}",
                    field=str(config_path),
                    value=loaded,
                )
            config_data = loaded
        else:
            logger.warning(f"Config file {config_path} not found, using defaults")

    env_overrides = _get_env_overrides()
    config_data.update(env_overrides)

    config = TuplesmithConfig(**config_data)

    configure_logging(
        level=config.log_level,
        json_format=config.log_format == "json",
    )

    return config


def _get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    env_mappings = {
        "TUPLESMITH_LOG_LEVEL": "log_level",
        "TUPLESMITH_LOG_FORMAT": "log_format",
        "TUPLESMITH_DISPLAY_SEPARATOR": "display_separator",
        "TUPLESMITH_DISPLAY_WIDTH": ("display_width", int),
        "TUPLESMITH_SPECTRUM_LIMIT": ("spectrum_limit", int),
    }

    for env_key, config_key in env_mappings.items():
        value = os.environ.get(env_key)
        if value is not None:
            if isinstance(config_key, tuple):
                key, converter = config_key
                overrides[key] = converter(value)
            else:
                overrides[config_key] = value

    return overrides
