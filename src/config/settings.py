# src/config/settings.py - v3
"""Typed configuration loaded from environment and .env via pydantic-settings.

Single source of truth for deployment-specific settings of the report
service and its artifact cache.
"""

from __future__ import annotations

import re
from datetime import timedelta
from pathlib import Path
from typing import Literal

from pydantic import ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_DURATION_RE = re.compile(r"^(\d+(?:\.\d+)?)(ms|s|m|h)?$")
_DURATION_UNITS = {"ms": 0.001, "s": 1, "m": 60, "h": 3600}


class ConfigurationError(Exception):
    """Raised when configuration is missing or internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Service ===
    environment: str = "development"

    # === Cache ===
    cache_enabled: bool = True
    cache_path: Path = Path("./cache/pdf-reports")
    cache_ttl: timedelta = timedelta(hours=1)
    cache_sweep_interval: float = 60.0

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:  # noqa: N805
        return v.upper() if isinstance(v, str) else v

    @field_validator("cache_ttl", mode="before")
    @classmethod
    def parse_short_duration(cls, v: object) -> object:  # noqa: N805
        """Accept plain seconds ("900") and short forms ("1h", "30m", "45s")."""
        if isinstance(v, str):
            match = _DURATION_RE.match(v.strip())
            if match:
                value = float(match.group(1))
                return timedelta(seconds=value * _DURATION_UNITS[match.group(2) or "s"])
        return v

    @field_validator("log_file", mode="before")
    @classmethod
    def empty_log_file_is_none(cls, v: object) -> object:  # noqa: N805
        return None if v == "" else v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Reject values the cache and logging cannot work with."""
        errors: list[str] = []

        if self.cache_ttl <= timedelta(0):
            errors.append("CACHE_TTL must be positive")

        if self.cache_sweep_interval <= 0:
            errors.append("CACHE_SWEEP_INTERVAL must be positive")

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment and .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or embedding).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    try:
        return Settings(**overrides)  # type: ignore[arg-type]
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
