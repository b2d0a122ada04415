"""Environment-driven application settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    app_name: str
    app_version: str
    log_level: str
    allocation_max_customers: int
    allocation_verify_assignments: bool


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def validate_settings(settings: Settings) -> None:
    if settings.log_level.upper() not in _VALID_LOG_LEVELS:
        raise ValueError(f"log_level must be one of {sorted(_VALID_LOG_LEVELS)}")
    if settings.allocation_max_customers <= 0:
        raise ValueError("allocation_max_customers must be > 0")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Build settings once per process from environment variables."""
    settings = Settings(
        app_name=os.getenv("APP_NAME", "Room Allocation"),
        app_version=os.getenv("APP_VERSION", "1.0.0"),
        log_level=os.getenv("LOG_LEVEL", "WARNING"),
        allocation_max_customers=int(os.getenv("ALLOCATION_MAX_CUSTOMERS", "200000")),
        allocation_verify_assignments=_env_bool("ALLOCATION_VERIFY_ASSIGNMENTS", False),
    )
    validate_settings(settings)
    return settings
