"""
Configuration helpers for the civic backend.

Routers and services read a Settings object instead of fetching os.environ
directly, so tests can swap the environment and clear the cache.
"""

from dataclasses import dataclass
from functools import lru_cache
import logging
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    public_base_url: str
    seed_data: bool
    log_level: int
    create_rate_limit: int
    create_rate_window: int
    trust_proxy_headers: bool = False


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _level(value: str | None) -> int:
        level = logging.getLevelName((value or "INFO").strip().upper())
        return level if isinstance(level, int) else logging.INFO

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        public_base_url=os.getenv("PUBLIC_BASE_URL", "http://localhost:5000").rstrip("/"),
        seed_data=_bool(os.getenv("CIVIC_SEED_DATA"), True),
        log_level=_level(os.getenv("LOG_LEVEL")),
        create_rate_limit=_int(os.getenv("CIVIC_CREATE_RATE_LIMIT", "30"), 30),
        create_rate_window=_int(os.getenv("CIVIC_CREATE_RATE_WINDOW", "60"), 60),
        trust_proxy_headers=_bool(os.getenv("TRUST_PROXY_HEADERS"), False),
    )
