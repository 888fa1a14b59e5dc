"""
Configuration helpers for the contacts API.

Settings are read from environment variables once and cached, so routers,
services and the DB layer never touch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    api_prefix: str
    seed_data: bool
    rate_limit_requests: int
    rate_limit_window_seconds: int
    log_level: str
    log_file: str


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

    prefix = (os.getenv("API_PREFIX", "/api") or "").strip().rstrip("/")
    if prefix and not prefix.startswith("/"):
        prefix = "/" + prefix

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_url=os.getenv("DATABASE_URL", "sqlite://"),
        api_prefix=prefix,
        seed_data=_bool(os.getenv("SEED_DATA"), True),
        rate_limit_requests=_int(os.getenv("RATE_LIMIT_REQUESTS", "10"), 10),
        rate_limit_window_seconds=_int(os.getenv("RATE_LIMIT_WINDOW_SECONDS", "60"), 60),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE", ""),
    )
