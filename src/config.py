"""Application configuration helpers."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values
from pydantic import BaseModel, ConfigDict, Field

ENV_FILE_CANDIDATES = (Path(".env"), Path(".env.local"))
ENV_PREFIX = "SHOPLIST_"


class Settings(BaseModel):
    """Service settings loaded from environment variables or .env files."""

    host: str = Field(default="0.0.0.0", description="Interface the HTTP server binds to.")
    port: int = Field(default=8080, description="Port the HTTP server listens on.")
    log_level: str = Field(default="INFO", description="Logging level (DEBUG/INFO/WARNING/ERROR)")
    log_format: str = Field(default="json", description="Logging format (json/plain).")
    log_requests: bool = Field(default=True, description="Emit request access logs when true.")
    default_most_used_limit: int = Field(
        default=3,
        description="Number of products returned by /products/most-used without a valid limit.",
    )

    model_config = ConfigDict(frozen=True)


def _coerce_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_env_file_values() -> Dict[str, str]:
    """Read ``.env`` candidates in order; later files win."""
    values: Dict[str, str] = {}
    for candidate in ENV_FILE_CANDIDATES:
        if candidate.is_file():
            parsed = dotenv_values(candidate)
            values.update({key: value for key, value in parsed.items() if value is not None})
    return values


def _load_from_env() -> Dict[str, object]:
    """Load optional overrides from env vars (with .env fallbacks)."""

    file_values = _load_env_file_values()

    def _env(key: str) -> Optional[str]:
        name = ENV_PREFIX + key
        return os.environ.get(name) or file_values.get(name)

    payload: Dict[str, object] = {}
    if (host := _env("HOST")):
        payload["host"] = host
    if (port := _env("PORT")):
        try:
            payload["port"] = int(port)
        except ValueError:
            pass
    if (log_level := _env("LOG_LEVEL")):
        payload["log_level"] = log_level.upper()
    if (log_format := _env("LOG_FORMAT")):
        payload["log_format"] = log_format.lower()
    if (log_requests := _env("LOG_REQUESTS")):
        payload["log_requests"] = _coerce_bool(log_requests)
    if (limit := _env("MOST_USED_LIMIT")):
        try:
            if int(limit) > 0:
                payload["default_most_used_limit"] = int(limit)
        except ValueError:
            pass
    return payload


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings(**_load_from_env())


def reset_settings_cache() -> None:
    """Clear cached settings (useful for tests)."""

    get_settings.cache_clear()
