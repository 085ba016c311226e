"""
Service settings.

Settings are read from the environment once, by the app factory, and then
passed explicitly to whatever needs them. Nothing else in the service reads
`os.environ`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, default).strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = ""
    database: str = "postgres"
    schema: str = "public"
    # Deployment mode. Only logging verbosity depends on it.
    is_live: bool = False
    database_url: str = ""
    pool_min_size: int = 1
    pool_max_size: int = 5
    command_timeout_s: float = 30.0

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            host=_env_str("DB_HOST", cls.host),
            port=_env_int("DB_PORT", cls.port),
            user=_env_str("DB_USER", cls.user),
            password=os.environ.get("DB_PASSWORD", ""),
            database=_env_str("DB_NAME", cls.database),
            schema=_env_str("DB_SCHEMA", cls.schema),
            is_live=_env_bool("IS_LIVE", cls.is_live),
            database_url=os.environ.get("DATABASE_URL", "").strip(),
            pool_min_size=_env_int("DB_POOL_MIN_SIZE", cls.pool_min_size),
            pool_max_size=_env_int("DB_POOL_MAX_SIZE", cls.pool_max_size),
            command_timeout_s=_env_float("DB_COMMAND_TIMEOUT_S", cls.command_timeout_s),
        )
