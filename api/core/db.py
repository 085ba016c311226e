"""
Async database access (raw SQL) using asyncpg.

`Database` owns one connection pool. The app factory builds it from
`Settings`, connects it on startup and closes it on shutdown (see
`api/main.py`). Repositories receive the instance explicitly.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from typing import Any, Protocol
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg

from .config import Settings

logger = logging.getLogger(__name__)


class DatabaseError(RuntimeError):
    pass


# Errors the store may raise, including use before connect(). Callers let
# these propagate untouched; only the HTTP layer maps them to a response.
STORAGE_ERRORS: tuple[type[BaseException], ...] = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    DatabaseError,
)


class Store(Protocol):
    """
    The read surface repositories depend on.

    `Database` implements it against Postgres; tests supply in-memory fakes.
    """

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None: ...

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]: ...


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Database:
    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._pool: asyncpg.Pool | None = None

    def connect_kwargs(self) -> dict[str, Any]:
        s = self._settings
        kwargs: dict[str, Any] = {
            "min_size": s.pool_min_size,
            "max_size": s.pool_max_size,
            "command_timeout": s.command_timeout_s,
            "server_settings": {"search_path": s.schema},
        }
        if s.database_url:
            kwargs["dsn"] = _sanitize_database_url(s.database_url)
            return kwargs

        if not s.host or not s.database:
            raise DatabaseError("Database host and name must be set when DATABASE_URL is empty.")
        kwargs.update(
            host=s.host,
            port=s.port,
            user=s.user,
            password=s.password or None,
            database=s.database,
        )
        return kwargs

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        self._pool = await asyncpg.create_pool(**self.connect_kwargs())
        logger.info("db_pool_opened schema=%s", self._settings.schema)

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None
        logger.info("db_pool_closed")

    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise DatabaseError("DB pool is not initialized. Call connect() on startup.")
        return self._pool

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self.pool().fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self.pool().fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]
