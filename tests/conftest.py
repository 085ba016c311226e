"""
Shared fixtures.

`SqliteStore` implements the same read surface as `core.db.Database` over an
in-memory sqlite database, so repository SQL runs for real without Postgres.
"""

from __future__ import annotations

import re
import sqlite3
from typing import Any

import pytest

_PLACEHOLDER = re.compile(r"\$\d+")

SCHEMA = """
CREATE TABLE entities (
    id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    deleted_at TEXT NULL
)
"""


class SqliteStore:
    def __init__(self) -> None:
        self.conn = sqlite3.connect(":memory:")
        self.conn.row_factory = sqlite3.Row
        self.conn.execute(SCHEMA)
        self.queries: list[str] = []

    def insert(self, id: int, name: str, deleted_at: str | None = None) -> None:
        self.conn.execute(
            "INSERT INTO entities (id, name, deleted_at) VALUES (?, ?, ?)",
            (id, name, deleted_at),
        )

    def _run(self, sql: str, args: tuple[Any, ...]) -> list[sqlite3.Row]:
        self.queries.append(sql)
        return self.conn.execute(_PLACEHOLDER.sub("?", sql), args).fetchall()

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        rows = self._run(sql, args)
        return dict(rows[0]) if rows else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        return [dict(r) for r in self._run(sql, args)]

    def close(self) -> None:
        self.conn.close()


@pytest.fixture
def store():
    s = SqliteStore()
    yield s
    s.close()


@pytest.fixture
def seeded_store(store: SqliteStore) -> SqliteStore:
    store.insert(1, "sensor")
    store.insert(2, "camera", "2023-01-01")
    store.insert(3, "beacon")
    return store
