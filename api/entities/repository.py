"""
Entity-type persistence (raw SQL, read-only).

Rows are soft-deleted by setting `deleted_at`; every query here filters them
out. Store errors are not caught.
"""

from __future__ import annotations

import logging

from core.db import Store

from .schemas import EntityType

logger = logging.getLogger(__name__)

LIST_ACTIVE_SQL = """
    SELECT id, name
    FROM entities
    WHERE deleted_at IS NULL
"""

FIND_ACTIVE_SQL = """
    SELECT id, name
    FROM entities
    WHERE name = $1
      AND deleted_at IS NULL
    LIMIT 1
"""


class EntityTypeRepository:
    def __init__(self, store: Store) -> None:
        self._store = store

    async def list_active(self, *, order_by_name: bool = False) -> list[EntityType]:
        """
        Return all entity types that are not soft-deleted.

        Row order is whatever the store returns unless `order_by_name` is set.
        """
        sql = LIST_ACTIVE_SQL
        if order_by_name:
            sql += "    ORDER BY name ASC\n"
        rows = await self._store.fetch_all(sql)
        logger.debug("entities_listed count=%s ordered=%s", len(rows), order_by_name)
        return [EntityType.model_validate(row) for row in rows]

    async def find_active(self, name: str) -> EntityType | None:
        row = await self._store.fetch_one(FIND_ACTIVE_SQL, name)
        if row is None:
            return None
        return EntityType.model_validate(row)
