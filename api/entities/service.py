"""
Entity-type business logic.

Flow:
1) Read active rows (repository)
2) Shape them for API consumers (view)
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import HTTPException, status

from . import view
from .repository import EntityTypeRepository

logger = logging.getLogger(__name__)


async def list_entity_names(repo: EntityTypeRepository, *, order_by_name: bool = False) -> list[str]:
    records = await repo.list_active(order_by_name=order_by_name)
    return view.entity_names(records)


async def get_entity(repo: EntityTypeRepository, name: str) -> dict[str, Any]:
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Entity type name is required.")

    record = await repo.find_active(name)
    if record is None:
        logger.debug("entity_type_not_found name=%s", name)
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Entity type not found.")
    return view.entity_detail(record)
