"""
Pydantic schemas for entity types.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class EntityType(BaseModel):
    """
    An entity-type row as read from the store.

    Only active rows are ever materialized, so `deleted_at` is not carried.
    """

    model_config = ConfigDict(frozen=True)

    id: int | str
    name: str


class EntityDetailResponse(BaseModel):
    id: int | str
    name: str
