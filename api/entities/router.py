"""
Entity-type API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from . import schemas, service
from .dependencies import get_repository
from .repository import EntityTypeRepository

router = APIRouter()


@router.get("/entities")
async def list_entities(
    sort: bool = Query(default=False, alias="sorted"),
    repo: EntityTypeRepository = Depends(get_repository),
) -> list[str]:
    """
    Names of all active entity types.
    """
    return await service.list_entity_names(repo, order_by_name=sort)


@router.get("/entities/{name}", response_model=schemas.EntityDetailResponse)
async def get_entity(
    name: str,
    repo: EntityTypeRepository = Depends(get_repository),
) -> dict:
    return await service.get_entity(repo, name)
