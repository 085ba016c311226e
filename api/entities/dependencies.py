"""
Request-scoped dependencies for entity-type routes.
"""

from __future__ import annotations

from fastapi import Request

from core.db import Store

from .repository import EntityTypeRepository


def get_store(request: Request) -> Store:
    return request.app.state.db


def get_repository(request: Request) -> EntityTypeRepository:
    return EntityTypeRepository(get_store(request))
