"""
Output shapes for entity types.

Keeps the public representation in one place so every endpoint renders
entity types the same way. Nothing here touches storage.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol


class MalformedRecordError(ValueError):
    pass


class NamedRecord(Protocol):
    @property
    def name(self) -> str: ...


def _name_of(record: Any, index: int | None = None) -> str:
    where = "record" if index is None else f"record at index {index}"
    try:
        name = record.name
    except AttributeError:
        raise MalformedRecordError(f"{where} has no name.") from None
    if not isinstance(name, str):
        raise MalformedRecordError(f"{where} has a non-string name ({type(name).__name__}).")
    return name


def entity_names(records: Sequence[NamedRecord]) -> list[str]:
    """
    Project records to their names, one-to-one and in input order.

    Ids and any other fields are dropped. A record without a string `name`
    raises `MalformedRecordError`; nothing is skipped or coerced.
    """
    return [_name_of(record, i) for i, record in enumerate(records)]


def entity_detail(record: Any) -> dict[str, Any]:
    try:
        record_id = record.id
    except AttributeError:
        raise MalformedRecordError("record has no id.") from None
    return {"id": record_id, "name": _name_of(record)}
