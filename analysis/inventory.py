"""
Inventory rows as the analyzers read them.

Bank rows arrive from storage with whatever history they have (imports,
older classifier versions, hand edits), so only the fields the analyzers use
are read, leniently. A row with a garbled confidence still counts for its
topic and level; a row that is not an object at all is skipped with a
warning.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Mapping, Optional, Union

from classification.schemas import InventoryItem

log = logging.getLogger("analysis.pipeline")

InventoryLike = Union[InventoryItem, Mapping[str, Any]]


@dataclass(frozen=True)
class InventoryRow:
    id: str
    topic: Optional[str]
    cognitive_level: Optional[str]
    deleted: bool
    approved: bool


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def as_row(raw: InventoryLike, index: int) -> Optional[InventoryRow]:
    """Read one bank row; None when it is not an object."""
    if isinstance(raw, InventoryItem):
        return InventoryRow(
            id=raw.id,
            topic=raw.topic,
            cognitive_level=raw.cognitive_level,
            deleted=bool(raw.deleted),
            approved=bool(raw.approved),
        )
    if not isinstance(raw, Mapping):
        log.warning(f"[INVENTORY] Row {index} is not an object ({type(raw).__name__}), skipped")
        return None

    row_id = raw.get("id")
    return InventoryRow(
        id=str(row_id) if row_id is not None else f"#{index}",
        topic=_text(raw.get("topic")),
        cognitive_level=_text(raw.get("cognitive_level") or raw.get("bloom_level")),
        deleted=bool(raw.get("deleted")),
        approved=bool(raw.get("approved")),
    )


def live_rows(inventory: Iterable[InventoryLike]) -> Iterator[InventoryRow]:
    """Readable, non-deleted rows in inventory order."""
    for index, raw in enumerate(inventory):
        row = as_row(raw, index)
        if row is not None and not row.deleted:
            yield row
