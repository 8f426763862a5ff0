"""DTOs for tracked entities (employees, drivers, trucks, claims, ...)."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class EntityRecord:
    """Read-model of an entity whose status is gated by checklists.

    attributes holds the entity's data fields (used by data and modal items).
    version is the optimistic-concurrency counter bumped on every status write.
    """

    id: str
    entity_type: str
    status: str
    version: int
    attributes: dict[str, Any] = field(default_factory=dict)
    updated_at: datetime | None = None
