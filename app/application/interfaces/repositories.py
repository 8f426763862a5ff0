"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.document import StoredDocument
    from app.application.dtos.entity import EntityRecord


# Document repository interface
class IDocumentRepository(Protocol):
    """Protocol for the document store read used by checklist evaluation (DIP)."""

    async def list_for_entity(
        self,
        entity_type: str,
        entity_id: str,
        document_types: Collection[str],
    ) -> list[StoredDocument]:
        """Return non-deleted documents of the given types for the entity, newest first."""


# Entity repository interface
class IEntityRepository(Protocol):
    """Protocol for tracked entity repository (DIP)."""

    async def get_by_id(
        self,
        entity_type: str,
        entity_id: str,
        *,
        for_update: bool = False,
    ) -> EntityRecord | None:
        """Return the non-deleted entity, or None. for_update locks the row until commit."""

    async def update_status_if_version(
        self,
        entity_type: str,
        entity_id: str,
        expected_version: int,
        new_status: str,
    ) -> EntityRecord | None:
        """Write new_status and bump version only if version still equals expected_version.

        Returns the updated entity, or None when another request won the race.
        """
