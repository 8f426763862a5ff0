"""Checklist domain entities.

A checklist definition is static configuration: an ordered list of items
(file, data or modal) for one entity type, plus the status transitions it
gates. Items are a tagged variant; consumers match on the concrete type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from app.domain.enums import ChecklistItemKind
from app.domain.value_objects import TransitionKey


@dataclass(frozen=True)
class FileItem:
    """Document slot satisfied by an uploaded and reviewed document.

    reviewable=False marks slots without a review step (incident and
    violation paperwork); an upload alone satisfies them.
    """

    kind: ClassVar[ChecklistItemKind] = ChecklistItemKind.FILE

    key: str
    label: str
    required: bool = True
    document_type: str = ""
    reviewable: bool = True

    def __post_init__(self) -> None:
        if not self.document_type:
            object.__setattr__(self, "document_type", self.key)


@dataclass(frozen=True)
class DataItem:
    """Entity attribute that must be filled (non-empty)."""

    kind: ClassVar[ChecklistItemKind] = ChecklistItemKind.DATA

    key: str
    label: str
    required: bool = True


@dataclass(frozen=True)
class ModalItem:
    """Entity attribute checked by a named validator (e.g. activity history coverage)."""

    kind: ClassVar[ChecklistItemKind] = ChecklistItemKind.MODAL

    key: str
    label: str
    validator: str
    required: bool = True


ChecklistItem = FileItem | DataItem | ModalItem


@dataclass(frozen=True)
class ChecklistDefinition:
    """Immutable checklist for one entity type.

    Attributes:
        key: Stable identifier, unique per entity type (e.g. 'pre_hiring').
        name: Display name used in gate decision messages.
        entity_type: Entity type this checklist belongs to (e.g. 'employees').
        items: Ordered checklist items.
        gates: Status transitions that require this checklist to be complete.
    """

    key: str
    name: str
    entity_type: str
    items: tuple[ChecklistItem, ...] = ()
    gates: frozenset[TransitionKey] = field(default_factory=frozenset)

    def required_items(self) -> tuple[ChecklistItem, ...]:
        """Return required items in configured order."""
        return tuple(item for item in self.items if item.required)

    def find_item(self, key: str) -> ChecklistItem | None:
        """Return the item with the given key, else the file item for that document type."""
        for item in self.items:
            if item.key == key:
                return item
        for item in self.items:
            if isinstance(item, FileItem) and item.document_type == key:
                return item
        return None

    def label_for(self, key: str) -> str | None:
        """Return the configured label for key, or None when the key is not listed."""
        item = self.find_item(key)
        return item.label if item else None

    def gates_transition(self, transition: TransitionKey) -> bool:
        """Return whether this checklist must be complete for the transition."""
        return transition in self.gates
