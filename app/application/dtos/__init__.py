"""Application DTOs (no ORM dependency)."""

from app.application.dtos.checklist import (
    CompletionResult,
    MissingItem,
    TransitionDecision,
)
from app.application.dtos.document import StoredDocument
from app.application.dtos.entity import EntityRecord

__all__ = [
    "CompletionResult",
    "EntityRecord",
    "MissingItem",
    "StoredDocument",
    "TransitionDecision",
]
