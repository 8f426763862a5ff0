"""DTOs for stored documents (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class StoredDocument:
    """Read-model of one stored document version, as the checklist evaluator sees it.

    Lifecycle (create, new version, soft delete) belongs to the document store;
    the evaluator only reads the latest version per document_type.
    """

    entity_type: str
    entity_id: str
    document_type: str
    version: int
    was_reviewed: bool
    created_at: datetime
    id: str | None = None
