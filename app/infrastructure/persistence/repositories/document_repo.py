"""Document repository. Returns application DTOs."""

from __future__ import annotations

from collections.abc import Collection

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.document import StoredDocument
from app.infrastructure.persistence.models.document import Document
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils import ensure_utc


def _document_to_result(d: Document) -> StoredDocument:
    """Map ORM Document to application StoredDocument."""
    return StoredDocument(
        id=d.id,
        entity_type=d.entity_type,
        entity_id=d.entity_id,
        document_type=d.document_type,
        version=d.version,
        was_reviewed=d.was_reviewed,
        created_at=ensure_utc(d.created_at),
    )


class DocumentRepository(BaseRepository[Document]):
    """Document metadata store (implements IDocumentRepository)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Document)

    async def list_for_entity(
        self,
        entity_type: str,
        entity_id: str,
        document_types: Collection[str],
    ) -> list[StoredDocument]:
        """Return non-deleted documents of the given types for the entity, newest first."""
        if not document_types:
            return []
        result = await self.db.execute(
            select(Document)
            .where(
                Document.entity_type == entity_type,
                Document.entity_id == entity_id,
                Document.document_type.in_(list(document_types)),
                Document.deleted_at.is_(None),
            )
            .order_by(Document.created_at.desc(), Document.id.desc())
        )
        return [_document_to_result(d) for d in result.scalars().all()]

    async def add(self, document: StoredDocument) -> StoredDocument:
        """Store document metadata (seeding, tests, upload integrations); return the stored DTO."""
        orm = Document(
            entity_type=document.entity_type,
            entity_id=document.entity_id,
            document_type=document.document_type,
            version=document.version,
            was_reviewed=document.was_reviewed,
            created_at=document.created_at,
        )
        if document.id:
            orm.id = document.id
        created = await self._create(orm)
        return _document_to_result(created)
