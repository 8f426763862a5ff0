"""SQLAlchemy repositories (implement application repository protocols)."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.document_repo import (
    DocumentRepository,
)
from app.infrastructure.persistence.repositories.entity_repo import EntityRepository

__all__ = [
    "BaseRepository",
    "DocumentRepository",
    "EntityRepository",
]
