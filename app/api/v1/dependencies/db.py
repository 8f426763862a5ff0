"""Repository dependencies (composition root).

Read repositories share the request's get_db session; write repositories
share the request's get_db_transactional session (FastAPI caches a
dependency per request, so all of them see one transaction).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import get_db, get_db_transactional
from app.infrastructure.persistence.repositories import (
    DocumentRepository,
    EntityRepository,
)


async def get_entity_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EntityRepository:
    """Entity repository for read operations."""
    return EntityRepository(db)


async def get_entity_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> EntityRepository:
    """Entity repository for status writes (row lock + versioned update)."""
    return EntityRepository(db)


async def get_document_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DocumentRepository:
    """Document repository for read operations."""
    return DocumentRepository(db)


async def get_document_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> DocumentRepository:
    """Document repository bound to the write transaction (gate reads before the write)."""
    return DocumentRepository(db)
