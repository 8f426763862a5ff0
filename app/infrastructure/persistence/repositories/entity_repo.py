"""Tracked entity repository. Returns application DTOs."""

from __future__ import annotations

from typing import Any

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.entity import EntityRecord
from app.infrastructure.persistence.models.entity import TrackedEntity
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils import ensure_utc, utc_now


def _entity_to_result(e: TrackedEntity) -> EntityRecord:
    """Map ORM TrackedEntity to application EntityRecord."""
    return EntityRecord(
        id=e.id,
        entity_type=e.entity_type,
        status=e.status,
        version=e.version,
        attributes=dict(e.attributes or {}),
        updated_at=ensure_utc(e.updated_at),
    )


class EntityRepository(BaseRepository[TrackedEntity]):
    """Tracked entity store (implements IEntityRepository)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, TrackedEntity)

    async def get_by_id(
        self,
        entity_type: str,
        entity_id: str,
        *,
        for_update: bool = False,
    ) -> EntityRecord | None:
        """Return the non-deleted entity of entity_type, or None.

        for_update locks the row (SELECT ... FOR UPDATE) until the transaction ends.
        """
        stmt = select(TrackedEntity).where(
            TrackedEntity.id == entity_id,
            TrackedEntity.entity_type == entity_type,
            TrackedEntity.deleted_at.is_(None),
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.db.execute(stmt)
        orm = result.scalar_one_or_none()
        return _entity_to_result(orm) if orm else None

    async def update_status_if_version(
        self,
        entity_type: str,
        entity_id: str,
        expected_version: int,
        new_status: str,
    ) -> EntityRecord | None:
        """Set status and bump version only if version still equals expected_version (optimistic lock).

        Returns the updated entity, or None if another request won the race.
        """
        stmt = (
            update(TrackedEntity)
            .where(
                TrackedEntity.id == entity_id,
                TrackedEntity.entity_type == entity_type,
                TrackedEntity.version == expected_version,
                TrackedEntity.deleted_at.is_(None),
            )
            .values(
                status=new_status,
                version=TrackedEntity.version + 1,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount != 1:
            return None
        refreshed = await self.db.execute(
            select(TrackedEntity)
            .where(TrackedEntity.id == entity_id)
            .execution_options(populate_existing=True)
        )
        return _entity_to_result(refreshed.scalar_one())

    async def create(
        self,
        entity_type: str,
        status: str,
        attributes: dict[str, Any] | None = None,
        *,
        entity_id: str | None = None,
    ) -> EntityRecord:
        """Create a tracked entity at version 1 (seeding, tests, integrations)."""
        orm = TrackedEntity(
            entity_type=entity_type,
            status=status,
            attributes=attributes or {},
            version=1,
        )
        if entity_id:
            orm.id = entity_id
        created = await self._create(orm)
        return _entity_to_result(created)
