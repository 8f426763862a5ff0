"""Tracked entity ORM model: anything whose status is gated by checklists."""

from typing import Any

from sqlalchemy import JSON, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SoftDeleteMixin,
    TimestampMixin,
    VersionedMixin,
)


class TrackedEntity(CuidMixin, TimestampMixin, SoftDeleteMixin, VersionedMixin, Base):
    """Employee, driver, truck, claim... Table: tracked_entity.

    attributes holds the entity's data fields (read by data and modal
    checklist items). version is bumped on every status write.
    """

    __tablename__ = "tracked_entity"

    entity_type: Mapped[str] = mapped_column(String(64), nullable=False)
    status: Mapped[str] = mapped_column(String(64), nullable=False)
    attributes: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=dict
    )

    __table_args__ = (
        Index("ix_tracked_entity_type_status", "entity_type", "status"),
    )
