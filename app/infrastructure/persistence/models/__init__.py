"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.document import Document
from app.infrastructure.persistence.models.entity import TrackedEntity
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SoftDeleteMixin,
    TimestampMixin,
    VersionedMixin,
)

__all__ = [
    "CuidMixin",
    "Document",
    "SoftDeleteMixin",
    "TimestampMixin",
    "TrackedEntity",
    "VersionedMixin",
]
