"""Document ORM model. Read side of the document store used by checklist evaluation."""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Index, Integer, String, false
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CuidMixin, SoftDeleteMixin
from app.shared.utils.datetime import utc_now


class Document(CuidMixin, SoftDeleteMixin, Base):
    """Document metadata. Table: document.

    One row per uploaded version; the checklist evaluator uses the highest
    version per (entity, document_type). was_reviewed is set by a reviewer.
    """

    __tablename__ = "document"

    entity_type: Mapped[str] = mapped_column(String(64), nullable=False)
    entity_id: Mapped[str] = mapped_column(String, nullable=False)
    document_type: Mapped[str] = mapped_column(String(128), nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    was_reviewed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        Index(
            "ix_document_entity_type_lookup",
            "entity_type",
            "entity_id",
            "document_type",
        ),
    )
