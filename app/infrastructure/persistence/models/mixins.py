"""Column mixins shared by tracked_entity and document.

Columns are declared with mapped_column directly on the mixin; SQLAlchemy
copies them onto each mapped subclass.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


class CuidMixin:
    """String CUID2 primary key generated by the application."""

    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """created_at / updated_at as aware UTC (app default, DB default as fallback)."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        onupdate=utc_now,
        server_default=func.now(),
    )


class SoftDeleteMixin:
    """deleted_at set means the row is hidden from every lookup."""

    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )


class VersionedMixin:
    """Optimistic concurrency counter; starts at 1 and is bumped on each status write."""

    version: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1, server_default="1"
    )
