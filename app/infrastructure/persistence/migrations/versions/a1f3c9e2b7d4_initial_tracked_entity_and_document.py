"""initial tracked_entity and document tables

Revision ID: a1f3c9e2b7d4
Revises:
Create Date: 2026-10-19

Entities whose status is gated by checklists, and the document metadata the
checklist evaluator reads (latest version per entity and document_type).
"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op

revision: str = "a1f3c9e2b7d4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "tracked_entity",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("entity_type", sa.String(length=64), nullable=False),
        sa.Column("status", sa.String(length=64), nullable=False),
        sa.Column("attributes", sa.JSON(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_tracked_entity_type_status",
        "tracked_entity",
        ["entity_type", "status"],
    )
    op.create_index(
        "ix_tracked_entity_deleted_at", "tracked_entity", ["deleted_at"]
    )

    op.create_table(
        "document",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("entity_type", sa.String(length=64), nullable=False),
        sa.Column("entity_id", sa.String(), nullable=False),
        sa.Column("document_type", sa.String(length=128), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.Column(
            "was_reviewed", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_document_entity_type_lookup",
        "document",
        ["entity_type", "entity_id", "document_type"],
    )
    op.create_index("ix_document_deleted_at", "document", ["deleted_at"])


def downgrade() -> None:
    op.drop_index("ix_document_deleted_at", table_name="document")
    op.drop_index("ix_document_entity_type_lookup", table_name="document")
    op.drop_table("document")
    op.drop_index("ix_tracked_entity_deleted_at", table_name="tracked_entity")
    op.drop_index("ix_tracked_entity_type_status", table_name="tracked_entity")
    op.drop_table("tracked_entity")
