"""Initial schema — villas and villa_numbers.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "villas",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("details", sa.Text, nullable=True),
        sa.Column("rate", sa.Float, nullable=False),
        sa.Column("sqft", sa.Integer, nullable=False, server_default="0"),
        sa.Column("occupancy", sa.Integer, nullable=False, server_default="0"),
        sa.Column("image_url", sa.Text, nullable=True),
        sa.Column("amenity", sa.JSON, nullable=False, server_default=sa.text("'[]'")),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    # Case-insensitive uniqueness of villa names.
    op.create_index(
        "uq_villas_name_lower",
        "villas",
        [sa.text("lower(name)")],
        unique=True,
    )

    op.create_table(
        "villa_numbers",
        sa.Column("villa_no", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column(
            "villa_id",
            sa.Integer,
            sa.ForeignKey("villas.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("special_details", sa.Text, nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_villa_numbers_villa_id", "villa_numbers", ["villa_id"])


def downgrade() -> None:
    op.drop_index("ix_villa_numbers_villa_id", table_name="villa_numbers")
    op.drop_table("villa_numbers")
    op.drop_index("uq_villas_name_lower", table_name="villas")
    op.drop_table("villas")
