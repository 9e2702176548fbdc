"""Create beers table.

Revision ID: 001_create_beers
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_beers"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "beers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("brand", sa.String(200), nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="0"),
        sa.Column("max", sa.Integer, nullable=False),
        sa.UniqueConstraint("name", name="uq_beers_name"),
        sa.CheckConstraint("quantity >= 0", name="ck_beers_quantity_non_negative"),
        sa.CheckConstraint("max >= 0", name="ck_beers_max_non_negative"),
    )


def downgrade() -> None:
    op.drop_table("beers")
