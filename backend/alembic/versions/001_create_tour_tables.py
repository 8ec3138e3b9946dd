"""Create users, tours and points_of_interest tables

Revision ID: 001
Revises: None
Create Date: 2024-03-01 00:00:00.000000+00:00

What:  Initial schema for the tour domain.
How:   Plain integer identity keys; string coordinates; display order stored
       as `display_order` because ORDER is a reserved word.

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users → tours → points_of_interest (foreign-key order)."""
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(255), nullable=False,
                  comment="Login name, unique across all users"),
        sa.Column("password", sa.String(255), nullable=False,
                  comment="Salted one-way password hash"),
        sa.PrimaryKeyConstraint("id"),
        # Race-free uniqueness; the service pre-check alone is not atomic
        sa.UniqueConstraint("username", name="uq_users_username"),
    )

    op.create_table(
        "tours",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("created_by_id", sa.Integer(), nullable=True,
                  comment="User who created the tour, if any"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["created_by_id"], ["users.id"], name="fk_tours_created_by"),
    )
    op.create_index("ix_tours_created_by_id", "tours", ["created_by_id"])

    op.create_table(
        "points_of_interest",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tour_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("latitude", sa.String(64), nullable=False),
        sa.Column("longitude", sa.String(64), nullable=False),
        sa.Column("photo_filename", sa.String(255), nullable=True),
        sa.Column("audio_filename", sa.String(255), nullable=True),
        sa.Column("video_filename", sa.String(255), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=True,
                  comment="Display position within the tour (ascending)"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tour_id"], ["tours.id"], name="fk_points_tour"),
    )
    # Serves "points of a tour in display order" with one index range scan
    op.create_index(
        "idx_points_tour_order",
        "points_of_interest",
        ["tour_id", "display_order"],
    )


def downgrade() -> None:
    """Drop all tables in reverse dependency order (all data lost)."""
    op.drop_index("idx_points_tour_order", table_name="points_of_interest")
    op.drop_table("points_of_interest")
    op.drop_index("ix_tours_created_by_id", table_name="tours")
    op.drop_table("tours")
    op.drop_table("users")
