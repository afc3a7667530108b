"""create_catalog_tables

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 10:12:44.310211

"""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1c2a9b7d10"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    ]


def _pivot(name: str, left: str, left_table: str, right: str, right_table: str) -> None:
    op.create_table(
        name,
        sa.Column(
            left,
            sa.String(36),
            sa.ForeignKey(f"{left_table}.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            right,
            sa.String(36),
            sa.ForeignKey(f"{right_table}.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


def upgrade() -> None:
    """Upgrade database schema."""
    op.create_table(
        "categories",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        *_timestamps(),
    )
    op.create_index("ix_categories_name", "categories", ["name"])

    op.create_table(
        "genres",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.true()
        ),
        *_timestamps(),
    )
    op.create_index("ix_genres_name", "genres", ["name"])

    op.create_table(
        "cast_members",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("type", sa.SmallInteger(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_cast_members_name", "cast_members", ["name"])

    op.create_table(
        "videos",
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("year_launched", sa.SmallInteger(), nullable=False),
        sa.Column("opened", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("rating", sa.String(3), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_videos_title", "videos", ["title"])

    _pivot("category_genre", "category_id", "categories", "genre_id", "genres")
    _pivot("category_video", "category_id", "categories", "video_id", "videos")
    _pivot("genre_video", "genre_id", "genres", "video_id", "videos")
    _pivot(
        "cast_member_video", "cast_member_id", "cast_members", "video_id", "videos"
    )


def downgrade() -> None:
    """Downgrade database schema."""
    for table in (
        "cast_member_video",
        "genre_video",
        "category_video",
        "category_genre",
        "videos",
        "cast_members",
        "genres",
        "categories",
    ):
        op.drop_table(table)
