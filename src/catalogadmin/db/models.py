"""
Database models for catalogadmin.

This module contains SQLAlchemy models for the video catalog: categories,
genres, cast members and videos, plus the association tables linking them.
"""

from __future__ import annotations

import datetime
import uuid
from typing import Optional

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    SmallInteger,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship
from sqlalchemy.sql import func


def _new_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


category_genre = Table(
    "category_genre",
    Base.metadata,
    Column(
        "category_id",
        String(36),
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "genre_id",
        String(36),
        ForeignKey("genres.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

category_video = Table(
    "category_video",
    Base.metadata,
    Column(
        "category_id",
        String(36),
        ForeignKey("categories.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "video_id",
        String(36),
        ForeignKey("videos.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

genre_video = Table(
    "genre_video",
    Base.metadata,
    Column(
        "genre_id",
        String(36),
        ForeignKey("genres.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "video_id",
        String(36),
        ForeignKey("videos.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

cast_member_video = Table(
    "cast_member_video",
    Base.metadata,
    Column(
        "cast_member_id",
        String(36),
        ForeignKey("cast_members.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "video_id",
        String(36),
        ForeignKey("videos.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Category(Base):
    """Catalog category (e.g. Movies, Documentaries)."""

    __tablename__ = "categories"

    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class Genre(Base):
    """Genre grouped under one or more categories."""

    __tablename__ = "genres"

    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    categories: Mapped[list["Category"]] = relationship(
        "Category", secondary=category_genre, lazy="selectin", order_by="Category.name"
    )


class CastMember(Base):
    """Person credited on videos, either as director or actor."""

    __tablename__ = "cast_members"

    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    type: Mapped[int] = mapped_column(SmallInteger, nullable=False)  # CastMemberType

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class Video(Base):
    """Catalog video with its classification and credits."""

    __tablename__ = "videos"

    # Primary key
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_id)

    # Video metadata
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    year_launched: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    opened: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    rating: Mapped[str] = mapped_column(String(3), nullable=False)  # Rating enum value
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # Minutes

    # Timestamps
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    categories: Mapped[list["Category"]] = relationship(
        "Category", secondary=category_video, lazy="selectin", order_by="Category.name"
    )
    genres: Mapped[list["Genre"]] = relationship(
        "Genre", secondary=genre_video, lazy="selectin", order_by="Genre.name"
    )
    cast_members: Mapped[list["CastMember"]] = relationship(
        "CastMember",
        secondary=cast_member_video,
        lazy="selectin",
        order_by="CastMember.name",
    )
