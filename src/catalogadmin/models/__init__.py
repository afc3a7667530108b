"""
Data models module for catalogadmin.

Defines Pydantic models for catalog entities with full type safety and
validation.
"""

from __future__ import annotations

from .cast_member import (
    CastMember,
    CastMemberBase,
    CastMemberCreate,
    CastMemberSummary,
    CastMemberUpdate,
)
from .category import (
    Category,
    CategoryBase,
    CategoryCreate,
    CategorySummary,
    CategoryUpdate,
)
from .enums import CastMemberType, Rating
from .genre import Genre, GenreBase, GenreCreate, GenreSummary, GenreUpdate
from .video import Video, VideoBase, VideoCreate, VideoUpdate

__all__ = [
    "CastMember",
    "CastMemberBase",
    "CastMemberCreate",
    "CastMemberSummary",
    "CastMemberType",
    "CastMemberUpdate",
    "Category",
    "CategoryBase",
    "CategoryCreate",
    "CategorySummary",
    "CategoryUpdate",
    "Genre",
    "GenreBase",
    "GenreCreate",
    "GenreSummary",
    "GenreUpdate",
    "Rating",
    "Video",
    "VideoBase",
    "VideoCreate",
    "VideoUpdate",
]
