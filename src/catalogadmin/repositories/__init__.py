"""
Repository layer for catalogadmin.

Provides data access abstraction following the Repository pattern.
"""

from __future__ import annotations

from .base import BaseRepository, BaseSQLAlchemyRepository, ListParams, Page
from .cast_member_repository import CastMemberRepository
from .category_repository import CategoryRepository
from .genre_repository import GenreRepository
from .video_repository import VideoRepository

__all__ = [
    "BaseRepository",
    "BaseSQLAlchemyRepository",
    "CastMemberRepository",
    "CategoryRepository",
    "GenreRepository",
    "ListParams",
    "Page",
    "VideoRepository",
]
