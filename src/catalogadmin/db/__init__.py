"""
Database module for catalogadmin.

Contains SQLAlchemy models and database migration management.
"""

from __future__ import annotations

from catalogadmin.db.models import Base, CastMember, Category, Genre, Video

__all__: list[str] = ["Base", "CastMember", "Category", "Genre", "Video"]
