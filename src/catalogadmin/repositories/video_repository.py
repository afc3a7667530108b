"""
Video repository implementation.

Videos relate to categories, genres and cast members. Besides checking
that related ids exist, writes enforce that every genre of a video
belongs to at least one of the video's categories.
"""

from __future__ import annotations

from typing import Any, List, Optional

from sqlalchemy import ColumnElement
from sqlalchemy.ext.asyncio import AsyncSession

from catalogadmin.db.models import CastMember as CastMemberDB
from catalogadmin.db.models import Category as CategoryDB
from catalogadmin.db.models import Genre as GenreDB
from catalogadmin.db.models import Video as VideoDB
from catalogadmin.models.video import VideoCreate, VideoUpdate
from catalogadmin.repositories.base import BaseSQLAlchemyRepository, obj_in_to_dict
from catalogadmin.repositories.category_repository import matches_ids_or_names


class VideoRepository(BaseSQLAlchemyRepository[VideoDB, VideoCreate, VideoUpdate]):
    """Repository for catalog videos."""

    search_column = "title"
    sortable_columns = {
        "title": "title",
        "year_launched": "year_launched",
        "rating": "rating",
        "duration": "duration",
        "opened": "opened",
        "created_at": "created_at",
    }
    relations = {
        "categories_id": ("categories", CategoryDB),
        "genres_id": ("genres", GenreDB),
        "cast_members_id": ("cast_members", CastMemberDB),
    }

    # list filter name -> (relationship, related model)
    _relation_filters = {
        "categories": (VideoDB.categories, CategoryDB),
        "genres": (VideoDB.genres, GenreDB),
        "cast_members": (VideoDB.cast_members, CastMemberDB),
    }

    def __init__(self) -> None:
        """Initialize repository with Video model."""
        super().__init__(VideoDB)

    def _filter_conditions(self, filters: dict[str, Any]) -> List[ColumnElement[bool]]:
        conditions: List[ColumnElement[bool]] = []
        for name, (relationship, related) in self._relation_filters.items():
            if filters.get(name):
                conditions.append(
                    relationship.any(matches_ids_or_names(related, filters[name]))
                )
        return conditions

    async def validate_relations(
        self,
        session: AsyncSession,
        obj_in: Any,
        db_obj: Optional[VideoDB] = None,
    ) -> dict[str, str]:
        """
        Check related ids and the genre/category consistency of a video.

        When an update only changes one side, the other side is taken
        from the stored video.

        Parameters
        ----------
        session : AsyncSession
            The database session.
        obj_in : Any
            ``VideoCreate`` or ``VideoUpdate`` payload.
        db_obj : Optional[VideoDB]
            The stored video when updating.

        Returns
        -------
        dict[str, str]
            Error message per offending payload field; empty when valid.
        """
        messages = await super().validate_relations(session, obj_in, db_obj)
        if "categories_id" in messages or "genres_id" in messages:
            return messages

        data = obj_in_to_dict(obj_in, exclude_unset=True)
        categories_id = data.get("categories_id")
        genres_id = data.get("genres_id")
        if categories_id is None and genres_id is None:
            return messages

        if categories_id is None:
            categories_id = [c.id for c in db_obj.categories] if db_obj else []
        if genres_id is None:
            genres_id = [g.id for g in db_obj.genres] if db_obj else []

        selected = set(categories_id)
        genres = await self._fetch_related(session, GenreDB, genres_id)
        orphans = sorted(
            genre.name
            for genre in genres
            if not any(category.id in selected for category in genre.categories)
        )
        if orphans:
            messages["genres_id"] = (
                f"Genre(s) not related to any selected category: {', '.join(orphans)}"
            )
        return messages
