"""
Genre repository implementation.

Genres belong to one or more categories; the ``categories`` list filter
accepts category ids or names.
"""

from __future__ import annotations

from typing import Any, List

from sqlalchemy import ColumnElement

from catalogadmin.db.models import Category as CategoryDB
from catalogadmin.db.models import Genre as GenreDB
from catalogadmin.models.genre import GenreCreate, GenreUpdate
from catalogadmin.repositories.base import BaseSQLAlchemyRepository
from catalogadmin.repositories.category_repository import matches_ids_or_names


class GenreRepository(BaseSQLAlchemyRepository[GenreDB, GenreCreate, GenreUpdate]):
    """Repository for genres and their category links."""

    sortable_columns = {
        "name": "name",
        "is_active": "is_active",
        "created_at": "created_at",
    }
    relations = {"categories_id": ("categories", CategoryDB)}

    def __init__(self) -> None:
        """Initialize repository with Genre model."""
        super().__init__(GenreDB)

    def _filter_conditions(self, filters: dict[str, Any]) -> List[ColumnElement[bool]]:
        conditions: List[ColumnElement[bool]] = []
        if filters.get("categories"):
            conditions.append(
                GenreDB.categories.any(
                    matches_ids_or_names(CategoryDB, filters["categories"])
                )
            )
        if "is_active" in filters:
            conditions.append(GenreDB.is_active.is_(filters["is_active"]))
        return conditions
