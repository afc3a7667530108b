"""
Category repository implementation.

Provides data access for catalog categories, including the ``is_active``
list filter and the id-or-name matching shared by the relation filters.
"""

from __future__ import annotations

from typing import Any, List, Sequence

from sqlalchemy import ColumnElement, or_

from catalogadmin.db.models import Category as CategoryDB
from catalogadmin.models.category import CategoryCreate, CategoryUpdate
from catalogadmin.repositories.base import BaseSQLAlchemyRepository


class CategoryRepository(
    BaseSQLAlchemyRepository[CategoryDB, CategoryCreate, CategoryUpdate]
):
    """Repository for catalog categories."""

    sortable_columns = {
        "name": "name",
        "is_active": "is_active",
        "created_at": "created_at",
    }

    def __init__(self) -> None:
        """Initialize repository with Category model."""
        super().__init__(CategoryDB)

    def _filter_conditions(self, filters: dict[str, Any]) -> List[ColumnElement[bool]]:
        conditions: List[ColumnElement[bool]] = []
        if "is_active" in filters:
            conditions.append(CategoryDB.is_active.is_(filters["is_active"]))
        return conditions


def matches_ids_or_names(model: Any, values: Sequence[str]) -> ColumnElement[bool]:
    """Condition matching rows of ``model`` by id or by exact name."""
    return or_(model.id.in_(values), model.name.in_(values))
