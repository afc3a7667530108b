"""Cast member repository implementation."""

from __future__ import annotations

from typing import Any, List

from sqlalchemy import ColumnElement

from catalogadmin.db.models import CastMember as CastMemberDB
from catalogadmin.models.cast_member import CastMemberCreate, CastMemberUpdate
from catalogadmin.repositories.base import BaseSQLAlchemyRepository


class CastMemberRepository(
    BaseSQLAlchemyRepository[CastMemberDB, CastMemberCreate, CastMemberUpdate]
):
    """Repository for directors and actors."""

    sortable_columns = {
        "name": "name",
        "type": "type",
        "created_at": "created_at",
    }

    def __init__(self) -> None:
        """Initialize repository with CastMember model."""
        super().__init__(CastMemberDB)

    def _filter_conditions(self, filters: dict[str, Any]) -> List[ColumnElement[bool]]:
        if "type" in filters:
            return [CastMemberDB.type == int(filters["type"])]
        return []
