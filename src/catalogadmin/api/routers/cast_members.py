"""Cast member CRUD endpoints."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import Query

from catalogadmin.api.routers.crud import build_crud_router
from catalogadmin.models.cast_member import (
    CastMember,
    CastMemberCreate,
    CastMemberUpdate,
)
from catalogadmin.models.enums import CastMemberType
from catalogadmin.repositories.cast_member_repository import CastMemberRepository

cast_member_repository = CastMemberRepository()


async def cast_member_filters(
    type: Optional[CastMemberType] = Query(
        default=None, description="1 = director, 2 = actor"
    ),
) -> dict[str, Any]:
    """List filters for cast members."""
    return {"type": type}


router = build_crud_router(
    resource="cast-members",
    label="Cast member",
    repository=cast_member_repository,
    create_schema=CastMemberCreate,
    update_schema=CastMemberUpdate,
    read_schema=CastMember,
    filters=cast_member_filters,
)
