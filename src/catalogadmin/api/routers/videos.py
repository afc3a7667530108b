"""Video CRUD endpoints."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import Query

from catalogadmin.api.routers.crud import build_crud_router
from catalogadmin.api.schemas.filters import split_csv
from catalogadmin.models.video import Video, VideoCreate, VideoUpdate
from catalogadmin.repositories.video_repository import VideoRepository

video_repository = VideoRepository()


async def video_filters(
    categories: Optional[str] = Query(
        default=None, description="Comma separated category ids or names"
    ),
    genres: Optional[str] = Query(
        default=None, description="Comma separated genre ids or names"
    ),
    cast_members: Optional[str] = Query(
        default=None, description="Comma separated cast member ids or names"
    ),
) -> dict[str, Any]:
    """List filters for videos."""
    return {
        "categories": split_csv(categories),
        "genres": split_csv(genres),
        "cast_members": split_csv(cast_members),
    }


router = build_crud_router(
    resource="videos",
    label="Video",
    repository=video_repository,
    create_schema=VideoCreate,
    update_schema=VideoUpdate,
    read_schema=Video,
    filters=video_filters,
)
