"""Genre CRUD endpoints."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import Query

from catalogadmin.api.routers.crud import build_crud_router
from catalogadmin.api.schemas.filters import split_csv
from catalogadmin.models.genre import Genre, GenreCreate, GenreUpdate
from catalogadmin.repositories.genre_repository import GenreRepository

genre_repository = GenreRepository()


async def genre_filters(
    categories: Optional[str] = Query(
        default=None,
        description="Comma separated category ids or names",
        examples=["Movies,Documentaries"],
    ),
    is_active: Optional[bool] = Query(default=None),
) -> dict[str, Any]:
    """List filters for genres."""
    return {"categories": split_csv(categories), "is_active": is_active}


router = build_crud_router(
    resource="genres",
    label="Genre",
    repository=genre_repository,
    create_schema=GenreCreate,
    update_schema=GenreUpdate,
    read_schema=Genre,
    filters=genre_filters,
)
