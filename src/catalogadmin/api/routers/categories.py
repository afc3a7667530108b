"""Category CRUD endpoints."""

from __future__ import annotations

from typing import Any, Optional

from fastapi import Query

from catalogadmin.api.routers.crud import build_crud_router
from catalogadmin.models.category import Category, CategoryCreate, CategoryUpdate
from catalogadmin.repositories.category_repository import CategoryRepository

category_repository = CategoryRepository()


async def category_filters(
    is_active: Optional[bool] = Query(
        default=None, description="Only active (true) or inactive (false) categories"
    ),
) -> dict[str, Any]:
    """List filters for categories."""
    return {"is_active": is_active}


router = build_crud_router(
    resource="categories",
    label="Category",
    repository=category_repository,
    create_schema=CategoryCreate,
    update_schema=CategoryUpdate,
    read_schema=Category,
    filters=category_filters,
)
