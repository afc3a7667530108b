"""Generic CRUD router builder.

Every catalog resource exposes the same five endpoints; ``build_crud_router``
generates them from a repository and the resource's pydantic schemas:

========  ==================  ==========================================
Method    Path                Behaviour
========  ==================  ==========================================
GET       ``/{resource}``     paginated, searchable, sortable list
POST      ``/{resource}``     create, 201 with ``{data}``
GET       ``/{resource}/id``  show, 404 when missing
PUT       ``/{resource}/id``  partial update, 404 when missing
DELETE    ``/{resource}/id``  delete the row, 204, 404 when missing
========  ==================  ==========================================
"""

import logging
from typing import Any, Awaitable, Callable, Optional, get_args

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel
from pydantic.fields import FieldInfo
from sqlalchemy.ext.asyncio import AsyncSession

from catalogadmin.api.deps import get_db
from catalogadmin.api.routers.responses import (
    CREATE_ERRORS,
    DELETE_ERRORS,
    GET_ITEM_ERRORS,
    LIST_ERRORS,
    UPDATE_ERRORS,
)
from catalogadmin.api.schemas.filters import list_params_dependency
from catalogadmin.api.schemas.responses import ApiResponse, ListMeta, ListResponse
from catalogadmin.exceptions import APIValidationError, NotFoundError
from catalogadmin.repositories.base import BaseSQLAlchemyRepository, ListParams

logger = logging.getLogger(__name__)

FiltersDependency = Callable[..., Awaitable[dict[str, Any]]]


async def no_filters() -> dict[str, Any]:
    """Filter dependency for resources without entity specific filters."""
    return {}


def _is_nullable(field: FieldInfo) -> bool:
    annotation = field.annotation
    return annotation is type(None) or type(None) in get_args(annotation)


def _null_field_errors(
    payload: BaseModel, create_schema: type[BaseModel]
) -> dict[str, str]:
    """Fields explicitly sent as null that the resource cannot store as null."""
    messages: dict[str, str] = {}
    for name, value in payload.model_dump(exclude_unset=True).items():
        field = create_schema.model_fields.get(name)
        if value is None and field is not None and not _is_nullable(field):
            messages[name] = "Field cannot be null"
    return messages


def build_list_meta(params: ListParams, total: int, count: int) -> ListMeta:
    """Pagination metadata for a list page; ``all`` listings are one page."""
    if params.fetch_all:
        return ListMeta.build(total=total, page=1, per_page=max(total, 1), count=count)
    return ListMeta.build(
        total=total, page=params.page, per_page=params.per_page, count=count
    )


def build_crud_router(
    *,
    resource: str,
    label: str,
    repository: BaseSQLAlchemyRepository[Any, Any, Any],
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    read_schema: type[BaseModel],
    filters: FiltersDependency = no_filters,
) -> APIRouter:
    """
    Build the CRUD router of one resource.

    Parameters
    ----------
    resource : str
        URL segment, e.g. ``"cast-members"``.
    label : str
        Human-readable entity name used in messages, e.g. ``"Cast member"``.
    repository : BaseSQLAlchemyRepository
        Data access for the resource; its ``sortable_columns`` whitelist the
        ``sort`` parameter.
    create_schema : type[BaseModel]
        Body model of ``POST``.
    update_schema : type[BaseModel]
        Body model of ``PUT``; fields left out are not changed.
    read_schema : type[BaseModel]
        Response model, validated from the ORM row.
    filters : FiltersDependency
        Dependency returning the entity specific list filters.

    Returns
    -------
    APIRouter
        Router with the five CRUD endpoints, mounted at ``/{resource}``.
    """
    router = APIRouter(prefix=f"/{resource}")
    list_params = list_params_dependency(list(repository.sortable_columns))

    async def _get_or_404(session: AsyncSession, item_id: str) -> Any:
        db_obj = await repository.get(session, item_id)
        if db_obj is None:
            raise NotFoundError(resource_type=label, identifier=item_id)
        return db_obj

    @router.get(
        "",
        response_model=ListResponse[read_schema],  # type: ignore[valid-type]
        responses=LIST_ERRORS,
        name=f"{resource}:list",
    )
    async def list_items(
        params: ListParams = Depends(list_params),
        list_filters: dict[str, Any] = Depends(filters),
        session: AsyncSession = Depends(get_db),
    ) -> dict[str, Any]:
        page = await repository.list_page(session, params, list_filters)
        return {
            "data": [read_schema.model_validate(item) for item in page.items],
            "meta": build_list_meta(params, page.total, len(page.items)),
        }

    @router.post(
        "",
        response_model=ApiResponse[read_schema],  # type: ignore[valid-type]
        status_code=status.HTTP_201_CREATED,
        responses=CREATE_ERRORS,
        name=f"{resource}:create",
    )
    async def create_item(
        payload: create_schema,  # type: ignore[valid-type]
        session: AsyncSession = Depends(get_db),
    ) -> dict[str, Any]:
        messages = await repository.validate_relations(session, payload)
        if messages:
            raise APIValidationError.for_fields(messages)
        db_obj = await repository.create(session, obj_in=payload)
        logger.info("Created %s %s", label.lower(), db_obj.id)
        return {"data": read_schema.model_validate(db_obj)}

    @router.get(
        "/{item_id}",
        response_model=ApiResponse[read_schema],  # type: ignore[valid-type]
        responses=GET_ITEM_ERRORS,
        name=f"{resource}:show",
    )
    async def get_item(
        item_id: str = Path(..., description=f"{label} id"),
        session: AsyncSession = Depends(get_db),
    ) -> dict[str, Any]:
        db_obj = await _get_or_404(session, item_id)
        return {"data": read_schema.model_validate(db_obj)}

    @router.put(
        "/{item_id}",
        response_model=ApiResponse[read_schema],  # type: ignore[valid-type]
        responses=UPDATE_ERRORS,
        name=f"{resource}:update",
    )
    async def update_item(
        payload: update_schema,  # type: ignore[valid-type]
        item_id: str = Path(..., description=f"{label} id"),
        session: AsyncSession = Depends(get_db),
    ) -> dict[str, Any]:
        db_obj = await _get_or_404(session, item_id)
        messages = _null_field_errors(payload, create_schema)
        messages.update(
            await repository.validate_relations(session, payload, db_obj)
        )
        if messages:
            raise APIValidationError.for_fields(messages)
        updated = await repository.update(
            session, db_obj=db_obj, obj_in=payload
        )
        logger.info("Updated %s %s", label.lower(), item_id)
        return {"data": read_schema.model_validate(updated)}

    @router.delete(
        "/{item_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        response_class=Response,
        responses=DELETE_ERRORS,
        name=f"{resource}:delete",
    )
    async def delete_item(
        item_id: str = Path(..., description=f"{label} id"),
        session: AsyncSession = Depends(get_db),
    ) -> Response:
        deleted: Optional[Any] = await repository.delete(session, id=item_id)
        if deleted is None:
            raise NotFoundError(resource_type=label, identifier=item_id)
        logger.info("Deleted %s %s", label.lower(), item_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
