"""Query-string schemas shared by the list endpoints.

``list_params_dependency`` builds a FastAPI dependency that parses the
common ``search``/``page``/``per_page``/``sort``/``dir``/``all`` parameters
for one resource, rejecting sort keys the resource does not whitelist.
"""

from __future__ import annotations

from enum import Enum
from typing import Awaitable, Callable, List, Optional, Sequence

from fastapi import Query

from catalogadmin.config.settings import settings
from catalogadmin.exceptions import APIValidationError
from catalogadmin.repositories.base import ListParams

ListParamsDependency = Callable[..., Awaitable[ListParams]]

_FALSE_FLAGS = frozenset({"0", "false", "no", "off"})


class SortDirection(str, Enum):
    """Sort direction for list endpoints."""

    ASC = "asc"
    DESC = "desc"


def split_csv(value: Optional[str]) -> Optional[List[str]]:
    """Split a comma separated filter value, dropping blanks.

    Examples
    --------
    >>> split_csv("Drama, Comedy,,")
    ['Drama', 'Comedy']
    >>> split_csv("") is None
    True
    """
    if value is None:
        return None
    items = [item.strip() for item in value.split(",") if item.strip()]
    return items or None


def parse_flag(value: Optional[str]) -> bool:
    """Interpret a presence flag: ``?all`` and ``?all=1`` are true, ``?all=false`` is not."""
    if value is None:
        return False
    return value.strip().lower() not in _FALSE_FLAGS


def list_params_dependency(sortable: Sequence[str]) -> ListParamsDependency:
    """Create the list-parameter dependency for a resource.

    Parameters
    ----------
    sortable : Sequence[str]
        Sort keys accepted by the resource.

    Returns
    -------
    ListParamsDependency
        Async dependency yielding a ``ListParams``.
    """
    allowed = tuple(sortable)

    async def list_params(
        search: Optional[str] = Query(
            default=None, max_length=255, description="Case-insensitive text search"
        ),
        page: int = Query(default=1, ge=1, description="Page number (1-based)"),
        per_page: int = Query(
            default=settings.default_per_page,
            ge=1,
            le=settings.max_per_page,
            description="Rows per page",
        ),
        sort: Optional[str] = Query(
            default=None, description=f"Sort column, one of: {', '.join(allowed)}"
        ),
        direction: SortDirection = Query(
            default=SortDirection.ASC, alias="dir", description="Sort direction"
        ),
        fetch_all: Optional[str] = Query(
            default=None, alias="all", description="Return every row, unpaginated"
        ),
    ) -> ListParams:
        if sort is not None and sort not in allowed:
            raise APIValidationError(
                errors=[
                    {
                        "loc": ["query", "sort"],
                        "msg": f"Sort must be one of: {', '.join(allowed)}",
                        "type": "enum",
                    }
                ]
            )
        return ListParams(
            search=search.strip() if search and search.strip() else None,
            page=page,
            per_page=per_page,
            sort=sort,
            dir=direction.value,
            fetch_all=parse_flag(fetch_all),
        )

    return list_params
