"""Filter state of a list table.

The state is immutable; every change goes through the reducer and
produces a new ``FilterState``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PER_PAGE = 15

# Search boxes may hand over ``{"value": "..."}`` instead of plain text
SearchValue = Union[str, Dict[str, Any]]


class Pagination(BaseModel):
    """Requested page (1-based) and page size."""

    model_config = ConfigDict(frozen=True)

    page: int = 1
    per_page: int = DEFAULT_PER_PAGE


class Order(BaseModel):
    """Sort column and direction; both ``None`` means server order."""

    model_config = ConfigDict(frozen=True)

    sort: Optional[str] = None
    dir: Optional[str] = None


class FilterState(BaseModel):
    """Search, pagination, ordering and table specific filters of a list."""

    model_config = ConfigDict(frozen=True)

    search: SearchValue = ""
    pagination: Pagination = Field(default_factory=Pagination)
    order: Order = Field(default_factory=Order)
    extra_filter: Optional[Dict[str, Any]] = None
