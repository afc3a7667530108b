"""URL query string <-> ``FilterState`` coercion.

Values read from the address bar are untrusted. Instead of rejecting them,
every field falls back to its default when it cannot be used: a bad page
becomes 1, an unknown sort column becomes ``None`` and so on. The rules
depend on the table (its sortable columns and page sizes), which reach the
validators through the pydantic validation context.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from catalogadmin.client.filter.state import FilterState, Order, Pagination

SORT_DIRECTIONS = ("asc", "desc")


def split_csv(value: Any) -> Optional[List[str]]:
    """Turn ``"a,b"`` (or an already split list) into ``["a", "b"]``; empty gives ``None``."""
    if value is None or value == "":
        return None
    items = value if isinstance(value, (list, tuple)) else str(value).split(",")
    cleaned = [str(item).strip() for item in items if str(item).strip()]
    return cleaned or None


class ExtraFilter(BaseModel):
    """
    Base class of table specific filters.

    Subclasses declare one optional field per query parameter; their
    validators must fall back to ``None`` instead of raising.
    """

    @classmethod
    def from_query_params(cls, params: Mapping[str, Any]) -> Dict[str, Any]:
        """Parse the subclass fields out of query parameters."""
        return cls.model_validate(
            {name: params.get(name) for name in cls.model_fields}
        ).model_dump()

    def to_query_params(self) -> Dict[str, str]:
        """Query parameters for the set filters; lists are comma joined."""
        params: Dict[str, str] = {}
        for name, value in self.model_dump(mode="json").items():
            if value is None or value == []:
                continue
            params[name] = ",".join(map(str, value)) if isinstance(value, list) else str(value)
        return params


class UrlFilterParams(BaseModel):
    """
    Flat view of the list parameters in a query string.

    Must be validated with a context holding ``sortable`` (column names),
    ``rows_per_page`` and ``rows_per_page_options``.
    """

    search: str = Field(default="", validate_default=True)
    page: int = Field(default=1, validate_default=True)
    per_page: Optional[int] = Field(default=None, validate_default=True)
    sort: Optional[str] = Field(default=None, validate_default=True)
    dir: Optional[str] = Field(default=None, validate_default=True)

    @field_validator("search", mode="before")
    @classmethod
    def default_search(cls, v: Any) -> str:
        return str(v) if v else ""

    @field_validator("page", mode="before")
    @classmethod
    def coerce_page(cls, v: Any) -> int:
        try:
            page = int(str(v).strip())
        except (TypeError, ValueError):
            return 1
        return page if page >= 1 else 1

    @field_validator("per_page", mode="before")
    @classmethod
    def coerce_per_page(cls, v: Any, info: ValidationInfo) -> int:
        context = info.context or {}
        default = context.get("rows_per_page", Pagination().per_page)
        try:
            per_page = int(str(v).strip())
        except (TypeError, ValueError):
            return default
        return per_page if per_page in context.get("rows_per_page_options", ()) else default

    @field_validator("sort", mode="before")
    @classmethod
    def coerce_sort(cls, v: Any, info: ValidationInfo) -> Optional[str]:
        sortable = (info.context or {}).get("sortable", ())
        return v if v in sortable else None

    @field_validator("dir", mode="before")
    @classmethod
    def coerce_dir(cls, v: Any) -> Optional[str]:
        if not v or str(v).lower() not in SORT_DIRECTIONS:
            return None
        return str(v).lower()


class FilterSchema:
    """
    Coercion rules of one table.

    Parameters
    ----------
    sortable : Sequence[str]
        Columns the table lets users sort by.
    rows_per_page : int
        Default page size.
    rows_per_page_options : Sequence[int]
        Page sizes offered by the table; anything else falls back to the default.
    extra_filter : type[ExtraFilter] | None
        Model of the table specific filters, if the table has any.
    """

    def __init__(
        self,
        sortable: Sequence[str],
        rows_per_page: int,
        rows_per_page_options: Sequence[int],
        extra_filter: Optional[type[ExtraFilter]] = None,
    ) -> None:
        self.sortable = tuple(sortable)
        self.rows_per_page = rows_per_page
        self.rows_per_page_options = tuple(rows_per_page_options)
        self.extra_filter = extra_filter

    @property
    def context(self) -> Dict[str, Any]:
        return {
            "sortable": self.sortable,
            "rows_per_page": self.rows_per_page,
            "rows_per_page_options": self.rows_per_page_options,
        }

    def cast(self, params: Mapping[str, Any]) -> FilterState:
        """Build a valid state from raw query parameters."""
        flat = UrlFilterParams.model_validate(
            {name: params.get(name) for name in UrlFilterParams.model_fields},
            context=self.context,
        )
        return FilterState(
            search=flat.search,
            pagination=Pagination(page=flat.page, per_page=flat.per_page or self.rows_per_page),
            order=Order(sort=flat.sort, dir=flat.dir),
            extra_filter=(
                self.extra_filter.from_query_params(params) if self.extra_filter else None
            ),
        )

    def defaults(self) -> FilterState:
        """State of a table opened without query parameters."""
        return self.cast({})

    def format_extra_filter(self, extra_filter: Optional[Mapping[str, Any]]) -> Dict[str, str]:
        """Query parameters for the table specific filters."""
        if not self.extra_filter or not extra_filter:
            return {}
        return self.extra_filter.model_validate(dict(extra_filter)).to_query_params()
