"""Actions accepted by the filter reducer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from catalogadmin.client.filter.state import FilterState, SearchValue


@dataclass(frozen=True)
class SetSearch:
    """Replace the search text; goes back to the first page."""

    search: SearchValue


@dataclass(frozen=True)
class SetPage:
    """Go to a page (1-based)."""

    page: int


@dataclass(frozen=True)
class SetPerPage:
    """Change the page size."""

    per_page: int


@dataclass(frozen=True)
class SetOrder:
    """Sort by a column; goes back to the first page."""

    sort: Optional[str]
    dir: Optional[str]


@dataclass(frozen=True)
class SetReset:
    """Replace the whole state, normally by the schema defaults."""

    state: FilterState


@dataclass(frozen=True)
class UpdateExtraFilter:
    """Merge values into the table specific filters."""

    extra_filter: Dict[str, Any] = field(default_factory=dict)


FilterAction = Union[SetSearch, SetPage, SetPerPage, SetOrder, SetReset, UpdateExtraFilter]
