"""
URL synchronized filter manager.

``FilterManager`` owns the filter state of one list table. User input goes
through its ``change_*`` methods, which dispatch reducer actions; the state
is mirrored into the query string of a ``History`` so a list can be
bookmarked, shared and navigated with back/forward.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Sequence

import httpx

from catalogadmin.client.filter.actions import (
    FilterAction,
    SetOrder,
    SetPage,
    SetPerPage,
    SetReset,
    SetSearch,
    UpdateExtraFilter,
)
from catalogadmin.client.filter.reducer import reduce_filter
from catalogadmin.client.filter.schema import ExtraFilter, FilterSchema
from catalogadmin.client.filter.state import DEFAULT_PER_PAGE, FilterState, SearchValue

logger = logging.getLogger(__name__)

StateListener = Callable[[FilterState], None]


@dataclass(frozen=True)
class TableColumn:
    """A column of a list table."""

    name: str
    label: str
    sortable: bool = True


@dataclass(frozen=True)
class Location:
    """An entry of the navigation history."""

    pathname: str
    search: str = ""
    state: Optional[FilterState] = None

    @property
    def query_params(self) -> httpx.QueryParams:
        return httpx.QueryParams(self.search.lstrip("?"))


class History(Protocol):
    """Navigation history the filter state is synchronized with."""

    @property
    def location(self) -> Location: ...

    def push(self, location: Location) -> None: ...

    def replace(self, location: Location) -> None: ...


@dataclass
class MemoryHistory:
    """In-process ``History``, used by the CLI and in tests."""

    entries: List[Location] = field(default_factory=lambda: [Location(pathname="/")])
    index: int = 0

    @classmethod
    def from_url(cls, pathname: str, search: str = "") -> "MemoryHistory":
        return cls(entries=[Location(pathname=pathname, search=search)])

    @property
    def location(self) -> Location:
        return self.entries[self.index]

    def push(self, location: Location) -> None:
        del self.entries[self.index + 1 :]
        self.entries.append(location)
        self.index = len(self.entries) - 1

    def replace(self, location: Location) -> None:
        self.entries[self.index] = location

    def back(self) -> Location:
        self.index = max(self.index - 1, 0)
        return self.location


class FilterManager:
    """
    Filter state of a list table, kept in step with the URL.

    Parameters
    ----------
    columns : Sequence[TableColumn]
        Columns of the table; sortable ones are valid ``sort`` values.
    rows_per_page : int
        Default page size.
    rows_per_page_options : Sequence[int]
        Page sizes offered by the table.
    history : History
        History to read the initial state from and write changes to.
    extra_filter : type[ExtraFilter] | None
        Model of the table specific filters.

    Examples
    --------
    >>> history = MemoryHistory.from_url("/genres", "?page=2&sort=name&dir=DESC")
    >>> manager = FilterManager(
    ...     columns=[TableColumn("name", "Name")],
    ...     rows_per_page=15,
    ...     rows_per_page_options=[15, 25, 50],
    ...     history=history,
    ... )
    >>> manager.state.order.dir
    'desc'
    """

    def __init__(
        self,
        *,
        columns: Sequence[TableColumn],
        rows_per_page: int,
        rows_per_page_options: Sequence[int],
        history: History,
        extra_filter: Optional[type[ExtraFilter]] = None,
    ) -> None:
        self.columns = list(columns)
        self.rows_per_page = rows_per_page
        self.rows_per_page_options = list(rows_per_page_options)
        self.history = history
        self.schema = FilterSchema(
            sortable=[column.name for column in self.columns if column.sortable],
            rows_per_page=rows_per_page,
            rows_per_page_options=rows_per_page_options,
            extra_filter=extra_filter,
        )
        self.state: FilterState = self.get_state_from_url()
        self._listeners: List[StateListener] = []

    # ------------------------------------------------------------------
    # State changes
    # ------------------------------------------------------------------

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Call ``listener`` with the new state after every dispatch."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: FilterAction) -> FilterState:
        self.state = reduce_filter(self.state, action)
        for listener in list(self._listeners):
            listener(self.state)
        return self.state

    def change_search(self, value: SearchValue) -> None:
        self.dispatch(SetSearch(search=value))

    def change_page(self, page_index: int) -> None:
        """Go to a page given as a zero-based index, as table widgets report it."""
        self.dispatch(SetPage(page=page_index + 1))

    def change_rows_per_page(self, per_page: int) -> None:
        self.dispatch(SetPerPage(per_page=per_page))

    def change_column_sort(self, column: str, direction: str) -> None:
        self.dispatch(SetOrder(sort=column, dir=direction))

    def change_extra_filter(self, values: Mapping[str, Any]) -> None:
        self.dispatch(UpdateExtraFilter(extra_filter=dict(values)))

    def reset_filter(self) -> None:
        """Back to the table defaults, extra filters included."""
        self.dispatch(SetReset(state=self.schema.defaults()))

    # ------------------------------------------------------------------
    # URL synchronization
    # ------------------------------------------------------------------

    @staticmethod
    def clear_search_text(text: SearchValue) -> str:
        """Unwrap search text handed over as ``{"value": ...}``."""
        if isinstance(text, Mapping) and "value" in text:
            return str(text["value"] or "")
        return text if isinstance(text, str) else ""

    def format_search_params(self) -> Dict[str, str]:
        """
        Query parameters for the current state, defaults left out.

        ``search`` appears only when not empty, ``page`` only when not 1,
        ``per_page`` only when not 15 and ``sort``/``dir`` only when sorted.
        """
        params: Dict[str, str] = {}
        search = self.clear_search_text(self.state.search)
        if search:
            params["search"] = search
        if self.state.pagination.page != 1:
            params["page"] = str(self.state.pagination.page)
        if self.state.pagination.per_page != DEFAULT_PER_PAGE:
            params["per_page"] = str(self.state.pagination.per_page)
        if self.state.order.sort:
            params["sort"] = self.state.order.sort
            if self.state.order.dir:
                params["dir"] = self.state.order.dir
        params.update(self.schema.format_extra_filter(self.state.extra_filter))
        return params

    def query_string(self) -> str:
        return "?" + str(httpx.QueryParams(self.format_search_params()))

    def get_state_from_url(self) -> FilterState:
        """Parse the current location into a valid state."""
        return self.schema.cast(self.history.location.query_params)

    def replace_history(self) -> None:
        """Rewrite the current entry with the normalized query string."""
        self.history.replace(
            Location(
                pathname=self.history.location.pathname,
                search=self.query_string(),
                state=self.state,
            )
        )

    def push_history(self) -> None:
        """Add a history entry for the current state unless it is already there."""
        if self.history.location.state == self.state:
            return
        location = Location(
            pathname=self.history.location.pathname,
            search=self.query_string(),
            state=self.state.model_copy(
                update={"search": self.clear_search_text(self.state.search)}
            ),
        )
        logger.debug("History push %s%s", location.pathname, location.search)
        self.history.push(location)
