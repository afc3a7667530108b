"""Filter, pagination and ordering state of list tables."""

from __future__ import annotations

from .actions import (
    FilterAction,
    SetOrder,
    SetPage,
    SetPerPage,
    SetReset,
    SetSearch,
    UpdateExtraFilter,
)
from .manager import FilterManager, History, Location, MemoryHistory, TableColumn
from .reducer import reduce_filter
from .schema import ExtraFilter, FilterSchema
from .state import FilterState, Order, Pagination

__all__ = [
    "ExtraFilter",
    "FilterAction",
    "FilterManager",
    "FilterSchema",
    "FilterState",
    "History",
    "Location",
    "MemoryHistory",
    "Order",
    "Pagination",
    "SetOrder",
    "SetPage",
    "SetPerPage",
    "SetReset",
    "SetSearch",
    "TableColumn",
    "UpdateExtraFilter",
    "reduce_filter",
]
