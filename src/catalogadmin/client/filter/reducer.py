"""Pure reducer over ``FilterState``."""

from __future__ import annotations

from typing import Any, Callable, Dict

from catalogadmin.client.filter.actions import (
    FilterAction,
    SetOrder,
    SetPage,
    SetPerPage,
    SetReset,
    SetSearch,
    UpdateExtraFilter,
)
from catalogadmin.client.filter.state import FilterState, Order


def _set_search(state: FilterState, action: SetSearch) -> FilterState:
    return state.model_copy(
        update={
            "search": action.search,
            "pagination": state.pagination.model_copy(update={"page": 1}),
        }
    )


def _set_page(state: FilterState, action: SetPage) -> FilterState:
    return state.model_copy(
        update={"pagination": state.pagination.model_copy(update={"page": action.page})}
    )


def _set_per_page(state: FilterState, action: SetPerPage) -> FilterState:
    return state.model_copy(
        update={
            "pagination": state.pagination.model_copy(
                update={"per_page": action.per_page}
            )
        }
    )


def _set_order(state: FilterState, action: SetOrder) -> FilterState:
    return state.model_copy(
        update={
            "order": Order(sort=action.sort, dir=action.dir),
            "pagination": state.pagination.model_copy(update={"page": 1}),
        }
    )


def _set_reset(state: FilterState, action: SetReset) -> FilterState:
    return action.state


def _update_extra_filter(state: FilterState, action: UpdateExtraFilter) -> FilterState:
    return state.model_copy(
        update={"extra_filter": {**(state.extra_filter or {}), **action.extra_filter}}
    )


_HANDLERS: Dict[type, Callable[[FilterState, Any], FilterState]] = {
    SetSearch: _set_search,
    SetPage: _set_page,
    SetPerPage: _set_per_page,
    SetOrder: _set_order,
    SetReset: _set_reset,
    UpdateExtraFilter: _update_extra_filter,
}


def reduce_filter(state: FilterState, action: FilterAction) -> FilterState:
    """
    Apply ``action`` to ``state``.

    Parameters
    ----------
    state : FilterState
        Current state; never modified.
    action : FilterAction
        One of the filter actions.

    Returns
    -------
    FilterState
        The next state. Unknown actions return ``state`` unchanged.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        return state
    return handler(state, action)
