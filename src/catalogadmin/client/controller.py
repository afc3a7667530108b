"""
List controller: keeps a table's rows in step with its filter state.

Every change of the ``FilterManager`` state restarts a debounce timer.
When the timer fires and the request parameters differ from the last
ones, the controller pushes a history entry and fetches the page. Results
of a fetch that was superseded in the meantime are dropped.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional, Set

from catalogadmin.client.filter.manager import FilterManager
from catalogadmin.client.filter.state import FilterState
from catalogadmin.client.http import HttpResource
from catalogadmin.exceptions import ClientError

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Could not load the information"

# (message, variant)
Notifier = Callable[[str, str], None]


def _log_notifier(message: str, variant: str) -> None:
    logger.warning("[%s] %s", variant, message)


class Debouncer:
    """
    Call ``callback`` once calls stop arriving for ``delay`` seconds.

    Only the arguments of the last call are used. Must be called from
    within a running event loop.
    """

    def __init__(self, delay: float, callback: Callable[..., Any]) -> None:
        self.delay = delay
        self.callback = callback
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args: Any) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, *args)

    def _fire(self, *args: Any) -> None:
        self._handle = None
        self.callback(*args)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class Subscription:
    """Whether the results of one fetch are still wanted."""

    def __init__(self) -> None:
        self.active = True

    def cancel(self) -> None:
        self.active = False


class ListController:
    """
    Fetch and hold the rows of one list table.

    Parameters
    ----------
    resource : HttpResource
        Resource the rows come from.
    manager : FilterManager
        Filter state of the table.
    debounce_time : float
        Seconds of quiet before a state change triggers a fetch.
    notifier : Notifier | None
        Shows a transient message to the user; defaults to logging it.
    """

    def __init__(
        self,
        resource: HttpResource,
        manager: FilterManager,
        *,
        debounce_time: float,
        notifier: Optional[Notifier] = None,
    ) -> None:
        self.resource = resource
        self.manager = manager
        self.notifier: Notifier = notifier or _log_notifier

        self.data: List[Dict[str, Any]] = []
        self.total_records = 0
        self.loading = False

        self._debouncer = Debouncer(debounce_time, self._on_debounced_state)
        self._last_params: Optional[Dict[str, Any]] = None
        self._subscription: Optional[Subscription] = None
        self._tasks: Set[asyncio.Task[None]] = set()
        self._unsubscribe: Optional[Callable[[], None]] = None

    def request_params(self, state: FilterState) -> Dict[str, Any]:
        """List query parameters for ``state``."""
        params: Dict[str, Any] = {
            "search": self.manager.clear_search_text(state.search) or None,
            "page": state.pagination.page,
            "per_page": state.pagination.per_page,
            "sort": state.order.sort,
            "dir": state.order.dir,
        }
        params.update(self.manager.schema.format_extra_filter(state.extra_filter))
        return params

    def start(self) -> asyncio.Task[None]:
        """
        Normalize the URL, listen to state changes and load the first page.

        Returns
        -------
        asyncio.Task[None]
            The initial fetch.
        """
        self.manager.replace_history()
        self._unsubscribe = self.manager.subscribe(self._debouncer)
        task = self._on_debounced_state(self.manager.state)
        assert task is not None
        return task

    def close(self) -> None:
        """Stop listening and drop any result still on its way."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._debouncer.cancel()
        if self._subscription is not None:
            self._subscription.cancel()

    async def wait_idle(self) -> None:
        """Wait until no debounce timer or fetch is pending."""
        while self._debouncer.pending or self._tasks:
            if self._tasks:
                await asyncio.gather(*self._tasks, return_exceptions=True)
            else:
                await asyncio.sleep(self._debouncer.delay)

    def _on_debounced_state(self, state: FilterState) -> Optional[asyncio.Task[None]]:
        params = self.request_params(state)
        if params == self._last_params:
            return None
        self._last_params = params

        if self._subscription is not None:
            self._subscription.cancel()
        subscription = Subscription()
        self._subscription = subscription

        self.manager.push_history()
        task = asyncio.get_running_loop().create_task(self.fetch(params, subscription))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def fetch(self, params: Dict[str, Any], subscription: Subscription) -> None:
        """Load one page; results are kept only while ``subscription`` is active."""
        self.loading = True
        try:
            response = await self.resource.list(params)
            if subscription.active:
                self.data = list(response.get("data", []))
                self.total_records = int(response.get("meta", {}).get("total", 0))
        except ClientError as e:
            if self.resource.is_cancelled_request(e):
                logger.debug("List request to %s superseded", self.resource.resource)
                return
            logger.error("Could not load %s: %s", self.resource.resource, e)
            self.notifier(LOAD_ERROR_MESSAGE, "error")
        finally:
            if subscription.active:
                self.loading = False
