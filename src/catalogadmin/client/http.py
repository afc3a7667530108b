"""
HTTP resource wrappers for the catalog API.

``HttpResource`` exposes the CRUD endpoints of one resource over a shared
``httpx.AsyncClient``. Starting a ``list`` request cancels the previous
one still in flight for the same resource; the superseded call raises
``RequestCancelledError``, which callers ignore.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from catalogadmin.config.settings import settings
from catalogadmin.exceptions import (
    ApiResponseError,
    FormValidationError,
    NetworkError,
    RequestCancelledError,
)

logger = logging.getLogger(__name__)

RESOURCES = ("categories", "genres", "cast-members", "videos")


def _clean_params(query_params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Drop unset values and render the rest the way the API parses them."""
    params: Dict[str, str] = {}
    for key, value in (query_params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            params[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            if value:
                params[key] = ",".join(str(item) for item in value)
        else:
            params[key] = str(value)
    return params


def _problem(response: httpx.Response) -> Dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


class HttpResource:
    """
    CRUD access to one API resource.

    Parameters
    ----------
    client : httpx.AsyncClient
        Client whose ``base_url`` points at the API root (``.../api/v1``).
    resource : str
        Resource path segment, e.g. ``"cast-members"``.
    """

    def __init__(self, client: httpx.AsyncClient, resource: str) -> None:
        self.client = client
        self.resource = resource
        self._list_task: Optional[asyncio.Task[Any]] = None

    async def list(self, query_params: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Fetch a list page, cancelling the previous unfinished list request.

        Parameters
        ----------
        query_params : Mapping[str, Any] | None
            ``search``, ``page``, ``per_page``, ``sort``, ``dir``, ``all`` and
            resource filters; ``None`` values are left out.

        Returns
        -------
        Dict[str, Any]
            The ``{data, meta}`` envelope.

        Raises
        ------
        RequestCancelledError
            A newer ``list`` call superseded this one.
        """
        previous = self._list_task
        if previous is not None and not previous.done():
            previous.cancel()

        task = asyncio.ensure_future(
            self._request("GET", self.resource, params=_clean_params(query_params))
        )
        self._list_task = task
        try:
            return await task
        except asyncio.CancelledError:
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                # The caller itself is being cancelled
                raise
            raise RequestCancelledError(self.resource) from None
        finally:
            if self._list_task is task:
                self._list_task = None

    async def get(self, id: str) -> Dict[str, Any]:
        return await self._request("GET", f"{self.resource}/{id}")

    async def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", self.resource, json=dict(data))

    async def update(self, id: str, data: Mapping[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"{self.resource}/{id}", json=dict(data))

    async def delete(self, id: str) -> None:
        await self._request("DELETE", f"{self.resource}/{id}")

    @staticmethod
    def is_cancelled_request(error: BaseException) -> bool:
        """Whether ``error`` only means the request was superseded."""
        return isinstance(error, RequestCancelledError)

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        try:
            response = await self.client.request(method, path, params=params, json=json)
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise NetworkError(f"Could not reach the catalog API: {e}", original_error=e) from e

        if response.status_code == 422:
            raise FormValidationError(_problem(response))
        if response.is_error:
            raise ApiResponseError(response.status_code, _problem(response))
        if response.status_code == 204 or not response.content:
            return None
        return response.json()


class CatalogClient:
    """
    Resource wrappers sharing one ``httpx.AsyncClient``.

    Examples
    --------
    >>> async with CatalogClient() as api:  # doctest: +SKIP
    ...     page = await api.genres.list({"search": "drama"})
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        # Trailing slash so relative resource paths resolve under /api/v1/
        self.http = httpx.AsyncClient(
            base_url=(base_url or settings.api_base_url).rstrip("/") + "/",
            timeout=timeout if timeout is not None else settings.request_timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )
        self.categories = HttpResource(self.http, "categories")
        self.genres = HttpResource(self.http, "genres")
        self.cast_members = HttpResource(self.http, "cast-members")
        self.videos = HttpResource(self.http, "videos")

    def resource(self, name: str) -> HttpResource:
        """Look a wrapper up by its URL segment (``"cast-members"``) or attribute name."""
        segment = name.replace("_", "-")
        if segment not in RESOURCES:
            raise KeyError(name)
        resource: HttpResource = getattr(self, segment.replace("-", "_"))
        return resource

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
