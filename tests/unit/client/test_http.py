"""
Tests for the HTTP resource wrappers, run against httpx.MockTransport.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx
import pytest

from catalogadmin.client.http import CatalogClient, HttpResource, _clean_params
from catalogadmin.exceptions import (
    ApiResponseError,
    FormValidationError,
    NetworkError,
    RequestCancelledError,
)

BASE_URL = "http://test/api/v1"

EMPTY_PAGE = {"data": [], "meta": {"total": 0}}


def make_client(handler: Any) -> CatalogClient:
    return CatalogClient(BASE_URL, transport=httpx.MockTransport(handler))


class TestCleanParams:
    """Tests for _clean_params."""

    def test_renders_values(self) -> None:
        assert _clean_params(
            {
                "search": "drama",
                "page": 2,
                "sort": None,
                "all": True,
                "is_active": False,
                "categories": ["a", "b"],
                "genres": [],
            }
        ) == {
            "search": "drama",
            "page": "2",
            "all": "true",
            "is_active": "false",
            "categories": "a,b",
        }

    def test_none(self) -> None:
        assert _clean_params(None) == {}


@pytest.mark.asyncio
class TestHttpResource:
    """CRUD calls and error mapping."""

    async def test_requests_resolve_under_api_root(self) -> None:
        seen: list[tuple[str, str, bytes]] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, str(request.url), request.content))
            if request.method == "DELETE":
                return httpx.Response(204)
            return httpx.Response(200, json={"data": {"id": "1"}})

        async with make_client(handler) as api:
            assert await api.cast_members.get("1") == {"data": {"id": "1"}}
            await api.cast_members.create({"name": "A", "type": 2})
            await api.cast_members.update("1", {"name": "B"})
            assert await api.cast_members.delete("1") is None

        assert [(method, url) for method, url, _ in seen] == [
            ("GET", f"{BASE_URL}/cast-members/1"),
            ("POST", f"{BASE_URL}/cast-members"),
            ("PUT", f"{BASE_URL}/cast-members/1"),
            ("DELETE", f"{BASE_URL}/cast-members/1"),
        ]
        assert json.loads(seen[1][2]) == {"name": "A", "type": 2}

    async def test_list_sends_clean_params(self) -> None:
        seen: list[httpx.URL] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url)
            return httpx.Response(200, json=EMPTY_PAGE)

        async with make_client(handler) as api:
            page = await api.genres.list({"search": "dr", "sort": None, "categories": ["x"]})

        assert page == EMPTY_PAGE
        assert dict(seen[0].params) == {"search": "dr", "categories": "x"}

    async def test_validation_error_exposes_field_errors(self) -> None:
        problem = {
            "status": 422,
            "detail": "Request validation failed",
            "errors": [
                {"loc": ["body", "name"], "msg": "Name cannot be empty", "type": "value_error"},
                {"loc": ["body", "categories_id"], "msg": "Unknown", "type": "value_error"},
                {"loc": ["body"], "msg": "Bad body", "type": "value_error"},
            ],
        }

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(422, json=problem)

        async with make_client(handler) as api:
            with pytest.raises(FormValidationError) as exc_info:
                await api.genres.create({"name": ""})

        assert exc_info.value.status_code == 422
        assert exc_info.value.field_errors == {
            "name": ["Name cannot be empty"],
            "categories_id": ["Unknown"],
            "__all__": ["Bad body"],
        }

    async def test_error_status_raises_api_response_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"detail": "Genre 'x' not found"})

        async with make_client(handler) as api:
            with pytest.raises(ApiResponseError) as exc_info:
                await api.genres.get("x")

        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "404: Genre 'x' not found"

    async def test_non_json_error_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad gateway")

        async with make_client(handler) as api:
            with pytest.raises(ApiResponseError) as exc_info:
                await api.videos.list()

        assert exc_info.value.problem == {}

    async def test_transport_failure_raises_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as api:
            with pytest.raises(NetworkError):
                await api.categories.list()

    async def test_newer_list_cancels_previous(self) -> None:
        release = asyncio.Event()

        async def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("page") == "1":
                await release.wait()
            return httpx.Response(200, json={"data": [request.url.params["page"]]})

        async with make_client(handler) as api:
            first = asyncio.create_task(api.genres.list({"page": 1}))
            await asyncio.sleep(0)
            second = await api.genres.list({"page": 2})

            with pytest.raises(RequestCancelledError) as exc_info:
                await first

        assert second == {"data": ["2"]}
        assert HttpResource.is_cancelled_request(exc_info.value)
        assert not HttpResource.is_cancelled_request(NetworkError())

    async def test_cancelling_the_caller_propagates(self) -> None:
        async def handler(request: httpx.Request) -> httpx.Response:
            await asyncio.Event().wait()
            return httpx.Response(200, json=EMPTY_PAGE)

        async with make_client(handler) as api:
            task = asyncio.create_task(api.genres.list())
            await asyncio.sleep(0)
            task.cancel()

            with pytest.raises(asyncio.CancelledError):
                await task


@pytest.mark.asyncio
class TestCatalogClient:
    """Tests for CatalogClient."""

    async def test_resource_lookup(self) -> None:
        async with make_client(lambda request: httpx.Response(200)) as api:
            assert api.resource("cast-members") is api.cast_members
            assert api.resource("cast_members") is api.cast_members
            with pytest.raises(KeyError):
                api.resource("users")
