"""
Tests for RFC 7807 exception handlers.

A throwaway FastAPI app raises each error type so the handlers are tested
without a database.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel, Field
from sqlalchemy.exc import OperationalError

from catalogadmin.api.exception_handlers import (
    MAX_DETAIL_LENGTH,
    TRUNCATION_SUFFIX,
    _truncate_detail,
    register_exception_handlers,
)
from catalogadmin.api.middleware.request_id import RequestIdMiddleware
from catalogadmin.exceptions import APIValidationError, NotFoundError, RepositoryError

pytestmark = pytest.mark.asyncio


class Payload(BaseModel):
    name: str = Field(..., min_length=1)
    year: int


def build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    app.add_middleware(RequestIdMiddleware)

    @app.get("/missing")
    async def missing() -> None:
        raise NotFoundError(resource_type="Genre", identifier="abc")

    @app.get("/relations")
    async def relations() -> None:
        raise APIValidationError.for_fields({"categories_id": "Unknown category id(s): x"})

    @app.get("/database")
    async def database() -> None:
        raise RepositoryError(
            "Failed to create Video",
            operation="create",
            entity_type="Video",
            original_error=OperationalError("INSERT", {}, Exception("disk full")),
        )

    @app.get("/boom")
    async def boom() -> None:
        raise RuntimeError("secret internals")

    @app.post("/payload")
    async def payload(body: Payload) -> Payload:
        return body

    return app


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=build_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestExceptionHandlers:
    """Each error type renders as a problem document."""

    async def test_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/missing", headers={"X-Request-ID": "req-1"})

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/problem+json"
        assert response.json() == {
            "type": "https://api.catalogadmin.dev/errors/NOT_FOUND",
            "title": "Resource Not Found",
            "status": 404,
            "detail": "Genre 'abc' not found",
            "instance": "/missing",
            "code": "NOT_FOUND",
            "request_id": "req-1",
        }

    async def test_api_validation_error_has_field_errors(self, client: AsyncClient) -> None:
        response = await client.get("/relations")

        assert response.status_code == 422
        assert response.json()["errors"] == [
            {
                "loc": ["body", "categories_id"],
                "msg": "Unknown category id(s): x",
                "type": "value_error",
            }
        ]

    async def test_request_validation_keeps_every_error(self, client: AsyncClient) -> None:
        response = await client.post("/payload", json={"name": ""})

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert body["detail"] == "Request validation failed"
        assert [e["loc"] for e in body["errors"]] == [["body", "name"], ["body", "year"]]

    async def test_repository_error_hides_cause(self, client: AsyncClient) -> None:
        response = await client.get("/database")

        assert response.status_code == 500
        assert response.json()["code"] == "DATABASE_ERROR"
        assert "disk full" not in response.text

    async def test_unhandled_error_hides_internals(self, client: AsyncClient) -> None:
        response = await client.get("/boom")

        assert response.status_code == 500
        assert response.json()["code"] == "INTERNAL_ERROR"
        assert response.json()["detail"] == "An unexpected error occurred"
        assert "secret" not in response.text


class TestTruncateDetail:
    """Tests for _truncate_detail."""

    def test_short_detail_unchanged(self) -> None:
        assert _truncate_detail("short") == "short"

    def test_long_detail_truncated(self) -> None:
        detail = _truncate_detail("x" * (MAX_DETAIL_LENGTH + 10))

        assert len(detail) == MAX_DETAIL_LENGTH
        assert detail.endswith(TRUNCATION_SUFFIX)
