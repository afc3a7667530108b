"""
Shared fixtures for API integration tests.

Every test runs against a fresh in-memory SQLite database through the
FastAPI app (see ``tests/conftest.py``); these fixtures create related rows
through the API itself.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable

import pytest
from httpx import AsyncClient

from tests.factories.cast_member_factory import CastMemberCreateFactory
from tests.factories.category_factory import CategoryCreateFactory
from tests.factories.genre_factory import GenreCreateFactory

API = "/api/v1"

Creator = Callable[..., Awaitable[dict[str, Any]]]


async def _post(client: AsyncClient, resource: str, payload: dict[str, Any]) -> dict[str, Any]:
    response = await client.post(f"{API}/{resource}", json=payload)
    assert response.status_code == 201, response.text
    data: dict[str, Any] = response.json()["data"]
    return data


@pytest.fixture
def create_category(async_client: AsyncClient) -> Creator:
    """Create a category through the API and return its data."""

    async def _create(**overrides: Any) -> dict[str, Any]:
        payload = CategoryCreateFactory.build(**overrides).model_dump(mode="json")
        return await _post(async_client, "categories", payload)

    return _create


@pytest.fixture
def create_genre(async_client: AsyncClient, create_category: Creator) -> Creator:
    """Create a genre (and a category for it unless ids are given)."""

    async def _create(**overrides: Any) -> dict[str, Any]:
        if "categories_id" not in overrides:
            overrides["categories_id"] = [(await create_category())["id"]]
        payload = GenreCreateFactory.build(**overrides).model_dump(mode="json")
        return await _post(async_client, "genres", payload)

    return _create


@pytest.fixture
def create_cast_member(async_client: AsyncClient) -> Creator:
    """Create a cast member through the API and return its data."""

    async def _create(**overrides: Any) -> dict[str, Any]:
        payload = CastMemberCreateFactory.build(**overrides).model_dump(mode="json")
        return await _post(async_client, "cast-members", payload)

    return _create
