"""
Integration tests for the genre endpoints.

Tests cover:
- Genres are created with their categories
- Unknown or missing category ids are rejected per field
- ``categories`` list filter by id or name
- Updating ``categories_id`` replaces the links
"""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from tests.integration.api.conftest import API, Creator

pytestmark = [pytest.mark.asyncio, pytest.mark.integration]

ENDPOINT = f"{API}/genres"


class TestCreateGenre:
    """Tests for POST /genres."""

    async def test_create_links_categories(
        self, async_client: AsyncClient, create_category: Creator
    ) -> None:
        movies = await create_category(name="Movies")
        series = await create_category(name="Series")

        response = await async_client.post(
            ENDPOINT,
            json={"name": "Drama", "categories_id": [series["id"], movies["id"], movies["id"]]},
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Drama"
        assert data["is_active"] is True
        assert data["categories"] == [
            {"id": movies["id"], "name": "Movies"},
            {"id": series["id"], "name": "Series"},
        ]

    async def test_categories_are_required(self, async_client: AsyncClient) -> None:
        missing = await async_client.post(ENDPOINT, json={"name": "Drama"})
        empty = await async_client.post(ENDPOINT, json={"name": "Drama", "categories_id": []})

        assert missing.status_code == 422
        assert ["body", "categories_id"] in [e["loc"] for e in missing.json()["errors"]]
        assert empty.status_code == 422

    async def test_unknown_category_is_rejected(
        self, async_client: AsyncClient, create_category: Creator
    ) -> None:
        movies = await create_category()

        response = await async_client.post(
            ENDPOINT, json={"name": "Drama", "categories_id": [movies["id"], "nope"]}
        )

        assert response.status_code == 422
        errors = response.json()["errors"]
        assert len(errors) == 1
        assert errors[0]["loc"] == ["body", "categories_id"]
        assert "nope" in errors[0]["msg"]
        assert (await async_client.get(ENDPOINT)).json()["meta"]["total"] == 0


class TestListGenres:
    """Tests for GET /genres."""

    async def test_filter_by_category_name_or_id(
        self, async_client: AsyncClient, create_category: Creator, create_genre: Creator
    ) -> None:
        movies = await create_category(name="Movies")
        series = await create_category(name="Series")
        await create_genre(name="Drama", categories_id=[movies["id"]])
        await create_genre(name="Sitcom", categories_id=[series["id"]])
        await create_genre(name="Thriller", categories_id=[movies["id"], series["id"]])

        by_name = await async_client.get(ENDPOINT, params={"categories": "Movies", "sort": "name"})
        by_id = await async_client.get(
            ENDPOINT, params={"categories": series["id"], "sort": "name"}
        )
        both = await async_client.get(
            ENDPOINT, params={"categories": "Movies,Series", "sort": "name"}
        )

        assert [g["name"] for g in by_name.json()["data"]] == ["Drama", "Thriller"]
        assert [g["name"] for g in by_id.json()["data"]] == ["Sitcom", "Thriller"]
        assert both.json()["meta"]["total"] == 3

    async def test_search_by_name(
        self, async_client: AsyncClient, create_genre: Creator
    ) -> None:
        await create_genre(name="Science Fiction")
        await create_genre(name="Horror")

        response = await async_client.get(ENDPOINT, params={"search": "fiction"})

        assert [g["name"] for g in response.json()["data"]] == ["Science Fiction"]


class TestUpdateGenre:
    """Tests for PUT /genres/{id}."""

    async def test_update_replaces_categories(
        self, async_client: AsyncClient, create_category: Creator, create_genre: Creator
    ) -> None:
        movies = await create_category(name="Movies")
        series = await create_category(name="Series")
        genre = await create_genre(name="Drama", categories_id=[movies["id"]])

        response = await async_client.put(
            f"{ENDPOINT}/{genre['id']}", json={"categories_id": [series["id"]]}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Drama"
        assert data["categories"] == [{"id": series["id"], "name": "Series"}]

    async def test_update_without_categories_keeps_them(
        self, async_client: AsyncClient, create_genre: Creator
    ) -> None:
        genre = await create_genre(name="Drama")

        response = await async_client.put(f"{ENDPOINT}/{genre['id']}", json={"name": "Dramas"})

        assert response.json()["data"]["name"] == "Dramas"
        assert response.json()["data"]["categories"] == genre["categories"]

    async def test_update_with_unknown_category_is_rejected(
        self, async_client: AsyncClient, create_genre: Creator
    ) -> None:
        genre = await create_genre()

        response = await async_client.put(
            f"{ENDPOINT}/{genre['id']}", json={"categories_id": ["missing"]}
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["loc"] == ["body", "categories_id"]


class TestDeleteGenre:
    """Tests for DELETE /genres/{id}."""

    async def test_delete_keeps_categories(
        self, async_client: AsyncClient, create_genre: Creator
    ) -> None:
        genre = await create_genre()
        category_id = genre["categories"][0]["id"]

        response = await async_client.delete(f"{ENDPOINT}/{genre['id']}")

        assert response.status_code == 204
        assert (await async_client.get(f"{ENDPOINT}/{genre['id']}")).status_code == 404
        assert (await async_client.get(f"{API}/categories/{category_id}")).status_code == 200
