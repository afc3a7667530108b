"""
Integration tests for the video endpoints.

Tests cover:
- Creating a video with categories, genres and cast members
- Related ids must exist
- Every genre must belong to one of the video's categories
- List filters on relations and title search
- Partial updates checked against the stored relations
"""

from __future__ import annotations

from typing import Any

import pytest
from httpx import AsyncClient

from tests.factories.video_factory import VideoCreateFactory
from tests.integration.api.conftest import API, Creator

pytestmark = [pytest.mark.asyncio, pytest.mark.integration]

ENDPOINT = f"{API}/videos"


@pytest.fixture
async def catalog(
    create_category: Creator, create_genre: Creator, create_cast_member: Creator
) -> dict[str, dict[str, Any]]:
    """Two categories, a genre in each and one director."""
    movies = await create_category(name="Movies")
    series = await create_category(name="Series")
    return {
        "movies": movies,
        "series": series,
        "drama": await create_genre(name="Drama", categories_id=[movies["id"]]),
        "sitcom": await create_genre(name="Sitcom", categories_id=[series["id"]]),
        "director": await create_cast_member(name="Director", type=1),
    }


def video_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = VideoCreateFactory.build(**overrides).model_dump(mode="json")
    return payload


class TestCreateVideo:
    """Tests for POST /videos."""

    async def test_create_with_relations(
        self, async_client: AsyncClient, catalog: dict[str, dict[str, Any]]
    ) -> None:
        response = await async_client.post(
            ENDPOINT,
            json=video_payload(
                title="The Film",
                rating="L",
                categories_id=[catalog["movies"]["id"]],
                genres_id=[catalog["drama"]["id"]],
                cast_members_id=[catalog["director"]["id"]],
            ),
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["title"] == "The Film"
        assert data["rating"] == "L"
        assert data["opened"] is False
        assert [c["name"] for c in data["categories"]] == ["Movies"]
        assert [g["name"] for g in data["genres"]] == ["Drama"]
        assert data["cast_members"] == [
            {"id": catalog["director"]["id"], "name": "Director", "type": 1}
        ]

    async def test_genre_outside_selected_categories_is_rejected(
        self, async_client: AsyncClient, catalog: dict[str, dict[str, Any]]
    ) -> None:
        response = await async_client.post(
            ENDPOINT,
            json=video_payload(
                categories_id=[catalog["movies"]["id"]],
                genres_id=[catalog["drama"]["id"], catalog["sitcom"]["id"]],
            ),
        )

        assert response.status_code == 422
        errors = response.json()["errors"]
        assert [e["loc"] for e in errors] == [["body", "genres_id"]]
        assert "Sitcom" in errors[0]["msg"]
        assert "Drama" not in errors[0]["msg"]

    async def test_unknown_cast_member_is_rejected(
        self, async_client: AsyncClient, catalog: dict[str, dict[str, Any]]
    ) -> None:
        response = await async_client.post(
            ENDPOINT,
            json=video_payload(
                categories_id=[catalog["movies"]["id"]],
                genres_id=[catalog["drama"]["id"]],
                cast_members_id=["ghost"],
            ),
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["loc"] == ["body", "cast_members_id"]

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"rating": "21"}, "rating"),
            ({"duration": 0}, "duration"),
            ({"title": ""}, "title"),
            ({"genres_id": []}, "genres_id"),
            ({"categories_id": ["  "]}, "categories_id"),
            ({"genres_id": ["  ", ""]}, "genres_id"),
            ({"description": "   "}, "description"),
        ],
    )
    async def test_invalid_fields_are_rejected(
        self,
        async_client: AsyncClient,
        catalog: dict[str, dict[str, Any]],
        overrides: dict[str, Any],
        field: str,
    ) -> None:
        payload = video_payload(
            categories_id=[catalog["movies"]["id"]], genres_id=[catalog["drama"]["id"]]
        )
        payload.update(overrides)

        response = await async_client.post(ENDPOINT, json=payload)

        assert response.status_code == 422
        assert ["body", field] in [e["loc"] for e in response.json()["errors"]]

    async def test_blank_relation_ids_are_rejected(
        self, async_client: AsyncClient
    ) -> None:
        payload = video_payload()
        payload.update(categories_id=["  "], genres_id=["  "])

        response = await async_client.post(ENDPOINT, json=payload)

        assert response.status_code == 422
        errors = {tuple(e["loc"]): e["msg"] for e in response.json()["errors"]}
        assert "At least one category is required" in errors[("body", "categories_id")]
        assert "At least one genre is required" in errors[("body", "genres_id")]
        listed = await async_client.get(ENDPOINT)
        assert listed.json()["meta"]["total"] == 0


class TestListVideos:
    """Tests for GET /videos."""

    async def test_relation_filters_and_search(
        self, async_client: AsyncClient, catalog: dict[str, dict[str, Any]]
    ) -> None:
        for title, category, genre in (
            ("Night Drama", "movies", "drama"),
            ("Day Drama", "movies", "drama"),
            ("Laughs", "series", "sitcom"),
        ):
            await async_client.post(
                ENDPOINT,
                json=video_payload(
                    title=title,
                    categories_id=[catalog[category]["id"]],
                    genres_id=[catalog[genre]["id"]],
                ),
            )

        by_genre = await async_client.get(ENDPOINT, params={"genres": "Drama", "sort": "title"})
        by_category = await async_client.get(
            ENDPOINT, params={"categories": catalog["series"]["id"]}
        )
        searched = await async_client.get(ENDPOINT, params={"search": "night"})

        assert [v["title"] for v in by_genre.json()["data"]] == ["Day Drama", "Night Drama"]
        assert [v["title"] for v in by_category.json()["data"]] == ["Laughs"]
        assert [v["title"] for v in searched.json()["data"]] == ["Night Drama"]

    async def test_unknown_sort_is_rejected(self, async_client: AsyncClient) -> None:
        response = await async_client.get(ENDPOINT, params={"sort": "name"})

        assert response.status_code == 422


class TestUpdateVideo:
    """Tests for PUT /videos/{id}."""

    async def test_genres_are_checked_against_stored_categories(
        self, async_client: AsyncClient, catalog: dict[str, dict[str, Any]]
    ) -> None:
        created = await async_client.post(
            ENDPOINT,
            json=video_payload(
                categories_id=[catalog["movies"]["id"]], genres_id=[catalog["drama"]["id"]]
            ),
        )
        video_id = created.json()["data"]["id"]

        rejected = await async_client.put(
            f"{ENDPOINT}/{video_id}", json={"genres_id": [catalog["sitcom"]["id"]]}
        )
        accepted = await async_client.put(
            f"{ENDPOINT}/{video_id}",
            json={
                "categories_id": [catalog["series"]["id"]],
                "genres_id": [catalog["sitcom"]["id"]],
            },
        )

        assert rejected.status_code == 422
        assert rejected.json()["errors"][0]["loc"] == ["body", "genres_id"]
        assert accepted.status_code == 200
        assert [g["name"] for g in accepted.json()["data"]["genres"]] == ["Sitcom"]
        assert [c["name"] for c in accepted.json()["data"]["categories"]] == ["Series"]

    async def test_scalar_update_keeps_relations(
        self, async_client: AsyncClient, catalog: dict[str, dict[str, Any]]
    ) -> None:
        created = await async_client.post(
            ENDPOINT,
            json=video_payload(
                categories_id=[catalog["movies"]["id"]],
                genres_id=[catalog["drama"]["id"]],
                cast_members_id=[catalog["director"]["id"]],
            ),
        )
        video = created.json()["data"]

        response = await async_client.put(
            f"{ENDPOINT}/{video['id']}", json={"opened": True, "rating": "18"}
        )

        data = response.json()["data"]
        assert data["opened"] is True
        assert data["rating"] == "18"
        assert data["genres"] == video["genres"]
        assert data["cast_members"] == video["cast_members"]

    @pytest.mark.parametrize(
        "body, field",
        [
            ({"categories_id": ["  "]}, "categories_id"),
            ({"genres_id": [""]}, "genres_id"),
            ({"description": "   "}, "description"),
        ],
    )
    async def test_blank_values_are_rejected(
        self,
        async_client: AsyncClient,
        catalog: dict[str, dict[str, Any]],
        body: dict[str, Any],
        field: str,
    ) -> None:
        created = await async_client.post(
            ENDPOINT,
            json=video_payload(
                description="A synopsis",
                categories_id=[catalog["movies"]["id"]],
                genres_id=[catalog["drama"]["id"]],
            ),
        )
        video_id = created.json()["data"]["id"]

        response = await async_client.put(f"{ENDPOINT}/{video_id}", json=body)
        stored = await async_client.get(f"{ENDPOINT}/{video_id}")

        assert response.status_code == 422
        assert response.json()["errors"][0]["loc"] == ["body", field]
        assert stored.json()["data"]["description"] == "A synopsis"
        assert [c["name"] for c in stored.json()["data"]["categories"]] == ["Movies"]


class TestDeleteVideo:
    """Tests for DELETE /videos/{id}."""

    async def test_delete(
        self, async_client: AsyncClient, catalog: dict[str, dict[str, Any]]
    ) -> None:
        created = await async_client.post(
            ENDPOINT,
            json=video_payload(
                categories_id=[catalog["movies"]["id"]], genres_id=[catalog["drama"]["id"]]
            ),
        )
        video_id = created.json()["data"]["id"]

        assert (await async_client.delete(f"{ENDPOINT}/{video_id}")).status_code == 204
        assert (await async_client.get(f"{ENDPOINT}/{video_id}")).status_code == 404
        assert (await async_client.get(f"{API}/genres/{catalog['drama']['id']}")).status_code == 200
