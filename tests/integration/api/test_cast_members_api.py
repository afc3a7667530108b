"""
Integration tests for the cast member endpoints.
"""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from tests.integration.api.conftest import API, Creator

pytestmark = [pytest.mark.asyncio, pytest.mark.integration]

ENDPOINT = f"{API}/cast-members"


class TestCastMembers:
    """CRUD tests for /cast-members."""

    async def test_create_director(self, async_client: AsyncClient) -> None:
        response = await async_client.post(ENDPOINT, json={"name": "Agnès Varda", "type": 1})

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Agnès Varda"
        assert data["type"] == 1

    @pytest.mark.parametrize("member_type", [0, 3, "actor"])
    async def test_unknown_type_is_rejected(
        self, async_client: AsyncClient, member_type: object
    ) -> None:
        response = await async_client.post(
            ENDPOINT, json={"name": "Someone", "type": member_type}
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["loc"] == ["body", "type"]

    async def test_filter_by_type(
        self, async_client: AsyncClient, create_cast_member: Creator
    ) -> None:
        await create_cast_member(name="Director One", type=1)
        await create_cast_member(name="Actor One", type=2)
        await create_cast_member(name="Actor Two", type=2)

        directors = await async_client.get(ENDPOINT, params={"type": 1})
        actors = await async_client.get(ENDPOINT, params={"type": 2, "sort": "name"})

        assert [m["name"] for m in directors.json()["data"]] == ["Director One"]
        assert [m["name"] for m in actors.json()["data"]] == ["Actor One", "Actor Two"]

    async def test_filter_with_unknown_type_is_rejected(self, async_client: AsyncClient) -> None:
        response = await async_client.get(ENDPOINT, params={"type": 7})

        assert response.status_code == 422

    async def test_sort_by_type(
        self, async_client: AsyncClient, create_cast_member: Creator
    ) -> None:
        await create_cast_member(name="Actor", type=2)
        await create_cast_member(name="Director", type=1)

        response = await async_client.get(ENDPOINT, params={"sort": "type", "dir": "asc"})

        assert [m["type"] for m in response.json()["data"]] == [1, 2]

    async def test_update_type(
        self, async_client: AsyncClient, create_cast_member: Creator
    ) -> None:
        member = await create_cast_member(type=2)

        response = await async_client.put(f"{ENDPOINT}/{member['id']}", json={"type": 1})

        assert response.status_code == 200
        assert response.json()["data"]["type"] == 1
        assert response.json()["data"]["name"] == member["name"]

    async def test_delete(self, async_client: AsyncClient, create_cast_member: Creator) -> None:
        member = await create_cast_member()

        assert (await async_client.delete(f"{ENDPOINT}/{member['id']}")).status_code == 204
        assert (await async_client.delete(f"{ENDPOINT}/{member['id']}")).status_code == 404
