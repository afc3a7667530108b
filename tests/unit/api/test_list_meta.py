"""
Tests for list pagination metadata.
"""

from __future__ import annotations

import pytest

from catalogadmin.api.routers.crud import build_list_meta
from catalogadmin.api.schemas.responses import ListMeta
from catalogadmin.repositories.base import ListParams


class TestListMetaBuild:
    """Tests for ListMeta.build."""

    @pytest.mark.parametrize(
        "total, page, per_page, count, expected",
        [
            (0, 1, 15, 0, (1, None, None)),
            (31, 1, 15, 15, (3, 1, 15)),
            (31, 3, 15, 1, (3, 31, 31)),
            (31, 4, 15, 0, (3, None, None)),
            (30, 2, 15, 15, (2, 16, 30)),
        ],
    )
    def test_build(
        self,
        total: int,
        page: int,
        per_page: int,
        count: int,
        expected: tuple[int, int | None, int | None],
    ) -> None:
        meta = ListMeta.build(total=total, page=page, per_page=per_page, count=count)

        assert (meta.last_page, meta.from_, meta.to) == expected
        assert meta.current_page == page

    def test_serializes_from_alias(self) -> None:
        meta = ListMeta.build(total=1, page=1, per_page=15, count=1)

        assert meta.model_dump(by_alias=True) == {
            "total": 1,
            "current_page": 1,
            "per_page": 15,
            "last_page": 1,
            "from": 1,
            "to": 1,
        }


class TestBuildListMeta:
    """Tests for build_list_meta."""

    def test_paginated(self) -> None:
        meta = build_list_meta(ListParams(page=2, per_page=10), total=25, count=10)

        assert (meta.current_page, meta.per_page, meta.last_page) == (2, 10, 3)

    def test_all_is_a_single_page(self) -> None:
        meta = build_list_meta(ListParams(page=3, per_page=10, fetch_all=True), total=25, count=25)

        assert (meta.current_page, meta.per_page, meta.last_page) == (1, 25, 1)
        assert (meta.from_, meta.to) == (1, 25)

    def test_all_on_empty_table(self) -> None:
        meta = build_list_meta(ListParams(fetch_all=True), total=0, count=0)

        assert meta.per_page == 1
        assert meta.from_ is None
