"""
Tests for catalog model validation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from catalogadmin.models import (
    CastMemberCreate,
    CastMemberType,
    CategoryCreate,
    CategoryUpdate,
    GenreCreate,
    GenreUpdate,
    Rating,
    VideoCreate,
    VideoUpdate,
)
from catalogadmin.models._validators import clean_name, unique_ids
from tests.factories.cast_member_factory import DirectorCreateFactory
from tests.factories.category_factory import CategoryCreateFactory, CategoryUpdateFactory
from tests.factories.video_factory import VideoCreateFactory, VideoUpdateFactory


class TestValidators:
    """Tests for the shared validators."""

    def test_clean_name_strips(self) -> None:
        assert clean_name("  Drama  ") == "Drama"

    @pytest.mark.parametrize("value", ["", "   "])
    def test_clean_name_rejects_blank(self, value: str) -> None:
        with pytest.raises(ValueError, match="Title cannot be empty"):
            clean_name(value, "Title")

    def test_clean_name_rejects_long(self) -> None:
        with pytest.raises(ValueError, match="cannot exceed 255"):
            clean_name("x" * 256)

    def test_unique_ids_keeps_order(self) -> None:
        assert unique_ids(["b", " a", "b", "", "a "]) == ["b", "a"]
        assert unique_ids(None) is None


class TestCategoryModels:
    """Tests for category models."""

    def test_factory_builds_valid_category(self) -> None:
        category = CategoryCreateFactory.build()

        assert category.is_active is True
        assert category.name

    def test_update_only_tracks_given_fields(self) -> None:
        update = CategoryUpdate(description=None)

        assert update.model_dump(exclude_unset=True) == {"description": None}

    def test_update_factory_sets_only_name(self) -> None:
        update = CategoryUpdateFactory.build()

        assert list(update.model_dump(exclude_unset=True)) == ["name"]

    def test_blank_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CategoryCreate(name=" ")


class TestGenreModels:
    """Tests for genre models."""

    def test_categories_deduplicated(self) -> None:
        genre = GenreCreate(name="Drama", categories_id=["a", "b", "a"])

        assert genre.categories_id == ["a", "b"]

    @pytest.mark.parametrize("categories_id", [[], [" "]])
    def test_needs_a_category(self, categories_id: list[str]) -> None:
        with pytest.raises(ValidationError):
            GenreCreate(name="Drama", categories_id=categories_id)

    def test_update_cannot_empty_categories(self) -> None:
        with pytest.raises(ValidationError):
            GenreUpdate(categories_id=[])

        assert GenreUpdate(name="Drama").categories_id is None


class TestCastMemberModels:
    """Tests for cast member models."""

    def test_type_from_int(self) -> None:
        member = CastMemberCreate(name="Someone", type=1)

        assert member.type is CastMemberType.DIRECTOR
        assert member.type.label == "Director"

    def test_director_factory(self) -> None:
        assert DirectorCreateFactory.build().type is CastMemberType.DIRECTOR

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            CastMemberCreate(name="Someone", type=5)


class TestVideoModels:
    """Tests for video models."""

    def test_rating_values(self) -> None:
        assert [r.value for r in Rating] == ["L", "10", "12", "14", "16", "18"]

    def test_json_dump_uses_plain_values(self) -> None:
        video = VideoCreateFactory.build(rating=Rating.FREE)

        dumped = video.model_dump(mode="json")

        assert dumped["rating"] == "L"
        assert dumped["cast_members_id"] == []

    @pytest.mark.parametrize(
        "field, value",
        [("year_launched", 0), ("duration", 0), ("rating", "99"), ("description", "  ")],
    )
    def test_invalid_fields(self, field: str, value: object) -> None:
        data = VideoCreateFactory.build().model_dump()
        data[field] = value

        with pytest.raises(ValidationError):
            VideoCreate(**data)

    def test_update_relations_are_optional(self) -> None:
        update = VideoUpdate(opened=True)

        assert update.model_dump(exclude_unset=True) == {"opened": True}

    def test_update_factory_leaves_relations_unset(self) -> None:
        update = VideoUpdateFactory.build()

        assert update.model_dump(exclude_unset=True) == {"title": update.title}

    @pytest.mark.parametrize("field", ["categories_id", "genres_id"])
    def test_blank_relation_ids_rejected(self, field: str) -> None:
        data = VideoCreateFactory.build().model_dump()
        data[field] = ["  ", ""]

        with pytest.raises(ValidationError, match="At least one"):
            VideoCreate(**data)

    def test_cast_members_may_be_blank(self) -> None:
        data = VideoCreateFactory.build().model_dump()
        data["cast_members_id"] = ["  "]

        assert VideoCreate(**data).cast_members_id == []

    @pytest.mark.parametrize(
        "field, value",
        [("categories_id", ["  "]), ("genres_id", []), ("description", "   ")],
    )
    def test_update_rejects_blank_values(self, field: str, value: object) -> None:
        with pytest.raises(ValidationError):
            VideoUpdate(**{field: value})

    def test_update_strips_description(self) -> None:
        assert VideoUpdate(description="  New plot ").description == "New plot"
