"""
List table definitions of the admin client.

Each table fixes its columns, page sizes, debounce time and, when it has
any, the model of its extra filters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from pydantic import field_validator

from catalogadmin.client.filter.manager import FilterManager, History, TableColumn
from catalogadmin.client.filter.schema import ExtraFilter, split_csv
from catalogadmin.models.enums import CastMemberType


class GenreTableFilter(ExtraFilter):
    """Genres filtered by category names (or ids)."""

    categories: Optional[List[str]] = None

    @field_validator("categories", mode="before")
    @classmethod
    def split_categories(cls, v: Any) -> Optional[List[str]]:
        return split_csv(v)


class CastMemberTableFilter(ExtraFilter):
    """Cast members filtered by role."""

    type: Optional[CastMemberType] = None

    @field_validator("type", mode="before")
    @classmethod
    def known_type(cls, v: Any) -> Optional[int]:
        try:
            return CastMemberType(int(str(v)))
        except (TypeError, ValueError):
            return None


class VideoTableFilter(ExtraFilter):
    """Videos filtered by related categories, genres and cast members."""

    categories: Optional[List[str]] = None
    genres: Optional[List[str]] = None
    cast_members: Optional[List[str]] = None

    @field_validator("categories", "genres", "cast_members", mode="before")
    @classmethod
    def split_values(cls, v: Any) -> Optional[List[str]]:
        return split_csv(v)


@dataclass(frozen=True)
class TableConfig:
    """Static configuration of one list table."""

    resource: str
    title: str
    columns: Tuple[TableColumn, ...]
    debounce_time: float  # seconds
    rows_per_page: int
    rows_per_page_options: Tuple[int, ...]
    extra_filter: Optional[type[ExtraFilter]] = None
    # Columns shown as related names, e.g. genre -> categories
    relation_columns: Tuple[str, ...] = field(default_factory=tuple)

    def filter_manager(self, history: History) -> FilterManager:
        return FilterManager(
            columns=self.columns,
            rows_per_page=self.rows_per_page,
            rows_per_page_options=self.rows_per_page_options,
            history=history,
            extra_filter=self.extra_filter,
        )


TABLES: Dict[str, TableConfig] = {
    "categories": TableConfig(
        resource="categories",
        title="Categories",
        columns=(
            TableColumn("id", "Id", sortable=False),
            TableColumn("name", "Name"),
            TableColumn("is_active", "Active?"),
            TableColumn("created_at", "Created at"),
        ),
        debounce_time=0.2,
        rows_per_page=10,
        rows_per_page_options=(10, 25, 50),
    ),
    "genres": TableConfig(
        resource="genres",
        title="Genres",
        columns=(
            TableColumn("name", "Name"),
            TableColumn("categories", "Categories", sortable=False),
            TableColumn("created_at", "Created at"),
        ),
        debounce_time=0.3,
        rows_per_page=15,
        rows_per_page_options=(15, 25, 50),
        extra_filter=GenreTableFilter,
        relation_columns=("categories",),
    ),
    "cast-members": TableConfig(
        resource="cast-members",
        title="Cast members",
        columns=(
            TableColumn("name", "Name"),
            TableColumn("type", "Type"),
            TableColumn("created_at", "Created at"),
        ),
        debounce_time=0.3,
        rows_per_page=15,
        rows_per_page_options=(15, 25, 50),
        extra_filter=CastMemberTableFilter,
    ),
    "videos": TableConfig(
        resource="videos",
        title="Videos",
        columns=(
            TableColumn("title", "Title"),
            TableColumn("categories", "Categories", sortable=False),
            TableColumn("genres", "Genres", sortable=False),
            TableColumn("year_launched", "Year"),
            TableColumn("created_at", "Created at"),
        ),
        debounce_time=0.3,
        rows_per_page=15,
        rows_per_page_options=(15, 25, 50),
        extra_filter=VideoTableFilter,
        relation_columns=("categories", "genres"),
    ),
}


def get_table(resource: str) -> TableConfig:
    """Table of a resource, by URL segment or attribute name."""
    return TABLES[resource.replace("_", "-")]
