"""
Genre models.

Defines Pydantic models for genres. A genre belongs to one or more
categories, referenced by id through ``categories_id`` on write.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalogadmin.models._validators import clean_name, clean_optional_name, required_ids
from catalogadmin.models.category import CategorySummary


class GenreBase(BaseModel):
    """Base model for genres."""

    name: str = Field(..., min_length=1, max_length=255, description="Genre name")
    is_active: bool = Field(default=True, description="Whether the genre is offered")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate genre name is not empty."""
        return clean_name(v, "Genre name")

    model_config = ConfigDict(
        validate_assignment=True,
    )


class GenreCreate(GenreBase):
    """Model for creating genres."""

    categories_id: List[str] = Field(
        ...,
        min_length=1,
        description="Ids of the categories the genre belongs to",
    )

    @field_validator("categories_id")
    @classmethod
    def validate_categories_id(cls, v: List[str]) -> List[str]:
        """Deduplicate category ids and require at least one."""
        return required_ids(v, "category")


class GenreUpdate(BaseModel):
    """Model for updating genres."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    is_active: Optional[bool] = None
    categories_id: Optional[List[str]] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        """Validate genre name if provided."""
        return clean_optional_name(v, "Genre name")

    @field_validator("categories_id")
    @classmethod
    def validate_categories_id(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        """Deduplicate category ids; an explicit empty list is rejected."""
        if v is None:
            return v
        return required_ids(v, "category")

    model_config = ConfigDict(
        validate_assignment=True,
    )


class GenreSummary(BaseModel):
    """Compact genre representation embedded in videos."""

    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class Genre(GenreBase):
    """Full genre model with its categories and timestamps."""

    id: str = Field(..., description="Genre UUID")
    categories: List[CategorySummary] = Field(default_factory=list)
    created_at: datetime = Field(..., description="When the genre was created")
    updated_at: datetime = Field(..., description="When the genre was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
    )
