"""
Video models.

Defines Pydantic models for catalog videos. Relations are written as id
lists (``categories_id``, ``genres_id``, ``cast_members_id``) and read back
as embedded summaries.
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from catalogadmin.models._validators import (
    clean_name,
    clean_optional_name,
    required_ids,
    unique_ids,
)
from catalogadmin.models.cast_member import CastMemberSummary
from catalogadmin.models.category import CategorySummary
from catalogadmin.models.enums import Rating
from catalogadmin.models.genre import GenreSummary


class VideoBase(BaseModel):
    """Base model for video data."""

    title: str = Field(..., min_length=1, max_length=255, description="Video title")
    description: str = Field(..., min_length=1, description="Synopsis")
    year_launched: int = Field(..., ge=1, le=9999, description="Release year")
    opened: bool = Field(default=False, description="Whether the video is open to all")
    rating: Rating = Field(..., description="Content rating")
    duration: int = Field(..., ge=1, description="Duration in minutes")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate title is not blank."""
        return clean_name(v, "Title")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Validate description is not blank."""
        if not v.strip():
            raise ValueError("Description cannot be empty")
        return v.strip()

    model_config = ConfigDict(
        validate_assignment=True,
    )


class VideoCreate(VideoBase):
    """Model for creating videos."""

    categories_id: List[str] = Field(..., min_length=1)
    genres_id: List[str] = Field(..., min_length=1)
    cast_members_id: List[str] = Field(default_factory=list)

    @field_validator("categories_id")
    @classmethod
    def validate_categories_id(cls, v: List[str]) -> List[str]:
        return required_ids(v, "category")

    @field_validator("genres_id")
    @classmethod
    def validate_genres_id(cls, v: List[str]) -> List[str]:
        return required_ids(v, "genre")

    @field_validator("cast_members_id")
    @classmethod
    def validate_cast_members_id(cls, v: List[str]) -> List[str]:
        """Deduplicate cast member ids; the list may be empty."""
        return unique_ids(v) or []


class VideoUpdate(BaseModel):
    """Model for updating videos."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = Field(default=None, min_length=1)
    year_launched: Optional[int] = Field(default=None, ge=1, le=9999)
    opened: Optional[bool] = None
    rating: Optional[Rating] = None
    duration: Optional[int] = Field(default=None, ge=1)
    categories_id: Optional[List[str]] = Field(default=None, min_length=1)
    genres_id: Optional[List[str]] = Field(default=None, min_length=1)
    cast_members_id: Optional[List[str]] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: Optional[str]) -> Optional[str]:
        """Validate title if provided."""
        return clean_optional_name(v, "Title")

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: Optional[str]) -> Optional[str]:
        """Validate description is not blank if provided."""
        if v is None:
            return v
        if not v.strip():
            raise ValueError("Description cannot be empty")
        return v.strip()

    @field_validator("categories_id", "genres_id")
    @classmethod
    def validate_required_ids(
        cls, v: Optional[List[str]], info: ValidationInfo
    ) -> Optional[List[str]]:
        """Deduplicate ids; a list given but left empty is rejected."""
        if v is None:
            return v
        return required_ids(v, "category" if info.field_name == "categories_id" else "genre")

    @field_validator("cast_members_id")
    @classmethod
    def validate_cast_members_id(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return unique_ids(v)

    model_config = ConfigDict(
        validate_assignment=True,
    )


class Video(VideoBase):
    """Full video model with relations and timestamps."""

    id: str = Field(..., description="Video UUID")
    categories: List[CategorySummary] = Field(default_factory=list)
    genres: List[GenreSummary] = Field(default_factory=list)
    cast_members: List[CastMemberSummary] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode for SQLAlchemy compatibility
        validate_assignment=True,
    )
