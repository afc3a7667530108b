"""
Category models.

Defines Pydantic models for catalog categories with validation and
serialization support.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalogadmin.models._validators import clean_name, clean_optional_name


class CategoryBase(BaseModel):
    """Base model for categories."""

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Category name",
    )
    description: Optional[str] = Field(
        default=None,
        description="Free-form description",
    )
    is_active: bool = Field(
        default=True,
        description="Whether the category is offered in the catalog",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate category name is not empty."""
        return clean_name(v, "Category name")

    model_config = ConfigDict(
        validate_assignment=True,
    )


class CategoryCreate(CategoryBase):
    """Model for creating categories."""

    pass


class CategoryUpdate(BaseModel):
    """Model for updating categories."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        """Validate category name if provided."""
        return clean_optional_name(v, "Category name")

    model_config = ConfigDict(
        validate_assignment=True,
    )


class CategorySummary(BaseModel):
    """Compact category representation embedded in genres and videos."""

    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class Category(CategoryBase):
    """Full category model with timestamps."""

    id: str = Field(..., description="Category UUID")
    created_at: datetime = Field(..., description="When the category was created")
    updated_at: datetime = Field(..., description="When the category was last updated")

    model_config = ConfigDict(
        from_attributes=True,  # Enable ORM mode for SQLAlchemy compatibility
        validate_assignment=True,
    )
