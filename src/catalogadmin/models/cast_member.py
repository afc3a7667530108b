"""
Cast member models.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from catalogadmin.models._validators import clean_name, clean_optional_name
from catalogadmin.models.enums import CastMemberType


class CastMemberBase(BaseModel):
    """Base model for cast members."""

    name: str = Field(..., min_length=1, max_length=255, description="Full name")
    type: CastMemberType = Field(..., description="1 = director, 2 = actor")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate cast member name is not empty."""
        return clean_name(v)

    model_config = ConfigDict(
        validate_assignment=True,
    )


class CastMemberCreate(CastMemberBase):
    """Model for creating cast members."""

    pass


class CastMemberUpdate(BaseModel):
    """Model for updating cast members."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[CastMemberType] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        """Validate cast member name if provided."""
        return clean_optional_name(v)

    model_config = ConfigDict(
        validate_assignment=True,
    )


class CastMemberSummary(BaseModel):
    """Compact cast member representation embedded in videos."""

    id: str
    name: str
    type: CastMemberType

    model_config = ConfigDict(from_attributes=True)


class CastMember(CastMemberBase):
    """Full cast member model with timestamps."""

    id: str = Field(..., description="Cast member UUID")
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True,
    )
