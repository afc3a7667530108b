"""
Enums for catalogadmin models.

Defines enumeration types used across the application for consistent
type safety and validation.
"""

from __future__ import annotations

from enum import Enum, IntEnum


class CastMemberType(IntEnum):
    """Role of a cast member."""

    DIRECTOR = 1
    ACTOR = 2

    @property
    def label(self) -> str:
        """Human-readable role name."""
        return self.name.capitalize()


class Rating(str, Enum):
    """Content rating of a video (minimum recommended age)."""

    FREE = "L"
    AGE_10 = "10"
    AGE_12 = "12"
    AGE_14 = "14"
    AGE_16 = "16"
    AGE_18 = "18"
