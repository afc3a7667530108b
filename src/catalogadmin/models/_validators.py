"""Shared field validation helpers for catalog models."""

from __future__ import annotations

from typing import List, Optional

NAME_MAX_LENGTH = 255


def clean_name(v: str, label: str = "Name") -> str:
    """Strip a required name and reject blank values."""
    if not v or not v.strip():
        raise ValueError(f"{label} cannot be empty")

    name = v.strip()
    if len(name) > NAME_MAX_LENGTH:
        raise ValueError(f"{label} cannot exceed {NAME_MAX_LENGTH} characters")

    return name


def clean_optional_name(v: Optional[str], label: str = "Name") -> Optional[str]:
    """Same as ``clean_name`` but lets ``None`` through."""
    if v is None:
        return v
    return clean_name(v, label)


def unique_ids(v: Optional[List[str]]) -> Optional[List[str]]:
    """Drop blank and duplicate ids while keeping the original order."""
    if v is None:
        return v
    seen: dict[str, None] = {}
    for item in v:
        item = item.strip()
        if item:
            seen.setdefault(item, None)
    return list(seen)


def required_ids(v: List[str], label: str) -> List[str]:
    """``unique_ids`` that rejects a list left empty once blanks are dropped."""
    ids = unique_ids(v) or []
    if not ids:
        raise ValueError(f"At least one {label} is required")
    return ids
