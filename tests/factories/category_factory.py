"""
Factory definitions for category models.
"""

from __future__ import annotations

import factory

from catalogadmin.models.category import CategoryCreate, CategoryUpdate


class CategoryCreateFactory(factory.Factory):
    """Factory for CategoryCreate models."""

    class Meta:
        model = CategoryCreate

    name = factory.Sequence(lambda n: f"Category {n:03d}")
    description = factory.LazyFunction(lambda: "Movies and series of the category")
    is_active = factory.LazyFunction(lambda: True)


class CategoryUpdateFactory(factory.Factory):
    """Factory for CategoryUpdate models."""

    class Meta:
        model = CategoryUpdate

    name = factory.Sequence(lambda n: f"Renamed category {n:03d}")
