"""
Demo data seeder.

Fills the catalog with fake categories, genres, cast members and videos.
Each video gets 5 random genres, every category of those genres and 3
random cast members, so the genre/category rule of videos always holds.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, List, Optional, Sequence, TypeVar

from faker import Faker
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from catalogadmin.db.models import CastMember as CastMemberDB
from catalogadmin.db.models import Category as CategoryDB
from catalogadmin.db.models import Genre as GenreDB
from catalogadmin.exceptions import RepositoryError
from catalogadmin.models import (
    CastMemberCreate,
    CastMemberType,
    CategoryCreate,
    GenreCreate,
    Rating,
    VideoCreate,
)
from catalogadmin.repositories import (
    CastMemberRepository,
    CategoryRepository,
    GenreRepository,
    VideoRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

GENRES_PER_VIDEO = 5
CAST_MEMBERS_PER_VIDEO = 3


class SeedResult(BaseModel):
    """Result of a seeding operation."""

    categories: int = 0
    genres: int = 0
    cast_members: int = 0
    videos: int = 0
    failed: int = 0
    duration_seconds: float = 0.0
    errors: list[str] = Field(default_factory=list)

    @property
    def created(self) -> int:
        """Total rows created."""
        return self.categories + self.genres + self.cast_members + self.videos


class CatalogSeeder:
    """
    Seed the catalog with fake data.

    Parameters
    ----------
    seed : int | None
        Seed of the random generator, for reproducible data.
    progress : Callable[[str], None] | None
        Called with the entity name after each created row.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        progress: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.faker = Faker()
        if seed is not None:
            self.faker.seed_instance(seed)
        self.progress = progress
        self.category_repository = CategoryRepository()
        self.genre_repository = GenreRepository()
        self.cast_member_repository = CastMemberRepository()
        self.video_repository = VideoRepository()

    def _tick(self, entity: str) -> None:
        if self.progress:
            self.progress(entity)

    def _pick(self, items: Sequence[T], count: int) -> List[T]:
        """Up to ``count`` distinct random items."""
        if len(items) <= count:
            return list(items)
        return list(self.faker.random_sample(elements=items, length=count))

    async def seed(
        self,
        session: AsyncSession,
        *,
        categories: int = 10,
        genres: int = 15,
        cast_members: int = 20,
        videos: int = 10,
    ) -> SeedResult:
        """
        Create the requested number of rows of each entity.

        Parameters
        ----------
        session : AsyncSession
            Session to write with; the caller commits.
        categories, genres, cast_members, videos : int
            Rows to create per entity.

        Returns
        -------
        SeedResult
            Counts of created rows and any per-row failures.
        """
        start = time.perf_counter()
        result = SeedResult()

        all_categories: List[CategoryDB] = []
        for _ in range(categories):
            category = await self._create(
                result,
                "categories",
                self.category_repository,
                session,
                CategoryCreate(
                    name=self.faker.unique.word().capitalize(),
                    description=self.faker.sentence(),
                    is_active=self.faker.boolean(chance_of_getting_true=90),
                ),
            )
            if category is not None:
                all_categories.append(category)

        all_genres: List[GenreDB] = []
        if all_categories:
            for _ in range(genres):
                genre = await self._create(
                    result,
                    "genres",
                    self.genre_repository,
                    session,
                    GenreCreate(
                        name=self.faker.unique.word().capitalize(),
                        categories_id=[
                            c.id for c in self._pick(all_categories, self.faker.random_int(1, 3))
                        ],
                    ),
                )
                if genre is not None:
                    all_genres.append(genre)

        all_cast_members: List[CastMemberDB] = []
        for _ in range(cast_members):
            cast_member = await self._create(
                result,
                "cast_members",
                self.cast_member_repository,
                session,
                CastMemberCreate(
                    name=self.faker.name(),
                    type=self.faker.random_element(list(CastMemberType)),
                ),
            )
            if cast_member is not None:
                all_cast_members.append(cast_member)

        if all_genres:
            for _ in range(videos):
                await self._create(
                    result,
                    "videos",
                    self.video_repository,
                    session,
                    self._video_payload(all_genres, all_cast_members),
                )

        result.duration_seconds = time.perf_counter() - start
        logger.info(
            "Seeded %d rows (%d failed) in %.2fs",
            result.created,
            result.failed,
            result.duration_seconds,
        )
        return result

    def _video_payload(
        self, all_genres: Sequence[GenreDB], all_cast_members: Sequence[CastMemberDB]
    ) -> VideoCreate:
        genres = self._pick(all_genres, GENRES_PER_VIDEO)
        categories_id: List[str] = []
        for genre in genres:
            for category in genre.categories:
                if category.id not in categories_id:
                    categories_id.append(category.id)
        return VideoCreate(
            title=self.faker.sentence(nb_words=3).rstrip("."),
            description=self.faker.paragraph(),
            year_launched=int(self.faker.year()),
            opened=self.faker.boolean(),
            rating=self.faker.random_element(list(Rating)),
            duration=self.faker.random_int(min=1, max=30),
            categories_id=categories_id,
            genres_id=[genre.id for genre in genres],
            cast_members_id=[
                member.id for member in self._pick(all_cast_members, CAST_MEMBERS_PER_VIDEO)
            ],
        )

    async def _create(
        self,
        result: SeedResult,
        counter: str,
        repository: Any,
        session: AsyncSession,
        payload: BaseModel,
    ) -> Any:
        try:
            # A failed row only rolls back its own savepoint
            async with session.begin_nested():
                row = await repository.create(session, obj_in=payload)
        except RepositoryError as e:
            result.failed += 1
            result.errors.append(f"{counter}: {e.message}")
            logger.warning("Seeding %s failed: %s", counter, e)
            return None
        setattr(result, counter, getattr(result, counter) + 1)
        self._tick(counter)
        return row
