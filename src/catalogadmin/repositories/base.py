"""
Base repository interface and implementation.

Provides common CRUD operations and the paginated, searchable, sortable
listing shared by every catalog repository.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, List, Optional, Sequence, TypeVar, Union

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import DeclarativeBase, InstrumentedAttribute

from catalogadmin.exceptions import RepositoryError

# Type variables for generic repository
ModelType = TypeVar("ModelType", bound=DeclarativeBase)
CreateSchemaType = TypeVar("CreateSchemaType")
UpdateSchemaType = TypeVar("UpdateSchemaType")


@dataclass(frozen=True)
class ListParams:
    """Listing options coming from the query string."""

    search: Optional[str] = None
    page: int = 1
    per_page: int = 15
    sort: Optional[str] = None
    dir: str = "asc"
    fetch_all: bool = False  # ignore pagination

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


@dataclass
class Page(Generic[ModelType]):
    """One page of rows plus the total matching the filters."""

    items: List[ModelType] = field(default_factory=list)
    total: int = 0


def obj_in_to_dict(obj_in: Any, exclude_unset: bool = False) -> dict[str, Any]:
    if hasattr(obj_in, "model_dump"):
        # Pydantic model
        return obj_in.model_dump(mode="json", exclude_unset=exclude_unset)
    # Dictionary or other object
    return dict(obj_in) if isinstance(obj_in, dict) else dict(obj_in.__dict__)


class BaseRepository(ABC, Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    Base repository interface defining common CRUD operations.

    This abstract base class provides a consistent interface for all repositories
    following the Repository pattern.
    """

    @abstractmethod
    async def create(
        self, session: AsyncSession, *, obj_in: CreateSchemaType
    ) -> ModelType:
        """Create a new entity."""
        pass

    @abstractmethod
    async def get(self, session: AsyncSession, id: Any) -> Optional[ModelType]:
        """Get entity by ID."""
        pass

    @abstractmethod
    async def list_page(
        self,
        session: AsyncSession,
        params: ListParams,
        filters: Optional[dict[str, Any]] = None,
    ) -> Page[ModelType]:
        """Get a filtered, sorted page of entities."""
        pass

    @abstractmethod
    async def update(
        self,
        session: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, dict[str, Any]],
    ) -> ModelType:
        """Update an existing entity."""
        pass

    @abstractmethod
    async def delete(self, session: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """Delete an entity by ID."""
        pass


class BaseSQLAlchemyRepository(
    BaseRepository[ModelType, CreateSchemaType, UpdateSchemaType]
):
    """
    Base SQLAlchemy repository implementation.

    Subclasses declare which columns may be sorted on, which column the
    free-text search applies to, and how payload id lists map onto
    many-to-many relationships.

    Attributes
    ----------
    sortable_columns : ClassVar[dict[str, str]]
        Public sort key -> model attribute name.
    search_column : ClassVar[str | None]
        Attribute matched case-insensitively by ``ListParams.search``.
    relations : ClassVar[dict[str, tuple[str, type]]]
        Payload field (``categories_id``) -> (relationship attribute, related model).
    """

    sortable_columns: ClassVar[dict[str, str]] = {}
    search_column: ClassVar[Optional[str]] = "name"
    relations: ClassVar[dict[str, tuple[str, type[DeclarativeBase]]]] = {}

    def __init__(self, model: type[ModelType]):
        self.model = model

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get(self, session: AsyncSession, id: Any) -> Optional[ModelType]:
        """Get entity by primary key, refreshing any instance already loaded."""
        result = await session.execute(
            select(self.model)
            .where(self.model.id == id)  # type: ignore[attr-defined]
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_all(self, session: AsyncSession) -> List[ModelType]:
        """Get every entity."""
        result = await session.execute(select(self.model))
        return list(result.scalars().all())

    async def count(self, session: AsyncSession) -> int:
        """Count total number of entities."""
        result = await session.execute(select(func.count()).select_from(self.model))
        return result.scalar() or 0

    def _filter_conditions(self, filters: dict[str, Any]) -> List[ColumnElement[bool]]:
        """Translate entity specific filters into WHERE conditions."""
        return []

    def _conditions(
        self, params: ListParams, filters: Optional[dict[str, Any]]
    ) -> List[ColumnElement[bool]]:
        conditions: List[ColumnElement[bool]] = []
        if params.search and self.search_column:
            column: InstrumentedAttribute[Any] = getattr(self.model, self.search_column)
            conditions.append(column.icontains(params.search, autoescape=True))
        if filters:
            conditions.extend(
                self._filter_conditions(
                    {key: value for key, value in filters.items() if value is not None}
                )
            )
        return conditions

    def _order_by(self, params: ListParams) -> list[Any]:
        column_name = self.sortable_columns.get(params.sort or "")
        id_column = self.model.id  # type: ignore[attr-defined]
        if column_name is None:
            # Newest first unless the caller asks for something else
            return [self.model.created_at.desc(), id_column]  # type: ignore[attr-defined]
        column = getattr(self.model, column_name)
        ordered = column.desc() if params.dir.lower() == "desc" else column.asc()
        return [ordered, id_column]

    async def list_page(
        self,
        session: AsyncSession,
        params: ListParams,
        filters: Optional[dict[str, Any]] = None,
    ) -> Page[ModelType]:
        """
        Get one page of entities matching search and filters.

        Parameters
        ----------
        session : AsyncSession
            The database session.
        params : ListParams
            Search text, pagination and ordering.
        filters : Optional[dict[str, Any]]
            Entity specific filters; ``None`` values are ignored.

        Returns
        -------
        Page[ModelType]
            The rows of the requested page and the unpaginated total.
        """
        conditions = self._conditions(params, filters)

        total_result = await session.execute(
            select(func.count()).select_from(self.model).where(*conditions)
        )
        total = total_result.scalar() or 0

        query = select(self.model).where(*conditions).order_by(*self._order_by(params))
        if not params.fetch_all:
            query = query.offset(params.offset).limit(params.per_page)

        result = await session.execute(query)
        return Page(items=list(result.scalars().all()), total=total)

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------

    async def _fetch_related(
        self, session: AsyncSession, related: type[DeclarativeBase], ids: Sequence[str]
    ) -> List[Any]:
        if not ids:
            return []
        result = await session.execute(
            select(related).where(related.id.in_(ids))  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())

    async def validate_relations(
        self,
        session: AsyncSession,
        obj_in: Any,
        db_obj: Optional[ModelType] = None,
    ) -> dict[str, str]:
        """
        Check that every related id in the payload exists.

        Parameters
        ----------
        session : AsyncSession
            The database session.
        obj_in : Any
            Create or update payload.
        db_obj : Optional[ModelType]
            The entity being updated, if any.

        Returns
        -------
        dict[str, str]
            Error message per offending payload field; empty when valid.
        """
        data = obj_in_to_dict(obj_in, exclude_unset=True)
        messages: dict[str, str] = {}
        for payload_field, (_, related) in self.relations.items():
            ids = data.get(payload_field)
            if not ids:
                continue
            found = {row.id for row in await self._fetch_related(session, related, ids)}
            missing = [item for item in ids if item not in found]
            if missing:
                messages[payload_field] = (
                    f"Unknown {related.__name__} id(s): {', '.join(missing)}"
                )
        return messages

    async def _assign(
        self, session: AsyncSession, db_obj: ModelType, data: dict[str, Any]
    ) -> None:
        for payload_field, (attribute, related) in self.relations.items():
            if payload_field in data and data[payload_field] is not None:
                rows = await self._fetch_related(session, related, data[payload_field])
                setattr(db_obj, attribute, rows)
        for name, value in data.items():
            if name not in self.relations and hasattr(db_obj, name):
                setattr(db_obj, name, value)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def create(
        self, session: AsyncSession, *, obj_in: CreateSchemaType
    ) -> ModelType:
        """Create a new entity in the database."""
        db_obj = self.model()
        await self._assign(session, db_obj, obj_in_to_dict(obj_in))
        session.add(db_obj)
        try:
            await session.flush()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to create {self.entity_name}",
                operation="insert",
                entity_type=self.entity_name,
                original_error=e,
            ) from e
        created = await self.get(session, db_obj.id)  # type: ignore[attr-defined]
        assert created is not None
        return created

    async def update(
        self,
        session: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, dict[str, Any]],
    ) -> ModelType:
        """Update an existing entity with the fields set on ``obj_in``."""
        await self._assign(session, db_obj, obj_in_to_dict(obj_in, exclude_unset=True))
        session.add(db_obj)
        try:
            await session.flush()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to update {self.entity_name}",
                operation="update",
                entity_type=self.entity_name,
                original_error=e,
            ) from e
        updated = await self.get(session, db_obj.id)  # type: ignore[attr-defined]
        assert updated is not None
        return updated

    async def delete(self, session: AsyncSession, *, id: Any) -> Optional[ModelType]:
        """Delete an entity by ID."""
        db_obj = await self.get(session, id)
        if db_obj:
            await session.delete(db_obj)
            try:
                await session.flush()
            except SQLAlchemyError as e:
                raise RepositoryError(
                    f"Failed to delete {self.entity_name}",
                    operation="delete",
                    entity_type=self.entity_name,
                    original_error=e,
                ) from e
        return db_obj
