"""
Generic async data access shared by the NoteBox repositories.
"""

from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, false, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from notebox.backend.models.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Subclasses bind ``model`` (``NoteRepository.model = Note``).

    Every soft-deletable model is filtered through ``_not_deleted()``;
    the partial indexes only mirror that predicate.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _not_deleted(self) -> ColumnElement[bool]:
        return self.model.deleted == false()

    async def get_by_id_or_none(self, id: int) -> ModelType | None:
        """Get an active record by primary key, or None if missing or soft-deleted."""
        pk_column = inspect(self.model).primary_key[0]
        result = await self.session.execute(
            select(self.model).where(pk_column == id, self._not_deleted())
        )
        return result.scalar_one_or_none()

    async def create(self, **kwargs: Any) -> ModelType:
        """Add and flush, returning the row with its identity filled in. Does not commit."""
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def count(self, *criteria: ColumnElement[bool]) -> int:
        """Count records matching the given criteria, deleted rows included."""
        result = await self.session.execute(
            select(func.count()).select_from(self.model).where(*criteria)
        )
        return result.scalar_one()
