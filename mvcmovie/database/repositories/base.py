"""
Generic repository over one catalog table.

Repositories only issue statements on the session they are given.
They flush so generated ids are available, but never commit: the
gateway's transaction scope decides when work becomes durable.
"""

from typing import Generic, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from mvcmovie.database.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Primary-key reads and single-row writes for ``model``.

    Subclasses set ``model`` and add table-specific queries.
    """

    model: type[ModelT]

    def __init__(self, session: Session) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        """Session all statements run on."""
        return self._session

    def _by_id(self, entity_id: int) -> Select[tuple[ModelT]]:
        return select(self.model).where(self.model.id == entity_id)

    def get_by_id(self, entity_id: int, for_update: bool = False) -> ModelT | None:
        """Load one row.

        Args:
            entity_id: Primary key value.
            for_update: Hold a row lock (SELECT ... FOR UPDATE) until
                the transaction ends. Ignored by SQLite.

        Returns:
            The row, or None when the id is unknown.
        """
        stmt = self._by_id(entity_id)
        if for_update:
            stmt = stmt.with_for_update()
        return self._session.scalars(stmt).first()

    def get_all(self) -> list[ModelT]:
        """Every row, oldest id first."""
        return list(self._session.scalars(select(self.model).order_by(self.model.id)))

    def count(self) -> int:
        """Number of rows in the table."""
        return self._session.scalar(select(func.count()).select_from(self.model)) or 0

    def create(self, entity: ModelT) -> ModelT:
        """Insert a row and flush so its id is assigned."""
        self._session.add(entity)
        self._session.flush()
        return entity

    def delete(self, entity: ModelT) -> None:
        """Delete a loaded row and flush immediately."""
        self._session.delete(entity)
        self._session.flush()
