"""Generic SQLAlchemy Repository: the persistence operations shared by all entities.

Invariants:
    - find_unique returns None when absent; update/delete raise ResourceNotFoundError
    - IntegrityError on commit is rolled back, then re-raised as
      ForeignKeyViolationError / UniqueViolationError when it can be classified
    - Unclassified IntegrityErrors propagate unchanged

Design Decisions:
    - Classification by SQLSTATE (PostgreSQL) with a message fallback (SQLite,
      which reports no SQLSTATE)
"""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mediahub.core.errors import (
    ForeignKeyViolationError, ResourceNotFoundError, UniqueViolationError,
)
from mediahub.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

_PG_FOREIGN_KEY_VIOLATION = "23503"
_PG_UNIQUE_VIOLATION = "23505"


def classify_integrity_error(exc: IntegrityError) -> str | None:
    """Return "foreign_key", "unique", or None for an IntegrityError."""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    message = str(orig).lower()
    if sqlstate == _PG_FOREIGN_KEY_VIOLATION or "foreign key constraint" in message:
        return "foreign_key"
    if sqlstate == _PG_UNIQUE_VIOLATION or "unique constraint" in message:
        return "unique"
    return None


class SqlAlchemyRepository(Generic[ModelT]):
    """CRUD over one mapped model."""

    model: type[ModelT]
    entity_name: str

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, fields: dict[str, Any]) -> ModelT:
        record = self.model(**fields)
        self.session.add(record)
        await self._commit("create")
        return record

    async def find_many(self) -> list[ModelT]:
        result = await self.session.execute(
            select(self.model).order_by(self.model.id),
        )
        return list(result.scalars().all())

    async def find_unique(self, record_id: int) -> ModelT | None:
        return await self.session.get(self.model, record_id)

    async def update(self, record_id: int, fields: dict[str, Any]) -> ModelT:
        record = await self._get_or_raise(record_id)
        for name, value in fields.items():
            setattr(record, name, value)
        await self._commit("update")
        return record

    async def delete(self, record_id: int) -> ModelT:
        record = await self._get_or_raise(record_id)
        await self.session.delete(record)
        await self._commit("delete")
        return record

    async def _get_or_raise(self, record_id: int) -> ModelT:
        record = await self.find_unique(record_id)
        if record is None:
            raise ResourceNotFoundError(self.entity_name, record_id)
        return record

    async def _commit(self, operation: str) -> None:
        table = self.model.__tablename__
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            kind = classify_integrity_error(e)
            if kind is None:
                raise
            logger.warning(
                f"{kind} constraint violated on {table} during {operation}",
                extra={"entity": self.entity_name, "error_code": kind},
            )
            if kind == "foreign_key":
                raise ForeignKeyViolationError(table, operation) from e
            raise UniqueViolationError(table, operation) from e
