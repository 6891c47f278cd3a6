"""Generic SQLAlchemy Repository: CRUD shared by every entity repository.

Invariants:
    - create/update/delete commit immediately (one statement, one transaction)
    - IntegrityError is rolled back and re-raised as ConflictError
    - get_by_id returns None for unknown ids; callers decide whether that is a 404
    - Search text is matched literally: LIKE wildcards in user input are escaped

Design Decisions:
    - Session injected per request (get_db dependency), never created here
    - populate_existing on get_by_id: rows changed by bulk UPDATE statements
      are re-read instead of served stale from the identity map
"""

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import Select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stridefund.core.errors import ConflictError, ErrorContext
from stridefund.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

LIKE_ESCAPE = "\\"


def contains_pattern(query: str) -> str:
    """ILIKE pattern matching `query` anywhere, with % and _ taken literally."""
    escaped = (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class SqlAlchemyRepository(Generic[ModelT]):
    """CRUD over a single ORM model."""

    model: type[ModelT]
    resource_type: str = "Resource"

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _commit(self, operation: str) -> None:
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.warning(f"{self.resource_type} {operation} conflict: {e.orig}")
            raise ConflictError(
                f"{self.resource_type} conflicts with an existing record",
                context=ErrorContext(
                    operation=operation, resource_type=self.resource_type,
                ),
            )

    async def _all(self, stmt: Select) -> list[ModelT]:
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def create(self, **fields: Any) -> ModelT:
        row = self.model(**fields)
        self.db.add(row)
        await self._commit("create")
        await self.db.refresh(row)
        return row

    async def get_by_id(self, row_id: str) -> ModelT | None:
        return await self.db.get(self.model, row_id, populate_existing=True)

    async def update(self, row_id: str, **fields: Any) -> ModelT | None:
        """Apply non-None `fields` to the row; None when the row is missing."""
        row = await self.db.get(self.model, row_id)
        if row is None:
            return None
        for name, value in fields.items():
            if value is not None:
                setattr(row, name, value)
        await self._commit("update")
        await self.db.refresh(row)
        return row

    async def delete(self, row_id: str) -> bool:
        row = await self.db.get(self.model, row_id)
        if row is None:
            return False
        await self.db.delete(row)
        await self._commit("delete")
        return True
