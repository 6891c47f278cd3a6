"""User Repository: lookup by id batch, listing and profile search."""

from typing import Sequence

from sqlalchemy import select, or_

from stridefund.models.user import User
from stridefund.repositories.base import (
    LIKE_ESCAPE, SqlAlchemyRepository, contains_pattern,
)


class SqlUserRepository(SqlAlchemyRepository[User]):
    model = User
    resource_type = "User"

    async def get_by_ids(self, user_ids: Sequence[str]) -> list[User]:
        if not user_ids:
            return []
        return await self._all(select(User).where(User.id.in_(list(user_ids))))

    async def list_page(self, limit: int, offset: int) -> list[User]:
        return await self._all(
            select(User).order_by(User.created_at.desc())
            .limit(limit).offset(offset),
        )

    async def search(self, query: str, limit: int, offset: int) -> list[User]:
        pattern = contains_pattern(query)
        return await self._all(
            select(User)
            .where(or_(
                User.username.ilike(pattern, escape=LIKE_ESCAPE),
                User.full_name.ilike(pattern, escape=LIKE_ESCAPE),
                User.email.ilike(pattern, escape=LIKE_ESCAPE),
            ))
            .order_by(User.username)
            .limit(limit).offset(offset),
        )
