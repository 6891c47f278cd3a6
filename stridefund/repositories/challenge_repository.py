"""Challenge Repository: challenges, slug lookup, search and membership."""

from sqlalchemy import select, or_

from stridefund.models.challenge import Challenge
from stridefund.models.membership import ChallengeMember
from stridefund.repositories.base import (
    LIKE_ESCAPE, SqlAlchemyRepository, contains_pattern,
)


class SqlChallengeRepository(SqlAlchemyRepository[Challenge]):
    model = Challenge
    resource_type = "Challenge"

    async def get_by_slug(self, slug: str) -> Challenge | None:
        result = await self.db.execute(
            select(Challenge).where(Challenge.slug == slug),
        )
        return result.scalar_one_or_none()

    async def get_by_owner_id(self, owner_id: str) -> list[Challenge]:
        return await self._all(
            select(Challenge).where(Challenge.owner_id == owner_id)
            .order_by(Challenge.created_at.desc()),
        )

    async def list_page(self, limit: int, offset: int) -> list[Challenge]:
        return await self._all(
            select(Challenge).order_by(Challenge.created_at.desc())
            .limit(limit).offset(offset),
        )

    async def search(self, query: str, limit: int, offset: int) -> list[Challenge]:
        pattern = contains_pattern(query)
        return await self._all(
            select(Challenge)
            .where(or_(
                Challenge.name.ilike(pattern, escape=LIKE_ESCAPE),
                Challenge.description.ilike(pattern, escape=LIKE_ESCAPE),
                Challenge.location.ilike(pattern, escape=LIKE_ESCAPE),
            ))
            .order_by(Challenge.created_at.desc())
            .limit(limit).offset(offset),
        )

    async def add_member(self, challenge_id: str, user_id: str) -> ChallengeMember:
        member = ChallengeMember(challenge_id=challenge_id, user_id=user_id)
        self.db.add(member)
        await self._commit("join")
        await self.db.refresh(member)
        return member

    async def is_member(self, challenge_id: str, user_id: str) -> bool:
        result = await self.db.execute(
            select(ChallengeMember.id).where(
                ChallengeMember.challenge_id == challenge_id,
                ChallengeMember.user_id == user_id,
            ),
        )
        return result.first() is not None
