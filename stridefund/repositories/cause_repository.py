"""Cause Repository: causes, membership and the atomic distance increment.

Invariants:
    - increment_distance is a single UPDATE ... SET distance_covered =
      distance_covered + :d; concurrent settlements never lose an update
    - increment_distance reports whether a row matched; it never inserts
"""

from sqlalchemy import select, update

from stridefund.models.cause import Cause
from stridefund.models.membership import CauseMember
from stridefund.repositories.base import SqlAlchemyRepository


class SqlCauseRepository(SqlAlchemyRepository[Cause]):
    model = Cause
    resource_type = "Cause"

    async def get_by_slug(self, slug: str) -> Cause | None:
        result = await self.db.execute(select(Cause).where(Cause.slug == slug))
        return result.scalar_one_or_none()

    async def get_by_challenge_id(self, challenge_id: str) -> list[Cause]:
        return await self._all(
            select(Cause).where(Cause.challenge_id == challenge_id)
            .order_by(Cause.created_at),
        )

    async def add_member(self, cause_id: str, user_id: str) -> CauseMember:
        member = CauseMember(cause_id=cause_id, user_id=user_id)
        self.db.add(member)
        await self._commit("join")
        await self.db.refresh(member)
        return member

    async def is_member(self, cause_id: str, user_id: str) -> bool:
        result = await self.db.execute(
            select(CauseMember.id).where(
                CauseMember.cause_id == cause_id,
                CauseMember.user_id == user_id,
            ),
        )
        return result.first() is not None

    async def increment_distance(self, cause_id: str, distance: float) -> bool:
        result = await self.db.execute(
            update(Cause)
            .where(Cause.id == cause_id)
            .values(distance_covered=Cause.distance_covered + distance)
            .execution_options(synchronize_session=False),
        )
        await self._commit("increment_distance")
        return result.rowcount > 0
