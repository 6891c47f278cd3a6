"""CauseRunner Repository: recorded activities and the raw leaderboard feed.

Invariants:
    - Every listing is ordered by (created_at, id): runners recorded in the
      same instant fall back to id order, so equal-distance leaderboard ties
      resolve the same way on every read
"""

from sqlalchemy import select

from stridefund.models.cause_runner import CauseRunner
from stridefund.repositories.base import SqlAlchemyRepository

_INSERTION_ORDER = (CauseRunner.created_at, CauseRunner.id)


class SqlCauseRunnerRepository(SqlAlchemyRepository[CauseRunner]):
    model = CauseRunner
    resource_type = "CauseRunner"

    async def get_by_cause_id(self, cause_id: str) -> list[CauseRunner]:
        return await self._all(
            select(CauseRunner).where(CauseRunner.cause_id == cause_id)
            .order_by(*_INSERTION_ORDER),
        )

    async def get_by_owner_id(self, owner_id: str) -> list[CauseRunner]:
        return await self._all(
            select(CauseRunner).where(CauseRunner.owner_id == owner_id)
            .order_by(*_INSERTION_ORDER),
        )

    async def get_leaderboard(self, cause_id: str | None = None) -> list[CauseRunner]:
        """Unranked runners in insertion order; ranking happens in core/leaderboard.py."""
        stmt = select(CauseRunner)
        if cause_id is not None:
            stmt = stmt.where(CauseRunner.cause_id == cause_id)
        return await self._all(stmt.order_by(*_INSERTION_ORDER))
