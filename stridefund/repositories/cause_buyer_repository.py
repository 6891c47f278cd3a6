"""CauseBuyer Repository: product purchases against a cause."""

from sqlalchemy import select

from stridefund.models.cause_buyer import CauseBuyer
from stridefund.repositories.base import SqlAlchemyRepository


class SqlCauseBuyerRepository(SqlAlchemyRepository[CauseBuyer]):
    model = CauseBuyer
    resource_type = "CauseBuyer"

    async def get_by_cause_id(self, cause_id: str) -> list[CauseBuyer]:
        return await self._all(
            select(CauseBuyer).where(CauseBuyer.cause_id == cause_id)
            .order_by(CauseBuyer.date_bought),
        )
