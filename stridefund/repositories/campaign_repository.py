"""Campaign Repositories: campaigns, membership, runners and the atomic totals.

Invariants:
    - add_totals and add_progress are single UPDATE ... SET col = col + :d
      statements; concurrent finishes and pledges never lose an update
    - Both report whether a row matched; neither inserts
    - Runner listings are ordered by (created_at, id), like cause runners
"""

from sqlalchemy import delete, select, or_, update

from stridefund.models.campaign import Campaign, CampaignMember, CampaignRunner
from stridefund.repositories.base import (
    LIKE_ESCAPE, SqlAlchemyRepository, contains_pattern,
)


class SqlCampaignRepository(SqlAlchemyRepository[Campaign]):
    model = Campaign
    resource_type = "Campaign"

    async def get_by_slug(self, slug: str) -> Campaign | None:
        result = await self.db.execute(select(Campaign).where(Campaign.slug == slug))
        return result.scalar_one_or_none()

    async def get_by_owner_id(self, owner_id: str) -> list[Campaign]:
        return await self._all(
            select(Campaign).where(Campaign.owner_id == owner_id)
            .order_by(Campaign.created_at.desc()),
        )

    async def list_page(
        self, limit: int, offset: int, exclude_owner_id: str | None = None,
    ) -> list[Campaign]:
        stmt = select(Campaign)
        if exclude_owner_id is not None:
            stmt = stmt.where(Campaign.owner_id != exclude_owner_id)
        return await self._all(
            stmt.order_by(Campaign.created_at.desc()).limit(limit).offset(offset),
        )

    async def search(self, query: str, limit: int, offset: int) -> list[Campaign]:
        pattern = contains_pattern(query)
        return await self._all(
            select(Campaign)
            .where(or_(
                Campaign.name.ilike(pattern, escape=LIKE_ESCAPE),
                Campaign.description.ilike(pattern, escape=LIKE_ESCAPE),
                Campaign.location.ilike(pattern, escape=LIKE_ESCAPE),
            ))
            .order_by(Campaign.created_at.desc())
            .limit(limit).offset(offset),
        )

    async def add_member(self, campaign_id: str, user_id: str) -> CampaignMember:
        member = CampaignMember(campaign_id=campaign_id, user_id=user_id)
        self.db.add(member)
        await self._commit("join")
        await self.db.refresh(member)
        return member

    async def is_member(self, campaign_id: str, user_id: str) -> bool:
        result = await self.db.execute(
            select(CampaignMember.id).where(
                CampaignMember.campaign_id == campaign_id,
                CampaignMember.user_id == user_id,
            ),
        )
        return result.first() is not None

    async def remove_member(self, campaign_id: str, user_id: str) -> bool:
        result = await self.db.execute(
            delete(CampaignMember).where(
                CampaignMember.campaign_id == campaign_id,
                CampaignMember.user_id == user_id,
            ),
        )
        await self._commit("leave")
        return result.rowcount > 0

    async def add_totals(
        self, campaign_id: str, distance: float = 0.0, money: float = 0.0,
    ) -> bool:
        result = await self.db.execute(
            update(Campaign)
            .where(Campaign.id == campaign_id)
            .values(
                distance_covered=Campaign.distance_covered + distance,
                money_raised=Campaign.money_raised + money,
            )
            .execution_options(synchronize_session=False),
        )
        await self._commit("add_totals")
        return result.rowcount > 0


class SqlCampaignRunnerRepository(SqlAlchemyRepository[CampaignRunner]):
    model = CampaignRunner
    resource_type = "CampaignRunner"

    async def get_by_campaign_id(self, campaign_id: str) -> list[CampaignRunner]:
        return await self._all(
            select(CampaignRunner).where(CampaignRunner.campaign_id == campaign_id)
            .order_by(CampaignRunner.created_at, CampaignRunner.id),
        )

    async def get_by_owner_id(self, owner_id: str) -> list[CampaignRunner]:
        return await self._all(
            select(CampaignRunner).where(CampaignRunner.owner_id == owner_id)
            .order_by(CampaignRunner.created_at, CampaignRunner.id),
        )

    async def add_progress(
        self, runner_id: str, distance: float, money: float, duration: str,
    ) -> bool:
        """Add distance and money to the runner and record its latest duration."""
        result = await self.db.execute(
            update(CampaignRunner)
            .where(CampaignRunner.id == runner_id)
            .values(
                distance_covered=CampaignRunner.distance_covered + distance,
                money_raised=CampaignRunner.money_raised + money,
                duration=duration,
            )
            .execution_options(synchronize_session=False),
        )
        await self._commit("add_progress")
        return result.rowcount > 0
