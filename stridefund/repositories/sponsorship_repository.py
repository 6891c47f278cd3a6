"""Sponsorship Repositories: pledges on challenges, causes and campaigns.

Design Decisions:
    - One shared implementation parameterized by model and target column;
      callers see the same SponsorshipRepository protocol for every table
"""

from sqlalchemy import select

from stridefund.models.sponsorship import SponsorChallenge, SponsorCause, SponsorCampaign
from stridefund.repositories.base import SqlAlchemyRepository


class _SqlSponsorshipRepository(SqlAlchemyRepository):
    target_column: str

    async def get_by_target(self, target_id: str) -> list:
        column = getattr(self.model, self.target_column)
        return await self._all(
            select(self.model).where(column == target_id)
            .order_by(self.model.created_at),
        )

    async def get_by_sponsor_id(self, sponsor_id: str) -> list:
        return await self._all(
            select(self.model).where(self.model.sponsor_id == sponsor_id)
            .order_by(self.model.created_at),
        )


class SqlSponsorChallengeRepository(_SqlSponsorshipRepository):
    model = SponsorChallenge
    resource_type = "SponsorChallenge"
    target_column = "challenge_id"


class SqlSponsorCauseRepository(_SqlSponsorshipRepository):
    model = SponsorCause
    resource_type = "SponsorCause"
    target_column = "cause_id"


class SqlSponsorCampaignRepository(_SqlSponsorshipRepository):
    model = SponsorCampaign
    resource_type = "SponsorCampaign"
    target_column = "campaign_id"
