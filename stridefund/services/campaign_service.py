"""Campaign Service: standalone campaigns, participation, finishing runs and campaign pledges.

Invariants:
    - Participating makes the user a member (if not already) and opens an
      unfinished runner; finishing adds distance and money to the runner and,
      by the same amounts, to the campaign
    - Only the runner's owner finishes it; only owners modify campaigns; only
      sponsors modify or withdraw their pledges
    - Campaign money_raised moves with every pledge write: +total on create,
      +(new - old) on update, -total on delete
    - A finish whose campaign row is gone raises SettlementIncompleteError;
      the runner keeps its progress

Design Decisions:
    - Leaderboards reuse core/leaderboard.py: finished runs only, best per user
    - Campaign pages are addressed by slug for participation and leaderboards,
      by id for owner edits, mirroring challenges
"""

import logging
from typing import Any

from stridefund.core.domain_types import ChallengeMode, SponsorTarget
from stridefund.core.errors import (
    ConflictError, ErrorContext, ForbiddenError, ResourceNotFoundError,
    SettlementIncompleteError,
)
from stridefund.core.leaderboard import top_runners
from stridefund.core.repository_protocols import (
    CampaignRepository, CampaignRunnerRepository, SponsorshipRepository,
)
from stridefund.core.slugs import generate_slug
from stridefund.core.sponsorship import compute_total_amount
from stridefund.core.validation import validate_finish_amounts, validate_text

logger = logging.getLogger(__name__)


def _enum_value(value):
    return getattr(value, "value", value)


class CampaignService:
    """Business operations for campaigns."""

    def __init__(
        self,
        campaigns: CampaignRepository,
        runners: CampaignRunnerRepository,
        sponsors: SponsorshipRepository,
    ):
        self.campaigns = campaigns
        self.runners = runners
        self.sponsors = sponsors

    # ─── Campaigns ───────────────────────────────────────────────

    async def create_campaign(
        self, owner_id: str, name: str,
        mode: ChallengeMode = ChallengeMode.FREE, **fields: Any,
    ):
        name = validate_text(name, "name", "create_campaign")
        if fields.get("activity") is not None:
            fields["activity"] = _enum_value(fields["activity"])
        campaign = await self.campaigns.create(
            owner_id=owner_id, name=name, mode=ChallengeMode(mode).value,
            slug=generate_slug(name), **fields,
        )
        logger.info(
            f"Campaign created: {campaign.slug}",
            extra={"campaign_id": campaign.id, "user_id": owner_id},
        )
        return campaign

    async def get_campaign_by_id(self, campaign_id: str):
        campaign = await self.campaigns.get_by_id(campaign_id)
        if campaign is None:
            raise ResourceNotFoundError("Campaign", campaign_id)
        return campaign

    async def get_campaign_by_slug(self, slug: str):
        campaign = await self.campaigns.get_by_slug(slug)
        if campaign is None:
            raise ResourceNotFoundError("Campaign", slug)
        return campaign

    async def list_campaigns(
        self, limit: int, offset: int = 0, exclude_owner_id: str | None = None,
    ) -> list:
        """Newest first; `exclude_owner_id` hides that user's own campaigns."""
        return await self.campaigns.list_page(limit, offset, exclude_owner_id)

    async def get_campaigns_by_owner(self, owner_id: str) -> list:
        return await self.campaigns.get_by_owner_id(owner_id)

    async def search_campaigns(self, query: str, limit: int, offset: int = 0) -> list:
        query = validate_text(query, "q", "search_campaigns")
        return await self.campaigns.search(query, limit, offset)

    async def update_campaign(self, campaign_id: str, user_id: str, **fields: Any):
        campaign = await self._owned_campaign(campaign_id, user_id, "modify")
        if fields.get("name") is not None:
            fields["name"] = validate_text(fields["name"], "name", "update_campaign")
            fields["slug"] = generate_slug(fields["name"])
        if fields.get("mode") is not None:
            fields["mode"] = ChallengeMode(fields["mode"]).value
        if fields.get("activity") is not None:
            fields["activity"] = _enum_value(fields["activity"])
        updated = await self.campaigns.update(campaign.id, **fields)
        logger.info(
            "Campaign updated",
            extra={"campaign_id": campaign.id, "user_id": user_id},
        )
        return updated

    async def delete_campaign(self, campaign_id: str, user_id: str) -> None:
        campaign = await self._owned_campaign(campaign_id, user_id, "delete")
        await self.campaigns.delete(campaign.id)
        logger.info(
            "Campaign deleted",
            extra={"campaign_id": campaign.id, "user_id": user_id},
        )

    async def _owned_campaign(self, campaign_id: str, user_id: str, action: str):
        campaign = await self.get_campaign_by_id(campaign_id)
        if campaign.owner_id != user_id:
            raise ForbiddenError("Campaign", campaign_id, action)
        return campaign

    # ─── Membership ──────────────────────────────────────────────

    async def join_campaign(self, campaign_id: str, user_id: str):
        await self.get_campaign_by_id(campaign_id)
        if await self.campaigns.is_member(campaign_id, user_id):
            raise ConflictError(
                "User already joined this campaign",
                context=ErrorContext(
                    operation="join_campaign", resource_type="Campaign",
                    resource_id=campaign_id, user_id=user_id,
                ),
            )
        member = await self.campaigns.add_member(campaign_id, user_id)
        logger.info(
            "Campaign joined",
            extra={"campaign_id": campaign_id, "user_id": user_id},
        )
        return member

    async def leave_campaign(self, campaign_id: str, user_id: str) -> None:
        await self.get_campaign_by_id(campaign_id)
        if not await self.campaigns.remove_member(campaign_id, user_id):
            raise ResourceNotFoundError("CampaignMember", user_id)
        logger.info(
            "Campaign left",
            extra={"campaign_id": campaign_id, "user_id": user_id},
        )

    # ─── Participation ───────────────────────────────────────────

    async def participate(
        self, slug: str, user_id: str,
        activity: str | None = None, cover_image: str | None = None,
    ):
        """Join the campaign if needed and open a new, unfinished runner."""
        campaign = await self.get_campaign_by_slug(slug)
        if not await self.campaigns.is_member(campaign.id, user_id):
            await self.campaigns.add_member(campaign.id, user_id)
        runner = await self.runners.create(
            campaign_id=campaign.id,
            owner_id=user_id,
            activity=_enum_value(activity),
            cover_image=cover_image,
        )
        logger.info(
            "Campaign participation started",
            extra={"campaign_id": campaign.id, "runner_id": runner.id, "user_id": user_id},
        )
        return runner

    async def get_runner(self, runner_id: str):
        runner = await self.runners.get_by_id(runner_id)
        if runner is None:
            raise ResourceNotFoundError("CampaignRunner", runner_id)
        return runner

    async def finish_activity(
        self,
        runner_id: str,
        user_id: str,
        distance_covered: float,
        duration: str,
        money_raised: float = 0.0,
    ):
        """Add a finished run to the runner and to its campaign.

        Returns (runner, campaign). Raises SettlementIncompleteError when the
        runner was updated but its campaign no longer exists.
        """
        validate_finish_amounts(distance_covered, money_raised)
        duration = validate_text(duration, "duration", "finish_activity")
        runner = await self.get_runner(runner_id)
        if runner.owner_id != user_id:
            raise ForbiddenError("CampaignRunner", runner_id, "finish")

        await self.runners.add_progress(runner_id, distance_covered, money_raised, duration)
        if not await self.campaigns.add_totals(
            runner.campaign_id, distance=distance_covered, money=money_raised,
        ):
            logger.error(
                "Runner finished but campaign missing; totals not updated",
                extra={"campaign_id": runner.campaign_id, "runner_id": runner_id, "user_id": user_id},
            )
            raise SettlementIncompleteError(
                runner.campaign_id, runner_id,
                resource_type="Campaign", operation="finish_activity",
            )

        logger.info(
            f"Campaign activity finished: +{distance_covered} km, +{money_raised}",
            extra={"campaign_id": runner.campaign_id, "runner_id": runner_id, "user_id": user_id},
        )
        return await self.get_runner(runner_id), await self.get_campaign_by_id(runner.campaign_id)

    async def get_campaign_runners(self, campaign_id: str) -> list:
        await self.get_campaign_by_id(campaign_id)
        return await self.runners.get_by_campaign_id(campaign_id)

    async def get_runners_by_user(self, user_id: str) -> list:
        return await self.runners.get_by_owner_id(user_id)

    async def get_campaign_leaderboard(self, slug: str, limit: int | None = None) -> list:
        campaign = await self.get_campaign_by_slug(slug)
        runners = await self.runners.get_by_campaign_id(campaign.id)
        return top_runners(runners, limit)

    # ─── Sponsorships ────────────────────────────────────────────

    async def sponsor_campaign(
        self, sponsor_id: str, campaign_id: str,
        distance: float, amount_per_km: float, **fields: Any,
    ):
        await self.get_campaign_by_id(campaign_id)
        pledge = await self.sponsors.create(
            sponsor_id=sponsor_id, campaign_id=campaign_id,
            distance=distance, amount_per_km=amount_per_km,
            total_amount=compute_total_amount(distance, amount_per_km),
            **fields,
        )
        await self.campaigns.add_totals(campaign_id, money=pledge.total_amount)
        logger.info(
            f"Campaign sponsored: {pledge.total_amount}",
            extra={"campaign_id": campaign_id, "user_id": sponsor_id, "sponsorship_id": pledge.id},
        )
        return pledge

    async def get_campaign_sponsorship(self, sponsorship_id: str):
        pledge = await self.sponsors.get_by_id(sponsorship_id)
        if pledge is None:
            raise ResourceNotFoundError("CampaignSponsorship", sponsorship_id)
        return pledge

    async def list_campaign_sponsors(self, campaign_id: str) -> list:
        await self.get_campaign_by_id(campaign_id)
        return await self.sponsors.get_by_target(campaign_id)

    async def list_sponsorships_by_sponsor(self, sponsor_id: str) -> dict[SponsorTarget, list]:
        return {SponsorTarget.CAMPAIGN: await self.sponsors.get_by_sponsor_id(sponsor_id)}

    async def update_campaign_sponsorship(
        self, sponsorship_id: str, sponsor_id: str,
        distance: float | None = None, amount_per_km: float | None = None,
        **fields: Any,
    ):
        """Recompute total_amount and move the campaign's money by the difference."""
        pledge = await self._sponsored_pledge(sponsorship_id, sponsor_id, "modify")
        previous_total = pledge.total_amount
        distance = pledge.distance if distance is None else distance
        amount_per_km = pledge.amount_per_km if amount_per_km is None else amount_per_km
        updated = await self.sponsors.update(
            sponsorship_id,
            distance=distance,
            amount_per_km=amount_per_km,
            total_amount=compute_total_amount(distance, amount_per_km),
            **fields,
        )
        delta = updated.total_amount - previous_total
        if delta:
            await self.campaigns.add_totals(updated.campaign_id, money=delta)
        logger.info(
            f"CampaignSponsorship updated: {updated.total_amount}",
            extra={"sponsorship_id": sponsorship_id, "user_id": sponsor_id},
        )
        return updated

    async def delete_campaign_sponsorship(self, sponsorship_id: str, sponsor_id: str) -> None:
        pledge = await self._sponsored_pledge(sponsorship_id, sponsor_id, "delete")
        campaign_id, total = pledge.campaign_id, pledge.total_amount
        await self.sponsors.delete(sponsorship_id)
        await self.campaigns.add_totals(campaign_id, money=-total)
        logger.info(
            "CampaignSponsorship withdrawn",
            extra={"campaign_id": campaign_id, "sponsorship_id": sponsorship_id, "user_id": sponsor_id},
        )

    async def _sponsored_pledge(self, sponsorship_id: str, sponsor_id: str, action: str):
        pledge = await self.get_campaign_sponsorship(sponsorship_id)
        if pledge.sponsor_id != sponsor_id:
            raise ForbiddenError("CampaignSponsorship", sponsorship_id, action)
        return pledge
