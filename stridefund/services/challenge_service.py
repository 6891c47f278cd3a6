"""Challenge Service: challenges, causes, activity settlement, leaderboards and pledges.

Invariants:
    - Inputs are validated before the first write (InvalidInputError, nothing stored)
    - Settlement is two explicit writes: runner commit, then atomic cause increment;
      a missing cause after the runner commit raises SettlementIncompleteError
    - total_amount is only (re)computed here, via compute_total_amount
    - Only owners modify or delete challenges; only sponsors modify their pledges
    - Repository errors propagate unchanged (no retries, no swallowing)

Design Decisions:
    - Ranking stays in core/leaderboard.py; this service only loads and truncates
    - Sponsorship update logic shared across both targets, keyed by SponsorTarget
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
    CauseBuyerRepository, CauseRepository, CauseRunnerRepository,
    ChallengeRepository, SponsorshipRepository,
)
from stridefund.core.slugs import generate_slug
from stridefund.core.sponsorship import compute_total_amount
from stridefund.core.validation import validate_activity_distances, validate_text

logger = logging.getLogger(__name__)


class ChallengeService:
    """Business operations for the challenge domain."""

    def __init__(
        self,
        challenges: ChallengeRepository,
        causes: CauseRepository,
        runners: CauseRunnerRepository,
        challenge_sponsors: SponsorshipRepository,
        cause_sponsors: SponsorshipRepository,
        buyers: CauseBuyerRepository,
    ):
        self.challenges = challenges
        self.causes = causes
        self.runners = runners
        self.challenge_sponsors = challenge_sponsors
        self.cause_sponsors = cause_sponsors
        self.buyers = buyers

    # ─── Challenges ──────────────────────────────────────────────

    async def create_challenge(
        self, owner_id: str, name: str,
        mode: ChallengeMode = ChallengeMode.FREE, **fields: Any,
    ):
        name = validate_text(name, "name", "create_challenge")
        challenge = await self.challenges.create(
            owner_id=owner_id, name=name, mode=ChallengeMode(mode).value,
            slug=generate_slug(name), **fields,
        )
        logger.info(
            f"Challenge created: {challenge.slug}",
            extra={"challenge_id": challenge.id, "user_id": owner_id},
        )
        return challenge

    async def get_challenge_by_id(self, challenge_id: str):
        challenge = await self.challenges.get_by_id(challenge_id)
        if challenge is None:
            raise ResourceNotFoundError("Challenge", challenge_id)
        return challenge

    async def get_challenge_by_slug(self, slug: str):
        challenge = await self.challenges.get_by_slug(slug)
        if challenge is None:
            raise ResourceNotFoundError("Challenge", slug)
        return challenge

    async def list_challenges(self, limit: int, offset: int = 0) -> list:
        return await self.challenges.list_page(limit, offset)

    async def search_challenges(self, query: str, limit: int, offset: int = 0) -> list:
        query = validate_text(query, "q", "search_challenges")
        return await self.challenges.search(query, limit, offset)

    async def update_challenge(self, challenge_id: str, user_id: str, **fields: Any):
        """Owner-only partial update; a new name regenerates the slug."""
        challenge = await self._owned_challenge(challenge_id, user_id, "modify")
        if fields.get("name") is not None:
            fields["name"] = validate_text(fields["name"], "name", "update_challenge")
            fields["slug"] = generate_slug(fields["name"])
        if fields.get("mode") is not None:
            fields["mode"] = ChallengeMode(fields["mode"]).value
        updated = await self.challenges.update(challenge.id, **fields)
        logger.info(
            "Challenge updated",
            extra={"challenge_id": challenge.id, "user_id": user_id},
        )
        return updated

    async def delete_challenge(self, challenge_id: str, user_id: str) -> None:
        challenge = await self._owned_challenge(challenge_id, user_id, "delete")
        await self.challenges.delete(challenge.id)
        logger.info(
            "Challenge deleted",
            extra={"challenge_id": challenge.id, "user_id": user_id},
        )

    async def get_challenges_by_owner(self, owner_id: str) -> list:
        return await self.challenges.get_by_owner_id(owner_id)

    async def join_challenge(self, challenge_id: str, user_id: str):
        await self.get_challenge_by_id(challenge_id)
        if await self.challenges.is_member(challenge_id, user_id):
            raise ConflictError(
                "User already joined this challenge",
                context=ErrorContext(
                    operation="join_challenge", resource_type="Challenge",
                    resource_id=challenge_id, user_id=user_id,
                ),
            )
        member = await self.challenges.add_member(challenge_id, user_id)
        logger.info(
            "Challenge joined",
            extra={"challenge_id": challenge_id, "user_id": user_id},
        )
        return member

    async def _owned_challenge(self, challenge_id: str, user_id: str, action: str):
        challenge = await self.get_challenge_by_id(challenge_id)
        if challenge.owner_id != user_id:
            raise ForbiddenError("Challenge", challenge_id, action)
        return challenge

    # ─── Causes ──────────────────────────────────────────────────

    async def create_cause(
        self, challenge_id: str, owner_id: str, name: str, **fields: Any,
    ):
        name = validate_text(name, "name", "create_cause")
        await self.get_challenge_by_id(challenge_id)
        if fields.get("activity") is not None:
            fields["activity"] = getattr(fields["activity"], "value", fields["activity"])
        cause = await self.causes.create(
            challenge_id=challenge_id, owner_id=owner_id, name=name,
            slug=generate_slug(name), **fields,
        )
        logger.info(
            f"Cause created: {cause.slug}",
            extra={"cause_id": cause.id, "challenge_id": challenge_id, "user_id": owner_id},
        )
        return cause

    async def get_cause_by_id(self, cause_id: str):
        cause = await self.causes.get_by_id(cause_id)
        if cause is None:
            raise ResourceNotFoundError("Cause", cause_id)
        return cause

    async def get_cause_by_slug(self, slug: str):
        cause = await self.causes.get_by_slug(slug)
        if cause is None:
            raise ResourceNotFoundError("Cause", slug)
        return cause

    async def get_causes_by_challenge(self, challenge_id: str) -> list:
        await self.get_challenge_by_id(challenge_id)
        return await self.causes.get_by_challenge_id(challenge_id)

    async def join_cause(self, cause_id: str, user_id: str):
        await self.get_cause_by_id(cause_id)
        if await self.causes.is_member(cause_id, user_id):
            raise ConflictError(
                "User already joined this cause",
                context=ErrorContext(
                    operation="join_cause", resource_type="Cause",
                    resource_id=cause_id, user_id=user_id,
                ),
            )
        member = await self.causes.add_member(cause_id, user_id)
        logger.info("Cause joined", extra={"cause_id": cause_id, "user_id": user_id})
        return member

    async def list_cause_buyers(self, cause_id: str) -> list:
        await self.get_cause_by_id(cause_id)
        return await self.buyers.get_by_cause_id(cause_id)

    async def buy_cause(self, cause_id: str, buyer_id: str, amount: float):
        await self.get_cause_by_id(cause_id)
        purchase = await self.buyers.create(
            cause_id=cause_id, buyer_id=buyer_id, amount=amount,
        )
        logger.info(
            f"Cause bought for {amount}",
            extra={"cause_id": cause_id, "user_id": buyer_id},
        )
        return purchase

    # ─── Activity Settlement ─────────────────────────────────────

    async def record_cause_activity(
        self,
        cause_id: str,
        owner_id: str,
        distance_to_cover: float,
        distance_covered: float,
        duration: str | None = None,
        activity: str | None = None,
        cover_image: str | None = None,
    ):
        """Record a runner and add its distance to the cause aggregate.

        Returns (runner, cause). Raises SettlementIncompleteError when the
        runner was committed but no cause row received the increment.
        """
        validate_activity_distances(distance_to_cover, distance_covered)
        runner = await self.runners.create(
            cause_id=cause_id,
            owner_id=owner_id,
            distance_to_cover=distance_to_cover,
            distance_covered=distance_covered,
            duration=duration,
            activity=getattr(activity, "value", activity),
            cover_image=cover_image,
        )
        if not await self.causes.increment_distance(cause_id, distance_covered):
            logger.error(
                "Runner recorded but cause missing; aggregate not updated",
                extra={"cause_id": cause_id, "runner_id": runner.id, "user_id": owner_id},
            )
            raise SettlementIncompleteError(cause_id, runner.id)

        cause = await self.get_cause_by_id(cause_id)
        logger.info(
            f"Activity recorded: +{distance_covered} km",
            extra={"cause_id": cause_id, "runner_id": runner.id, "user_id": owner_id},
        )
        return runner, cause

    async def get_cause_runners(self, cause_id: str) -> list:
        """Every runner of the cause, finished or not, oldest first."""
        await self.get_cause_by_id(cause_id)
        return await self.runners.get_by_cause_id(cause_id)

    async def get_runners_by_user(self, user_id: str) -> list:
        return await self.runners.get_by_owner_id(user_id)

    # ─── Leaderboards ────────────────────────────────────────────

    async def get_leaderboard(self, limit: int | None = None) -> list:
        runners = await self.runners.get_leaderboard()
        return top_runners(runners, limit)

    async def get_cause_leaderboard(self, cause_id: str, limit: int | None = None) -> list:
        await self.get_cause_by_id(cause_id)
        runners = await self.runners.get_leaderboard(cause_id)
        return top_runners(runners, limit)

    # ─── Sponsorships ────────────────────────────────────────────

    async def sponsor_challenge(
        self, sponsor_id: str, challenge_id: str,
        distance: float, amount_per_km: float, **fields: Any,
    ):
        await self.get_challenge_by_id(challenge_id)
        pledge = await self.challenge_sponsors.create(
            sponsor_id=sponsor_id, challenge_id=challenge_id,
            distance=distance, amount_per_km=amount_per_km,
            total_amount=compute_total_amount(distance, amount_per_km),
            **fields,
        )
        logger.info(
            f"Challenge sponsored: {pledge.total_amount}",
            extra={"challenge_id": challenge_id, "user_id": sponsor_id, "sponsorship_id": pledge.id},
        )
        return pledge

    async def sponsor_cause(
        self, sponsor_id: str, cause_id: str,
        distance: float, amount_per_km: float, **fields: Any,
    ):
        await self.get_cause_by_id(cause_id)
        pledge = await self.cause_sponsors.create(
            sponsor_id=sponsor_id, cause_id=cause_id,
            distance=distance, amount_per_km=amount_per_km,
            total_amount=compute_total_amount(distance, amount_per_km),
            **fields,
        )
        logger.info(
            f"Cause sponsored: {pledge.total_amount}",
            extra={"cause_id": cause_id, "user_id": sponsor_id, "sponsorship_id": pledge.id},
        )
        return pledge

    async def list_challenge_sponsors(self, challenge_id: str) -> list:
        await self.get_challenge_by_id(challenge_id)
        return await self.challenge_sponsors.get_by_target(challenge_id)

    async def list_cause_sponsors(self, cause_id: str) -> list:
        await self.get_cause_by_id(cause_id)
        return await self.cause_sponsors.get_by_target(cause_id)

    async def list_sponsorships_by_sponsor(self, sponsor_id: str) -> dict[SponsorTarget, list]:
        """The sponsor's pledges on both targets."""
        return {
            SponsorTarget.CHALLENGE: await self.challenge_sponsors.get_by_sponsor_id(sponsor_id),
            SponsorTarget.CAUSE: await self.cause_sponsors.get_by_sponsor_id(sponsor_id),
        }

    async def update_challenge_sponsorship(
        self, sponsorship_id: str, sponsor_id: str, **fields: Any,
    ):
        return await self._update_sponsorship(
            SponsorTarget.CHALLENGE, sponsorship_id, sponsor_id, **fields,
        )

    async def update_cause_sponsorship(
        self, sponsorship_id: str, sponsor_id: str, **fields: Any,
    ):
        return await self._update_sponsorship(
            SponsorTarget.CAUSE, sponsorship_id, sponsor_id, **fields,
        )

    async def _update_sponsorship(
        self, target: SponsorTarget, sponsorship_id: str, sponsor_id: str,
        distance: float | None = None, amount_per_km: float | None = None,
        **fields: Any,
    ):
        """Apply changes and recompute total_amount from the merged operands."""
        repo = (
            self.challenge_sponsors if target is SponsorTarget.CHALLENGE
            else self.cause_sponsors
        )
        resource_type = f"{target.value.capitalize()}Sponsorship"
        pledge = await repo.get_by_id(sponsorship_id)
        if pledge is None:
            raise ResourceNotFoundError(resource_type, sponsorship_id)
        if pledge.sponsor_id != sponsor_id:
            raise ForbiddenError(resource_type, sponsorship_id, "modify")

        distance = pledge.distance if distance is None else distance
        amount_per_km = pledge.amount_per_km if amount_per_km is None else amount_per_km
        updated = await repo.update(
            sponsorship_id,
            distance=distance,
            amount_per_km=amount_per_km,
            total_amount=compute_total_amount(distance, amount_per_km),
            **fields,
        )
        logger.info(
            f"{resource_type} updated: {updated.total_amount}",
            extra={"sponsorship_id": sponsorship_id, "user_id": sponsor_id},
        )
        return updated
