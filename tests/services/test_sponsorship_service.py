"""Sponsorship Service: pledge creation, explicit recompute and ownership."""

import pytest

from stridefund.core.domain_types import SponsorTarget
from stridefund.core.errors import ForbiddenError, ResourceNotFoundError


async def test_sponsor_challenge_computes_total(challenge_service, challenge, bob):
    pledge = await challenge_service.sponsor_challenge(
        bob.id, challenge.id, distance=10.5, amount_per_km=5.0,
    )
    assert pledge.total_amount == pytest.approx(52.5)
    assert pledge.challenge_id == challenge.id


async def test_sponsor_cause_computes_total(challenge_service, cause, bob):
    pledge = await challenge_service.sponsor_cause(
        bob.id, cause.id, distance=20, amount_per_km=1.25, brand_img="logo.png",
    )
    assert pledge.total_amount == pytest.approx(25.0)
    assert pledge.brand_img == "logo.png"


async def test_sponsor_missing_target_is_not_found(challenge_service, bob):
    with pytest.raises(ResourceNotFoundError):
        await challenge_service.sponsor_challenge(bob.id, "nope", 1.0, 1.0)
    with pytest.raises(ResourceNotFoundError):
        await challenge_service.sponsor_cause(bob.id, "nope", 1.0, 1.0)


async def test_update_recomputes_total(challenge_service, challenge, bob):
    pledge = await challenge_service.sponsor_challenge(bob.id, challenge.id, 10.0, 2.0)

    updated = await challenge_service.update_challenge_sponsorship(
        pledge.id, bob.id, distance=15.0,
    )

    assert updated.distance == 15.0
    assert updated.amount_per_km == 2.0
    assert updated.total_amount == pytest.approx(30.0)


async def test_update_cause_pledge_rate(challenge_service, cause, bob):
    pledge = await challenge_service.sponsor_cause(bob.id, cause.id, 4.0, 1.0)

    updated = await challenge_service.update_cause_sponsorship(
        pledge.id, bob.id, amount_per_km=3.5,
    )

    assert updated.total_amount == pytest.approx(14.0)


async def test_update_by_other_user_is_forbidden(challenge_service, challenge, alice, bob):
    pledge = await challenge_service.sponsor_challenge(bob.id, challenge.id, 1.0, 1.0)
    with pytest.raises(ForbiddenError):
        await challenge_service.update_challenge_sponsorship(pledge.id, alice.id, distance=2.0)


async def test_update_missing_pledge(challenge_service, bob):
    with pytest.raises(ResourceNotFoundError):
        await challenge_service.update_cause_sponsorship("missing", bob.id, distance=2.0)


async def test_list_sponsors(challenge_service, challenge, cause, alice, bob):
    await challenge_service.sponsor_challenge(alice.id, challenge.id, 1.0, 1.0)
    await challenge_service.sponsor_challenge(bob.id, challenge.id, 2.0, 1.0)
    await challenge_service.sponsor_cause(bob.id, cause.id, 2.0, 1.0)

    assert len(await challenge_service.list_challenge_sponsors(challenge.id)) == 2
    assert len(await challenge_service.list_cause_sponsors(cause.id)) == 1


async def test_pledges_by_sponsor_cover_both_targets(
    challenge_service, challenge, cause, alice, bob,
):
    on_challenge = await challenge_service.sponsor_challenge(
        bob.id, challenge.id, distance=5, amount_per_km=1.0,
    )
    on_cause = await challenge_service.sponsor_cause(
        bob.id, cause.id, distance=2, amount_per_km=3.0,
    )
    await challenge_service.sponsor_cause(alice.id, cause.id, distance=1, amount_per_km=1.0)

    pledges = await challenge_service.list_sponsorships_by_sponsor(bob.id)

    assert [p.id for p in pledges[SponsorTarget.CHALLENGE]] == [on_challenge.id]
    assert [p.id for p in pledges[SponsorTarget.CAUSE]] == [on_cause.id]
