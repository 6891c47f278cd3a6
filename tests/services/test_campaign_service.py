"""Campaign Service: participation, additive finishes, leaderboard and pledge money."""

import pytest

from stridefund.core.domain_types import SponsorTarget
from stridefund.core.errors import (
    ConflictError, ForbiddenError, InvalidInputError, ResourceNotFoundError,
    SettlementIncompleteError,
)


async def test_create_campaign_defaults(campaign):
    assert campaign.slug.startswith("lagos-bridge-run-")
    assert campaign.mode == "Free"
    assert campaign.activity == "Running"
    assert campaign.money_raised == 0.0
    assert campaign.distance_covered == 0.0


async def test_create_campaign_rejects_blank_name(campaign_service, alice):
    with pytest.raises(InvalidInputError):
        await campaign_service.create_campaign(alice.id, "  ")


async def test_participate_joins_once_and_opens_runner(campaign_service, campaign, bob):
    first = await campaign_service.participate(campaign.slug, bob.id, activity="Walking")
    second = await campaign_service.participate(campaign.slug, bob.id)

    assert first.id != second.id
    assert first.distance_covered == 0.0
    assert first.duration is None
    assert first.activity == "Walking"
    assert await campaign_service.campaigns.is_member(campaign.id, bob.id)


async def test_participate_unknown_slug(campaign_service, bob):
    with pytest.raises(ResourceNotFoundError):
        await campaign_service.participate("missing-12345678", bob.id)


async def test_finish_is_additive_for_runner_and_campaign(campaign_service, campaign, bob):
    runner = await campaign_service.participate(campaign.slug, bob.id)

    await campaign_service.finish_activity(runner.id, bob.id, 3.5, "00:20:00", 10.0)
    runner, refreshed = await campaign_service.finish_activity(
        runner.id, bob.id, 4.5, "00:45:00", 2.5,
    )

    assert runner.distance_covered == pytest.approx(8.0)
    assert runner.money_raised == pytest.approx(12.5)
    assert runner.duration == "00:45:00"
    assert refreshed.distance_covered == pytest.approx(8.0)
    assert refreshed.money_raised == pytest.approx(12.5)


async def test_finish_by_other_user_is_forbidden(campaign_service, campaign, alice, bob):
    runner = await campaign_service.participate(campaign.slug, bob.id)
    with pytest.raises(ForbiddenError):
        await campaign_service.finish_activity(runner.id, alice.id, 1.0, "00:05:00")


@pytest.mark.parametrize("distance,duration,money", [
    (0.0, "00:10:00", 0.0),
    (2.0, "   ", 0.0),
    (2.0, "00:10:00", -1.0),
])
async def test_finish_rejects_bad_input_without_writing(
    campaign_service, campaign, bob, distance, duration, money,
):
    runner = await campaign_service.participate(campaign.slug, bob.id)
    with pytest.raises(InvalidInputError):
        await campaign_service.finish_activity(runner.id, bob.id, distance, duration, money)
    assert (await campaign_service.get_campaign_by_id(campaign.id)).distance_covered == 0.0


async def test_finish_against_missing_campaign_keeps_runner_progress(campaign_service, bob):
    orphan = await campaign_service.runners.create(campaign_id="gone" * 8, owner_id=bob.id)

    with pytest.raises(SettlementIncompleteError) as exc:
        await campaign_service.finish_activity(orphan.id, bob.id, 2.0, "00:12:00")

    assert exc.value.runner_id == orphan.id
    assert exc.value.context.resource_type == "Campaign"
    assert (await campaign_service.get_runner(orphan.id)).distance_covered == pytest.approx(2.0)


async def test_leaderboard_ranks_finished_runs_by_slug(campaign_service, campaign, alice, bob):
    bob_run = await campaign_service.participate(campaign.slug, bob.id)
    alice_run = await campaign_service.participate(campaign.slug, alice.id)
    await campaign_service.participate(campaign.slug, alice.id)
    await campaign_service.finish_activity(bob_run.id, bob.id, 5.0, "00:30:00")
    await campaign_service.finish_activity(alice_run.id, alice.id, 7.0, "00:40:00")

    ranked = await campaign_service.get_campaign_leaderboard(campaign.slug)

    assert [r.id for r in ranked] == [alice_run.id, bob_run.id]
    assert [r.id for r in await campaign_service.get_campaign_leaderboard(campaign.slug, 1)] == [alice_run.id]


async def test_join_and_leave(campaign_service, campaign, bob):
    await campaign_service.join_campaign(campaign.id, bob.id)
    with pytest.raises(ConflictError):
        await campaign_service.join_campaign(campaign.id, bob.id)

    await campaign_service.leave_campaign(campaign.id, bob.id)
    assert not await campaign_service.campaigns.is_member(campaign.id, bob.id)
    with pytest.raises(ResourceNotFoundError):
        await campaign_service.leave_campaign(campaign.id, bob.id)


async def test_owner_only_update_and_delete(campaign_service, campaign, alice, bob):
    with pytest.raises(ForbiddenError):
        await campaign_service.update_campaign(campaign.id, bob.id, name="Hijack")

    updated = await campaign_service.update_campaign(
        campaign.id, alice.id, name="Harbour Run", accept_tac=True,
    )
    assert updated.slug.startswith("harbour-run-")
    assert updated.accept_tac is True

    await campaign_service.delete_campaign(campaign.id, alice.id)
    with pytest.raises(ResourceNotFoundError):
        await campaign_service.get_campaign_by_id(campaign.id)


async def test_listing_by_owner_and_excluding_owner(campaign_service, campaign, alice, bob):
    bobs = await campaign_service.create_campaign(bob.id, "Night Ride", activity="Cycling")

    assert [c.id for c in await campaign_service.get_campaigns_by_owner(alice.id)] == [campaign.id]
    assert [c.id for c in await campaign_service.list_campaigns(10, exclude_owner_id=alice.id)] == [bobs.id]
    assert {c.id for c in await campaign_service.list_campaigns(10)} == {campaign.id, bobs.id}


async def test_search_campaigns(campaign_service, campaign):
    assert [c.id for c in await campaign_service.search_campaigns("BOOKS", 10)] == [campaign.id]
    assert await campaign_service.search_campaigns("%", 10) == []


async def test_pledges_move_campaign_money(campaign_service, campaign, alice, bob):
    pledge = await campaign_service.sponsor_campaign(
        bob.id, campaign.id, distance=10, amount_per_km=2.0,
    )
    assert pledge.total_amount == pytest.approx(20.0)
    assert (await campaign_service.get_campaign_by_id(campaign.id)).money_raised == pytest.approx(20.0)

    with pytest.raises(ForbiddenError):
        await campaign_service.update_campaign_sponsorship(pledge.id, alice.id, distance=1)

    updated = await campaign_service.update_campaign_sponsorship(pledge.id, bob.id, amount_per_km=3.0)
    assert updated.total_amount == pytest.approx(30.0)
    assert (await campaign_service.get_campaign_by_id(campaign.id)).money_raised == pytest.approx(30.0)

    await campaign_service.delete_campaign_sponsorship(pledge.id, bob.id)
    assert (await campaign_service.get_campaign_by_id(campaign.id)).money_raised == pytest.approx(0.0)
    assert await campaign_service.list_campaign_sponsors(campaign.id) == []


async def test_pledges_by_sponsor(campaign_service, campaign, bob):
    pledge = await campaign_service.sponsor_campaign(bob.id, campaign.id, distance=1, amount_per_km=1.0)
    pledges = await campaign_service.list_sponsorships_by_sponsor(bob.id)
    assert [p.id for p in pledges[SponsorTarget.CAMPAIGN]] == [pledge.id]


async def test_sponsor_missing_campaign(campaign_service, bob):
    with pytest.raises(ResourceNotFoundError):
        await campaign_service.sponsor_campaign(bob.id, "missing", distance=1, amount_per_km=1.0)


async def test_runners_by_campaign_and_user(campaign_service, campaign, alice, bob):
    run = await campaign_service.participate(campaign.slug, bob.id)
    assert [r.id for r in await campaign_service.get_campaign_runners(campaign.id)] == [run.id]
    assert [r.id for r in await campaign_service.get_runners_by_user(bob.id)] == [run.id]
    assert await campaign_service.get_runners_by_user(alice.id) == []
