"""Challenge Service: challenge/cause management, membership and purchases."""

import pytest

from stridefund.core.errors import (
    ConflictError, ForbiddenError, InvalidInputError, ResourceNotFoundError,
)


async def test_create_challenge_slugs_name(challenge):
    assert challenge.slug.startswith("spring-marathon-")
    assert challenge.mode == "Free"
    assert challenge.no_of_winner == 3


async def test_create_challenge_rejects_blank_name(challenge_service, alice):
    with pytest.raises(InvalidInputError):
        await challenge_service.create_challenge(alice.id, "   ")


async def test_get_by_id_and_slug(challenge_service, challenge):
    assert (await challenge_service.get_challenge_by_id(challenge.id)).id == challenge.id
    assert (await challenge_service.get_challenge_by_slug(challenge.slug)).id == challenge.id


async def test_get_unknown_challenge(challenge_service):
    with pytest.raises(ResourceNotFoundError):
        await challenge_service.get_challenge_by_slug("missing-12345678")


async def test_list_newest_first(challenge_service, challenge, alice):
    newer = await challenge_service.create_challenge(alice.id, "Autumn Ride", mode="Paid")
    listed = await challenge_service.list_challenges(limit=10)
    assert [c.id for c in listed] == [newer.id, challenge.id]
    assert newer.mode == "Paid"


async def test_search_is_case_insensitive(challenge_service, challenge):
    assert [c.id for c in await challenge_service.search_challenges("lagos", 10)] == [challenge.id]
    assert [c.id for c in await challenge_service.search_challenges("WATER", 10)] == [challenge.id]
    assert await challenge_service.search_challenges("nowhere", 10) == []


async def test_search_treats_wildcards_literally(challenge_service, challenge, alice):
    effort = await challenge_service.create_challenge(alice.id, "100% Effort")

    assert [c.id for c in await challenge_service.search_challenges("%", 10)] == [effort.id]
    assert await challenge_service.search_challenges("n_", 10) == []
    assert await challenge_service.search_challenges("S%M", 10) == []


async def test_rename_regenerates_slug(challenge_service, challenge, alice):
    old_slug = challenge.slug
    updated = await challenge_service.update_challenge(challenge.id, alice.id, name="Summer Sprint")
    assert updated.name == "Summer Sprint"
    assert updated.slug.startswith("summer-sprint-")
    assert updated.slug != old_slug


async def test_only_owner_updates_or_deletes(challenge_service, challenge, bob):
    with pytest.raises(ForbiddenError):
        await challenge_service.update_challenge(challenge.id, bob.id, goal="x")
    with pytest.raises(ForbiddenError):
        await challenge_service.delete_challenge(challenge.id, bob.id)


async def test_delete_challenge(challenge_service, challenge, alice):
    await challenge_service.delete_challenge(challenge.id, alice.id)
    with pytest.raises(ResourceNotFoundError):
        await challenge_service.get_challenge_by_id(challenge.id)


async def test_create_cause_requires_challenge(challenge_service, alice):
    with pytest.raises(ResourceNotFoundError):
        await challenge_service.create_cause("missing", alice.id, "Wells")


async def test_cause_lookup(challenge_service, challenge, cause):
    assert cause.distance_covered == 0.0
    assert cause.activity == "Running"
    assert (await challenge_service.get_cause_by_slug(cause.slug)).id == cause.id
    assert [c.id for c in await challenge_service.get_causes_by_challenge(challenge.id)] == [cause.id]


async def test_join_challenge_twice_conflicts(challenge_service, challenge, bob):
    member = await challenge_service.join_challenge(challenge.id, bob.id)
    assert member.user_id == bob.id
    with pytest.raises(ConflictError):
        await challenge_service.join_challenge(challenge.id, bob.id)


async def test_join_cause_twice_conflicts(challenge_service, cause, bob):
    await challenge_service.join_cause(cause.id, bob.id)
    with pytest.raises(ConflictError):
        await challenge_service.join_cause(cause.id, bob.id)


async def test_join_missing_target(challenge_service, bob):
    with pytest.raises(ResourceNotFoundError):
        await challenge_service.join_challenge("missing", bob.id)
    with pytest.raises(ResourceNotFoundError):
        await challenge_service.join_cause("missing", bob.id)


async def test_buy_cause(challenge_service, cause, bob):
    purchase = await challenge_service.buy_cause(cause.id, bob.id, 25.0)
    assert purchase.amount == 25.0
    assert purchase.buyer_id == bob.id
    assert purchase.date_bought is not None


async def test_buy_missing_cause(challenge_service, bob):
    with pytest.raises(ResourceNotFoundError):
        await challenge_service.buy_cause("missing", bob.id, 1.0)


async def test_cause_buyers_listed(challenge_service, cause, alice, bob):
    first = await challenge_service.buy_cause(cause.id, bob.id, 10.0)
    second = await challenge_service.buy_cause(cause.id, alice.id, 4.0)

    buyers = await challenge_service.list_cause_buyers(cause.id)

    assert {b.id for b in buyers} == {first.id, second.id}
    with pytest.raises(ResourceNotFoundError):
        await challenge_service.list_cause_buyers("missing")


async def test_challenges_by_owner(challenge_service, challenge, alice, bob):
    bobs = await challenge_service.create_challenge(bob.id, "Night Walk")

    assert [c.id for c in await challenge_service.get_challenges_by_owner(alice.id)] == [challenge.id]
    assert [c.id for c in await challenge_service.get_challenges_by_owner(bob.id)] == [bobs.id]


async def test_runners_by_cause_and_by_user(challenge_service, challenge, cause, alice, bob):
    other = await challenge_service.create_cause(challenge.id, bob.id, "Trees")
    unfinished, _ = await challenge_service.record_cause_activity(cause.id, alice.id, 10, 2.0)
    finished, _ = await challenge_service.record_cause_activity(other.id, alice.id, 10, 8.0, "00:45:00")
    await challenge_service.record_cause_activity(cause.id, bob.id, 10, 3.0, "00:20:00")

    by_cause = await challenge_service.get_cause_runners(cause.id)
    by_user = await challenge_service.get_runners_by_user(alice.id)

    assert unfinished.id in [r.id for r in by_cause]
    assert {r.owner_id for r in by_cause} == {alice.id, bob.id}
    assert {r.id for r in by_user} == {unfinished.id, finished.id}
