"""Cause Routes: creation, activity settlement over HTTP, pledges and purchases."""

import pytest


def _auth(user) -> dict:
    return {"X-User-Id": user.id}


async def test_create_cause(client, challenge, bob):
    res = await client.post(
        "/api/v1/causes",
        json={"challenge_id": challenge.id, "name": "Solar Lamps", "activity": "Walking"},
        headers=_auth(bob),
    )
    assert res.status_code == 201
    body = res.json()
    assert body["challenge_id"] == challenge.id
    assert body["distance_covered"] == 0.0
    assert body["activity"] == "Walking"

    by_slug = await client.get(f"/api/v1/causes/slug/{body['slug']}")
    assert by_slug.json()["id"] == body["id"]


async def test_create_cause_for_missing_challenge(client, bob):
    res = await client.post(
        "/api/v1/causes", json={"challenge_id": "missing", "name": "X"}, headers=_auth(bob),
    )
    assert res.status_code == 404


async def test_record_activity_updates_cause(client, cause, bob):
    res = await client.post(
        "/api/v1/causes/activity",
        json={
            "cause_id": cause.id, "distance_to_cover": 10,
            "distance_covered": 8.2, "duration": "00:41:00", "activity": "Running",
        },
        headers=_auth(bob),
    )
    assert res.status_code == 201
    body = res.json()
    assert body["runner"]["owner_id"] == bob.id
    assert body["cause"]["distance_covered"] == pytest.approx(8.2)

    fetched = await client.get(f"/api/v1/causes/{cause.id}")
    assert fetched.json()["distance_covered"] == pytest.approx(8.2)


async def test_record_activity_zero_distance_is_400(client, cause, bob):
    res = await client.post(
        "/api/v1/causes/activity",
        json={"cause_id": cause.id, "distance_to_cover": 0, "distance_covered": 0},
        headers=_auth(bob),
    )
    assert res.status_code == 400

    board = await client.get(f"/api/v1/causes/{cause.id}/leaderboard")
    assert board.json() == []


async def test_record_activity_missing_cause_reports_runner(client, bob):
    res = await client.post(
        "/api/v1/causes/activity",
        json={"cause_id": "f" * 32, "distance_to_cover": 5, "distance_covered": 5},
        headers=_auth(bob),
    )
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "SETTLEMENT_INCOMPLETE"
    assert len(error["context"]["details"]["runner_id"]) == 32


async def test_cause_leaderboard(client, challenge_service, cause, alice, bob):
    await challenge_service.record_cause_activity(cause.id, alice.id, 10, 4.0, "00:30:00")
    await challenge_service.record_cause_activity(cause.id, bob.id, 10, 6.0, "00:35:00")
    await challenge_service.record_cause_activity(cause.id, bob.id, 10, 2.0, "00:15:00")

    res = await client.get(f"/api/v1/causes/{cause.id}/leaderboard", params={"limit": 1})

    assert [e["username"] for e in res.json()] == ["bob"]


async def test_cause_pledge_and_update(client, cause, bob):
    res = await client.post(
        "/api/v1/causes/sponsor",
        json={"cause_id": cause.id, "distance": 4, "amount_per_km": 2.5},
        headers=_auth(bob),
    )
    pledge = res.json()
    assert pledge["total_amount"] == pytest.approx(10.0)
    assert pledge["cause_id"] == cause.id

    updated = await client.patch(
        f"/api/v1/causes/sponsors/{pledge['id']}",
        json={"amount_per_km": 3.0}, headers=_auth(bob),
    )
    assert updated.json()["total_amount"] == pytest.approx(12.0)

    sponsors = await client.get(f"/api/v1/causes/{cause.id}/sponsors")
    assert len(sponsors.json()) == 1


async def test_join_and_buy(client, cause, bob):
    joined = await client.post(f"/api/v1/causes/{cause.id}/join", headers=_auth(bob))
    assert joined.status_code == 201
    again = await client.post(f"/api/v1/causes/{cause.id}/join", headers=_auth(bob))
    assert again.status_code == 409

    bought = await client.post(
        "/api/v1/causes/buy", json={"cause_id": cause.id, "amount": 15}, headers=_auth(bob),
    )
    assert bought.status_code == 201
    assert bought.json()["buyer_id"] == bob.id


async def test_buy_rejects_zero_amount(client, cause, bob):
    res = await client.post(
        "/api/v1/causes/buy", json={"cause_id": cause.id, "amount": 0}, headers=_auth(bob),
    )
    assert res.status_code == 400


async def test_cause_leaderboard_limit_skips_deleted_leader(
    client, challenge_service, user_service, cause, alice, bob,
):
    await challenge_service.record_cause_activity(cause.id, bob.id, 10, 12.0, "00:55:00")
    await challenge_service.record_cause_activity(cause.id, alice.id, 10, 5.0, "00:30:00")
    await user_service.delete_user(bob.id)

    res = await client.get(f"/api/v1/causes/{cause.id}/leaderboard", params={"limit": 1})

    assert [(e["rank"], e["username"]) for e in res.json()] == [(1, "alice")]


async def test_cause_runners_and_buyers(client, challenge_service, cause, bob):
    await challenge_service.record_cause_activity(cause.id, bob.id, 10, 1.5)
    await challenge_service.buy_cause(cause.id, bob.id, 12.0)

    runners = await client.get(f"/api/v1/causes/{cause.id}/runners")
    assert [(r["owner_id"], r["duration"]) for r in runners.json()] == [(bob.id, None)]

    buyers = await client.get(f"/api/v1/causes/{cause.id}/buyers")
    assert [(b["buyer_id"], b["amount"]) for b in buyers.json()] == [(bob.id, 12.0)]

    assert (await client.get("/api/v1/causes/missing/runners")).status_code == 404
