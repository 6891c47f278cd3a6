"""User Service: registration, uniqueness and self-service edits."""

import pytest

from stridefund.core.errors import ConflictError, InvalidInputError, ResourceNotFoundError


async def test_create_user_normalizes_email(user_service):
    user = await user_service.create_user("  Carol@Example.com ", " carol ")
    assert user.email == "carol@example.com"
    assert user.username == "carol"
    assert len(user.id) == 32


async def test_duplicate_username_conflicts(user_service, alice):
    with pytest.raises(ConflictError):
        await user_service.create_user("other@example.com", "alice")


async def test_duplicate_email_conflicts(user_service, alice):
    with pytest.raises(ConflictError):
        await user_service.create_user("alice@example.com", "alice2")


async def test_blank_username_rejected(user_service):
    with pytest.raises(InvalidInputError):
        await user_service.create_user("x@example.com", "  ")


async def test_get_users_batch(user_service, alice, bob):
    found = await user_service.get_users([alice.id, bob.id, "missing"])
    assert {u.id for u in found} == {alice.id, bob.id}
    assert await user_service.get_users([]) == []


async def test_search_users(user_service, alice, bob):
    assert [u.id for u in await user_service.search_users("walker", 10)] == [bob.id]


async def test_search_treats_wildcards_literally(user_service, alice, bob):
    carol = await user_service.create_user("carol@example.com", "carol_runs", "Carol 100%")

    assert [u.id for u in await user_service.search_users("_", 10)] == [carol.id]
    assert [u.id for u in await user_service.search_users("%", 10)] == [carol.id]
    assert await user_service.search_users("a%e", 10) == []


async def test_update_and_delete(user_service, alice):
    updated = await user_service.update_user(alice.id, bio="Ultra runner")
    assert updated.bio == "Ultra runner"
    await user_service.delete_user(alice.id)
    with pytest.raises(ResourceNotFoundError):
        await user_service.get_user(alice.id)


async def test_delete_missing_user(user_service):
    with pytest.raises(ResourceNotFoundError):
        await user_service.delete_user("missing")
