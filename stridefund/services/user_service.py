"""User Service: profile registration, lookup and self-service edits.

Invariants:
    - email/username are stripped and non-empty; duplicates raise ConflictError
    - Update and delete act on the caller's own profile only
"""

import logging
from typing import Any, Sequence

from stridefund.core.errors import ResourceNotFoundError
from stridefund.core.repository_protocols import UserRepository
from stridefund.core.validation import validate_text

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, users: UserRepository):
        self.users = users

    async def create_user(
        self, email: str, username: str,
        full_name: str | None = None, bio: str | None = None,
    ):
        user = await self.users.create(
            email=validate_text(email, "email", "create_user").lower(),
            username=validate_text(username, "username", "create_user"),
            full_name=full_name,
            bio=bio,
        )
        logger.info(f"User created: {user.username}", extra={"user_id": user.id})
        return user

    async def get_user(self, user_id: str):
        user = await self.users.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user

    async def get_users(self, user_ids: Sequence[str]) -> list:
        return await self.users.get_by_ids(user_ids)

    async def list_users(self, limit: int, offset: int = 0) -> list:
        return await self.users.list_page(limit, offset)

    async def search_users(self, query: str, limit: int, offset: int = 0) -> list:
        query = validate_text(query, "q", "search_users")
        return await self.users.search(query, limit, offset)

    async def update_user(self, user_id: str, **fields: Any):
        if fields.get("username") is not None:
            fields["username"] = validate_text(fields["username"], "username", "update_user")
        user = await self.users.update(user_id, **fields)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        logger.info("User updated", extra={"user_id": user_id})
        return user

    async def delete_user(self, user_id: str) -> None:
        if not await self.users.delete(user_id):
            raise ResourceNotFoundError("User", user_id)
        logger.info("User deleted", extra={"user_id": user_id})
