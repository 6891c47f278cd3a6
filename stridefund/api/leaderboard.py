"""Leaderboard Presentation: attaches owner profiles to ranked cause or campaign runners.

Invariants:
    - Rank order from core/leaderboard.py is preserved; ranks are 1-based
    - Runners whose owner no longer exists are skipped, and later ranks close the gap
    - `limit` is applied after the owner filter, so a board is only short
      when fewer ranked runners with live owners exist
"""

from typing import Sequence

from stridefund.schemas.challenge import LeaderboardEntry
from stridefund.services.user_service import UserService


async def build_leaderboard(
    runners: Sequence, users: UserService, limit: int | None = None,
) -> list[LeaderboardEntry]:
    owners = {
        user.id: user
        for user in await users.get_users(list({r.owner_id for r in runners}))
    }
    entries: list[LeaderboardEntry] = []
    for runner in runners:
        if limit is not None and len(entries) >= limit:
            break
        owner = owners.get(runner.owner_id)
        if owner is None:
            continue
        entries.append(LeaderboardEntry(
            rank=len(entries) + 1,
            runner_id=runner.id,
            cause_id=getattr(runner, "cause_id", None),
            campaign_id=getattr(runner, "campaign_id", None),
            owner_id=runner.owner_id,
            username=owner.username,
            full_name=owner.full_name,
            distance_covered=runner.distance_covered,
            money_raised=runner.money_raised,
            duration=runner.duration,
        ))
    return entries
