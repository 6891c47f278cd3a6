"""Leaderboard Ranking: pure ordering and per-owner dedup of runner records.

Invariants:
    - Output ordered by distance_covered descending; equal distances keep input order
    - At most one record per owner_id: the first one in ranked order with a duration
    - Records with an empty duration never appear, even as an owner's only record
    - Pure: same input, same output; the input sequence is never mutated
"""

from typing import Iterable, Protocol, TypeVar


class RunnerLike(Protocol):
    """Structural contract for anything rankable (ORM rows, test doubles)."""
    owner_id: str
    distance_covered: float
    duration: str | None


R = TypeVar("R", bound=RunnerLike)


def rank_runners(runners: Iterable[R]) -> list[R]:
    """Rank runners by distance and keep each owner's best finished run."""
    ordered = sorted(runners, key=lambda r: r.distance_covered, reverse=True)
    seen: set[str] = set()
    ranked: list[R] = []
    for runner in ordered:
        if not runner.duration or runner.owner_id in seen:
            continue
        seen.add(runner.owner_id)
        ranked.append(runner)
    return ranked


def top_runners(runners: Iterable[R], limit: int | None = None) -> list[R]:
    """rank_runners truncated to the first `limit` entries (all when None)."""
    ranked = rank_runners(runners)
    if limit is None:
        return ranked
    return ranked[:max(limit, 0)]
