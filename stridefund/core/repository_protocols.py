"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection
    - Repositories raise domain errors (ConflictError on unique violations),
      never bare SQLAlchemy exceptions

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, while the pure functions that
      consume their results (rank_runners, compute_total_amount) stay sync
    - Records returned as attribute-bearing objects (ORM rows in production,
      plain objects in tests), described by the *Like protocols below
"""

from typing import Any, Protocol, Sequence

from stridefund.core.domain_types import (
    UserId, ChallengeId, CauseId, RunnerId, PostId, CommentId, CampaignId,
)
from stridefund.core.leaderboard import RunnerLike


class CauseLike(Protocol):
    """Structural contract for the cause aggregate used by settlement."""
    id: str
    challenge_id: str
    distance_covered: float


class PledgeLike(Protocol):
    """Structural contract for sponsorship pledges of either target."""
    id: str
    sponsor_id: str
    distance: float
    amount_per_km: float
    total_amount: float


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def create(self, **fields: Any) -> Any: ...
    async def get_by_id(self, user_id: UserId) -> Any | None: ...
    async def get_by_ids(self, user_ids: Sequence[UserId]) -> list[Any]: ...
    async def list_page(self, limit: int, offset: int) -> list[Any]: ...
    async def search(self, query: str, limit: int, offset: int) -> list[Any]: ...
    async def update(self, user_id: UserId, **fields: Any) -> Any | None: ...
    async def delete(self, user_id: UserId) -> bool: ...


class ChallengeRepository(Protocol):
    """Contract for challenge persistence and membership."""
    async def create(self, **fields: Any) -> Any: ...
    async def get_by_id(self, challenge_id: ChallengeId) -> Any | None: ...
    async def get_by_slug(self, slug: str) -> Any | None: ...
    async def get_by_owner_id(self, owner_id: UserId) -> list[Any]: ...
    async def list_page(self, limit: int, offset: int) -> list[Any]: ...
    async def search(self, query: str, limit: int, offset: int) -> list[Any]: ...
    async def update(self, challenge_id: ChallengeId, **fields: Any) -> Any | None: ...
    async def delete(self, challenge_id: ChallengeId) -> bool: ...
    async def add_member(self, challenge_id: ChallengeId, user_id: UserId) -> Any: ...
    async def is_member(self, challenge_id: ChallengeId, user_id: UserId) -> bool: ...


class CauseRepository(Protocol):
    """Contract for cause persistence, membership and the distance aggregate."""
    async def create(self, **fields: Any) -> CauseLike: ...
    async def get_by_id(self, cause_id: CauseId) -> CauseLike | None: ...
    async def get_by_slug(self, slug: str) -> CauseLike | None: ...
    async def get_by_challenge_id(self, challenge_id: ChallengeId) -> list[CauseLike]: ...
    async def add_member(self, cause_id: CauseId, user_id: UserId) -> Any: ...
    async def is_member(self, cause_id: CauseId, user_id: UserId) -> bool: ...
    async def increment_distance(self, cause_id: CauseId, distance: float) -> bool:
        """Atomically add `distance`; False when no cause row matched."""
        ...


class CauseRunnerRepository(Protocol):
    """Contract for runner (recorded activity) persistence."""
    async def create(self, **fields: Any) -> RunnerLike: ...
    async def get_by_id(self, runner_id: RunnerId) -> RunnerLike | None: ...
    async def get_by_cause_id(self, cause_id: CauseId) -> list[RunnerLike]: ...
    async def get_by_owner_id(self, owner_id: UserId) -> list[RunnerLike]: ...
    async def delete(self, runner_id: RunnerId) -> bool: ...
    async def get_leaderboard(self, cause_id: CauseId | None = None) -> list[RunnerLike]:
        """All runners (optionally of one cause) in insertion order, unranked."""
        ...


class SponsorshipRepository(Protocol):
    """Contract for pledge persistence; one implementation per target table."""
    async def create(self, **fields: Any) -> PledgeLike: ...
    async def get_by_id(self, sponsorship_id: str) -> PledgeLike | None: ...
    async def get_by_target(self, target_id: str) -> list[PledgeLike]: ...
    async def get_by_sponsor_id(self, sponsor_id: UserId) -> list[PledgeLike]: ...
    async def update(self, sponsorship_id: str, **fields: Any) -> PledgeLike | None: ...
    async def delete(self, sponsorship_id: str) -> bool: ...


class CauseBuyerRepository(Protocol):
    """Contract for cause purchase records."""
    async def create(self, **fields: Any) -> Any: ...
    async def get_by_cause_id(self, cause_id: CauseId) -> list[Any]: ...


class CampaignRepository(Protocol):
    """Contract for campaign persistence, membership and the distance/money totals."""
    async def create(self, **fields: Any) -> Any: ...
    async def get_by_id(self, campaign_id: CampaignId) -> Any | None: ...
    async def get_by_slug(self, slug: str) -> Any | None: ...
    async def get_by_owner_id(self, owner_id: UserId) -> list[Any]: ...
    async def list_page(
        self, limit: int, offset: int, exclude_owner_id: UserId | None = None,
    ) -> list[Any]: ...
    async def search(self, query: str, limit: int, offset: int) -> list[Any]: ...
    async def update(self, campaign_id: CampaignId, **fields: Any) -> Any | None: ...
    async def delete(self, campaign_id: CampaignId) -> bool: ...
    async def add_member(self, campaign_id: CampaignId, user_id: UserId) -> Any: ...
    async def is_member(self, campaign_id: CampaignId, user_id: UserId) -> bool: ...
    async def remove_member(self, campaign_id: CampaignId, user_id: UserId) -> bool: ...
    async def add_totals(
        self, campaign_id: CampaignId, distance: float = 0.0, money: float = 0.0,
    ) -> bool:
        """Atomically add to distance_covered and money_raised; False when no row matched."""
        ...


class CampaignRunnerRepository(Protocol):
    """Contract for campaign participation records."""
    async def create(self, **fields: Any) -> RunnerLike: ...
    async def get_by_id(self, runner_id: RunnerId) -> RunnerLike | None: ...
    async def get_by_campaign_id(self, campaign_id: CampaignId) -> list[RunnerLike]: ...
    async def get_by_owner_id(self, owner_id: UserId) -> list[RunnerLike]: ...
    async def delete(self, runner_id: RunnerId) -> bool: ...
    async def add_progress(
        self, runner_id: RunnerId, distance: float, money: float, duration: str,
    ) -> bool:
        """Atomically add distance and money and set duration; False when no row matched."""
        ...


class PostRepository(Protocol):
    """Contract for post persistence."""
    async def create(self, **fields: Any) -> Any: ...
    async def get_by_id(self, post_id: PostId) -> Any | None: ...
    async def get_by_slug(self, slug: str) -> Any | None: ...
    async def list_page(self, limit: int, offset: int) -> list[Any]: ...
    async def update(self, post_id: PostId, **fields: Any) -> Any | None: ...
    async def delete(self, post_id: PostId) -> bool: ...


class CommentRepository(Protocol):
    """Contract for comment persistence."""
    async def create(self, **fields: Any) -> Any: ...
    async def get_by_id(self, comment_id: CommentId) -> Any | None: ...
    async def get_by_post_id(self, post_id: PostId) -> list[Any]: ...
    async def update(self, comment_id: CommentId, **fields: Any) -> Any | None: ...
    async def delete(self, comment_id: CommentId) -> bool: ...
