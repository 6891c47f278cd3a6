"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ChallengeId, CauseId, RunnerId, CampaignId wrap 32-char hex strings
    - All valid modes and activities encoded as Enums (no raw string matching)

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders; values match the
      labels stored in the database ("Free", "Walking", ...)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ChallengeId = NewType("ChallengeId", str)
CauseId = NewType("CauseId", str)
RunnerId = NewType("RunnerId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
CampaignId = NewType("CampaignId", str)


# ─── Value Types ─────────────────────────────────────────────────

Kilometers = NewType("Kilometers", float)
Money = NewType("Money", float)


# ─── Enums ───────────────────────────────────────────────────────

class ChallengeMode(str, Enum):
    """Whether joining a challenge costs money."""
    FREE = "Free"
    PAID = "Paid"


class Activity(str, Enum):
    """Activity types a cause or campaign can be tracked with."""
    WALKING = "Walking"
    RUNNING = "Running"
    CYCLING = "Cycling"


class SponsorTarget(str, Enum):
    """What a sponsorship pledge is attached to."""
    CHALLENGE = "challenge"
    CAUSE = "cause"
    CAMPAIGN = "campaign"
