"""Challenge & Cause Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - Names: 1-100 chars, stripped, non-empty
    - mode restricted to ChallengeMode, activity to Activity
    - Distances and amounts on activity/purchase requests are strictly positive

Design Decisions:
    - Responses read straight from ORM rows (from_attributes=True)
    - Update models are all-optional: omitted fields are left untouched
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stridefund.core.domain_types import Activity, ChallengeMode


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("name cannot be empty or whitespace")
    return v


# --- Challenges ---------------------------------------------------------------

class ChallengeCreate(BaseModel):
    """Challenge creation."""
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    mode: ChallengeMode = ChallengeMode.FREE
    condition: str | None = None
    goal: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)
    distance_to_cover: float = Field(0.0, ge=0)
    target_amount: float = Field(0.0, ge=0)
    target_amount_per_km: float = Field(0.0, ge=0)
    start_duration: str | None = Field(None, max_length=50)
    end_duration: str | None = Field(None, max_length=50)
    no_of_winner: int = Field(3, ge=1)
    cover_image: str | None = Field(None, max_length=500)
    video_url: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_required(v)


class ChallengeUpdate(BaseModel):
    """Partial challenge update (owner only)."""
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    mode: ChallengeMode | None = None
    condition: str | None = None
    goal: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)
    distance_to_cover: float | None = Field(None, ge=0)
    target_amount: float | None = Field(None, ge=0)
    target_amount_per_km: float | None = Field(None, ge=0)
    start_duration: str | None = Field(None, max_length=50)
    end_duration: str | None = Field(None, max_length=50)
    no_of_winner: int | None = Field(None, ge=1)
    cover_image: str | None = Field(None, max_length=500)
    video_url: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return None if v is None else _strip_required(v)


class ChallengeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    name: str
    description: str | None
    mode: ChallengeMode
    condition: str | None
    goal: str | None
    location: str | None
    distance_to_cover: float
    target_amount: float
    target_amount_per_km: float
    start_duration: str | None
    end_duration: str | None
    no_of_winner: int
    cover_image: str | None
    video_url: str | None
    slug: str
    created_at: datetime


# --- Causes -------------------------------------------------------------------

class CauseCreate(BaseModel):
    """Cause creation under an existing challenge."""
    challenge_id: str = Field(min_length=1)
    name: str = Field(min_length=1, max_length=100)
    problem: str | None = None
    solution: str | None = None
    product_description: str | None = None
    activity: Activity | None = None
    location: str | None = Field(None, max_length=255)
    description: str | None = None
    is_commercial: bool = False
    amount_per_piece: float = Field(0.0, ge=0)
    fund_cause: bool = False
    fund_amount: float = Field(0.0, ge=0)
    willing_amount: float = Field(0.0, ge=0)
    unit_price: float = Field(0.0, ge=0)
    workout_img: str | None = Field(None, max_length=500)
    video_url: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_required(v)


class CauseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    challenge_id: str
    owner_id: str
    name: str
    problem: str | None
    solution: str | None
    product_description: str | None
    activity: Activity | None
    location: str | None
    description: str | None
    is_commercial: bool
    distance_covered: float
    amount_per_piece: float
    fund_cause: bool
    fund_amount: float
    willing_amount: float
    unit_price: float
    workout_img: str | None
    video_url: str | None
    slug: str
    created_at: datetime


class MembershipResponse(BaseModel):
    """Result of joining a challenge or cause."""
    id: str
    target_id: str
    user_id: str
    created_at: datetime


# --- Activity settlement ------------------------------------------------------

class RecordActivityRequest(BaseModel):
    """One finished (or in-progress, when duration is omitted) activity."""
    cause_id: str = Field(min_length=1)
    distance_to_cover: float = Field(gt=0)
    distance_covered: float = Field(gt=0)
    duration: str | None = Field(None, max_length=50)
    activity: Activity | None = None
    cover_image: str | None = Field(None, max_length=500)


class RunnerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    cause_id: str
    owner_id: str
    distance_to_cover: float
    distance_covered: float
    duration: str | None
    money_raised: float
    activity: Activity | None
    cover_image: str | None
    created_at: datetime


class RecordActivityResponse(BaseModel):
    runner: RunnerResponse
    cause: CauseResponse


class LeaderboardEntry(BaseModel):
    """Ranked runner (cause or campaign) enriched with its owner's public profile."""
    rank: int
    runner_id: str
    cause_id: str | None = None
    campaign_id: str | None = None
    owner_id: str
    username: str
    full_name: str | None
    distance_covered: float
    money_raised: float = 0.0
    duration: str | None


# --- Purchases ----------------------------------------------------------------

class BuyCauseRequest(BaseModel):
    cause_id: str = Field(min_length=1)
    amount: float = Field(gt=0)


class CauseBuyerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    cause_id: str
    buyer_id: str
    amount: float
    date_bought: datetime
