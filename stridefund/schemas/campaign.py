"""Campaign Schemas: campaign CRUD, participation, finishing runs and pledges.

Invariants:
    - Names: 1-100 chars, stripped, non-empty
    - A finish adds distance_covered > 0 and money_raised >= 0; duration is required
    - money_raised and distance_covered on campaigns are never client-writable
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stridefund.core.domain_types import Activity, ChallengeMode
from stridefund.schemas.challenge import _strip_required


class CampaignCreate(BaseModel):
    name: str = Field(min_length=1, max_length=100)
    description: str | None = None
    condition: str | None = None
    mode: ChallengeMode = ChallengeMode.FREE
    goal: str | None = Field(None, max_length=255)
    activity: Activity | None = None
    location: str | None = Field(None, max_length=255)
    target_amount: float = Field(0.0, ge=0)
    target_amount_per_km: float = Field(0.0, ge=0)
    distance_to_cover: float = Field(0.0, ge=0)
    start_duration: str | None = Field(None, max_length=50)
    end_duration: str | None = Field(None, max_length=50)
    workout_img: str | None = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_required(v)


class CampaignUpdate(BaseModel):
    """Partial campaign update (owner only)."""
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    condition: str | None = None
    mode: ChallengeMode | None = None
    goal: str | None = Field(None, max_length=255)
    activity: Activity | None = None
    location: str | None = Field(None, max_length=255)
    target_amount: float | None = Field(None, ge=0)
    target_amount_per_km: float | None = Field(None, ge=0)
    distance_to_cover: float | None = Field(None, ge=0)
    start_duration: str | None = Field(None, max_length=50)
    end_duration: str | None = Field(None, max_length=50)
    workout_img: str | None = Field(None, max_length=500)
    accept_tac: bool | None = None

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        return None if v is None else _strip_required(v)


class CampaignResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    owner_id: str
    name: str
    description: str | None
    condition: str | None
    mode: ChallengeMode
    goal: str | None
    activity: Activity | None
    accept_tac: bool
    location: str | None
    money_raised: float
    target_amount: float
    target_amount_per_km: float
    distance_to_cover: float
    distance_covered: float
    start_duration: str | None
    end_duration: str | None
    workout_img: str | None
    slug: str
    created_at: datetime


class ParticipateRequest(BaseModel):
    activity: Activity | None = None
    cover_image: str | None = Field(None, max_length=500)


class FinishActivityRequest(BaseModel):
    distance_covered: float = Field(gt=0)
    duration: str = Field(min_length=1, max_length=50)
    money_raised: float = Field(0.0, ge=0)


class CampaignRunnerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    campaign_id: str
    owner_id: str
    distance_covered: float
    duration: str | None
    money_raised: float
    activity: Activity | None
    cover_image: str | None
    date_joined: datetime


class FinishActivityResponse(BaseModel):
    runner: CampaignRunnerResponse
    campaign: CampaignResponse


class SponsorCampaignRequest(BaseModel):
    campaign_id: str = Field(min_length=1)
    distance: float = Field(gt=0)
    amount_per_km: float = Field(gt=0)
    brand_img: str | None = Field(None, max_length=500)
    video_url: str | None = Field(None, max_length=500)
