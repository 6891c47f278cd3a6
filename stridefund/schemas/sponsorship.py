"""Sponsorship Schemas: per-kilometre pledge requests and responses.

Invariants:
    - distance and amount_per_km are strictly positive on create and, when
      present, on update
    - total_amount is never accepted from clients; the service computes it
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SponsorChallengeRequest(BaseModel):
    challenge_id: str = Field(min_length=1)
    distance: float = Field(gt=0)
    amount_per_km: float = Field(gt=0)
    brand_img: str | None = Field(None, max_length=500)
    video_url: str | None = Field(None, max_length=500)


class SponsorCauseRequest(BaseModel):
    cause_id: str = Field(min_length=1)
    distance: float = Field(gt=0)
    amount_per_km: float = Field(gt=0)
    brand_img: str | None = Field(None, max_length=500)
    video_url: str | None = Field(None, max_length=500)


class SponsorshipUpdate(BaseModel):
    """Partial pledge update; total_amount is recomputed from the result."""
    distance: float | None = Field(None, gt=0)
    amount_per_km: float | None = Field(None, gt=0)
    brand_img: str | None = Field(None, max_length=500)
    video_url: str | None = Field(None, max_length=500)


class SponsorshipResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    sponsor_id: str
    challenge_id: str | None = None
    cause_id: str | None = None
    campaign_id: str | None = None
    distance: float
    amount_per_km: float
    total_amount: float
    brand_img: str | None
    video_url: str | None
    created_at: datetime


class SponsorPledgesResponse(BaseModel):
    """All pledges made by one sponsor, grouped by target."""
    challenges: list[SponsorshipResponse]
    causes: list[SponsorshipResponse]
    campaigns: list[SponsorshipResponse]
