"""Sponsorship ORM: per-kilometre money pledges on challenges, causes and campaigns.

Invariants:
    - total_amount = distance * amount_per_km at creation and after every
      explicit recompute (ChallengeService.update_*_sponsorship,
      CampaignService.update_campaign_sponsorship)
    - Nothing recomputes total_amount implicitly on column changes

Design Decisions:
    - One table per pledge target instead of one polymorphic table
"""

from sqlalchemy import String, Float
from sqlalchemy.orm import Mapped, mapped_column

from stridefund.db.base import Base, TimestampedMixin


class _PledgeColumns:
    sponsor_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    distance: Mapped[float] = mapped_column(Float, nullable=False)
    amount_per_km: Mapped[float] = mapped_column(Float, nullable=False)
    total_amount: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    brand_img: Mapped[str | None] = mapped_column(String(500), nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)


class SponsorChallenge(_PledgeColumns, TimestampedMixin, Base):
    """Pledge attached to a challenge."""
    __tablename__ = "sponsor_challenges"

    challenge_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )


class SponsorCause(_PledgeColumns, TimestampedMixin, Base):
    """Pledge attached to a cause."""
    __tablename__ = "sponsor_causes"

    cause_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )


class SponsorCampaign(_PledgeColumns, TimestampedMixin, Base):
    """Pledge attached to a campaign; its total counts toward money_raised."""
    __tablename__ = "sponsor_campaigns"

    campaign_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
