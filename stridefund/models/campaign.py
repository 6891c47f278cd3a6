"""Campaign ORM: standalone fundraising runs, their runners and member list.

Invariants:
    - distance_covered and money_raised on both Campaign and CampaignRunner
      only move through atomic increments (repositories/campaign_repository.py)
    - A CampaignRunner starts unfinished (distance 0, duration NULL) when a user
      participates; finishing adds to it
    - (campaign_id, user_id) is a unique membership pair
    - slug is unique
"""

from datetime import datetime

from sqlalchemy import String, Text, Float, Boolean, DateTime, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from stridefund.core.domain_types import ChallengeMode
from stridefund.db.base import Base, TimestampedMixin, utcnow


class Campaign(TimestampedMixin, Base):
    """Campaign entity: carries distance and money totals of all its runners."""
    __tablename__ = "campaigns"

    owner_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    condition: Mapped[str | None] = mapped_column(Text, nullable=True)
    mode: Mapped[str] = mapped_column(
        String(10), nullable=False, default=ChallengeMode.FREE.value,
    )
    goal: Mapped[str | None] = mapped_column(String(255), nullable=True)
    activity: Mapped[str | None] = mapped_column(
        String(20), nullable=True, index=True,
    )
    accept_tac: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    location: Mapped[str | None] = mapped_column(
        String(255), nullable=True, index=True,
    )
    money_raised: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    target_amount: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    target_amount_per_km: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    distance_to_cover: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    distance_covered: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    start_duration: Mapped[str | None] = mapped_column(String(50), nullable=True)
    end_duration: Mapped[str | None] = mapped_column(String(50), nullable=True)
    workout_img: Mapped[str | None] = mapped_column(String(500), nullable=True)
    slug: Mapped[str] = mapped_column(
        String(150), nullable=False, unique=True, index=True,
    )


class CampaignRunner(TimestampedMixin, Base):
    """One user's participation in a campaign."""
    __tablename__ = "campaign_runners"

    campaign_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    owner_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    distance_covered: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0, index=True,
    )
    duration: Mapped[str | None] = mapped_column(String(50), nullable=True)
    money_raised: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    activity: Mapped[str | None] = mapped_column(String(20), nullable=True)
    cover_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    date_joined: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )


class CampaignMember(TimestampedMixin, Base):
    """A user's membership in a campaign."""
    __tablename__ = "campaign_members"
    __table_args__ = (
        UniqueConstraint("campaign_id", "user_id", name="uq_campaign_member"),
    )

    campaign_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
