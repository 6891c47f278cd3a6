"""Challenge ORM: top-level fundraising/fitness campaign owned by a user.

Invariants:
    - slug is unique (generated from name + random suffix)
    - mode is one of ChallengeMode values ("Free" | "Paid")
    - no_of_winner defaults to 3

Design Decisions:
    - owner_id is a plain indexed column: ownership resolved through UserRepository
"""

from sqlalchemy import String, Text, Float, Integer
from sqlalchemy.orm import Mapped, mapped_column

from stridefund.core.domain_types import ChallengeMode
from stridefund.db.base import Base, TimestampedMixin


class Challenge(TimestampedMixin, Base):
    """Challenge entity."""
    __tablename__ = "challenges"

    owner_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    mode: Mapped[str] = mapped_column(
        String(10), nullable=False, default=ChallengeMode.FREE.value, index=True,
    )
    condition: Mapped[str | None] = mapped_column(Text, nullable=True)
    goal: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str | None] = mapped_column(
        String(255), nullable=True, index=True,
    )
    distance_to_cover: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    target_amount: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    target_amount_per_km: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    start_duration: Mapped[str | None] = mapped_column(String(50), nullable=True)
    end_duration: Mapped[str | None] = mapped_column(String(50), nullable=True)
    no_of_winner: Mapped[int] = mapped_column(
        Integer, nullable=False, default=3,
    )
    cover_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    slug: Mapped[str] = mapped_column(
        String(150), nullable=False, unique=True, index=True,
    )
