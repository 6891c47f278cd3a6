"""Cause ORM: sub-campaign under a challenge, tracked with one activity type.

Invariants:
    - distance_covered starts at 0 and only grows via atomic increments
      (CauseRepository.increment_distance)
    - slug is unique
    - activity is one of Activity values or NULL
"""

from sqlalchemy import String, Text, Float, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from stridefund.db.base import Base, TimestampedMixin


class Cause(TimestampedMixin, Base):
    """Cause entity: carries the cumulative distance of all its runners."""
    __tablename__ = "causes"

    challenge_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    owner_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    problem: Mapped[str | None] = mapped_column(Text, nullable=True)
    solution: Mapped[str | None] = mapped_column(Text, nullable=True)
    product_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    activity: Mapped[str | None] = mapped_column(
        String(20), nullable=True, index=True,
    )
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_commercial: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    distance_covered: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0, index=True,
    )
    amount_per_piece: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    fund_cause: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    fund_amount: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    willing_amount: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    unit_price: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    workout_img: Mapped[str | None] = mapped_column(String(500), nullable=True)
    video_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    slug: Mapped[str] = mapped_column(
        String(150), nullable=False, unique=True, index=True,
    )
