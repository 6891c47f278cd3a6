"""CauseRunner ORM: one participant's recorded activity against a cause.

Invariants:
    - distance_to_cover > 0 and distance_covered > 0 (checked before insert)
    - duration empty/NULL means "not finished": excluded from leaderboards
    - cause_id carries no FK: a runner outlives its cause (see SettlementIncompleteError)
"""

from sqlalchemy import String, Float
from sqlalchemy.orm import Mapped, mapped_column

from stridefund.db.base import Base, TimestampedMixin


class CauseRunner(TimestampedMixin, Base):
    """Runner entry: a single tracked activity."""
    __tablename__ = "cause_runners"

    cause_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    owner_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    distance_to_cover: Mapped[float] = mapped_column(Float, nullable=False)
    distance_covered: Mapped[float] = mapped_column(
        Float, nullable=False, index=True,
    )
    duration: Mapped[str | None] = mapped_column(String(50), nullable=True)
    money_raised: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    activity: Mapped[str | None] = mapped_column(String(20), nullable=True)
    cover_image: Mapped[str | None] = mapped_column(String(500), nullable=True)
