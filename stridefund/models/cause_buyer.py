"""CauseBuyer ORM: one-off purchase of a cause's product."""

from datetime import datetime

from sqlalchemy import String, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from stridefund.db.base import Base, TimestampedMixin, utcnow


class CauseBuyer(TimestampedMixin, Base):
    """Purchase record."""
    __tablename__ = "cause_buyers"

    buyer_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    cause_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    amount: Mapped[float] = mapped_column(Float, nullable=False)
    date_bought: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
