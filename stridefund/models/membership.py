"""Membership ORM: who joined which challenge or cause.

Invariants:
    - (challenge_id, user_id) and (cause_id, user_id) are unique pairs
"""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from stridefund.db.base import Base, TimestampedMixin


class ChallengeMember(TimestampedMixin, Base):
    """A user's membership in a challenge."""
    __tablename__ = "challenge_members"
    __table_args__ = (
        UniqueConstraint("challenge_id", "user_id", name="uq_challenge_member"),
    )

    challenge_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )


class CauseMember(TimestampedMixin, Base):
    """A user's membership in a cause."""
    __tablename__ = "cause_members"
    __table_args__ = (
        UniqueConstraint("cause_id", "user_id", name="uq_cause_member"),
    )

    cause_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
