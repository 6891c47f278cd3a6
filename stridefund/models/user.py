"""User ORM: a registered participant, owner, sponsor or author.

Invariants:
    - email and username are unique
    - Credentials live with the external auth provider, not here
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stridefund.db.base import Base, TimestampedMixin


class User(TimestampedMixin, Base):
    """User profile."""
    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True,
    )
    username: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True,
    )
    full_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
