"""SQLAlchemy Declarative Base: shared base class and common columns for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Every entity gets a 32-char hex id plus created_at/updated_at (TimestampedMixin)

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from stridefund.core.identifiers import new_id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all StrideFund ORM models."""
    pass


class TimestampedMixin:
    """Identifier and audit timestamps shared by every entity."""

    id: Mapped[str] = mapped_column(
        String(32), primary_key=True, default=new_id,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow,
    )
