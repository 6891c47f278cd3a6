"""Post & Comment ORM: social feed entries and their replies.

Invariants:
    - Post.slug is unique
    - Only the author (owner_id) may edit or delete a post or comment
      (enforced in PostService)
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from stridefund.db.base import Base, TimestampedMixin


class Post(TimestampedMixin, Base):
    """Feed post."""
    __tablename__ = "posts"

    owner_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(
        String(250), nullable=False, unique=True, index=True,
    )


class Comment(TimestampedMixin, Base):
    """Reply under a post."""
    __tablename__ = "comments"

    post_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    owner_id: Mapped[str] = mapped_column(
        String(32), nullable=False, index=True,
    )
    content: Mapped[str] = mapped_column(Text, nullable=False)
