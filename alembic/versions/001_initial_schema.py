"""Initial schema: users, challenges, causes, runners, pledges, purchases, posts.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(32), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def _ref(name: str) -> sa.Column:
    return sa.Column(name, sa.String(32), nullable=False)


def _pledge_columns() -> list[sa.Column]:
    return [
        _ref("sponsor_id"),
        sa.Column("distance", sa.Float, nullable=False),
        sa.Column("amount_per_km", sa.Float, nullable=False),
        sa.Column("total_amount", sa.Float, nullable=False, server_default="0"),
        sa.Column("brand_img", sa.String(500), nullable=True),
        sa.Column("video_url", sa.String(500), nullable=True),
    ]


_INDEXES = {
    "users": [],
    "challenges": ["owner_id", "mode", "location"],
    "challenge_members": ["challenge_id", "user_id"],
    "causes": ["challenge_id", "owner_id", "activity", "distance_covered"],
    "cause_members": ["cause_id", "user_id"],
    "cause_runners": ["cause_id", "owner_id", "distance_covered"],
    "sponsor_challenges": ["sponsor_id", "challenge_id"],
    "sponsor_causes": ["sponsor_id", "cause_id"],
    "cause_buyers": ["buyer_id", "cause_id"],
    "posts": ["owner_id"],
    "comments": ["post_id", "owner_id"],
}


def upgrade() -> None:
    op.create_table(
        "users",
        *_base_columns(),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("username", sa.String(50), nullable=False, unique=True),
        sa.Column("full_name", sa.String(200), nullable=True),
        sa.Column("bio", sa.Text, nullable=True),
    )

    op.create_table(
        "challenges",
        *_base_columns(),
        _ref("owner_id"),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("mode", sa.String(10), nullable=False, server_default="Free"),
        sa.Column("condition", sa.Text, nullable=True),
        sa.Column("goal", sa.String(255), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("distance_to_cover", sa.Float, nullable=False, server_default="0"),
        sa.Column("target_amount", sa.Float, nullable=False, server_default="0"),
        sa.Column("target_amount_per_km", sa.Float, nullable=False, server_default="0"),
        sa.Column("start_duration", sa.String(50), nullable=True),
        sa.Column("end_duration", sa.String(50), nullable=True),
        sa.Column("no_of_winner", sa.Integer, nullable=False, server_default="3"),
        sa.Column("cover_image", sa.String(500), nullable=True),
        sa.Column("video_url", sa.String(500), nullable=True),
        sa.Column("slug", sa.String(150), nullable=False),
    )
    op.create_index("ix_challenges_slug", "challenges", ["slug"], unique=True)

    op.create_table(
        "challenge_members",
        *_base_columns(),
        _ref("challenge_id"),
        _ref("user_id"),
        sa.UniqueConstraint("challenge_id", "user_id", name="uq_challenge_member"),
    )

    op.create_table(
        "causes",
        *_base_columns(),
        _ref("challenge_id"),
        _ref("owner_id"),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("problem", sa.Text, nullable=True),
        sa.Column("solution", sa.Text, nullable=True),
        sa.Column("product_description", sa.Text, nullable=True),
        sa.Column("activity", sa.String(20), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("is_commercial", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("distance_covered", sa.Float, nullable=False, server_default="0"),
        sa.Column("amount_per_piece", sa.Float, nullable=False, server_default="0"),
        sa.Column("fund_cause", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("fund_amount", sa.Float, nullable=False, server_default="0"),
        sa.Column("willing_amount", sa.Float, nullable=False, server_default="0"),
        sa.Column("unit_price", sa.Float, nullable=False, server_default="0"),
        sa.Column("workout_img", sa.String(500), nullable=True),
        sa.Column("video_url", sa.String(500), nullable=True),
        sa.Column("slug", sa.String(150), nullable=False),
    )
    op.create_index("ix_causes_slug", "causes", ["slug"], unique=True)

    op.create_table(
        "cause_members",
        *_base_columns(),
        _ref("cause_id"),
        _ref("user_id"),
        sa.UniqueConstraint("cause_id", "user_id", name="uq_cause_member"),
    )

    op.create_table(
        "cause_runners",
        *_base_columns(),
        _ref("cause_id"),
        _ref("owner_id"),
        sa.Column("distance_to_cover", sa.Float, nullable=False),
        sa.Column("distance_covered", sa.Float, nullable=False),
        sa.Column("duration", sa.String(50), nullable=True),
        sa.Column("money_raised", sa.Float, nullable=False, server_default="0"),
        sa.Column("activity", sa.String(20), nullable=True),
        sa.Column("cover_image", sa.String(500), nullable=True),
    )

    op.create_table(
        "sponsor_challenges",
        *_base_columns(),
        _ref("challenge_id"),
        *_pledge_columns(),
    )

    op.create_table(
        "sponsor_causes",
        *_base_columns(),
        _ref("cause_id"),
        *_pledge_columns(),
    )

    op.create_table(
        "cause_buyers",
        *_base_columns(),
        _ref("buyer_id"),
        _ref("cause_id"),
        sa.Column("amount", sa.Float, nullable=False),
        sa.Column("date_bought", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "posts",
        *_base_columns(),
        _ref("owner_id"),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("slug", sa.String(250), nullable=False),
    )
    op.create_index("ix_posts_slug", "posts", ["slug"], unique=True)

    op.create_table(
        "comments",
        *_base_columns(),
        _ref("post_id"),
        _ref("owner_id"),
        sa.Column("content", sa.Text, nullable=False),
    )

    for table, columns in _INDEXES.items():
        for column in ["created_at", *columns]:
            op.create_index(f"ix_{table}_{column}", table, [column])


def downgrade() -> None:
    for table in reversed(list(_INDEXES)):
        op.drop_table(table)
