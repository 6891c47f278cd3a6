"""Campaigns: campaigns, their runners, members and pledges.

Revision ID: 002_campaigns
Revises: 001_initial
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_campaigns"
down_revision: Union[str, None] = "001_initial"
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


def _money(name: str) -> sa.Column:
    return sa.Column(name, sa.Float, nullable=False, server_default="0")


_INDEXES = {
    "campaigns": ["owner_id", "activity", "location"],
    "campaign_runners": ["campaign_id", "owner_id", "distance_covered"],
    "campaign_members": ["campaign_id", "user_id"],
    "sponsor_campaigns": ["sponsor_id", "campaign_id"],
}


def upgrade() -> None:
    op.create_table(
        "campaigns",
        *_base_columns(),
        _ref("owner_id"),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("condition", sa.Text, nullable=True),
        sa.Column("mode", sa.String(10), nullable=False, server_default="Free"),
        sa.Column("goal", sa.String(255), nullable=True),
        sa.Column("activity", sa.String(20), nullable=True),
        sa.Column("accept_tac", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("location", sa.String(255), nullable=True),
        _money("money_raised"),
        _money("target_amount"),
        _money("target_amount_per_km"),
        _money("distance_to_cover"),
        _money("distance_covered"),
        sa.Column("start_duration", sa.String(50), nullable=True),
        sa.Column("end_duration", sa.String(50), nullable=True),
        sa.Column("workout_img", sa.String(500), nullable=True),
        sa.Column("slug", sa.String(150), nullable=False),
    )
    op.create_index("ix_campaigns_slug", "campaigns", ["slug"], unique=True)

    op.create_table(
        "campaign_runners",
        *_base_columns(),
        _ref("campaign_id"),
        _ref("owner_id"),
        _money("distance_covered"),
        sa.Column("duration", sa.String(50), nullable=True),
        _money("money_raised"),
        sa.Column("activity", sa.String(20), nullable=True),
        sa.Column("cover_image", sa.String(500), nullable=True),
        sa.Column("date_joined", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "campaign_members",
        *_base_columns(),
        _ref("campaign_id"),
        _ref("user_id"),
        sa.UniqueConstraint("campaign_id", "user_id", name="uq_campaign_member"),
    )

    op.create_table(
        "sponsor_campaigns",
        *_base_columns(),
        _ref("campaign_id"),
        _ref("sponsor_id"),
        sa.Column("distance", sa.Float, nullable=False),
        sa.Column("amount_per_km", sa.Float, nullable=False),
        _money("total_amount"),
        sa.Column("brand_img", sa.String(500), nullable=True),
        sa.Column("video_url", sa.String(500), nullable=True),
    )

    for table, columns in _INDEXES.items():
        for column in ["created_at", *columns]:
            op.create_index(f"ix_{table}_{column}", table, [column])


def downgrade() -> None:
    for table in reversed(list(_INDEXES)):
        op.drop_table(table)
