"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base and TimestampedMixin (db/base.py)
    - Cross-entity references are plain indexed string columns, no FK constraints

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all
      or alembic autogenerate runs
"""

from stridefund.models.user import User  # noqa: F401
from stridefund.models.challenge import Challenge  # noqa: F401
from stridefund.models.cause import Cause  # noqa: F401
from stridefund.models.cause_runner import CauseRunner  # noqa: F401
from stridefund.models.membership import ChallengeMember, CauseMember  # noqa: F401
from stridefund.models.sponsorship import (  # noqa: F401
    SponsorChallenge, SponsorCause, SponsorCampaign,
)
from stridefund.models.cause_buyer import CauseBuyer  # noqa: F401
from stridefund.models.post import Post, Comment  # noqa: F401
from stridefund.models.campaign import (  # noqa: F401
    Campaign, CampaignRunner, CampaignMember,
)
