"""API Dependencies: caller identity and per-request service wiring.

Invariants:
    - Protected routes depend on get_current_user_id; a missing or blank
      X-User-Id header raises UnauthorizedError before the handler runs
    - Services are built per request around the request's AsyncSession

Design Decisions:
    - Identity comes from an upstream gateway header; token handling lives there
"""

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from stridefund.core.domain_types import UserId
from stridefund.core.errors import UnauthorizedError
from stridefund.infrastructure.database import get_db
from stridefund.repositories import (
    SqlCampaignRepository, SqlCampaignRunnerRepository, SqlCauseBuyerRepository,
    SqlCauseRepository, SqlCauseRunnerRepository, SqlChallengeRepository,
    SqlCommentRepository, SqlPostRepository, SqlSponsorCampaignRepository,
    SqlSponsorCauseRepository, SqlSponsorChallengeRepository, SqlUserRepository,
)
from stridefund.services.campaign_service import CampaignService
from stridefund.services.challenge_service import ChallengeService
from stridefund.services.post_service import PostService
from stridefund.services.user_service import UserService


async def get_current_user_id(
    x_user_id: str | None = Header(None, alias="X-User-Id"),
) -> UserId:
    if x_user_id is None or not x_user_id.strip():
        raise UnauthorizedError()
    return UserId(x_user_id.strip())


def get_challenge_service(db: AsyncSession = Depends(get_db)) -> ChallengeService:
    return ChallengeService(
        challenges=SqlChallengeRepository(db),
        causes=SqlCauseRepository(db),
        runners=SqlCauseRunnerRepository(db),
        challenge_sponsors=SqlSponsorChallengeRepository(db),
        cause_sponsors=SqlSponsorCauseRepository(db),
        buyers=SqlCauseBuyerRepository(db),
    )


def get_campaign_service(db: AsyncSession = Depends(get_db)) -> CampaignService:
    return CampaignService(
        campaigns=SqlCampaignRepository(db),
        runners=SqlCampaignRunnerRepository(db),
        sponsors=SqlSponsorCampaignRepository(db),
    )


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(SqlUserRepository(db))


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(SqlPostRepository(db), SqlCommentRepository(db))
