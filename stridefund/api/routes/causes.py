"""Cause Routes: causes, activity settlement, per-cause leaderboard, pledges, purchases.

Invariants:
    - POST /activity returns 201 with the runner and the refreshed cause;
      a committed runner against a missing cause yields 404 SETTLEMENT_INCOMPLETE
    - Static paths are declared before /{cause_id}
"""

from fastapi import APIRouter, Depends, Query, status

from stridefund.api.dependencies import (
    get_challenge_service, get_current_user_id, get_user_service,
)
from stridefund.api.leaderboard import build_leaderboard
from stridefund.config import get_settings
from stridefund.schemas.challenge import (
    BuyCauseRequest, CauseBuyerResponse, CauseCreate, CauseResponse,
    LeaderboardEntry, MembershipResponse, RecordActivityRequest,
    RecordActivityResponse, RunnerResponse,
)
from stridefund.schemas.sponsorship import (
    SponsorCauseRequest, SponsorshipResponse, SponsorshipUpdate,
)
from stridefund.services.challenge_service import ChallengeService
from stridefund.services.user_service import UserService

router = APIRouter(prefix="/api/v1/causes", tags=["causes"])
_settings = get_settings()


@router.post("", response_model=CauseResponse, status_code=status.HTTP_201_CREATED)
async def create_cause(
    body: CauseCreate,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    fields = body.model_dump()
    return await service.create_cause(fields.pop("challenge_id"), user_id, **fields)


@router.post(
    "/activity", response_model=RecordActivityResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_activity(
    body: RecordActivityRequest,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    """Record a runner and add its distance to the cause."""
    runner, cause = await service.record_cause_activity(
        body.cause_id, user_id,
        distance_to_cover=body.distance_to_cover,
        distance_covered=body.distance_covered,
        duration=body.duration,
        activity=body.activity,
        cover_image=body.cover_image,
    )
    return RecordActivityResponse(
        runner=RunnerResponse.model_validate(runner),
        cause=CauseResponse.model_validate(cause),
    )


@router.post("/sponsor", response_model=SponsorshipResponse, status_code=status.HTTP_201_CREATED)
async def sponsor_cause(
    body: SponsorCauseRequest,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    return await service.sponsor_cause(user_id, **body.model_dump())


@router.patch("/sponsors/{sponsorship_id}", response_model=SponsorshipResponse)
async def update_cause_sponsorship(
    sponsorship_id: str,
    body: SponsorshipUpdate,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    return await service.update_cause_sponsorship(
        sponsorship_id, user_id, **body.model_dump(exclude_unset=True),
    )


@router.post("/buy", response_model=CauseBuyerResponse, status_code=status.HTTP_201_CREATED)
async def buy_cause(
    body: BuyCauseRequest,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    return await service.buy_cause(body.cause_id, user_id, body.amount)


@router.get("/slug/{slug}", response_model=CauseResponse)
async def get_cause_by_slug(
    slug: str, service: ChallengeService = Depends(get_challenge_service),
):
    return await service.get_cause_by_slug(slug)


@router.get("/{cause_id}", response_model=CauseResponse)
async def get_cause(
    cause_id: str, service: ChallengeService = Depends(get_challenge_service),
):
    return await service.get_cause_by_id(cause_id)


@router.get("/{cause_id}/leaderboard", response_model=list[LeaderboardEntry])
async def get_cause_leaderboard(
    cause_id: str,
    limit: int = Query(_settings.leaderboard_size, ge=1, le=_settings.max_page_size),
    service: ChallengeService = Depends(get_challenge_service),
    users: UserService = Depends(get_user_service),
):
    runners = await service.get_cause_leaderboard(cause_id)
    return await build_leaderboard(runners, users, limit)


@router.get("/{cause_id}/sponsors", response_model=list[SponsorshipResponse])
async def get_cause_sponsors(
    cause_id: str, service: ChallengeService = Depends(get_challenge_service),
):
    return await service.list_cause_sponsors(cause_id)


@router.post(
    "/{cause_id}/join", response_model=MembershipResponse,
    status_code=status.HTTP_201_CREATED,
)
async def join_cause(
    cause_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    member = await service.join_cause(cause_id, user_id)
    return MembershipResponse(
        id=member.id, target_id=member.cause_id,
        user_id=member.user_id, created_at=member.created_at,
    )


@router.get("/{cause_id}/runners", response_model=list[RunnerResponse])
async def get_cause_runners(
    cause_id: str, service: ChallengeService = Depends(get_challenge_service),
):
    """All recorded activities of the cause, including unfinished ones."""
    return await service.get_cause_runners(cause_id)


@router.get("/{cause_id}/buyers", response_model=list[CauseBuyerResponse])
async def get_cause_buyers(
    cause_id: str, service: ChallengeService = Depends(get_challenge_service),
):
    return await service.list_cause_buyers(cause_id)
