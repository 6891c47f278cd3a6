"""Challenge Routes: CRUD, search, membership, pledges and the global leaderboard.

Invariants:
    - Static paths (/search, /leaderboard, /slug, /sponsor, /sponsors) are
      declared before /{challenge_id}
    - Writes require the X-User-Id caller; reads are public
"""

from fastapi import APIRouter, Depends, Query, Response, status

from stridefund.api.dependencies import (
    get_challenge_service, get_current_user_id, get_user_service,
)
from stridefund.api.leaderboard import build_leaderboard
from stridefund.config import get_settings
from stridefund.schemas.challenge import (
    CauseResponse, ChallengeCreate, ChallengeResponse, ChallengeUpdate,
    LeaderboardEntry, MembershipResponse,
)
from stridefund.schemas.sponsorship import (
    SponsorChallengeRequest, SponsorshipResponse, SponsorshipUpdate,
)
from stridefund.services.challenge_service import ChallengeService
from stridefund.services.user_service import UserService

router = APIRouter(prefix="/api/v1/challenges", tags=["challenges"])
_settings = get_settings()


@router.post("", response_model=ChallengeResponse, status_code=status.HTTP_201_CREATED)
async def create_challenge(
    body: ChallengeCreate,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    return await service.create_challenge(user_id, **body.model_dump())


@router.get("")
async def list_challenges(
    limit: int = Query(_settings.default_page_size, ge=1, le=_settings.max_page_size),
    offset: int = Query(0, ge=0),
    service: ChallengeService = Depends(get_challenge_service),
):
    """List challenges newest first."""
    rows = await service.list_challenges(limit, offset)
    return {
        "challenges": [ChallengeResponse.model_validate(c) for c in rows],
        "pagination": {"limit": limit, "offset": offset},
    }


@router.get("/search")
async def search_challenges(
    q: str = Query(min_length=1, max_length=100),
    limit: int = Query(_settings.default_page_size, ge=1, le=_settings.max_page_size),
    offset: int = Query(0, ge=0),
    service: ChallengeService = Depends(get_challenge_service),
):
    """Case-insensitive match on name, description or location."""
    rows = await service.search_challenges(q, limit, offset)
    return {
        "challenges": [ChallengeResponse.model_validate(c) for c in rows],
        "pagination": {"limit": limit, "offset": offset},
    }


@router.get("/leaderboard", response_model=list[LeaderboardEntry])
async def get_leaderboard(
    limit: int = Query(_settings.leaderboard_size, ge=1, le=_settings.max_page_size),
    service: ChallengeService = Depends(get_challenge_service),
    users: UserService = Depends(get_user_service),
):
    """Best finished run per user across all causes."""
    runners = await service.get_leaderboard()
    return await build_leaderboard(runners, users, limit)


@router.get("/slug/{slug}", response_model=ChallengeResponse)
async def get_challenge_by_slug(
    slug: str, service: ChallengeService = Depends(get_challenge_service),
):
    return await service.get_challenge_by_slug(slug)


@router.post("/sponsor", response_model=SponsorshipResponse, status_code=status.HTTP_201_CREATED)
async def sponsor_challenge(
    body: SponsorChallengeRequest,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    return await service.sponsor_challenge(user_id, **body.model_dump())


@router.patch("/sponsors/{sponsorship_id}", response_model=SponsorshipResponse)
async def update_challenge_sponsorship(
    sponsorship_id: str,
    body: SponsorshipUpdate,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    """Change a pledge; total_amount is recomputed."""
    return await service.update_challenge_sponsorship(
        sponsorship_id, user_id, **body.model_dump(exclude_unset=True),
    )


@router.get("/{challenge_id}", response_model=ChallengeResponse)
async def get_challenge(
    challenge_id: str, service: ChallengeService = Depends(get_challenge_service),
):
    return await service.get_challenge_by_id(challenge_id)


@router.patch("/{challenge_id}", response_model=ChallengeResponse)
async def update_challenge(
    challenge_id: str,
    body: ChallengeUpdate,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    return await service.update_challenge(
        challenge_id, user_id, **body.model_dump(exclude_unset=True),
    )


@router.delete("/{challenge_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_challenge(
    challenge_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    await service.delete_challenge(challenge_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{challenge_id}/causes", response_model=list[CauseResponse])
async def get_challenge_causes(
    challenge_id: str, service: ChallengeService = Depends(get_challenge_service),
):
    return await service.get_causes_by_challenge(challenge_id)


@router.get("/{challenge_id}/sponsors", response_model=list[SponsorshipResponse])
async def get_challenge_sponsors(
    challenge_id: str, service: ChallengeService = Depends(get_challenge_service),
):
    return await service.list_challenge_sponsors(challenge_id)


@router.post(
    "/{challenge_id}/join", response_model=MembershipResponse,
    status_code=status.HTTP_201_CREATED,
)
async def join_challenge(
    challenge_id: str,
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
):
    member = await service.join_challenge(challenge_id, user_id)
    return MembershipResponse(
        id=member.id, target_id=member.challenge_id,
        user_id=member.user_id, created_at=member.created_at,
    )
