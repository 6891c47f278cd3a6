"""User Routes: registration, lookup, self-service profile edits and per-user activity.

Invariants:
    - /me routes act only on the X-User-Id caller
    - /me paths are declared before /{user_id} so they are never captured as an id
"""

from fastapi import APIRouter, Depends, Query, Response, status

from stridefund.api.dependencies import (
    get_campaign_service, get_challenge_service, get_current_user_id,
    get_user_service,
)
from stridefund.config import get_settings
from stridefund.core.domain_types import SponsorTarget
from stridefund.schemas.challenge import ChallengeResponse, RunnerResponse
from stridefund.schemas.sponsorship import (
    SponsorPledgesResponse, SponsorshipResponse,
)
from stridefund.schemas.user import UserCreate, UserResponse, UserUpdate
from stridefund.services.campaign_service import CampaignService
from stridefund.services.challenge_service import ChallengeService
from stridefund.services.user_service import UserService

router = APIRouter(prefix="/api/v1/users", tags=["users"])
_settings = get_settings()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    body: UserCreate, users: UserService = Depends(get_user_service),
):
    """Register a profile for a gateway-authenticated user."""
    return await users.create_user(
        body.email, body.username, body.full_name, body.bio,
    )


@router.get("")
async def list_users(
    q: str | None = Query(None, max_length=100),
    limit: int = Query(_settings.default_page_size, ge=1, le=_settings.max_page_size),
    offset: int = Query(0, ge=0),
    users: UserService = Depends(get_user_service),
):
    """List users newest first, or search by username, name or email."""
    rows = (
        await users.search_users(q, limit, offset) if q is not None
        else await users.list_users(limit, offset)
    )
    return {
        "users": [UserResponse.model_validate(u) for u in rows],
        "pagination": {"limit": limit, "offset": offset},
    }


@router.get("/me", response_model=UserResponse)
async def get_me(
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service),
):
    return await users.get_user(user_id)


@router.patch("/me", response_model=UserResponse)
async def update_me(
    body: UserUpdate,
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service),
):
    return await users.update_user(user_id, **body.model_dump(exclude_unset=True))


@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_me(
    user_id: str = Depends(get_current_user_id),
    users: UserService = Depends(get_user_service),
):
    await users.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me/sponsorships", response_model=SponsorPledgesResponse)
async def get_my_sponsorships(
    user_id: str = Depends(get_current_user_id),
    service: ChallengeService = Depends(get_challenge_service),
    campaigns: CampaignService = Depends(get_campaign_service),
):
    """Every pledge the caller made, grouped by target."""
    pledges = {
        **await service.list_sponsorships_by_sponsor(user_id),
        **await campaigns.list_sponsorships_by_sponsor(user_id),
    }
    return SponsorPledgesResponse(**{
        field: [SponsorshipResponse.model_validate(p) for p in pledges[target]]
        for field, target in (
            ("challenges", SponsorTarget.CHALLENGE),
            ("causes", SponsorTarget.CAUSE),
            ("campaigns", SponsorTarget.CAMPAIGN),
        )
    })


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str, users: UserService = Depends(get_user_service),
):
    return await users.get_user(user_id)


@router.get("/{user_id}/challenges", response_model=list[ChallengeResponse])
async def get_user_challenges(
    user_id: str, service: ChallengeService = Depends(get_challenge_service),
):
    """Challenges owned by the user, newest first."""
    return await service.get_challenges_by_owner(user_id)


@router.get("/{user_id}/activities", response_model=list[RunnerResponse])
async def get_user_activities(
    user_id: str, service: ChallengeService = Depends(get_challenge_service),
):
    """Every runner the user recorded, across all causes, oldest first."""
    return await service.get_runners_by_user(user_id)
