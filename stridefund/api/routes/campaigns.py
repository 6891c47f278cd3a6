"""Campaign Routes: CRUD, participation, finishing runs, leaderboard and pledges.

Invariants:
    - Static paths (/search, /by_user, /by_others, /runners, /sponsor,
      /sponsors, /slug) are declared before /{campaign_id}
    - Writes and caller-scoped listings require X-User-Id; other reads are public
    - POST /runners/{runner_id}/finish returns the runner and the refreshed
      campaign; a missing campaign yields 404 SETTLEMENT_INCOMPLETE
"""

from fastapi import APIRouter, Depends, Query, Response, status

from stridefund.api.dependencies import (
    get_campaign_service, get_current_user_id, get_user_service,
)
from stridefund.api.leaderboard import build_leaderboard
from stridefund.config import get_settings
from stridefund.schemas.campaign import (
    CampaignCreate, CampaignResponse, CampaignRunnerResponse, CampaignUpdate,
    FinishActivityRequest, FinishActivityResponse, ParticipateRequest,
    SponsorCampaignRequest,
)
from stridefund.schemas.challenge import LeaderboardEntry, MembershipResponse
from stridefund.schemas.sponsorship import SponsorshipResponse, SponsorshipUpdate
from stridefund.services.campaign_service import CampaignService
from stridefund.services.user_service import UserService

router = APIRouter(prefix="/api/v1/campaigns", tags=["campaigns"])
_settings = get_settings()


def _page(rows: list, limit: int, offset: int) -> dict:
    return {
        "campaigns": [CampaignResponse.model_validate(c) for c in rows],
        "pagination": {"limit": limit, "offset": offset},
    }


@router.post("", response_model=CampaignResponse, status_code=status.HTTP_201_CREATED)
async def create_campaign(
    body: CampaignCreate,
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.create_campaign(user_id, **body.model_dump())


@router.get("")
async def list_campaigns(
    limit: int = Query(_settings.default_page_size, ge=1, le=_settings.max_page_size),
    offset: int = Query(0, ge=0),
    service: CampaignService = Depends(get_campaign_service),
):
    """List campaigns newest first."""
    return _page(await service.list_campaigns(limit, offset), limit, offset)


@router.get("/search")
async def search_campaigns(
    q: str = Query(min_length=1, max_length=100),
    limit: int = Query(_settings.default_page_size, ge=1, le=_settings.max_page_size),
    offset: int = Query(0, ge=0),
    service: CampaignService = Depends(get_campaign_service),
):
    """Case-insensitive match on name, description or location."""
    return _page(await service.search_campaigns(q, limit, offset), limit, offset)


@router.get("/by_user", response_model=list[CampaignResponse])
async def get_my_campaigns(
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.get_campaigns_by_owner(user_id)


@router.get("/by_others")
async def get_others_campaigns(
    limit: int = Query(_settings.default_page_size, ge=1, le=_settings.max_page_size),
    offset: int = Query(0, ge=0),
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    """Campaigns the caller can join: everything not owned by them."""
    rows = await service.list_campaigns(limit, offset, exclude_owner_id=user_id)
    return _page(rows, limit, offset)


@router.get("/runners/mine", response_model=list[CampaignRunnerResponse])
async def get_my_runs(
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.get_runners_by_user(user_id)


@router.get("/runners/{runner_id}", response_model=CampaignRunnerResponse)
async def get_runner(
    runner_id: str, service: CampaignService = Depends(get_campaign_service),
):
    return await service.get_runner(runner_id)


@router.post("/runners/{runner_id}/finish", response_model=FinishActivityResponse)
async def finish_activity(
    runner_id: str,
    body: FinishActivityRequest,
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    """Add a finished run's distance and money to the runner and its campaign."""
    runner, campaign = await service.finish_activity(
        runner_id, user_id,
        distance_covered=body.distance_covered,
        duration=body.duration,
        money_raised=body.money_raised,
    )
    return FinishActivityResponse(
        runner=CampaignRunnerResponse.model_validate(runner),
        campaign=CampaignResponse.model_validate(campaign),
    )


@router.post("/sponsor", response_model=SponsorshipResponse, status_code=status.HTTP_201_CREATED)
async def sponsor_campaign(
    body: SponsorCampaignRequest,
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.sponsor_campaign(user_id, **body.model_dump())


@router.get("/sponsors/{sponsorship_id}", response_model=SponsorshipResponse)
async def get_campaign_sponsorship(
    sponsorship_id: str, service: CampaignService = Depends(get_campaign_service),
):
    return await service.get_campaign_sponsorship(sponsorship_id)


@router.patch("/sponsors/{sponsorship_id}", response_model=SponsorshipResponse)
async def update_campaign_sponsorship(
    sponsorship_id: str,
    body: SponsorshipUpdate,
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.update_campaign_sponsorship(
        sponsorship_id, user_id, **body.model_dump(exclude_unset=True),
    )


@router.delete("/sponsors/{sponsorship_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_campaign_sponsorship(
    sponsorship_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    await service.delete_campaign_sponsorship(sponsorship_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/slug/{slug}", response_model=CampaignResponse)
async def get_campaign_by_slug(
    slug: str, service: CampaignService = Depends(get_campaign_service),
):
    return await service.get_campaign_by_slug(slug)


@router.get("/slug/{slug}/leaderboard", response_model=list[LeaderboardEntry])
async def get_campaign_leaderboard(
    slug: str,
    limit: int = Query(_settings.leaderboard_size, ge=1, le=_settings.max_page_size),
    service: CampaignService = Depends(get_campaign_service),
    users: UserService = Depends(get_user_service),
):
    """Best finished run per user in this campaign."""
    runners = await service.get_campaign_leaderboard(slug)
    return await build_leaderboard(runners, users, limit)


@router.post(
    "/slug/{slug}/participate", response_model=CampaignRunnerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def participate(
    slug: str,
    body: ParticipateRequest,
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.participate(
        slug, user_id, activity=body.activity, cover_image=body.cover_image,
    )


@router.get("/{campaign_id}", response_model=CampaignResponse)
async def get_campaign(
    campaign_id: str, service: CampaignService = Depends(get_campaign_service),
):
    return await service.get_campaign_by_id(campaign_id)


@router.patch("/{campaign_id}", response_model=CampaignResponse)
async def update_campaign(
    campaign_id: str,
    body: CampaignUpdate,
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    return await service.update_campaign(
        campaign_id, user_id, **body.model_dump(exclude_unset=True),
    )


@router.delete("/{campaign_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_campaign(
    campaign_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    await service.delete_campaign(campaign_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{campaign_id}/runners", response_model=list[CampaignRunnerResponse])
async def get_campaign_runners(
    campaign_id: str, service: CampaignService = Depends(get_campaign_service),
):
    return await service.get_campaign_runners(campaign_id)


@router.get("/{campaign_id}/sponsors", response_model=list[SponsorshipResponse])
async def get_campaign_sponsors(
    campaign_id: str, service: CampaignService = Depends(get_campaign_service),
):
    return await service.list_campaign_sponsors(campaign_id)


@router.post(
    "/{campaign_id}/join", response_model=MembershipResponse,
    status_code=status.HTTP_201_CREATED,
)
async def join_campaign(
    campaign_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    member = await service.join_campaign(campaign_id, user_id)
    return MembershipResponse(
        id=member.id, target_id=member.campaign_id,
        user_id=member.user_id, created_at=member.created_at,
    )


@router.delete("/{campaign_id}/join", status_code=status.HTTP_204_NO_CONTENT)
async def leave_campaign(
    campaign_id: str,
    user_id: str = Depends(get_current_user_id),
    service: CampaignService = Depends(get_campaign_service),
):
    await service.leave_campaign(campaign_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
