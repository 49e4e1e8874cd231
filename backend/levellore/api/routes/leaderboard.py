from fastapi import APIRouter, Depends
from typing import List

from ..schemas import LeaderboardEntryResponse
from ...auth.dependencies import get_current_user, get_services
from ...models import Account
from ...services.service_coordinator import ServiceCoordinator

router = APIRouter(tags=["leaderboard"])


@router.get("/leaderboard", response_model=List[LeaderboardEntryResponse])
async def get_leaderboard(
    current_user: Account = Depends(get_current_user),
    services: ServiceCoordinator = Depends(get_services)
):
    entries = await services.leaderboard_service.list_top()
    return [
        LeaderboardEntryResponse(
            username=entry.username,
            level=entry.level,
            xp=entry.xp,
            profile_pic=entry.avatar_image
        )
        for entry in entries
    ]
