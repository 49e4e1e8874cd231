from fastapi import APIRouter, Depends
from typing import Optional

from ..schemas import UserProfileResponse, AvatarRequest, AvatarResponse
from ...auth.dependencies import get_bearer_token, get_current_user, get_services
from ...models import Account
from ...services.service_coordinator import ServiceCoordinator

router = APIRouter(tags=["user"])


@router.get("/user", response_model=UserProfileResponse)
async def get_user(
    token: Optional[str] = Depends(get_bearer_token),
    services: ServiceCoordinator = Depends(get_services)
):
    """Current user's profile; level and progress come from the server only"""
    profile = await services.auth_service.get_profile(token)
    info = profile.level_info
    return UserProfileResponse(
        username=profile.username,
        xp=profile.xp,
        level=info.level,
        last_login_date=profile.last_login_award_date,
        last_quiz_date=profile.last_quiz_award_date,
        profile_pic=profile.avatar_image,
        xp_into_level=info.xp_into_level,
        xp_to_next_level=info.xp_to_next_level,
        progress_percent=info.progress_percent
    )


@router.post("/avatar", response_model=AvatarResponse)
async def upload_avatar(
    request: AvatarRequest,
    current_user: Account = Depends(get_current_user),
    services: ServiceCoordinator = Depends(get_services)
):
    """Replace the profile picture with a base64 image data URI"""
    image = await services.auth_service.update_avatar(current_user.username, request.image)
    return AvatarResponse(profile_pic=image)
