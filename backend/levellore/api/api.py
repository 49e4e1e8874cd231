from fastapi import APIRouter

from .routes import (
    auth_router,
    user_router,
    xp_router,
    chat_router,
    leaderboard_router,
    health_router
)


def build_api_router(prefix: str) -> APIRouter:
    """Create the main API router under ``prefix``"""
    api_router = APIRouter(prefix=prefix)

    # Include all route modules
    api_router.include_router(auth_router)
    api_router.include_router(user_router)
    api_router.include_router(xp_router)
    api_router.include_router(chat_router)
    api_router.include_router(leaderboard_router)
    api_router.include_router(health_router)

    return api_router
