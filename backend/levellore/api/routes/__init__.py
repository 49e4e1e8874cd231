from .auth import router as auth_router
from .user import router as user_router
from .xp import router as xp_router
from .chat import router as chat_router
from .leaderboard import router as leaderboard_router
from .health import router as health_router

__all__ = [
    "auth_router",
    "user_router",
    "xp_router",
    "chat_router",
    "leaderboard_router",
    "health_router"
]
