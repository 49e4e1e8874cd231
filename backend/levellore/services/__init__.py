from .leveling import LevelInfo, compute_level, cumulative_xp_for_level, BASE_XP
from .session_manager import SessionManager, UserSession
from .award_service import AwardService, AwardKind, AwardResult
from .auth_service import AuthenticationService, Profile, DEFAULT_AVATAR
from .chat_service import ChatService
from .leaderboard_service import LeaderboardService, LeaderboardEntry
from .quiz_service import QuizService, QuizQuestion
from .service_coordinator import ServiceCoordinator

__all__ = [
    "LevelInfo",
    "compute_level",
    "cumulative_xp_for_level",
    "BASE_XP",
    "SessionManager",
    "UserSession",
    "AwardService",
    "AwardKind",
    "AwardResult",
    "AuthenticationService",
    "Profile",
    "DEFAULT_AVATAR",
    "ChatService",
    "LeaderboardService",
    "LeaderboardEntry",
    "QuizService",
    "QuizQuestion",
    "ServiceCoordinator",
]
