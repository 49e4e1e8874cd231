from .auth import (
    CredentialsRequest,
    LoginResponse,
    MessageResponse
)
from .user import (
    UserProfileResponse,
    AvatarRequest,
    AvatarResponse
)
from .xp import (
    XpAwardResponse,
    QuizAnswerRequest,
    QuizAwardResponse,
    QuizQuestionResponse
)
from .chat import (
    ChatPostRequest,
    ChatMessageResponse,
    ChatPostResponse
)
from .leaderboard import LeaderboardEntryResponse
from .common import (
    HealthResponse
)

__all__ = [
    # Auth schemas
    "CredentialsRequest",
    "LoginResponse",
    "MessageResponse",

    # User schemas
    "UserProfileResponse",
    "AvatarRequest",
    "AvatarResponse",

    # XP and quiz schemas
    "XpAwardResponse",
    "QuizAnswerRequest",
    "QuizAwardResponse",
    "QuizQuestionResponse",

    # Chat schemas
    "ChatPostRequest",
    "ChatMessageResponse",
    "ChatPostResponse",

    # Leaderboard schemas
    "LeaderboardEntryResponse",

    # Common schemas
    "HealthResponse"
]
