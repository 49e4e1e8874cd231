"""
Service coordinator to build and wire services around a single store
"""

import logging
from typing import Optional

from .auth_service import AuthenticationService
from .award_service import AwardKind, AwardService
from .chat_service import ChatService
from .leaderboard_service import LeaderboardService
from .quiz_service import QuizService
from .session_manager import SessionManager
from ..core.config import Settings
from ..db import Store, create_store

logger = logging.getLogger(__name__)


class ServiceCoordinator:
    """Owns the store and every service that depends on it"""

    def __init__(self, settings: Settings, store: Optional[Store] = None):
        self.settings = settings
        self.store = store or create_store(settings)
        self.session_manager = SessionManager(settings.SESSION_TTL_HOURS)
        self.auth_service = AuthenticationService(
            self.store,
            self.session_manager,
            bcrypt_rounds=settings.BCRYPT_ROUNDS,
            max_avatar_bytes=settings.MAX_AVATAR_BYTES
        )
        self.award_service = AwardService(self.store, {
            AwardKind.DAILY_LOGIN: settings.DAILY_LOGIN_XP,
            AwardKind.DAILY_QUIZ: settings.DAILY_QUIZ_XP,
        })
        self.chat_service = ChatService(
            self.store,
            history_limit=settings.CHAT_HISTORY_LIMIT,
            max_length=settings.CHAT_MAX_LENGTH
        )
        self.leaderboard_service = LeaderboardService(self.store)
        self.quiz_service = QuizService()
        self.initialized = False

    async def initialize(self):
        """Load the store; failures propagate so the app refuses to start on bad data"""
        if self.initialized:
            logger.info("Services already initialized")
            return

        logger.info(f"Starting services with {self.settings.STORE_BACKEND} store")
        await self.store.initialize()
        self.initialized = True
        logger.info("All services initialized successfully")

    async def cleanup(self):
        """Clean up all services"""
        await self.store.close()
        self.session_manager.active_sessions.clear()
        self.initialized = False
        logger.info("All services cleaned up")

    async def get_status(self) -> dict:
        """Get status of the store and sessions"""
        return {
            "initialized": self.initialized,
            "store_backend": self.settings.STORE_BACKEND,
            "store_reachable": await self.store.ping(),
            "active_sessions": self.session_manager.active_count(),
        }
