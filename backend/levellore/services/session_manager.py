import secrets
from datetime import datetime, timedelta
from typing import Optional, Dict
from dataclasses import dataclass


@dataclass
class UserSession:
    """User session data structure"""
    token: str
    username: str
    issued_at: datetime
    last_activity: datetime
    expires_at: Optional[datetime] = None


class SessionManager:
    """In-memory bearer token registry; sessions live as long as the process"""

    def __init__(self, session_duration_hours: Optional[int] = None):
        self.active_sessions: Dict[str, UserSession] = {}
        self.session_duration = (
            timedelta(hours=session_duration_hours) if session_duration_hours else None
        )

    def create_session(self, username: str) -> str:
        """Create new session and return its token"""
        token = secrets.token_urlsafe(32)
        now = datetime.now()

        session = UserSession(
            token=token,
            username=username,
            issued_at=now,
            last_activity=now,
            expires_at=now + self.session_duration if self.session_duration else None
        )

        self.active_sessions[token] = session
        return token

    def get_session(self, token: str) -> Optional[UserSession]:
        """Get active session by token"""
        session = self.active_sessions.get(token)

        if not session:
            return None

        # Check if session has expired
        if session.expires_at and datetime.now() > session.expires_at:
            self.end_session(token)
            return None

        session.last_activity = datetime.now()
        return session

    def resolve(self, token: Optional[str]) -> Optional[str]:
        """Map a bearer token to its username, or None"""
        if not token:
            return None
        session = self.get_session(token)
        return session.username if session else None

    def end_session(self, token: str) -> bool:
        """End a specific session"""
        return self.active_sessions.pop(token, None) is not None

    def cleanup_expired_sessions(self) -> int:
        """Remove expired sessions"""
        now = datetime.now()
        expired = [
            token for token, session in self.active_sessions.items()
            if session.expires_at and now > session.expires_at
        ]
        for token in expired:
            self.end_session(token)
        return len(expired)

    def active_count(self) -> int:
        """Get count of active sessions"""
        self.cleanup_expired_sessions()
        return len(self.active_sessions)
