from dataclasses import dataclass, replace
from datetime import date
from typing import Optional, Dict, Any


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    return date.fromisoformat(value)


def _format_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass
class Account:
    """A registered player. ``xp`` is the only progression state stored."""
    username: str
    password_hash: str
    xp: int = 0
    last_login_award_date: Optional[date] = None
    last_quiz_award_date: Optional[date] = None
    avatar_image: Optional[str] = None

    def __post_init__(self):
        if self.xp < 0:
            raise ValueError("xp must be non-negative")

    def with_changes(self, **changes) -> "Account":
        """Return a copy with the given fields replaced"""
        return replace(self, **changes)

    def to_record(self) -> Dict[str, Any]:
        """Convert to the persisted record (the username is the key, not a field)"""
        return {
            "password": self.password_hash,
            "xp": self.xp,
            "lastLoginDate": _format_date(self.last_login_award_date),
            "lastQuizDate": _format_date(self.last_quiz_award_date),
            "profilePic": self.avatar_image,
        }

    @classmethod
    def from_record(cls, username: str, data: Dict[str, Any]) -> "Account":
        """Create Account from a persisted record"""
        return cls(
            username=username,
            password_hash=data["password"],
            xp=int(data.get("xp", 0)),
            last_login_award_date=_parse_date(data.get("lastLoginDate")),
            last_quiz_award_date=_parse_date(data.get("lastQuizDate")),
            avatar_image=data.get("profilePic"),
        )
