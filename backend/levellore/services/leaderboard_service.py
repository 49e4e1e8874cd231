from dataclasses import dataclass
from typing import List

from .auth_service import DEFAULT_AVATAR
from .leveling import compute_level
from ..db import Store


@dataclass(frozen=True)
class LeaderboardEntry:
    username: str
    level: int
    xp: int
    avatar_image: str


class LeaderboardService:
    """Read-only ranking of every account"""

    def __init__(self, store: Store):
        self.store = store

    async def list_top(self) -> List[LeaderboardEntry]:
        """All accounts by XP, highest first; equal XP falls back to username order"""
        accounts = await self.store.list_accounts()
        ranked = sorted(accounts, key=lambda a: (-a.xp, a.username))
        return [
            LeaderboardEntry(
                username=account.username,
                level=compute_level(account.xp).level,
                xp=account.xp,
                avatar_image=account.avatar_image or DEFAULT_AVATAR
            )
            for account in ranked
        ]
