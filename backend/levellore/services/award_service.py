import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Optional

from .leveling import compute_level
from ..core.exceptions import NotFound
from ..db import Store

logger = logging.getLogger(__name__)


class AwardKind(str, Enum):
    DAILY_LOGIN = "dailyLogin"
    DAILY_QUIZ = "dailyQuiz"


# Account field holding the last day each kind was claimed
_DATE_FIELDS = {
    AwardKind.DAILY_LOGIN: "last_login_award_date",
    AwardKind.DAILY_QUIZ: "last_quiz_award_date",
}


@dataclass(frozen=True)
class AwardResult:
    xp: int
    level: int
    awarded: bool


class AwardService:
    """Grants each daily award at most once per calendar day per account"""

    def __init__(self, store: Store, amounts: Dict[AwardKind, int]):
        self.store = store
        self.amounts = dict(amounts)

    def amount_for(self, kind: AwardKind) -> int:
        return self.amounts[kind]

    async def grant_if_eligible(
        self,
        username: str,
        kind: AwardKind,
        today: Optional[date] = None
    ) -> AwardResult:
        """
        Add the award's XP unless it was already claimed on ``today``.

        ``today`` defaults to the server's local calendar date. Only the
        claim date gates the award; calling this again on the same day is a
        no-op that reports ``awarded=False``.
        """
        today = today or date.today()
        field = _DATE_FIELDS[kind]

        async with self.store.writer():
            account = await self.store.get_account(username)
            if account is None:
                raise NotFound(f"User '{username}' not found")

            if getattr(account, field) == today:
                return AwardResult(
                    xp=account.xp,
                    level=compute_level(account.xp).level,
                    awarded=False
                )

            amount = self.amount_for(kind)
            updated = account.with_changes(xp=account.xp + amount, **{field: today})
            await self.store.put_account(updated)

        logger.info(f"Granted {kind.value} award of {amount} XP to {username}")
        return AwardResult(
            xp=updated.xp,
            level=compute_level(updated.xp).level,
            awarded=True
        )
