from datetime import date
from fastapi import APIRouter, Body, Depends
from typing import Optional

from ..schemas import (
    XpAwardResponse,
    QuizAnswerRequest,
    QuizAwardResponse,
    QuizQuestionResponse
)
from ...auth.dependencies import get_current_user, get_services
from ...models import Account
from ...services.award_service import AwardKind
from ...services.service_coordinator import ServiceCoordinator

router = APIRouter(tags=["xp"])


@router.post("/xp/daily-login", response_model=XpAwardResponse)
async def claim_daily_login(
    current_user: Account = Depends(get_current_user),
    services: ServiceCoordinator = Depends(get_services)
):
    """Grant the daily login XP once per calendar day"""
    result = await services.award_service.grant_if_eligible(
        current_user.username, AwardKind.DAILY_LOGIN
    )
    return XpAwardResponse(xp=result.xp, level=result.level, awarded=result.awarded)


@router.get("/quiz", response_model=QuizQuestionResponse)
async def get_daily_quiz(
    current_user: Account = Depends(get_current_user),
    services: ServiceCoordinator = Depends(get_services)
):
    """Today's quiz question; the answer stays on the server"""
    today = date.today()
    question = services.quiz_service.question_for(today)
    return QuizQuestionResponse(date=today, question=question.question, options=question.options)


@router.post("/xp/quiz", response_model=QuizAwardResponse)
async def claim_daily_quiz(
    request: Optional[QuizAnswerRequest] = Body(None),
    current_user: Account = Depends(get_current_user),
    services: ServiceCoordinator = Depends(get_services)
):
    """
    Grant the daily quiz XP once per calendar day.

    XP rewards taking part: a wrong answer still claims the award. When a
    choice is sent, whether it was right is reported back.
    """
    today = date.today()
    correct = None
    if request is not None and request.choice is not None:
        correct = services.quiz_service.check_answer(request.choice, today)

    result = await services.award_service.grant_if_eligible(
        current_user.username, AwardKind.DAILY_QUIZ, today
    )
    return QuizAwardResponse(
        xp=result.xp,
        level=result.level,
        awarded=result.awarded,
        correct=correct
    )
