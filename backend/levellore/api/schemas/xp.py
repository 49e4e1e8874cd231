from pydantic import BaseModel, Field
from typing import List, Optional
import datetime


class XpAwardResponse(BaseModel):
    """XP state after a daily award attempt"""
    xp: int
    level: int
    awarded: bool = Field(..., description="False when today's award was already claimed")


class QuizAnswerRequest(BaseModel):
    """Optional answer submitted with the quiz award claim"""
    choice: Optional[int] = Field(None, description="Index of the chosen option")


class QuizAwardResponse(XpAwardResponse):
    correct: Optional[bool] = Field(None, description="Whether the choice was right; null when none was sent")


class QuizQuestionResponse(BaseModel):
    """Today's quiz question without its answer"""
    date: datetime.date
    question: str
    options: List[str]
