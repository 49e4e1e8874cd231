from pydantic import BaseModel, Field
from typing import Optional
from datetime import date


class UserProfileResponse(BaseModel):
    """Current user's profile with level derived from XP"""
    username: str
    xp: int
    level: int
    last_login_date: Optional[date] = Field(None, alias="lastLoginDate")
    last_quiz_date: Optional[date] = Field(None, alias="lastQuizDate")
    profile_pic: str = Field(..., alias="profilePic")
    xp_into_level: int = Field(..., alias="xpIntoLevel")
    xp_to_next_level: int = Field(..., alias="xpToNextLevel")
    progress_percent: float = Field(..., alias="progressPercent", description="Progress through the current level, 0-100")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "username": "sandy",
                "xp": 250,
                "level": 2,
                "lastLoginDate": "2024-05-01",
                "lastQuizDate": None,
                "profilePic": "data:image/png;base64,...",
                "xpIntoLevel": 150,
                "xpToNextLevel": 200,
                "progressPercent": 75.0
            }
        }


class AvatarRequest(BaseModel):
    """Request model for uploading a profile picture"""
    image: Optional[str] = Field(None, description="Image as a base64 data URI")


class AvatarResponse(BaseModel):
    profile_pic: str = Field(..., alias="profilePic")

    class Config:
        populate_by_name = True
