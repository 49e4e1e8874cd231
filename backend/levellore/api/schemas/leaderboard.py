from pydantic import BaseModel, Field


class LeaderboardEntryResponse(BaseModel):
    username: str
    level: int
    xp: int
    profile_pic: str = Field(..., alias="profilePic")

    class Config:
        populate_by_name = True
