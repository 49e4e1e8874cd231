from pydantic import BaseModel, Field
from typing import Optional


class ChatPostRequest(BaseModel):
    """Request model for posting a chat message"""
    text: Optional[str] = Field(None, description="Message text, trimmed before storing")


class ChatMessageResponse(BaseModel):
    id: str
    username: str = Field(..., description="Author at the time of sending")
    text: str
    timestamp: int = Field(..., description="Milliseconds since epoch")

    class Config:
        json_schema_extra = {
            "example": {
                "id": "0f8fad5bd9cb469fa16570867728950e",
                "username": "sandy",
                "text": "Hi-yah!",
                "timestamp": 1714550400000
            }
        }


class ChatPostResponse(BaseModel):
    message: str = "Sent"
    data: ChatMessageResponse
