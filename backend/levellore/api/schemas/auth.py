from pydantic import BaseModel, Field
from typing import Optional


class CredentialsRequest(BaseModel):
    """Request model for registration and login"""
    username: Optional[str] = Field(None, description="Case-sensitive username")
    password: Optional[str] = Field(None, description="Plain-text password, only ever hashed")

    class Config:
        json_schema_extra = {
            "example": {
                "username": "sandy",
                "password": "karate-chop"
            }
        }


class LoginResponse(BaseModel):
    """Response model for successful login"""
    token: str = Field(..., description="Bearer token for the Authorization header")


class MessageResponse(BaseModel):
    """Plain confirmation message"""
    message: str
