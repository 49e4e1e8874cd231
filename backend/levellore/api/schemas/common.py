from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = "healthy"
    service: str = "levellore-api"
    version: str = "0.1.0"
    timestamp: str
    store: str = "connected"
