from fastapi import APIRouter, Depends
from typing import Optional

from ..schemas import CredentialsRequest, LoginResponse, MessageResponse
from ...auth.dependencies import get_bearer_token, get_services
from ...services.service_coordinator import ServiceCoordinator

router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=MessageResponse)
async def register_user(
    request: CredentialsRequest,
    services: ServiceCoordinator = Depends(get_services)
):
    """Register a new user account"""
    await services.auth_service.register(request.username, request.password)
    return MessageResponse(message="Account created successfully.")


@router.post("/login", response_model=LoginResponse)
async def login_user(
    request: CredentialsRequest,
    services: ServiceCoordinator = Depends(get_services)
):
    """Exchange username and password for a bearer token"""
    token = await services.auth_service.authenticate(request.username, request.password)
    return LoginResponse(token=token)


@router.post("/logout", response_model=MessageResponse)
async def logout_user(
    token: Optional[str] = Depends(get_bearer_token),
    services: ServiceCoordinator = Depends(get_services)
):
    """End the session on the server; unknown tokens are ignored"""
    services.auth_service.logout(token)
    return MessageResponse(message="Logout successful")
