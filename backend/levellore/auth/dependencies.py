from fastapi import Depends, HTTPException, Request, status
from typing import Optional

from ..core.exceptions import Unauthorized
from ..models import Account
from ..services.service_coordinator import ServiceCoordinator


def get_services(request: Request) -> ServiceCoordinator:
    """Service coordinator attached to the running application"""
    return request.app.state.services


def get_bearer_token(request: Request) -> Optional[str]:
    """Token from an ``Authorization: Bearer <token>`` header, if any"""
    auth_header = request.headers.get("Authorization")

    if not auth_header or not auth_header.startswith("Bearer "):
        return None

    token = auth_header[len("Bearer "):].strip()
    return token or None


async def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    services: ServiceCoordinator = Depends(get_services)
) -> Account:
    """
    Dependency that resolves the bearer token to an account.
    Use this on all protected endpoints.
    """
    try:
        return await services.auth_service.resolve_account(token)
    except Unauthorized as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
            headers={"WWW-Authenticate": "Bearer"},
        )
