from fastapi import APIRouter, Depends
from datetime import datetime

from ..schemas import HealthResponse
from ...auth.dependencies import get_services
from ...services.service_coordinator import ServiceCoordinator

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(services: ServiceCoordinator = Depends(get_services)):
    """Health check endpoint"""
    status = await services.get_status()
    store_status = "connected" if status["store_reachable"] else "disconnected"

    return HealthResponse(
        status="healthy" if store_status == "connected" else "unhealthy",
        service="levellore-api",
        version=services.settings.VERSION,
        timestamp=datetime.now().isoformat(),
        store=store_status
    )
