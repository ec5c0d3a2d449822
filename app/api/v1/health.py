"""
Health check endpoint.
Liveness/readiness probe target reporting pod identity.
"""
from fastapi import APIRouter, Depends

from app.config import AppConfig, app_config_dependency
from app.models import HealthResponse
from app.utils import current_timestamp

router = APIRouter()

@router.get("/health", response_model=HealthResponse)
async def health_check(config: AppConfig = Depends(app_config_dependency)) -> HealthResponse:
    return HealthResponse(
        status="UP",
        timestamp=current_timestamp(),
        pod_name=config.pod_name,
        namespace=config.namespace,
    )
