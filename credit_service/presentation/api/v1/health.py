"""Health check endpoint for service monitoring."""

from fastapi import APIRouter
from pydantic import BaseModel

from credit_service import __version__
from credit_service.core.config import settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    version: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Reports that the credit service is up and which version is running.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(service=settings.app_name, version=__version__)
