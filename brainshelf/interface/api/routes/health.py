"""Health check routes."""

from datetime import datetime, timezone

from fastapi import APIRouter

from brainshelf.application.usecase.base import CamelModel
from brainshelf.util.di import SettingsDep

router = APIRouter(tags=["health"])


class HealthResponse(CamelModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version="1.0.0",
        git_sha=settings.git_sha,
    )
