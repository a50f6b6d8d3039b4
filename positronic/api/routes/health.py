"""
Health Routes
=============

FastAPI routes for health check endpoints.
"""

from fastapi import APIRouter, Request

from positronic.models.schemas import HealthStatus

router = APIRouter(prefix="/api/v1", tags=["Health"])


@router.get("/health", response_model=HealthStatus)
async def health_check(request: Request) -> HealthStatus:
    """Basic health check endpoint."""
    settings = request.app.state.settings
    return HealthStatus(status="healthy", version=settings.app_version, app_name=settings.app_name)
