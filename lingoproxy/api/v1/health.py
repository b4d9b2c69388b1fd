"""Health check endpoint."""

from fastapi import APIRouter

from lingoproxy import __version__
from lingoproxy.core.config import settings
from lingoproxy.schemas.translate import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.app_env,
    )
