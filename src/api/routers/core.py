"""Core routes for the Atelier API (root and health check)."""

from api.dependencies import get_generation_service
from api.schemas import HealthResponse, RootResponse
from fastapi import APIRouter

router = APIRouter(tags=["Core"])


@router.get(
    "/",
    response_model=RootResponse,
    summary="API root",
    description="Returns API name and version.",
)
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Atelier API", "version": "1.0.0"}


@router.get(
    "/api/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns server health status and whether a Gemini API key is configured.",
)
async def health() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "generation_configured": get_generation_service().is_configured(),
    }
