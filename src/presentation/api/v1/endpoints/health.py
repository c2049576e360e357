"""Health check endpoint."""

from fastapi import APIRouter, Request

from presentation.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Health check endpoint.

    Returns service status and version information.
    """
    settings = request.app.state.settings

    return HealthResponse(
        status="healthy",
        version=settings.app_version,
    )
