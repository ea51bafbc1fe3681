"""Health check API routes."""

from fastapi import APIRouter, Request
from ...schemas.health import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check(request: Request) -> dict:
    """Health check endpoint.

    Args:
        request: FastAPI request object.

    Returns:
        Health status and the number of configured redirects.
    """
    return {
        "status": "healthy",
        "redirects": getattr(request.app.state, "redirect_count", 0),
    }
