"""Response schemas for URL Redirect Service."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    redirects: int
