"""API routes served by the fallback application."""

from .health import router as health_router
from .home import router as home_router

__all__ = ["health_router", "home_router"]
