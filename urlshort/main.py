"""URL Redirect Service - Main FastAPI Application.

A small path-based redirect service:
- Redirect configured paths with 302 Found
- Load redirects from settings, YAML or JSON files
- Fall back to a default FastAPI app for everything else
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp

from .core.config import Settings, settings
from .api.handler import file_handler, map_handler
from .api.routes import health_router, home_router

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting {app.title}...")
    yield
    logger.info(f"Shutting down {app.title}...")


async def general_exception_handler(request: Request, exc: Exception):
    """General exception handler."""
    logger.error(f"Unhandled Exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error", "error_code": "500"},
    )


def create_fallback_app(config: Settings) -> FastAPI:
    """Create the FastAPI app serving requests no redirect matches."""
    fallback = FastAPI(
        title=config.app_title,
        description=config.app_description,
        version=config.app_version,
        lifespan=lifespan,
    )
    fallback.add_exception_handler(Exception, general_exception_handler)
    fallback.include_router(health_router)
    fallback.include_router(home_router)
    return fallback


def create_app(config: Optional[Settings] = None) -> ASGIApp:
    """Build the redirect application.

    Inline redirects from settings wrap the fallback app, and redirects
    from the configured file wrap those, so file rules take precedence.

    Args:
        config: Settings to use. Defaults to the global settings.

    Returns:
        ASGI application.

    Raises:
        ParseError: If the redirects file is invalid.
    """
    if config is None:
        config = settings
    fallback = create_fallback_app(config)

    handler = map_handler(config.redirects, fallback)
    paths = set(handler.paths_to_urls)

    if config.redirects_file is not None:
        handler = file_handler(config.redirects_file, handler, config.redirects_format)
        paths.update(handler.paths_to_urls)

    fallback.state.redirect_count = len(paths)
    logger.info(f"Serving {len(paths)} redirects")
    return handler


# Create application
app = create_app()
