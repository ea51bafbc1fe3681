"""API package for URL Redirect Service."""

from .handler import (
    RedirectHandler,
    map_handler,
    yaml_handler,
    json_handler,
    file_handler,
)
from .routes import health_router, home_router

__all__ = [
    "RedirectHandler",
    "map_handler",
    "yaml_handler",
    "json_handler",
    "file_handler",
    "health_router",
    "home_router",
]
