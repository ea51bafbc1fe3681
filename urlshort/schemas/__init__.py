"""Schemas package for URL Redirect Service."""

from .health import HealthResponse

__all__ = ["HealthResponse"]
