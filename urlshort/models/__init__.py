"""Models package for URL Redirect Service."""

from .rule import PathRule

__all__ = ["PathRule"]
