"""Utils package for URL Redirect Service."""

from .parser import (
    ParseError,
    parse_yaml,
    parse_json,
    parse_rules,
    detect_format,
)
from .route_table import build_route_table

__all__ = [
    "ParseError",
    "parse_yaml",
    "parse_json",
    "parse_rules",
    "detect_format",
    "build_route_table",
]
