"""Redirect handlers.

A redirect handler is an ASGI application that answers requests for
configured paths with a 302 redirect and hands every other request to a
fallback ASGI application unchanged.
"""

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from fastapi.responses import RedirectResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from ..utils.parser import detect_format, parse_json, parse_rules, parse_yaml
from ..utils.route_table import build_route_table

logger = logging.getLogger(__name__)


class RedirectHandler:
    """ASGI application redirecting exact path matches."""

    def __init__(self, paths_to_urls: Mapping[str, str], fallback: ASGIApp):
        self.paths_to_urls = MappingProxyType(dict(paths_to_urls))
        self.fallback = fallback

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            destination = self.paths_to_urls.get(scope["path"])
            if destination is not None:
                response = RedirectResponse(url=destination, status_code=302)
                await response(scope, receive, send)
                return

        await self.fallback(scope, receive, send)


def map_handler(paths_to_urls: Mapping[str, str], fallback: ASGIApp) -> RedirectHandler:
    """Create a handler redirecting the paths in a mapping.

    Args:
        paths_to_urls: Request path to destination URL.
        fallback: ASGI application for paths not in the mapping.

    Returns:
        Redirect handler.
    """
    return RedirectHandler(paths_to_urls, fallback)


def yaml_handler(yml: bytes, fallback: ASGIApp) -> RedirectHandler:
    """Create a handler from YAML rules.

    YAML is expected to be in the format:

        - path: /some-path
          url: https://www.some-url.com/demo

    Raises:
        ParseError: If the YAML is invalid. No handler is created.
    """
    table = build_route_table(parse_yaml(yml))
    logger.info(f"Loaded {len(table)} redirects from YAML")
    return map_handler(table, fallback)


def json_handler(jsn: bytes, fallback: ASGIApp) -> RedirectHandler:
    """Create a handler from JSON rules.

    JSON is expected to be an array of {"path": ..., "url": ...} objects.

    Raises:
        ParseError: If the JSON is invalid. No handler is created.
    """
    table = build_route_table(parse_json(jsn))
    logger.info(f"Loaded {len(table)} redirects from JSON")
    return map_handler(table, fallback)


def file_handler(
    path: Union[str, Path], fallback: ASGIApp, fmt: Optional[str] = None
) -> RedirectHandler:
    """Create a handler from a YAML or JSON rules file.

    Args:
        path: Rules file.
        fallback: ASGI application for unmatched paths.
        fmt: "yaml" or "json". Inferred from the file suffix when omitted.

    Returns:
        Redirect handler.

    Raises:
        ParseError: If the format is unknown or the file contents are invalid.
        OSError: If the file cannot be read.
    """
    fmt = fmt or detect_format(path)
    data = Path(path).read_bytes()
    table = build_route_table(parse_rules(data, fmt))
    logger.info(f"Loaded {len(table)} redirects from {path}")
    return map_handler(table, fallback)
