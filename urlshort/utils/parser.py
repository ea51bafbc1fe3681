"""Redirect rule parsing module.

This module turns raw YAML or JSON configuration bytes into an ordered
list of PathRule objects. Both formats share one record shape:

    - path: /some-path
      url: https://www.some-url.com/demo
"""

import logging
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import TypeAdapter, ValidationError

from ..models.rule import PathRule

logger = logging.getLogger(__name__)


# Supported file suffixes and the format they imply
FORMAT_SUFFIXES = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}

_rules_adapter = TypeAdapter(Optional[list[PathRule]])


class ParseError(ValueError):
    """Raised when configuration bytes cannot be parsed into rules."""

    def __init__(self, fmt: str, reason: str):
        self.format = fmt
        self.reason = reason
        super().__init__(f"Invalid {fmt} redirect rules: {reason}")


def parse_yaml(data: bytes) -> list[PathRule]:
    """Parse a YAML sequence of path/url mappings.

    Args:
        data: Raw YAML bytes.

    Returns:
        Rules in document order.

    Raises:
        ParseError: If the YAML is malformed or an element has the wrong shape.
    """
    try:
        # BaseLoader keeps plain scalars such as "on" or "2020-01-01" as strings
        payload = yaml.load(data, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        logger.error(f"YAML parsing failed: {e}")
        raise ParseError("yaml", str(e)) from e

    try:
        return _rules_adapter.validate_python(payload) or []
    except ValidationError as e:
        logger.error(f"YAML rules validation failed: {e}")
        raise ParseError("yaml", str(e)) from e


def parse_json(data: bytes) -> list[PathRule]:
    """Parse a JSON array of path/url objects.

    Args:
        data: Raw JSON bytes.

    Returns:
        Rules in array order.

    Raises:
        ParseError: If the JSON is malformed or an element has the wrong shape.
    """
    try:
        return _rules_adapter.validate_json(data) or []
    except ValidationError as e:
        logger.error(f"JSON rules validation failed: {e}")
        raise ParseError("json", str(e)) from e


PARSERS = {
    "yaml": parse_yaml,
    "json": parse_json,
}


def parse_rules(data: bytes, fmt: str) -> list[PathRule]:
    """Parse rules using the parser registered for fmt."""
    parser = PARSERS.get(fmt)
    if parser is None:
        raise ParseError(fmt, f"unsupported format, expected one of {sorted(PARSERS)}")
    return parser(data)


def detect_format(path: Union[str, Path]) -> str:
    """Infer the rules format from a file suffix.

    Args:
        path: Rules file path.

    Returns:
        "yaml" or "json".

    Raises:
        ParseError: If the suffix is not recognised.
    """
    suffix = Path(path).suffix.lower()
    try:
        return FORMAT_SUFFIXES[suffix]
    except KeyError:
        raise ParseError(
            "unknown", f"cannot infer rules format from suffix {suffix!r} of {path}"
        ) from None
