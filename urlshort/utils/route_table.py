"""Route table construction."""

from types import MappingProxyType
from typing import Iterable, Mapping

from ..models.rule import PathRule


def build_route_table(rules: Iterable[PathRule]) -> Mapping[str, str]:
    """Fold rules into a read-only path -> destination mapping.

    Rules are applied in order, so a later rule overwrites an earlier one
    with the same path.

    Args:
        rules: Parsed redirect rules.

    Returns:
        Read-only mapping of request path to destination URL.
    """
    table: dict[str, str] = {}
    for rule in rules:
        table[rule.path] = rule.destination
    return MappingProxyType(table)
