"""
Shared utilities for coercing raw argument strings into primitive values.

The rules are deliberately strict: integers are plain base-10 literals and
booleans accept only the canonical literal set.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_int(raw: str) -> int:
    """Parse a base-10 integer with an optional sign.

    Whitespace, underscores and non-ASCII digits are rejected, which
    ``int()`` on its own would accept.

    Raises:
        ValueError: If ``raw`` is not a base-10 integer literal.
    """
    if not _INT_PATTERN.fullmatch(raw):
        raise ValueError(f"invalid syntax: {raw!r}")
    return int(raw)


def parse_bool(raw: str) -> bool:
    """Parse a canonical boolean literal.

    Raises:
        ValueError: If ``raw`` is not one of the accepted literals.
    """
    if raw in TRUE_LITERALS:
        return True
    if raw in FALSE_LITERALS:
        return False
    raise ValueError(f"invalid syntax: {raw!r}")


def _identity(raw: str) -> str:
    return raw


_COERCERS: dict[type, Callable[[str], Any]] = {
    str: _identity,
    int: parse_int,
    bool: parse_bool,
}


def get_coercer(field_type: Any) -> Callable[[str], Any] | None:
    """Return the coercion function for ``field_type`` or None if unsupported."""
    # Exact lookup only: bool subclasses int and must not fall through to it
    if not isinstance(field_type, type):
        return None
    return _COERCERS.get(field_type)
