"""
Strict primitive parsers for EditorConfig property values.

These accept only the canonical textual form of a value. Anything else,
including surrounding whitespace, signs, leading zeros and case variants,
is reported as ``None``.
"""

import re
from typing import Any, Callable, NamedTuple, Optional


# Largest value accepted for unsigned integer properties (64-bit unsigned).
MAX_UINT = 2 ** 64 - 1

_UINT_PATTERN = re.compile(r"0|[1-9][0-9]*")

_MAX_UINT_DIGITS = len(str(MAX_UINT))

_BOOL_LITERALS = {
    "true": True,
    "false": False,
}


def parse_uint(raw: str) -> Optional[int]:
    """
    Parse a canonical base-10 non-negative integer.

    Args:
        raw: Raw property value

    Returns:
        The integer, or None if ``raw`` is not a canonical literal
    """
    if len(raw) > _MAX_UINT_DIGITS or not _UINT_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if value > MAX_UINT:
        return None
    return value


def parse_bool(raw: str) -> Optional[bool]:
    """Parse exactly ``"true"`` or ``"false"``."""
    return _BOOL_LITERALS.get(raw)


def format_uint(value: int) -> str:
    """Render a non-negative integer in its canonical form."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if value < 0 or value > MAX_UINT:
        raise ValueError(f"Integer out of range: {value}")
    return str(value)


def format_bool(value: bool) -> str:
    """Render a boolean as ``"true"`` or ``"false"``."""
    if not isinstance(value, bool):
        raise TypeError(f"Expected bool, got {type(value).__name__}")
    return "true" if value else "false"


class Primitive(NamedTuple):
    """A strict parser paired with the formatter that inverts it."""
    name: str
    parse: Callable[[str], Optional[Any]]
    format: Callable[[Any], str]


UINT = Primitive("uint", parse_uint, format_uint)
BOOL = Primitive("bool", parse_bool, format_bool)
