"""
Typed EditorConfig properties.

A property pairs a fixed key with a rule that parses a raw string value into
a typed result. Variants are classes used as tags and are never instantiated;
callers work with them through the class-level ``key()`` and
``parse_value()`` operations described by :class:`Property`.

Three builders stamp out the variants:

- :func:`enum_property` for a closed set of literals (an ``Enum``)
- :func:`scalar_property` for a strictly parsed primitive
- :func:`optional_property` for a primitive with a sentinel meaning
  "explicitly none"

``parse_value`` returns ``None`` when a value is not recognized and never
raises, logs or falls back to a default.
"""

import re
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Optional, Protocol, Tuple, TypeVar, Union

from .primitives import BOOL, UINT, Primitive


V = TypeVar("V", covariant=True)
C = TypeVar("C", bound=type)

_KEY_PATTERN = re.compile(r"[a-z][a-z0-9_]*")

_REGISTRY: Dict[str, "Property[Any]"] = {}


class PropertyError(Exception):
    """Base class for property errors."""
    pass


class UnknownPropertyError(PropertyError, KeyError):
    """Raised when no property is registered for a key."""
    pass


class Explicit(Enum):
    """Explicit absence of a value, written with a property's sentinel string."""
    NONE = "none"


class Property(Protocol[V]):
    """
    Capability shared by every property variant.

    Attributes:
        value_kind: One of ``"enum"``, ``"scalar"`` or ``"optional"``
    """

    value_kind: ClassVar[str]

    @classmethod
    def key(cls) -> str:
        """The EditorConfig key this property is stored under."""
        ...

    @classmethod
    def parse_value(cls, raw: str) -> Optional[V]:
        """Parse a raw value, returning None if it is not recognized."""
        ...


def _register(cls: C, key: str, kind: str) -> C:
    if not _KEY_PATTERN.fullmatch(key):
        raise ValueError(f"Invalid property key: {key!r}")
    if key in _REGISTRY:
        raise ValueError(f"Property key already registered: {key!r}")

    cls.key = classmethod(lambda _cls: key)
    cls.value_kind = kind
    _REGISTRY[key] = cls
    return cls


def enum_property(key: str) -> Callable[[C], C]:
    """
    Turn an ``Enum`` into a property whose values are its member values.

    Matching is exact and case-sensitive.

    Args:
        key: EditorConfig key of the property

    Returns:
        Class decorator
    """
    def decorate(cls: C) -> C:
        if not issubclass(cls, Enum):
            raise TypeError(f"enum_property requires an Enum, got {cls.__name__}")

        def parse_value(cls, raw: str):
            for member in cls:
                if member.value == raw:
                    return member
            return None

        cls.parse_value = classmethod(parse_value)
        return _register(cls, key, "enum")

    return decorate


def scalar_property(key: str, primitive: Primitive) -> Callable[[C], C]:
    """Make a property whose value is ``primitive`` parsed strictly."""
    def decorate(cls: C) -> C:
        def parse_value(cls, raw: str):
            return primitive.parse(raw)

        cls.primitive = primitive
        cls.parse_value = classmethod(parse_value)
        return _register(cls, key, "scalar")

    return decorate


def optional_property(key: str, primitive: Primitive, sentinel: str) -> Callable[[C], C]:
    """
    Make a property whose value is ``primitive`` or :attr:`Explicit.NONE`.

    The exact ``sentinel`` string parses to ``Explicit.NONE``; every other
    string is handed to the primitive parser.

    Args:
        key: EditorConfig key of the property
        primitive: Strict parser for present values
        sentinel: Raw string meaning "explicitly none"

    Returns:
        Class decorator
    """
    if primitive.parse(sentinel) is not None:
        raise ValueError(f"Sentinel {sentinel!r} is also a valid {primitive.name} value")

    def decorate(cls: C) -> C:
        def parse_value(cls, raw: str):
            if raw == sentinel:
                return Explicit.NONE
            return primitive.parse(raw)

        cls.primitive = primitive
        cls.sentinel = sentinel
        cls.parse_value = classmethod(parse_value)
        return _register(cls, key, "optional")

    return decorate


@enum_property("indent_style")
class IndentStyle(Enum):
    """The ``indent_style`` property."""
    TABS = "tab"
    SPACES = "space"


# EditorConfig describes indent_size and tab_width as "whole numbers", while
# its wiki asks for a positive integer. The whole-number reading is used, so
# a size of 0 is accepted.

@optional_property("indent_size", UINT, sentinel="tab")
class IndentSize:
    """The ``indent_size`` property; ``tab`` means "use tab_width"."""


@scalar_property("tab_width", UINT)
class TabWidth:
    """The ``tab_width`` property."""


@enum_property("end_of_line")
class EndOfLine(Enum):
    """The ``end_of_line`` property."""
    LF = "lf"
    CRLF = "crlf"
    CR = "cr"

    @property
    def sequence(self) -> str:
        """Newline characters written for this line ending."""
        if self is EndOfLine.CRLF:
            return "\r\n"
        if self is EndOfLine.CR:
            return "\r"
        return "\n"


@enum_property("charset")
class Charset(Enum):
    """The ``charset`` property."""
    UTF8 = "utf-8"
    LATIN1 = "latin1"
    UTF16LE = "utf-16le"
    UTF16BE = "utf-16be"
    UTF8BOM = "utf-8-bom"

    @property
    def codec(self) -> str:
        """Name of the Python codec for this charset."""
        if self is Charset.UTF8BOM:
            return "utf-8-sig"
        return self.value


@scalar_property("trim_trailing_whitespace", BOOL)
class TrimTrailingWhitespace:
    """The ``trim_trailing_whitespace`` property."""


@scalar_property("insert_final_newline", BOOL)
class FinalNewline:
    """The ``insert_final_newline`` property."""


@optional_property("max_line_length", UINT, sentinel="off")
class MaxLineLength:
    """The ``max_line_length`` property."""


PROPERTIES: Tuple[Property[Any], ...] = (
    IndentStyle,
    IndentSize,
    TabWidth,
    EndOfLine,
    Charset,
    TrimTrailingWhitespace,
    FinalNewline,
    MaxLineLength,
)


def get_property(key: str) -> Property[Any]:
    """
    Look up a property variant by its exact key.

    Raises:
        UnknownPropertyError: If no property uses ``key``
    """
    try:
        return _REGISTRY[key]
    except KeyError:
        raise UnknownPropertyError(f"Unknown property: {key!r}") from None


def is_known_property(key: str) -> bool:
    """Check whether a property is registered for ``key``."""
    return key in _REGISTRY


def format_value(prop: Property[Any], value: Union[Enum, int, bool, Explicit]) -> str:
    """
    Render a parsed value back to its canonical raw string.

    This is the inverse of ``prop.parse_value``.

    Args:
        prop: Property variant the value belongs to
        value: Parsed value

    Returns:
        Canonical raw string

    Raises:
        TypeError: If ``value`` is not a value of ``prop``
    """
    if prop.value_kind == "enum":
        if not isinstance(value, prop):
            raise TypeError(f"Expected {prop.__name__} member, got {value!r}")
        return value.value

    if value is Explicit.NONE:
        if prop.value_kind != "optional":
            raise TypeError(f"{prop.__name__} has no explicit none value")
        return prop.sentinel

    return prop.primitive.format(value)


def _value_type_name(prop: Property[Any]) -> str:
    if prop.value_kind == "enum":
        return prop.__name__
    return prop.primitive.name


def describe_property(prop: Property[Any]) -> Dict[str, Any]:
    """Summarize a property variant as a plain dictionary."""
    data: Dict[str, Any] = {
        "key": prop.key(),
        "kind": prop.value_kind,
        "type": _value_type_name(prop),
    }
    if prop.value_kind == "enum":
        data["values"] = [member.value for member in prop]
    if prop.value_kind == "optional":
        data["sentinel"] = prop.sentinel
    return data
