"""
Typed EditorConfig settings.

This module defines :class:`EditorSettings`, an immutable snapshot holding one
parsed value per EditorConfig property. String inputs are parsed with the
property catalog, so the model accepts exactly what ``parse_value`` accepts.
"""

from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .primitives import MAX_UINT
from .property import (
    PROPERTIES,
    Property,
    Charset,
    EndOfLine,
    Explicit,
    FinalNewline,
    IndentSize,
    IndentStyle,
    MaxLineLength,
    TabWidth,
    TrimTrailingWhitespace,
    format_value,
)


def _coerce(prop: Property[Any], v: Any) -> Any:
    """Parse a string through ``prop`` and check already-typed values."""
    if v is None:
        return None

    if isinstance(v, str):
        parsed = prop.parse_value(v)
        if parsed is None:
            raise ValueError(f"Unrecognized value for {prop.key()}: {v!r}")
        return parsed

    if prop.value_kind == "enum":
        if isinstance(v, prop):
            return v
        raise ValueError(f"Invalid {prop.key()} value: {v!r}")

    if v is Explicit.NONE:
        if prop.value_kind == "optional":
            return v
        raise ValueError(f"{prop.key()} cannot be explicitly none")

    if prop.primitive.name == "bool":
        if isinstance(v, bool):
            return v
        raise ValueError(f"Invalid {prop.key()} value: {v!r}")

    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"Invalid {prop.key()} value: {v!r}")
    if v < 0 or v > MAX_UINT:
        raise ValueError(f"{prop.key()} must be a non-negative integer, got {v}")
    return v


class EditorSettings(BaseModel):
    """
    Parsed values for the standard EditorConfig properties.

    Every field is optional; ``None`` means the property is not set.
    ``Explicit.NONE`` is only valid for ``indent_size`` (``tab``) and
    ``max_line_length`` (``off``).

    Attributes:
        indent_style: Tabs or spaces
        indent_size: Columns per indentation level, or Explicit.NONE for tab
        tab_width: Columns per tab character
        end_of_line: Line ending
        charset: Character encoding
        trim_trailing_whitespace: Whether trailing whitespace is removed
        insert_final_newline: Whether files end with a newline
        max_line_length: Maximum line length, or Explicit.NONE for off
    """

    model_config = ConfigDict(frozen=True)

    indent_style: Optional[IndentStyle] = Field(None, description="Tabs or spaces")
    indent_size: Optional[Union[int, Explicit]] = Field(None, description="Indentation width")
    tab_width: Optional[int] = Field(None, description="Tab character width")
    end_of_line: Optional[EndOfLine] = Field(None, description="Line ending")
    charset: Optional[Charset] = Field(None, description="Character encoding")
    trim_trailing_whitespace: Optional[bool] = Field(None, description="Trim trailing whitespace")
    insert_final_newline: Optional[bool] = Field(None, description="Insert final newline")
    max_line_length: Optional[Union[int, Explicit]] = Field(None, description="Maximum line length")

    @field_validator('indent_style', mode='before')
    @classmethod
    def validate_indent_style(cls, v) -> Optional[IndentStyle]:
        return _coerce(IndentStyle, v)

    @field_validator('indent_size', mode='before')
    @classmethod
    def validate_indent_size(cls, v):
        return _coerce(IndentSize, v)

    @field_validator('tab_width', mode='before')
    @classmethod
    def validate_tab_width(cls, v) -> Optional[int]:
        return _coerce(TabWidth, v)

    @field_validator('end_of_line', mode='before')
    @classmethod
    def validate_end_of_line(cls, v) -> Optional[EndOfLine]:
        return _coerce(EndOfLine, v)

    @field_validator('charset', mode='before')
    @classmethod
    def validate_charset(cls, v) -> Optional[Charset]:
        return _coerce(Charset, v)

    @field_validator('trim_trailing_whitespace', mode='before')
    @classmethod
    def validate_trim_trailing_whitespace(cls, v) -> Optional[bool]:
        return _coerce(TrimTrailingWhitespace, v)

    @field_validator('insert_final_newline', mode='before')
    @classmethod
    def validate_insert_final_newline(cls, v) -> Optional[bool]:
        return _coerce(FinalNewline, v)

    @field_validator('max_line_length', mode='before')
    @classmethod
    def validate_max_line_length(cls, v):
        return _coerce(MaxLineLength, v)

    def get(self, prop: Property[Any]) -> Any:
        """Get the value stored for a property variant."""
        return getattr(self, prop.key())

    def effective_indent_size(self) -> Optional[int]:
        """
        Get the indentation width in columns.

        ``indent_size = tab`` defers to ``tab_width``.

        Returns:
            Width in columns, or None if it cannot be determined
        """
        if self.indent_size is Explicit.NONE:
            return self.tab_width
        return self.indent_size

    def effective_tab_width(self) -> Optional[int]:
        """Get the tab width, falling back to a numeric ``indent_size``."""
        if self.tab_width is not None:
            return self.tab_width
        if isinstance(self.indent_size, int):
            return self.indent_size
        return None

    def is_empty(self) -> bool:
        """Check if no property is set."""
        return all(self.get(prop) is None for prop in PROPERTIES)

    def to_dict(self) -> Dict[str, str]:
        """Convert set properties to their canonical raw strings."""
        data = {}
        for prop in PROPERTIES:
            value = self.get(prop)
            if value is not None:
                data[prop.key()] = format_value(prop, value)
        return data

    def to_yaml(self) -> str:
        """Render set properties as YAML with a header comment."""
        lines = ["# EditorConfig properties"]
        data = self.to_dict()
        if data:
            lines.append(yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip())
        return "\n".join(lines) + "\n"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'EditorSettings':
        """Create settings from a dictionary of raw or typed values."""
        return cls(**data)

    def __str__(self) -> str:
        """String representation of the settings."""
        data = self.to_dict()
        if not data:
            return "EditorSettings(<empty>)"
        pairs = ", ".join(f"{key}={value}" for key, value in data.items())
        return f"EditorSettings({pairs})"
