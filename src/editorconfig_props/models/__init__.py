"""
Data models for EditorConfig Properties.

This module contains the property catalog and the typed settings model.
"""

from .property import (
    PROPERTIES,
    Charset,
    EndOfLine,
    Explicit,
    FinalNewline,
    IndentSize,
    IndentStyle,
    MaxLineLength,
    Property,
    PropertyError,
    TabWidth,
    TrimTrailingWhitespace,
    UnknownPropertyError,
    describe_property,
    enum_property,
    format_value,
    get_property,
    is_known_property,
    optional_property,
    scalar_property,
)
from .settings import EditorSettings

__all__ = [
    'PROPERTIES',
    'Charset',
    'EditorSettings',
    'EndOfLine',
    'Explicit',
    'FinalNewline',
    'IndentSize',
    'IndentStyle',
    'MaxLineLength',
    'Property',
    'PropertyError',
    'TabWidth',
    'TrimTrailingWhitespace',
    'UnknownPropertyError',
    'describe_property',
    'enum_property',
    'format_value',
    'get_property',
    'is_known_property',
    'optional_property',
    'scalar_property',
]
