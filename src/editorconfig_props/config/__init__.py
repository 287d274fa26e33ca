"""
Settings resolution package for EditorConfig Properties.

This package turns raw property mappings into typed settings and reports
unknown keys and unrecognized values.
"""

from .resolver import (
    SettingsResolver,
    ResolveResult,
    SettingsError,
    PropertyNotSetError,
    UnrecognizedValueError,
    resolve_settings,
    validate_properties
)

__all__ = [
    'SettingsResolver',
    'ResolveResult',
    'SettingsError',
    'PropertyNotSetError',
    'UnrecognizedValueError',
    'resolve_settings',
    'validate_properties'
]
