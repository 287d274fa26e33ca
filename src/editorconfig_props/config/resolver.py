"""
Resolution of raw EditorConfig properties into typed settings.

This module takes the ``key -> value`` mapping an EditorConfig reader produces
for one file and turns it into :class:`EditorSettings`. It reports unknown
keys and unrecognized values, and offers single-property lookups that tell a
missing key apart from a malformed value.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Union

from pydantic import ValidationError

from ..models.property import (
    PROPERTIES,
    Property,
    PropertyError,
    get_property,
    is_known_property,
)
from ..models.settings import EditorSettings


logger = logging.getLogger(__name__)


@dataclass
class ResolveResult:
    """
    Result of resolving a raw property mapping.

    Attributes:
        settings: The typed settings built from recognized values
        warnings: List of non-fatal warnings
        unrecognized: Known keys whose values could not be parsed, with the raw value
        unknown_keys: Keys that do not name a known property
    """
    settings: EditorSettings
    warnings: List[str] = field(default_factory=list)
    unrecognized: Dict[str, str] = field(default_factory=dict)
    unknown_keys: List[str] = field(default_factory=list)


class SettingsError(PropertyError):
    """Raised when a property mapping cannot be resolved."""
    pass


class PropertyNotSetError(PropertyError, KeyError):
    """Raised when a property is absent from a raw mapping."""
    pass


class UnrecognizedValueError(PropertyError, ValueError):
    """
    Raised when a property is present but its value is not recognized.

    Attributes:
        key: The property key
        raw: The raw value that failed to parse
    """

    def __init__(self, key: str, raw: str):
        self.key = key
        self.raw = raw
        super().__init__(f"Unrecognized value for {key}: {raw!r}")


class SettingsResolver:
    """
    Resolver from raw property mappings to :class:`EditorSettings`.

    Values are matched exactly as given; keys and values are not lowercased
    or trimmed.
    """

    def __init__(self, strict_mode: bool = False):
        """
        Initialize the resolver.

        Args:
            strict_mode: If True, treat warnings as errors
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def resolve(self, raw: Mapping[str, str]) -> ResolveResult:
        """
        Parse every known property present in ``raw``.

        Args:
            raw: Raw property values keyed by property name

        Returns:
            ResolveResult containing the settings and what was skipped

        Raises:
            SettingsError: If a value is not a string, or on warnings in strict mode
        """
        self._check_mapping(raw)

        values: Dict[str, Any] = {}
        unrecognized: Dict[str, str] = {}
        unknown_keys: List[str] = []
        warnings: List[str] = []

        for key, value in raw.items():
            if not is_known_property(key):
                unknown_keys.append(key)
                self.logger.debug(f"Ignoring unknown property: {key}")
                continue

            parsed = get_property(key).parse_value(value)
            if parsed is None:
                unrecognized[key] = value
                warnings.append(f"Unrecognized value for {key}: {value!r}")
                self.logger.warning(f"Unrecognized value for {key}: {value!r}")
                continue

            values[key] = parsed

        if self.strict_mode and warnings:
            raise SettingsError(f"Property warnings in strict mode: {'; '.join(warnings)}")

        try:
            settings = EditorSettings(**values)
        except ValidationError as e:
            raise SettingsError(f"Failed to build settings: {e}") from e

        self.logger.info(
            f"Resolved {len(values)} properties "
            f"({len(unrecognized)} unrecognized, {len(unknown_keys)} unknown)"
        )

        return ResolveResult(
            settings=settings,
            warnings=warnings,
            unrecognized=unrecognized,
            unknown_keys=unknown_keys,
        )

    def _check_mapping(self, raw: Mapping[str, str]) -> None:
        """
        Ensure every key and value in ``raw`` is a string.

        Raises:
            SettingsError: If a key or value has another type
        """
        if not isinstance(raw, Mapping):
            raise SettingsError(f"Properties must be a mapping, got {type(raw).__name__}")

        for key, value in raw.items():
            if not isinstance(key, str):
                raise SettingsError(f"Property key must be a string, got {type(key).__name__}")
            if not isinstance(value, str):
                raise SettingsError(
                    f"Value for {key} must be a string, got {type(value).__name__}"
                )

    def get(self, raw: Mapping[str, str], prop: Union[Property[Any], str]) -> Any:
        """
        Look up and parse a single property.

        Args:
            raw: Raw property values keyed by property name
            prop: Property variant or its key

        Returns:
            The parsed value

        Raises:
            UnknownPropertyError: If ``prop`` is a key with no property
            PropertyNotSetError: If the key is absent from ``raw``
            UnrecognizedValueError: If the value is present but not recognized
        """
        if isinstance(prop, str):
            prop = get_property(prop)

        key = prop.key()
        if key not in raw:
            raise PropertyNotSetError(f"Property not set: {key}")

        value = raw[key]
        parsed = prop.parse_value(value)
        if parsed is None:
            raise UnrecognizedValueError(key, value)
        return parsed

    def get_or(self, raw: Mapping[str, str], prop: Union[Property[Any], str], default: Any = None) -> Any:
        """Look up a single property, returning ``default`` if it is missing or malformed."""
        try:
            return self.get(raw, prop)
        except (PropertyNotSetError, UnrecognizedValueError):
            return default

    def validate_properties(self, raw: Mapping[str, str]) -> List[str]:
        """
        Validate a raw mapping without building settings.

        Args:
            raw: Raw property values keyed by property name

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        try:
            self._check_mapping(raw)
        except SettingsError as e:
            errors.append(str(e))
            return errors

        for prop in PROPERTIES:
            key = prop.key()
            if key in raw and prop.parse_value(raw[key]) is None:
                errors.append(f"Unrecognized value for {key}: {raw[key]!r}")

        return errors


def resolve_settings(raw: Mapping[str, str], strict_mode: bool = False) -> ResolveResult:
    """
    Convenience function to resolve a raw property mapping.

    Args:
        raw: Raw property values keyed by property name
        strict_mode: Whether to treat warnings as errors

    Returns:
        ResolveResult containing the parsed settings

    Raises:
        SettingsError: If the mapping cannot be resolved
    """
    resolver = SettingsResolver(strict_mode=strict_mode)
    return resolver.resolve(raw)


def validate_properties(raw: Mapping[str, str]) -> List[str]:
    """Convenience function to validate a raw property mapping."""
    resolver = SettingsResolver()
    return resolver.validate_properties(raw)
