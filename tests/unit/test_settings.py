"""
Unit tests for the EditorSettings model.

Tests parsing of raw strings through the property catalog, typed value
checks, EditorConfig fallbacks and serialization.
"""

import pytest
import yaml
from pydantic import ValidationError

from editorconfig_props.models.property import (
    Charset,
    EndOfLine,
    Explicit,
    IndentSize,
    IndentStyle,
    MaxLineLength,
    TabWidth,
)
from editorconfig_props.models.settings import EditorSettings


class TestEditorSettings:
    """Test cases for EditorSettings."""

    def test_default_settings(self):
        """Test that no property is set by default."""
        settings = EditorSettings()

        assert settings.indent_style is None
        assert settings.indent_size is None
        assert settings.max_line_length is None
        assert settings.is_empty()
        assert settings.to_dict() == {}

    def test_string_conversion(self):
        """Test conversion of raw strings to typed values."""
        settings = EditorSettings(
            indent_style="space",
            indent_size="2",
            tab_width="8",
            end_of_line="crlf",
            charset="utf-8-bom",
            trim_trailing_whitespace="true",
            insert_final_newline="false",
            max_line_length="100",
        )

        assert settings.indent_style is IndentStyle.SPACES
        assert settings.indent_size == 2
        assert settings.tab_width == 8
        assert settings.end_of_line is EndOfLine.CRLF
        assert settings.charset is Charset.UTF8BOM
        assert settings.trim_trailing_whitespace is True
        assert settings.insert_final_newline is False
        assert settings.max_line_length == 100
        assert not settings.is_empty()

    def test_sentinels(self):
        """Test that sentinel strings become Explicit.NONE."""
        settings = EditorSettings(indent_size="tab", max_line_length="off")

        assert settings.indent_size is Explicit.NONE
        assert settings.max_line_length is Explicit.NONE

    def test_typed_values(self):
        """Test that already-typed values are accepted."""
        settings = EditorSettings(
            indent_style=IndentStyle.TABS,
            indent_size=Explicit.NONE,
            tab_width=0,
            trim_trailing_whitespace=False,
        )

        assert settings.indent_style is IndentStyle.TABS
        assert settings.indent_size is Explicit.NONE
        assert settings.tab_width == 0
        assert settings.trim_trailing_whitespace is False

    @pytest.mark.parametrize("field,value", [
        ("indent_style", "Tab"),
        ("indent_size", "two"),
        ("tab_width", "-1"),
        ("tab_width", " 4"),
        ("end_of_line", "lfs"),
        ("charset", "UTF-8"),
        ("trim_trailing_whitespace", "True"),
        ("insert_final_newline", "yes"),
        ("max_line_length", "Off"),
    ])
    def test_unrecognized_strings(self, field, value):
        """Test that unrecognized raw strings fail validation."""
        with pytest.raises(ValidationError, match="Unrecognized value"):
            EditorSettings(**{field: value})

    @pytest.mark.parametrize("field,value", [
        ("tab_width", -1),
        ("tab_width", True),
        ("tab_width", Explicit.NONE),
        ("indent_style", EndOfLine.LF),
        ("trim_trailing_whitespace", 1),
        ("max_line_length", 80.0),
    ])
    def test_invalid_typed_values(self, field, value):
        """Test that typed values of the wrong kind fail validation."""
        with pytest.raises(ValidationError):
            EditorSettings(**{field: value})

    def test_frozen(self):
        """Test that settings cannot be modified."""
        settings = EditorSettings(tab_width="4")

        with pytest.raises(ValidationError):
            settings.tab_width = 8

    def test_get(self):
        """Test lookup by property variant."""
        settings = EditorSettings(indent_size="tab", tab_width="4")

        assert settings.get(IndentSize) is Explicit.NONE
        assert settings.get(TabWidth) == 4
        assert settings.get(MaxLineLength) is None

    def test_from_dict(self):
        """Test creation from a dictionary."""
        settings = EditorSettings.from_dict({'end_of_line': 'lf', 'charset': 'latin1'})

        assert settings.end_of_line is EndOfLine.LF
        assert settings.charset is Charset.LATIN1


class TestFallbacks:
    """Test cases for effective indent size and tab width."""

    def test_indent_size_tab_uses_tab_width(self):
        """Test that indent_size = tab defers to tab_width."""
        settings = EditorSettings(indent_size="tab", tab_width="8")

        assert settings.effective_indent_size() == 8
        assert settings.effective_tab_width() == 8

    def test_indent_size_tab_without_tab_width(self):
        """Test that indent_size = tab alone is undetermined."""
        settings = EditorSettings(indent_size="tab")

        assert settings.effective_indent_size() is None
        assert settings.effective_tab_width() is None

    def test_tab_width_follows_indent_size(self):
        """Test that an unset tab_width follows a numeric indent_size."""
        settings = EditorSettings(indent_size="2")

        assert settings.effective_indent_size() == 2
        assert settings.effective_tab_width() == 2

    def test_explicit_tab_width_wins(self):
        """Test that an explicit tab_width is kept."""
        settings = EditorSettings(indent_size="2", tab_width="4")

        assert settings.effective_tab_width() == 4

    def test_zero_indent_size(self):
        """Test that an indent size of 0 is kept as 0."""
        settings = EditorSettings(indent_size="0")

        assert settings.effective_indent_size() == 0
        assert settings.effective_tab_width() == 0


class TestSerialization:
    """Test cases for dictionary and YAML output."""

    def test_to_dict(self):
        """Test canonical strings in registry order."""
        settings = EditorSettings(
            max_line_length="off",
            indent_style="tab",
            insert_final_newline="true",
        )

        data = settings.to_dict()
        assert data == {
            'indent_style': 'tab',
            'insert_final_newline': 'true',
            'max_line_length': 'off',
        }
        assert list(data) == ['indent_style', 'insert_final_newline', 'max_line_length']

    def test_to_yaml(self):
        """Test YAML rendering keeps values as strings."""
        settings = EditorSettings(
            indent_size="4",
            trim_trailing_whitespace="false",
            max_line_length="off",
        )

        text = settings.to_yaml()
        assert text.startswith("# EditorConfig properties\n")
        assert yaml.safe_load(text) == settings.to_dict()

    def test_to_yaml_empty(self):
        """Test YAML rendering of empty settings."""
        assert EditorSettings().to_yaml() == "# EditorConfig properties\n"

    def test_str(self):
        """Test string representation."""
        assert str(EditorSettings()) == "EditorSettings(<empty>)"
        assert str(EditorSettings(tab_width="4")) == "EditorSettings(tab_width=4)"
