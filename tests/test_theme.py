"""Tests for theme parsing and resolution"""
import pytest

from markdown_render.errors import InvalidThemeError
from markdown_render.theme import (
    ThemePreference,
    color_scheme_for,
    palette_variables,
    parse_theme,
    resolve_theme,
)


class TestParseTheme:
    """Tests for parse_theme"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("light", ThemePreference.LIGHT),
            ("dark", ThemePreference.DARK),
            ("auto", ThemePreference.AUTO),
            ("DARK", ThemePreference.DARK),
            ("", ThemePreference.AUTO),
        ],
    )
    def test_valid_values(self, raw, expected):
        assert parse_theme(raw) is expected

    def test_invalid_value(self):
        with pytest.raises(InvalidThemeError, match="Invalid theme value"):
            parse_theme("sideways")

    @pytest.mark.parametrize("raw", [" dark ", "light ", " "])
    def test_surrounding_whitespace_rejected(self, raw):
        with pytest.raises(InvalidThemeError):
            parse_theme(raw)


class TestResolveTheme:
    """Tests for resolve_theme"""

    def test_light_pins_light_palette(self, geist):
        resolution = resolve_theme(ThemePreference.LIGHT, geist)

        assert resolution.color_scheme == "light"
        assert resolution.base_variables == palette_variables(geist.palette.light)
        assert resolution.override_variables is None
        assert not resolution.has_override

    def test_dark_pins_dark_palette(self, geist):
        resolution = resolve_theme(ThemePreference.DARK, geist)

        assert resolution.color_scheme == "dark"
        assert resolution.base_variables == palette_variables(geist.palette.dark)
        assert resolution.override_variables is None

    def test_auto_defaults_to_light_with_dark_override(self, geist):
        resolution = resolve_theme(ThemePreference.AUTO, geist)

        assert resolution.color_scheme == "light dark"
        assert resolution.base_variables == palette_variables(geist.palette.light)
        assert resolution.override_variables == palette_variables(geist.palette.dark)
        assert resolution.has_override

    def test_color_scheme_for(self):
        assert color_scheme_for(ThemePreference.AUTO) == "light dark"
        assert color_scheme_for(ThemePreference.LIGHT) == "light"
        assert color_scheme_for(ThemePreference.DARK) == "dark"


class TestPaletteVariables:
    """Tests for palette_variables"""

    def test_declares_all_seven_fields_in_order(self, geist):
        variables = palette_variables(geist.palette.light)

        assert list(variables) == [
            "--bg", "--fg", "--code-bg", "--code-fg", "--border", "--link", "--link-hover",
        ]
        assert variables["--bg"] == geist.palette.light.background
        assert variables["--link-hover"] == geist.palette.light.link_hover
