"""Tests for CSS composition"""
import pytest

from markdown_render.presets import DEFAULT_MONO_FONT
from markdown_render.styles import (
    SHARED_STYLES,
    TYPOGRAPHY_STYLES,
    build_styles,
    render_dark_block,
    render_root_block,
)
from markdown_render.theme import DARK_MEDIA_QUERY, ThemePreference, palette_variables, resolve_theme


MEDIA_RULE = f"@media {DARK_MEDIA_QUERY}"


class TestDarkModeBlock:
    """Tests for the conditional dark-mode override"""

    @pytest.mark.parametrize("preference", [ThemePreference.LIGHT, ThemePreference.DARK])
    def test_fixed_themes_have_no_media_block(self, geist, preference):
        css = build_styles(preference, geist)

        assert MEDIA_RULE not in css

    def test_auto_has_exactly_one_media_block(self, geist):
        css = build_styles(ThemePreference.AUTO, geist)

        assert css.count(MEDIA_RULE) == 1

    def test_auto_root_uses_light_and_media_uses_dark(self, geist):
        resolution = resolve_theme(ThemePreference.AUTO, geist)
        root_block = render_root_block(resolution, geist)
        dark_block = render_dark_block(resolution)

        for name, value in palette_variables(geist.palette.light).items():
            assert f"{name}: {value};" in root_block
        for name, value in palette_variables(geist.palette.dark).items():
            assert f"{name}: {value};" in dark_block

    def test_dark_block_skips_font_variables(self, geist):
        dark_block = render_dark_block(resolve_theme(ThemePreference.AUTO, geist))

        assert "--font-" not in dark_block

    def test_no_block_without_override(self, geist):
        assert render_dark_block(resolve_theme(ThemePreference.LIGHT, geist)) == ""


class TestRootBlock:
    """Tests for :root variable declarations"""

    def test_dark_theme_uses_dark_palette(self, geist):
        css = build_styles(ThemePreference.DARK, geist)

        assert "color-scheme: dark;" in css
        assert f"--bg: {geist.palette.dark.background};" in css
        assert f"--bg: {geist.palette.light.background};" not in css

    def test_auto_color_scheme(self, geist):
        assert "color-scheme: light dark;" in build_styles(ThemePreference.AUTO, geist)

    def test_font_fallbacks(self, system_preset):
        css = build_styles(ThemePreference.LIGHT, system_preset)

        assert f"--font-body: {system_preset.font_family};" in css
        assert f"--font-heading: {system_preset.font_family};" in css
        assert f"--font-mono: {DEFAULT_MONO_FONT};" in css

    def test_invalid_css_passes_through(self, geist):
        broken = geist.model_copy(
            update={"palette": geist.palette.model_copy(
                update={"light": geist.palette.light.model_copy(update={"link": "not-a-color"})}
            )}
        )

        assert "--link: not-a-color;" in build_styles(ThemePreference.LIGHT, broken)


class TestComposition:
    """Tests for block ordering and output stability"""

    def test_block_order(self, geist):
        css = build_styles(ThemePreference.AUTO, geist)

        positions = [
            css.index(":root {"),
            css.index(MEDIA_RULE),
            css.index(SHARED_STYLES),
            css.index(TYPOGRAPHY_STYLES),
            css.index(geist.extra_css),
        ]
        assert positions == sorted(positions)

    def test_blocks_separated_by_blank_line(self, geist):
        css = build_styles(ThemePreference.LIGHT, geist)

        assert f"\n\n{SHARED_STYLES}\n{TYPOGRAPHY_STYLES}\n{geist.extra_css}" in css

    def test_missing_extra_css_is_omitted(self, system_preset):
        css = build_styles(ThemePreference.LIGHT, system_preset)

        assert css.endswith(TYPOGRAPHY_STYLES)

    def test_deterministic(self, geist):
        first = build_styles(ThemePreference.AUTO, geist)
        second = build_styles(ThemePreference.AUTO, geist)

        assert first == second
