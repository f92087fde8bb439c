"""
Theme resolution.

Decides which palette feeds the static ``:root`` variables and whether a
``prefers-color-scheme: dark`` override is emitted.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from .errors import InvalidThemeError
from .presets import StylePreset, ThemePalette


class ThemePreference(str, Enum):
    """Theme mode requested on the command line."""
    AUTO = "auto"
    LIGHT = "light"
    DARK = "dark"


DARK_MEDIA_QUERY = "(prefers-color-scheme: dark)"

# CSS custom property per palette field, in declaration order
PALETTE_VARIABLES = (
    ("--bg", "background"),
    ("--fg", "foreground"),
    ("--code-bg", "code_background"),
    ("--code-fg", "code_foreground"),
    ("--border", "border"),
    ("--link", "link"),
    ("--link-hover", "link_hover"),
)


@dataclass(frozen=True)
class ThemeResolution:
    """Static variables plus an optional dark-mode override set."""
    preference: ThemePreference
    color_scheme: str
    base_variables: Dict[str, str]
    override_variables: Optional[Dict[str, str]] = None

    @property
    def has_override(self) -> bool:
        return self.override_variables is not None


def parse_theme(raw: str) -> ThemePreference:
    """
    Parse a ``--theme`` value.

    Matching is case-insensitive and an empty value means ``auto``.

    Raises:
        InvalidThemeError: for anything other than light, dark or auto
    """
    normalized = raw.lower()
    if normalized == "":
        return ThemePreference.AUTO
    try:
        return ThemePreference(normalized)
    except ValueError:
        raise InvalidThemeError(raw) from None


def color_scheme_for(preference: ThemePreference) -> str:
    if preference is ThemePreference.AUTO:
        return "light dark"
    return preference.value


def palette_variables(palette: ThemePalette) -> Dict[str, str]:
    return {name: getattr(palette, field) for name, field in PALETTE_VARIABLES}


def resolve_theme(preference: ThemePreference, preset: StylePreset) -> ThemeResolution:
    """
    Resolve the palettes a preset contributes for a theme preference.

    ``light`` and ``dark`` pin one palette with no override. ``auto`` uses
    the light palette as the default and overrides every palette variable
    with the dark palette under the dark media query, so clients without a
    preference see the light colors.
    """
    palette = preset.palette
    if preference is ThemePreference.DARK:
        base = palette.dark
    else:
        base = palette.light

    override = None
    if preference is ThemePreference.AUTO:
        override = palette_variables(palette.dark)

    return ThemeResolution(
        preference=preference,
        color_scheme=color_scheme_for(preference),
        base_variables=palette_variables(base),
        override_variables=override,
    )
