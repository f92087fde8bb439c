"""
Style presets for rendered documents.

Each preset bundles web font imports, font stacks, a light and a dark
palette and optional extra CSS. The catalog is fixed at import time.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_STYLE_ID = "geist-prose"

DEFAULT_MONO_FONT = 'SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", monospace'

_GOOGLE_FONTS_PRECONNECT = (
    '<link rel="preconnect" href="https://fonts.googleapis.com">',
    '<link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>',
)


class ThemePalette(BaseModel):
    """Colors for one theme mode. Values are passed to CSS untouched."""

    model_config = ConfigDict(frozen=True)

    background: str = Field(..., description="Solid color or gradient")
    foreground: str
    code_background: str
    code_foreground: str
    border: str
    link: str
    link_hover: str


class PresetPalette(BaseModel):
    """Light and dark palettes of a preset."""

    model_config = ConfigDict(frozen=True)

    light: ThemePalette
    dark: ThemePalette


class StylePreset(BaseModel):
    """Named visual theme selectable with ``--style``."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    label: str
    description: str
    font_imports: Tuple[str, ...] = ()
    font_family: str
    heading_font_family: Optional[str] = None
    mono_font_family: Optional[str] = None
    palette: PresetPalette
    extra_css: Optional[str] = None

    def resolved_heading_font(self) -> str:
        return self.heading_font_family or self.font_family

    def resolved_mono_font(self) -> str:
        return self.mono_font_family or DEFAULT_MONO_FONT


_SLATE_DARK = ThemePalette(
    background="#020617",
    foreground="#e2e8f0",
    code_background="#1e293b",
    code_foreground="#e2e8f0",
    border="#334155",
    link="#93c5fd",
    link_hover="#bfdbfe",
)


PRESETS: Tuple[StylePreset, ...] = (
    StylePreset(
        id="geist-prose",
        label="Geist Prose",
        description="Geist Sans & Mono with Tailwind prose-inspired colors",
        font_imports=_GOOGLE_FONTS_PRECONNECT + (
            '<link href="https://fonts.googleapis.com/css2?family=Geist:wght@300..800'
            '&family=Geist+Mono:wght@400..700&display=swap" rel="stylesheet">',
        ),
        font_family='"Geist", -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif',
        heading_font_family='"Geist", -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif',
        mono_font_family='"Geist Mono", SFMono-Regular, Menlo, Monaco, Consolas, "Liberation Mono", monospace',
        palette=PresetPalette(
            light=ThemePalette(
                background="linear-gradient(135deg, #f8fafc 0%, #f1f5f9 100%)",
                foreground="#0f172a",
                code_background="#e2e8f0",
                code_foreground="#0f172a",
                border="#cbd5f5",
                link="#2563eb",
                link_hover="#1d4ed8",
            ),
            dark=ThemePalette(
                background="linear-gradient(160deg, #0b1120 0%, #111827 45%, #020617 100%)",
                foreground="#e2e8f0",
                code_background="#1e293b",
                code_foreground="#e2e8f0",
                border="#334155",
                link="#93c5fd",
                link_hover="#bfdbfe",
            ),
        ),
        extra_css="""\
    h1, h2, h3, h4, h5, h6 {
      letter-spacing: -0.01em;
    }
    a {
      text-decoration: none;
    }
    a:hover, a:focus {
      text-decoration: underline;
    }
    img {
      border-radius: 0.75rem;
    }
    blockquote {
      border-left-width: 0.25rem;
    }
""",
    ),
    StylePreset(
        id="inter-ui",
        label="Inter UI",
        description="Inter with neutral slate prose colors",
        font_imports=_GOOGLE_FONTS_PRECONNECT + (
            '<link href="https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700'
            '&display=swap" rel="stylesheet">',
        ),
        font_family='"Inter", -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif',
        heading_font_family='"Inter", -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif',
        mono_font_family=DEFAULT_MONO_FONT,
        palette=PresetPalette(
            light=ThemePalette(
                background="#f8fafc",
                foreground="#0f172a",
                code_background="#e2e8f0",
                code_foreground="#0f172a",
                border="#cbd5f5",
                link="#2563eb",
                link_hover="#1d4ed8",
            ),
            dark=_SLATE_DARK,
        ),
        extra_css="""\
    h1, h2, h3, h4, h5, h6 {
      font-family: var(--font-heading);
      font-weight: 600;
    }
""",
    ),
    StylePreset(
        id="system-ui",
        label="System UI",
        description="Native system fonts, no web font downloads",
        font_family='system-ui, -apple-system, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif',
        palette=PresetPalette(
            light=ThemePalette(
                background="#ffffff",
                foreground="#1f2937",
                code_background="#f3f4f6",
                code_foreground="#111827",
                border="#e5e7eb",
                link="#2563eb",
                link_hover="#1e40af",
            ),
            dark=ThemePalette(
                background="#111827",
                foreground="#e5e7eb",
                code_background="#1f2937",
                code_foreground="#f9fafb",
                border="#374151",
                link="#60a5fa",
                link_hover="#93c5fd",
            ),
        ),
    ),
)


def _build_index(presets: Iterable[StylePreset]) -> Dict[str, StylePreset]:
    index: Dict[str, StylePreset] = {}
    for preset in presets:
        if preset.id in index:
            raise ValueError(f"Duplicate style preset id: {preset.id}")
        index[preset.id] = preset
    return index


_PRESETS_BY_ID = _build_index(PRESETS)


def list_presets() -> Tuple[StylePreset, ...]:
    """Return all presets in registration order."""
    return PRESETS


def resolve_preset(preset_id: str) -> Optional[StylePreset]:
    """Look up a preset by exact, case-sensitive id. Returns None when unknown."""
    return _PRESETS_BY_ID.get(preset_id)
