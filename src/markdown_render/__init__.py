"""
markdown-render - Markdown to styled HTML previewer.

Provides:
- list_presets / resolve_preset: style preset catalog
- resolve_theme: light/dark/auto palette resolution
- build_styles: preset and theme CSS composition
- render_markdown_document: Markdown to complete HTML document
"""

from .converter import (
    MarkdownRenderer,
    RenderedMarkdown,
    derive_title,
    render_html_document,
    render_markdown_document,
)
from .presets import (
    DEFAULT_STYLE_ID,
    PresetPalette,
    StylePreset,
    ThemePalette,
    list_presets,
    resolve_preset,
)
from .styles import build_styles
from .theme import ThemePreference, ThemeResolution, parse_theme, resolve_theme

__version__ = "0.1.0"

__all__ = [
    "MarkdownRenderer",
    "RenderedMarkdown",
    "derive_title",
    "render_html_document",
    "render_markdown_document",
    "DEFAULT_STYLE_ID",
    "PresetPalette",
    "StylePreset",
    "ThemePalette",
    "list_presets",
    "resolve_preset",
    "build_styles",
    "ThemePreference",
    "ThemeResolution",
    "parse_theme",
    "resolve_theme",
]
