"""
CSS composition for rendered documents.

Blocks are assembled in a fixed order so identical inputs always give
identical CSS:

1. ``:root`` variables (palette, color-scheme, fonts)
2. dark-mode media override (``auto`` theme only)
3. shared layout rules
4. typography bindings
5. preset extra CSS
"""

from typing import Dict, List, Optional

import structlog

from .presets import StylePreset
from .theme import DARK_MEDIA_QUERY, ThemePreference, ThemeResolution, resolve_theme

log = structlog.get_logger()


SHARED_STYLES = """\
    body {
      margin: 0 auto;
      max-width: 56rem;
      padding: 3rem 1rem 4rem;
      background: var(--bg);
      color: var(--fg);
    }
    h1, h2, h3, h4, h5, h6 {
      line-height: 1.3;
      margin-top: 2.4rem;
      margin-bottom: 1rem;
      font-weight: 650;
    }
    h1 { font-size: 2.5rem; }
    h2 { font-size: 2rem; }
    h3 { font-size: 1.5rem; }
    h4 { font-size: 1.25rem; }
    p, li {
      margin-top: 0.75rem;
      margin-bottom: 0.75rem;
      font-size: 1rem;
    }
    a {
      color: var(--link);
      text-decoration: underline;
      text-decoration-thickness: 2px;
    }
    a:hover, a:focus {
      color: var(--link-hover);
    }
    pre {
      background: var(--code-bg);
      color: var(--code-fg);
      padding: 1rem;
      overflow: auto;
      border-radius: 0.5rem;
      border: 1px solid var(--border);
    }
    code {
      font-family: var(--font-mono);
      background: var(--code-bg);
      color: var(--code-fg);
      padding: 0.15rem 0.35rem;
      border-radius: 0.35rem;
    }
    pre code {
      padding: 0;
      background: transparent;
    }
    blockquote {
      margin: 1.5rem 0;
      padding: 0.75rem 1rem;
      border-left: 4px solid var(--border);
      background: var(--code-bg);
      color: var(--fg);
      border-radius: 0 0.5rem 0.5rem 0;
    }
    table {
      border-collapse: collapse;
      width: 100%;
      margin: 1.5rem 0;
    }
    th, td {
      border: 1px solid var(--border);
      padding: 0.5rem 0.75rem;
      text-align: left;
    }
    img, video {
      max-width: 100%;
      height: auto;
      border-radius: 0.4rem;
    }
"""

TYPOGRAPHY_STYLES = """\
    body {
      font-family: var(--font-body);
    }
    h1, h2, h3, h4, h5, h6 {
      font-family: var(--font-heading);
    }
    code, pre code {
      font-family: var(--font-mono);
    }
"""


def font_variables(preset: StylePreset) -> Dict[str, str]:
    return {
        "--font-body": preset.font_family,
        "--font-heading": preset.resolved_heading_font(),
        "--font-mono": preset.resolved_mono_font(),
    }


def _declarations(variables: Dict[str, str], indent: str) -> List[str]:
    return [f"{indent}{name}: {value};" for name, value in variables.items()]


def render_root_block(resolution: ThemeResolution, preset: StylePreset) -> str:
    lines = ["    :root {", f"      color-scheme: {resolution.color_scheme};"]
    lines += _declarations(resolution.base_variables, "      ")
    lines += _declarations(font_variables(preset), "      ")
    lines += ["      line-height: 1.6;", "    }"]
    return "\n".join(lines) + "\n"


def render_dark_block(resolution: ThemeResolution) -> str:
    """Media-query override block, or an empty string when not needed."""
    if not resolution.has_override:
        return ""
    lines = [f"    @media {DARK_MEDIA_QUERY} {{", "      :root {"]
    lines += _declarations(resolution.override_variables, "        ")
    lines += ["      }", "    }"]
    return "\n".join(lines) + "\n"


def build_styles(
    preference: ThemePreference,
    preset: StylePreset,
    resolution: Optional[ThemeResolution] = None,
) -> str:
    """
    Compose the document stylesheet for a preset and theme preference.

    Args:
        preference: Requested theme mode
        preset: Resolved style preset
        resolution: Precomputed theme resolution, resolved here when omitted

    Returns:
        CSS text with non-empty blocks separated by a blank line
    """
    if resolution is None:
        resolution = resolve_theme(preference, preset)

    blocks = [
        render_root_block(resolution, preset),
        render_dark_block(resolution),
        SHARED_STYLES,
        TYPOGRAPHY_STYLES,
        preset.extra_css or "",
    ]
    css = "\n".join(block for block in blocks if block)

    log.debug(
        "styles_composed",
        preset=preset.id,
        theme=preference.value,
        dark_override=resolution.has_override,
        length=len(css),
    )
    return css
