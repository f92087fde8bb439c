"""
Markdown to HTML document conversion.
"""
from __future__ import annotations

import html
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

import markdown
import structlog
from jinja2 import Template

from .presets import StylePreset
from .styles import build_styles
from .theme import ThemePreference, resolve_theme

log = structlog.get_logger()


TEMPLATE_PATH = Path(__file__).parent / "templates" / "document.html.j2"

DEFAULT_TITLE = "Markdown Preview"

MERMAID_HEAD_SCRIPT = '<script src="https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.min.js"></script>'
MERMAID_BODY_SCRIPT = (
    '<script>if (window.mermaid) { mermaid.initialize({ startOnLoad: true, theme: "default" }); }</script>'
)

FONT_IMPORT_SEPARATOR = "\n    "

_MERMAID_FENCE = re.compile(r"```mermaid\s*(.*?)```", re.DOTALL)
_H1_HEADING = re.compile(r"^\s*#\s+(.+)$", re.MULTILINE)

_template_cache: Optional[Template] = None


@dataclass(frozen=True)
class RenderedMarkdown:
    html_body: str
    mermaid_detected: bool


class MarkdownRenderer:
    """Configurable Markdown to HTML fragment renderer"""

    def __init__(
        self,
        extensions: Optional[list] = None,
        extension_configs: Optional[dict] = None,
    ):
        """
        Initialize Markdown renderer.

        Args:
            extensions: Markdown extensions to use
            extension_configs: Extension configurations
        """
        self.extensions = extensions or [
            "markdown.extensions.tables",
            "markdown.extensions.fenced_code",
            "markdown.extensions.codehilite",
            "markdown.extensions.toc",
            "markdown.extensions.footnotes",
            "markdown.extensions.attr_list",
            "markdown.extensions.def_list",
            "markdown.extensions.sane_lists",
        ]
        self.extension_configs = extension_configs or {
            "codehilite": {
                "css_class": "highlight",
                "guess_lang": False,
            },
        }
        self._md = markdown.Markdown(
            extensions=self.extensions,
            extension_configs=self.extension_configs,
        )

    @staticmethod
    def extract_mermaid(md_content: str) -> Tuple[str, bool]:
        """
        Replace ```mermaid fences with escaped ``<div class="mermaid">`` blocks.

        Returns:
            Rewritten Markdown (not yet converted) and whether any diagram
            was found
        """
        found = False

        def _replace(match: re.Match) -> str:
            nonlocal found
            found = True
            code = match.group(1).rstrip()
            return f'\n\n<div class="mermaid">{html.escape(code)}</div>\n\n'

        processed = _MERMAID_FENCE.sub(_replace, md_content)
        return processed, found

    def render_fragment(self, md_content: str) -> RenderedMarkdown:
        """
        Render Markdown to an HTML fragment (no document wrapper).

        Args:
            md_content: Markdown content

        Returns:
            Rendered body and mermaid detection flag
        """
        # Reset MD instance for clean conversion
        self._md.reset()

        processed, mermaid_detected = self.extract_mermaid(md_content)
        html_body = self._md.convert(processed)

        log.debug(
            "markdown_rendered",
            source_length=len(md_content),
            html_length=len(html_body),
            mermaid=mermaid_detected,
        )
        return RenderedMarkdown(html_body=html_body, mermaid_detected=mermaid_detected)


def derive_title(md_content: str, source_path: Union[str, Path]) -> str:
    """Title from the first level-1 heading, else the file stem, else a default."""
    match = _H1_HEADING.search(md_content)
    if match and match.group(1).strip():
        return match.group(1).strip()

    stem = Path(source_path).stem if source_path else ""
    return stem or DEFAULT_TITLE


def load_template() -> Template:
    """Load the document template, reading it from disk only once per process."""
    global _template_cache
    if _template_cache is None:
        source = TEMPLATE_PATH.read_text(encoding="utf-8")
        _template_cache = Template(source, keep_trailing_newline=True)
        log.debug("template_loaded", path=str(TEMPLATE_PATH))
    return _template_cache


def render_html_document(
    title: str,
    body: str,
    preference: ThemePreference,
    preset: StylePreset,
    mermaid_detected: bool = False,
) -> str:
    """
    Assemble the final HTML document.

    Args:
        title: Document title, escaped by the template
        body: Rendered HTML body
        preference: Theme mode
        preset: Style preset
        mermaid_detected: Whether to include the mermaid scripts

    Returns:
        Complete HTML document
    """
    resolution = resolve_theme(preference, preset)
    styles = build_styles(preference, preset, resolution=resolution)

    return load_template().render(
        title=title,
        body=body,
        styles=styles,
        color_scheme=resolution.color_scheme,
        font_imports=FONT_IMPORT_SEPARATOR.join(preset.font_imports),
        head_scripts=MERMAID_HEAD_SCRIPT if mermaid_detected else "",
        body_scripts=MERMAID_BODY_SCRIPT if mermaid_detected else "",
        body_class=f"preset-{preset.id}",
    )


def render_markdown_document(
    md_content: str,
    source_path: Union[str, Path],
    preference: ThemePreference,
    preset: StylePreset,
    renderer: Optional[MarkdownRenderer] = None,
) -> str:
    """
    Convert Markdown source to a complete styled HTML document.

    Args:
        md_content: Markdown content
        source_path: Path of the source file, used for the fallback title
        preference: Theme mode
        preset: Style preset
        renderer: Markdown renderer, a default one is created when omitted

    Returns:
        Complete HTML document
    """
    renderer = renderer or MarkdownRenderer()
    rendered = renderer.render_fragment(md_content)
    title = derive_title(md_content, source_path)

    return render_html_document(
        title=title,
        body=rendered.html_body,
        preference=preference,
        preset=preset,
        mermaid_detected=rendered.mermaid_detected,
    )
