"""
markdown-render CLI

Render a Markdown file to styled HTML and preview it in a browser.

Usage:
    markdown-render notes.md
    markdown-render notes.md --style inter-ui --dark
    markdown-render notes.md --stdout > notes.html
    markdown-render --list-styles
"""

from pathlib import Path
from typing import List, Optional, Sequence

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from .browser import open_in_browser
from .config import RenderSettings, load_settings
from .converter import render_markdown_document
from .errors import BrowserLaunchError, MarkdownRenderError, UnknownStyleError
from .files import read_source, write_to_temp_file
from .logging_config import configure_logging
from .presets import list_presets, resolve_preset
from .theme import ThemePreference, parse_theme

log = structlog.get_logger()

app = typer.Typer(
    name="markdown-render",
    help="Render Markdown to styled HTML and open it in a browser.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console()
err_console = Console(stderr=True)


THEME_FLAGS_KEY = "markdown_render.theme_flags"


def emit_error(message: str) -> None:
    err_console.print(
        f"[red]Error:[/red] {escape(message)}", soft_wrap=True, highlight=False, emoji=False
    )


def emit_warning(message: str) -> None:
    err_console.print(
        f"[yellow]Warning:[/yellow] {escape(message)}", soft_wrap=True, highlight=False, emoji=False
    )


def record_theme_flag(ctx: typer.Context, param: typer.CallbackParam, value):
    """Remember theme options in command line order; click calls this as it parses."""
    if value is None or value is False:
        return value
    raw = value if param.name == "theme" else param.name
    ctx.meta.setdefault(THEME_FLAGS_KEY, []).append(raw)
    return value


def resolve_theme_flags(requested: Sequence[str]) -> ThemePreference:
    """
    Resolve ``--theme``/``--light``/``--dark`` values given in command line order.

    Every value is validated and the last one wins.

    Raises:
        InvalidThemeError: when a ``--theme`` value is not recognised
    """
    preference = ThemePreference.AUTO
    for raw in requested:
        preference = parse_theme(raw)
    return preference


def print_styles() -> None:
    for preset in list_presets():
        console.print(
            f"- [cyan]{escape(preset.id)}[/cyan]: {escape(preset.label)} - {escape(preset.description)}",
            soft_wrap=True,
            highlight=False,
            emoji=False,
        )


def _execute(
    ctx: typer.Context,
    settings: RenderSettings,
    sources: List[str],
    no_open: bool,
    stdout: bool,
    style: Optional[str],
    list_styles: bool,
) -> int:
    preference = resolve_theme_flags(ctx.meta.get(THEME_FLAGS_KEY, []))

    if list_styles:
        print_styles()
        return 0

    if len(sources) != 1:
        emit_error("Please provide exactly one markdown file.")
        typer.echo(ctx.get_help())
        return 1

    style_id = style if style is not None else settings.default_style
    preset = resolve_preset(style_id)
    if preset is None:
        raise UnknownStyleError(style_id)
    log.debug("preset_resolved", preset=preset.id, theme=preference.value)

    source_path = Path(sources[0]).resolve()
    markdown_content = read_source(source_path)

    html_document = render_markdown_document(markdown_content, source_path, preference, preset)

    if stdout:
        typer.echo(html_document, nl=False)
        return 0

    output_path = write_to_temp_file(html_document, source_path)
    console.print(
        f"Generated HTML: {escape(str(output_path))}", soft_wrap=True, highlight=False, emoji=False
    )

    if no_open or settings.no_open:
        return 0

    try:
        open_in_browser(output_path)
    except BrowserLaunchError as e:
        emit_warning(str(e))
    return 0


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def render(
    ctx: typer.Context,
    sources: Optional[List[str]] = typer.Argument(
        None,
        metavar="MARKDOWN_FILE",
        help="Markdown file to render",
        show_default=False,
    ),
    no_open: bool = typer.Option(
        False,
        "--no-open",
        help="Generate the HTML file but skip launching the browser",
    ),
    stdout: bool = typer.Option(
        False,
        "--stdout",
        help="Print the generated HTML to standard output",
    ),
    theme: Optional[str] = typer.Option(
        None,
        "--theme",
        metavar="MODE",
        callback=record_theme_flag,
        help='Override auto detection with "light" or "dark" (default: auto)',
    ),
    style: Optional[str] = typer.Option(
        None,
        "--style",
        metavar="ID",
        help="Typography/background preset (default: geist-prose)",
    ),
    list_styles: bool = typer.Option(
        False,
        "--list-styles",
        help="Print available style presets and exit",
    ),
    light: bool = typer.Option(
        False, "--light", callback=record_theme_flag, help='Shortcut for "--theme light"'
    ),
    dark: bool = typer.Option(
        False, "--dark", callback=record_theme_flag, help='Shortcut for "--theme dark"'
    ),
):
    """
    Render a Markdown file to styled HTML.

    The document is written to a temporary directory and opened in the
    default browser unless --no-open, --stdout or MARKDOWN_RENDER_NO_OPEN
    is given.
    """
    settings: Optional[RenderSettings] = None
    try:
        settings = load_settings()
        configure_logging(settings.log_level, settings.log_format)
        exit_code = _execute(
            ctx,
            settings,
            sources or [],
            no_open=no_open,
            stdout=stdout,
            style=style,
            list_styles=list_styles,
        )
    except MarkdownRenderError as e:
        emit_error(str(e))
        exit_code = 1
    except Exception as e:
        emit_error(f"Unexpected error: {e}")
        if settings is not None and settings.debug:
            err_console.print_exception()
        exit_code = 1

    if exit_code:
        raise typer.Exit(exit_code)


def main():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
