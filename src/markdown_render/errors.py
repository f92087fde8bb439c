"""
Exception hierarchy for markdown-render.

Only the CLI catches these; library functions raise and let them propagate.
"""


class MarkdownRenderError(Exception):
    """Base class for all user-facing errors."""


class ConfigurationError(MarkdownRenderError):
    """Environment settings could not be parsed."""


class ArgumentError(MarkdownRenderError):
    """Command line arguments are invalid."""


class InvalidThemeError(ArgumentError):
    """Theme value is not one of light, dark or auto."""

    def __init__(self, value: str):
        self.value = value
        super().__init__('Invalid theme value. Use "light", "dark", or "auto".')


class UnknownStyleError(MarkdownRenderError):
    """Requested style preset is not registered."""

    def __init__(self, style_id: str):
        self.style_id = style_id
        super().__init__(
            f'Unknown style "{style_id}". Use --list-styles to see available options.'
        )


class SourceReadError(MarkdownRenderError):
    """Markdown source file could not be read."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f'Unable to read "{path}". {reason}')


class BrowserLaunchError(MarkdownRenderError):
    """Browser could not be opened. Never fatal."""
