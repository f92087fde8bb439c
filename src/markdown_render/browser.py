"""
Best-effort browser launch for generated documents.
"""
import webbrowser
from pathlib import Path

import structlog

from .errors import BrowserLaunchError

log = structlog.get_logger()


def open_in_browser(path: Path) -> None:
    """
    Open a local HTML file in the default browser.

    Raises:
        BrowserLaunchError: when no browser could be launched
    """
    url = Path(path).resolve().as_uri()
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:
        raise BrowserLaunchError(f"Failed to open browser. {e}") from e

    if not opened:
        raise BrowserLaunchError("Failed to open browser. No runnable browser found.")

    log.info("browser_opened", url=url)
