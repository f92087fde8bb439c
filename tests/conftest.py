"""
Pytest configuration and shared fixtures.
"""
import tempfile
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from markdown_render.presets import resolve_preset


ENV_VARS = (
    "MARKDOWN_RENDER_NO_OPEN",
    "MARKDOWN_RENDER_STYLE",
    "MARKDOWN_RENDER_LOG_LEVEL",
    "MARKDOWN_RENDER_LOG_FORMAT",
    "DEBUG",
)


@pytest.fixture(autouse=True)
def env_setup(monkeypatch):
    """Start every test from a clean environment."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def temp_root(monkeypatch, tmp_path):
    """Keep generated temp directories inside the test's tmp_path."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture(autouse=True)
def browser(monkeypatch):
    """Never launch a real browser from CLI tests."""
    opener = MagicMock()
    monkeypatch.setattr("markdown_render.cli.open_in_browser", opener)
    return opener


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def geist():
    return resolve_preset("geist-prose")


@pytest.fixture
def system_preset():
    return resolve_preset("system-ui")


@pytest.fixture
def sample_markdown():
    return """# Hello World

Some **bold** text and a [link](https://example.com).

| Column A | Column B |
|----------|----------|
| Value 1  | Value 2  |

```python
def hello():
    print("world")
```
"""


@pytest.fixture
def markdown_file(tmp_path, sample_markdown):
    path = tmp_path / "notes.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path
