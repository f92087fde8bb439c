"""
Source reading and temporary HTML output.
"""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Union

import structlog

from .errors import SourceReadError

log = structlog.get_logger()


TEMP_DIR_PREFIX = "markdown-render-"
DEFAULT_OUTPUT_NAME = "preview"


def read_source(path: Union[str, Path]) -> str:
    """
    Read a Markdown source file as UTF-8.

    Raises:
        SourceReadError: when the file is missing, unreadable or not UTF-8
    """
    source = Path(path).resolve()
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(source, str(e)) from e


def output_basename(source_path: Union[str, Path]) -> str:
    return Path(source_path).stem or DEFAULT_OUTPUT_NAME


def write_to_temp_file(html_document: str, source_path: Union[str, Path]) -> Path:
    """
    Write the document into a fresh temporary directory.

    Args:
        html_document: Complete HTML document
        source_path: Markdown source path, used to name the output file

    Returns:
        Absolute path of the written ``.html`` file
    """
    temp_dir = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX))
    output_path = (temp_dir / f"{output_basename(source_path)}.html").resolve()
    output_path.write_text(html_document, encoding="utf-8")

    log.info("html_written", output_path=str(output_path), size=len(html_document))
    return output_path
