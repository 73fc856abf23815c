# topmark:header:start
#
#   project      : Copywrite
#   file         : conftest.py
#   file_relpath : tests/pipeline/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Pipeline test helpers.

These helpers build in-memory `Content` images and run the scanner so step
tests do not need to touch the filesystem.
"""

from __future__ import annotations

from pathlib import Path

from copywrite.languages import LanguageProfile, get_language_registry
from copywrite.pipeline.context import Content, HeaderFinding
from copywrite.pipeline.status import BomKind
from copywrite.pipeline.steps.reader import decode_line, split_raw_lines
from copywrite.pipeline.steps.scanner import locate_header


def make_content(text: str | bytes, name: str = "sample.c") -> Content:
    """Build a BOM-less UTF-8 `Content` image from ``text``.

    Args:
        text (str | bytes): File content.
        name (str): Path recorded on the image; only its name matters.

    Returns:
        Content: The in-memory image.
    """
    data: bytes = text.encode("utf-8") if isinstance(text, str) else text
    raw: list[bytes] = split_raw_lines(data)
    return Content(
        path=Path(name),
        bom=BomKind.NONE,
        bom_bytes=b"",
        encoding="utf-8",
        raw_lines=tuple(raw),
        lines=tuple(decode_line(r, "utf-8") for r in raw),
    )


def language(key: str) -> LanguageProfile:
    """Return the built-in profile for ``key``."""
    return get_language_registry()[key]


def scan(text: str | bytes, key: str = "c") -> HeaderFinding:
    """Scan ``text`` with the built-in profile ``key``."""
    return locate_header(make_content(text), language(key))
