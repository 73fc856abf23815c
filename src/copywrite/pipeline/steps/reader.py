# topmark:header:start
#
#   project      : Copywrite
#   file         : reader.py
#   file_relpath : src/copywrite/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

r"""File reader step.

Loads a file as raw bytes, detects and strips a leading byte-order mark, and
splits the remainder into raw lines on ``\n`` (each keeping its terminator).
Every raw line is decoded on its own with replacement semantics, so a stray
undecodable byte in one comment line never rejects the whole file.

Files marked as UTF-16 or UTF-32 are rejected: their lines cannot be split on
a single ``\n`` byte and Copywrite never rewrites them.
"""

from __future__ import annotations

import codecs
import sys
from typing import TYPE_CHECKING, Final

from copywrite.config.logging import get_logger
from copywrite.errors import ContentReadError, UnsupportedEncodingError
from copywrite.pipeline.context import Content
from copywrite.pipeline.status import BomKind

if TYPE_CHECKING:
    from pathlib import Path

    from copywrite.config.logging import CopywriteLogger

logger: CopywriteLogger = get_logger(__name__)

# Order matters: the UTF-32LE mark starts with the UTF-16LE mark.
_BOMS: Final[tuple[tuple[BomKind, bytes], ...]] = (
    (BomKind.UTF8, codecs.BOM_UTF8),
    (BomKind.UTF32_LE, codecs.BOM_UTF32_LE),
    (BomKind.UTF32_BE, codecs.BOM_UTF32_BE),
    (BomKind.UTF16_LE, codecs.BOM_UTF16_LE),
    (BomKind.UTF16_BE, codecs.BOM_UTF16_BE),
)

# Legacy single-byte codec used for BOM-less files on Windows.
LEGACY_ENCODING: Final[str] = "cp1252"


def detect_bom(data: bytes) -> tuple[BomKind, bytes]:
    """Detect a byte-order mark at the start of ``data``.

    Args:
        data (bytes): Raw file content.

    Returns:
        tuple[BomKind, bytes]: The BOM kind and its raw bytes (``b""`` when none).
    """
    for kind, mark in _BOMS:
        if data.startswith(mark):
            return kind, mark
    return BomKind.NONE, b""


def select_encoding(bom: BomKind, *, platform: str | None = None) -> str:
    """Return the codec used to decode lines of a file with the given BOM.

    Args:
        bom (BomKind): The detected byte-order mark (never a wide one).
        platform (str | None): Platform identifier; defaults to ``sys.platform``.

    Returns:
        str: ``"utf-8"`` unless the file has no BOM and the platform is Windows.
    """
    platform = sys.platform if platform is None else platform
    if bom is BomKind.NONE and platform == "win32":
        return LEGACY_ENCODING
    return "utf-8"


def split_raw_lines(data: bytes) -> list[bytes]:
    r"""Split ``data`` on ``\n``, keeping the terminator on each line."""
    # bytes.splitlines() would also split on a bare \r; only \n ends a line here.
    lines: list[bytes] = []
    pos: int = 0
    size: int = len(data)
    while pos < size:
        nl: int = data.find(b"\n", pos)
        if nl == -1:
            lines.append(data[pos:])
            break
        lines.append(data[pos : nl + 1])
        pos = nl + 1
    return lines


def decode_line(raw: bytes, encoding: str) -> str:
    """Decode one raw line and strip its single terminator for pattern matching."""
    text: str = raw.decode(encoding, errors="replace")
    if text.endswith("\r\n"):
        return text[:-2]
    return text.removesuffix("\n")


def load_content(path: Path, *, platform: str | None = None) -> Content:
    """Load ``path`` into a `Content` image.

    Args:
        path (Path): File to read.
        platform (str | None): Platform identifier used to pick the fallback codec.

    Returns:
        Content: Raw and decoded lines plus BOM information.

    Raises:
        ContentReadError: If the file cannot be read.
        UnsupportedEncodingError: If the file starts with a UTF-16/UTF-32 BOM.
    """
    try:
        data: bytes = path.read_bytes()
    except OSError as e:
        raise ContentReadError(path, f"Could not read content from {path}: {e}") from e

    bom, bom_bytes = detect_bom(data)
    if bom is not BomKind.NONE:
        logger.debug("BOM found in %s: %s", path, bom.value)
    if bom.is_wide:
        raise UnsupportedEncodingError(
            path, f"Copywrite does not support UTF-16/32 encoded files ({bom.value}): {path}"
        )

    encoding: str = select_encoding(bom, platform=platform)
    raw_lines: list[bytes] = split_raw_lines(data[len(bom_bytes) :])
    lines: list[str] = [decode_line(raw, encoding) for raw in raw_lines]
    logger.trace("Read %d lines from %s (encoding=%s)", len(lines), path, encoding)

    return Content(
        path=path,
        bom=bom,
        bom_bytes=bom_bytes,
        encoding=encoding,
        raw_lines=tuple(raw_lines),
        lines=tuple(lines),
    )
