# topmark:header:start
#
#   project      : Copywrite
#   file         : context.py
#   file_relpath : src/copywrite/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Per-file data carried between the pipeline steps.

`Content` is produced by the reader and never mutated afterwards.
`HeaderFinding` is produced by the scanner from a `Content`; it is computed
fresh for every file and discarded once the file has been handled.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from copywrite.pipeline.status import BomKind

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class Content:
    """Loaded file image.

    Attributes:
        path (Path): Source path.
        bom (BomKind): Byte-order mark detected at the start of the file.
        bom_bytes (bytes): The raw BOM bytes (empty when there is no BOM).
        encoding (str): Codec used to decode lines and to encode new header lines.
        raw_lines (tuple[bytes, ...]): Raw byte lines, each including its original
            terminator (the last line has none when the file lacks a trailing newline).
        lines (tuple[str, ...]): Decoded lines with terminators stripped; index ``i``
            corresponds to ``raw_lines[i]``.
    """

    path: Path
    bom: BomKind
    bom_bytes: bytes
    encoding: str
    raw_lines: tuple[bytes, ...]
    lines: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.raw_lines) != len(self.lines):
            raise ValueError(
                f"raw_lines ({len(self.raw_lines)}) and lines ({len(self.lines)}) differ in length"
            )

    def __len__(self) -> int:
        return len(self.lines)


@dataclass(frozen=True)
class HeaderFinding:
    """Result of scanning one file for an existing header.

    Attributes:
        language (str): Language key of the profile used for the scan.
        content (Content): The scanned content.
        skip (int): Number of leading lines always kept above the header.
        start (int | None): Index of the first line of the detected comment region.
        end (int | None): Index of the last line (inclusive) of the region.
        years_line (int | None): Index of the last line carrying a year marker.
        has_license (bool): Whether a license or year marker was seen in the region.
    """

    language: str
    content: Content
    skip: int = 0
    start: int | None = None
    end: int | None = None
    years_line: int | None = None
    has_license: bool = False

    @property
    def is_bounded(self) -> bool:
        """True if both ends of a comment region are known."""
        return self.start is not None and self.end is not None

    @property
    def is_replaceable(self) -> bool:
        """True if the region is a bounded license header that can be replaced in place."""
        return self.is_bounded and self.has_license
