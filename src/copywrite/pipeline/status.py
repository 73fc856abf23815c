# topmark:header:start
#
#   project      : Copywrite
#   file         : status.py
#   file_relpath : src/copywrite/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Status enums shared by the Copywrite pipeline steps.

Conventions:
  * `FileOutcome` values are human-readable strings used in CLI output; each
    member carries a yachalk colorizer exposed via ``.color``.
  * Compare members with ``==``; do not rely on identity of the string values.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from yachalk import chalk


class Colorizer(Protocol):
    """Callable that decorates a string for display (e.g. a yachalk style)."""

    def __call__(self, *args: object, sep: str = " ") -> str: ...


class ColoredStrEnum(str, Enum):
    """String enum whose members carry an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color


class BomKind(Enum):
    """Byte-order mark detected at the start of a file.

    Attributes:
        NONE: No byte-order mark.
        UTF8: UTF-8 BOM (``EF BB BF``).
        UTF16_LE: UTF-16 little-endian BOM (``FF FE``).
        UTF16_BE: UTF-16 big-endian BOM (``FE FF``).
        UTF32_LE: UTF-32 little-endian BOM (``FF FE 00 00``).
        UTF32_BE: UTF-32 big-endian BOM (``00 00 FE FF``).
    """

    NONE = "none"
    UTF8 = "utf-8"
    UTF16_LE = "utf-16-le"
    UTF16_BE = "utf-16-be"
    UTF32_LE = "utf-32-le"
    UTF32_BE = "utf-32-be"

    @property
    def is_wide(self) -> bool:
        """True for UTF-16/UTF-32 marks, which Copywrite never decodes or rewrites."""
        return self not in (BomKind.NONE, BomKind.UTF8)


class ScanState(Enum):
    """States of the header locator.

    Attributes:
        PREAMBLE: Consuming lines that must stay above the header.
        SCANNING: Skipping blank lines while looking for a comment start.
        INSIDE_BLOCK: Inside a block comment, looking for its end.
        INSIDE_LINE_RUN: Inside a run of line comments.
        DONE: Scan finished; the finding is final.
    """

    PREAMBLE = "preamble"
    SCANNING = "scanning"
    INSIDE_BLOCK = "inside block"
    INSIDE_LINE_RUN = "inside line run"
    DONE = "done"


class WriteAction(Enum):
    """How the rewriter splices the header into the file.

    Attributes:
        REPLACE: Replace the bounded license header in place.
        INSERT: Insert a new header after the preserved preamble.
    """

    REPLACE = "replace"
    INSERT = "insert"


class FileOutcome(ColoredStrEnum):
    """Per-file result reported by the runner."""

    INSERTED = ("inserted", chalk.green)
    REPLACED = ("replaced", chalk.green)
    UP_TO_DATE = ("up-to-date", chalk.gray)
    WOULD_INSERT = ("would insert", chalk.yellow)
    WOULD_REPLACE = ("would replace", chalk.yellow)
    UNREADABLE = ("unreadable", chalk.red_bright)
    UNSUPPORTED_ENCODING = ("unsupported encoding", chalk.red)
    WRITE_FAILED = ("write failed", chalk.red_bright)

    @property
    def changed(self) -> bool:
        """True if the file was (or would be) rewritten."""
        return self in (
            FileOutcome.INSERTED,
            FileOutcome.REPLACED,
            FileOutcome.WOULD_INSERT,
            FileOutcome.WOULD_REPLACE,
        )

    @property
    def failed(self) -> bool:
        """True if the file was skipped because of an error."""
        return self in (
            FileOutcome.UNREADABLE,
            FileOutcome.UNSUPPORTED_ENCODING,
            FileOutcome.WRITE_FAILED,
        )
