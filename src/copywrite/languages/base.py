# topmark:header:start
#
#   project      : Copywrite
#   file         : base.py
#   file_relpath : src/copywrite/languages/base.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Language profiles describing comment syntax and header formatting.

A *language profile* tells Copywrite how to recognize an existing header in a
file of a given language and how to emit a new one. Profiles come in three
flavors sharing one capability interface:

* `BlockLanguage`: true block comments (``/* ... */``, ``<!-- ... -->``),
  optionally falling back to line comments (``//``) for detection.
* `LineLanguage`: line comments only, headers are emitted as a run of prefixed
  lines without start/end lines (e.g. Protocol Buffers).
* `PragmaLanguage`: line comments only, headers are framed by one marker line
  repeated at the top and bottom (e.g. ``#`` for Python).

Detection relies on the regular expressions (`match_start`, `match_end`,
`keeps_first`); emission relies on the literal `HeaderFormat` (`format`).
Because block-start and block-end patterns only exist together on
`BlockLanguage`, a profile with one but not the other cannot be built.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import re
    from collections.abc import Sequence


class CommentKind(Enum):
    """Kind of comment region that opened a header candidate.

    Attributes:
        BLOCK: A block comment; the region ends at the block-end delimiter.
        LINE: A run of line comments; the region ends at the first line that is
            not a line comment.
    """

    BLOCK = "block"
    LINE = "line"


@dataclass(frozen=True, slots=True)
class HeaderFormat:
    """Literal delimiters used when emitting a header.

    Attributes:
        start_line (str | None): Line written before the content lines.
        end_line (str | None): Line written after the content lines.
        line_prefix (str): Prefix for every content line.
        line_suffix (str): Suffix for every content line.
    """

    start_line: str | None = None
    end_line: str | None = None
    line_prefix: str = ""
    line_suffix: str = ""

    def wrap(self, template_lines: Sequence[str]) -> list[str]:
        """Wrap rendered template lines into literal header lines.

        Empty template lines use the right-trimmed prefix so blank header lines
        carry no trailing whitespace.

        Args:
            template_lines (Sequence[str]): Rendered template content lines.

        Returns:
            list[str]: Header lines without line terminators.
        """
        header: list[str] = []
        if self.start_line is not None:
            header.append(self.start_line)
        for line in template_lines:
            prefix: str = self.line_prefix.rstrip() if not line else self.line_prefix
            header.append(f"{prefix}{line}{self.line_suffix}")
        if self.end_line is not None:
            header.append(self.end_line)
        return header


@dataclass(frozen=True, kw_only=True)
class LanguageProfile(ABC):
    """Common capability interface of all language profiles.

    Attributes:
        key (str): Language identifier (e.g. ``"python"``).
        extensions (tuple[str, ...]): File extensions including the leading dot,
            matched case-sensitively against ``Path.suffix``.
        keep_first (re.Pattern[str] | None): Lines matching this pattern at the very
            top of a file are preserved above any header.
        line_prefix (str): Prefix for each emitted content line.
        line_suffix (str): Suffix for each emitted content line.
    """

    key: str
    extensions: tuple[str, ...]
    keep_first: re.Pattern[str] | None = None
    line_prefix: str = ""
    line_suffix: str = ""

    def keeps_first(self, line: str) -> bool:
        """Return True if ``line`` belongs to the preamble kept above the header."""
        return self.keep_first is not None and self.keep_first.search(line) is not None

    @abstractmethod
    def match_start(self, line: str) -> CommentKind | None:
        """Return the kind of comment region opened by ``line``, if any.

        Args:
            line (str): Decoded line without terminator.

        Returns:
            CommentKind | None: The comment kind, or None if the line does not
                open a comment region.
        """

    @abstractmethod
    def match_end(self, kind: CommentKind, line: str) -> bool:
        """Return True if ``line`` terminates an open region of ``kind``.

        For block regions the terminating line is part of the region. For line
        regions the terminating line is the first one *outside* the region.
        """

    @property
    @abstractmethod
    def header_format(self) -> HeaderFormat:
        """Literal delimiters used to emit a header for this language."""

    def format(self, template_lines: Sequence[str]) -> list[str]:
        """Format rendered template lines as this language's header lines."""
        return self.header_format.wrap(template_lines)


def _matches(pattern: re.Pattern[str] | None, line: str) -> bool:
    return pattern is not None and pattern.search(line) is not None


@dataclass(frozen=True, kw_only=True)
class BlockLanguage(LanguageProfile):
    """Language with block comments and an optional line-comment fallback.

    Attributes:
        block_start (re.Pattern[str]): Pattern for the line opening a block comment.
        block_end (re.Pattern[str]): Pattern for the line closing a block comment.
        line_comment (re.Pattern[str] | None): Line-comment pattern used when a line
            does not open a block comment.
        start_line (str | None): Literal first header line.
        end_line (str | None): Literal last header line.
    """

    block_start: re.Pattern[str]
    block_end: re.Pattern[str]
    line_comment: re.Pattern[str] | None = None
    start_line: str | None = None
    end_line: str | None = None

    def match_start(self, line: str) -> CommentKind | None:
        # Block syntax wins when a line matches both
        if _matches(self.block_start, line):
            return CommentKind.BLOCK
        if _matches(self.line_comment, line):
            return CommentKind.LINE
        return None

    def match_end(self, kind: CommentKind, line: str) -> bool:
        if kind is CommentKind.BLOCK:
            return _matches(self.block_end, line)
        return not _matches(self.line_comment, line)

    @property
    def header_format(self) -> HeaderFormat:
        return HeaderFormat(
            start_line=self.start_line,
            end_line=self.end_line,
            line_prefix=self.line_prefix,
            line_suffix=self.line_suffix,
        )


@dataclass(frozen=True, kw_only=True)
class LineLanguage(LanguageProfile):
    """Language with line comments only; headers have no start/end lines.

    Attributes:
        line_comment (re.Pattern[str]): Line-comment pattern.
    """

    line_comment: re.Pattern[str]

    def match_start(self, line: str) -> CommentKind | None:
        return CommentKind.LINE if _matches(self.line_comment, line) else None

    def match_end(self, kind: CommentKind, line: str) -> bool:
        return not _matches(self.line_comment, line)

    @property
    def header_format(self) -> HeaderFormat:
        return HeaderFormat(line_prefix=self.line_prefix, line_suffix=self.line_suffix)


@dataclass(frozen=True, kw_only=True)
class PragmaLanguage(LineLanguage):
    """Line-comment language whose headers are framed by a repeated marker line.

    Attributes:
        marker (str): Literal line written both above and below the content lines.
    """

    marker: str = field(default="#")

    @property
    def header_format(self) -> HeaderFormat:
        return HeaderFormat(
            start_line=self.marker,
            end_line=self.marker,
            line_prefix=self.line_prefix,
            line_suffix=self.line_suffix,
        )
