# topmark:header:start
#
#   project      : Copywrite
#   file         : scanner.py
#   file_relpath : src/copywrite/pipeline/steps/scanner.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Header locator step.

Scans the decoded lines of a file once, front to back, with a small finite
state machine::

    PREAMBLE --> SCANNING --> INSIDE_BLOCK ----> DONE
                     |   \\--> INSIDE_LINE_RUN --> DONE
                     \\-----------------------------^

* ``PREAMBLE``: while the current index equals ``skip`` and the profile's
  keep-first pattern matches, the line is preserved and ``skip`` advances.
* ``SCANNING``: blank lines are transparent; a block-comment start or a
  line-comment start opens a region; anything else means the file has no
  header.
* ``INSIDE_BLOCK``: a license line is recorded and never ends the block;
  otherwise the block-comment end terminates the region, and a year marker
  on any other line is recorded. An unterminated block yields "no header" rather than a
  guessed boundary.
* ``INSIDE_LINE_RUN``: markers are recorded while lines remain line comments;
  the run ends on the line before the first non-comment line (or at the last
  line of the file).

Every state is a transition method on `HeaderScanner` that consumes at most
one line and returns the next state.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from copywrite.config.logging import get_logger
from copywrite.constants import EMPTY_PATTERN, LICENSE_PATTERN, YEARS_PATTERN
from copywrite.languages.base import CommentKind
from copywrite.pipeline.context import HeaderFinding
from copywrite.pipeline.status import ScanState

if TYPE_CHECKING:
    from copywrite.config.logging import CopywriteLogger
    from copywrite.languages.base import LanguageProfile
    from copywrite.pipeline.context import Content

logger: CopywriteLogger = get_logger(__name__)


class HeaderScanner:
    """Single-use state machine locating the header region of one file.

    Args:
        content (Content): Loaded file image.
        language (LanguageProfile): Comment syntax of the file's language.

    Attributes:
        state (ScanState): Current state.
        index (int): Index of the next line to consume.
        skip (int): Number of preamble lines kept above the header.
        start (int | None): First line of the open or closed comment region.
        end (int | None): Last line (inclusive) of the closed comment region.
        years_line (int | None): Last line in the region carrying a year marker.
        has_license (bool): Whether a license or year marker was seen.
    """

    def __init__(self, content: Content, language: LanguageProfile) -> None:
        self.content = content
        self.language = language
        self.state: ScanState = ScanState.PREAMBLE
        self.index: int = 0
        self.skip: int = 0
        self.start: int | None = None
        self.end: int | None = None
        self.years_line: int | None = None
        self.has_license: bool = False
        self._transitions: dict[ScanState, Callable[[], ScanState]] = {
            ScanState.PREAMBLE: self.on_preamble,
            ScanState.SCANNING: self.on_scanning,
            ScanState.INSIDE_BLOCK: self.on_inside_block,
            ScanState.INSIDE_LINE_RUN: self.on_inside_line_run,
        }

    @property
    def _line(self) -> str:
        return self.content.lines[self.index]

    @property
    def _at_eof(self) -> bool:
        return self.index >= len(self.content.lines)

    def run(self) -> HeaderFinding:
        """Run the machine to completion and return the finding."""
        while self.state is not ScanState.DONE:
            previous: ScanState = self.state
            self.state = self._transitions[self.state]()
            if self.state is not previous:
                logger.trace(
                    "%s: %s -> %s at line %d",
                    self.content.path,
                    previous.value,
                    self.state.value,
                    self.index,
                )
        return self.finding()

    def finding(self) -> HeaderFinding:
        """Return the current scan result as an immutable finding."""
        return HeaderFinding(
            language=self.language.key,
            content=self.content,
            skip=self.skip,
            start=self.start,
            end=self.end,
            years_line=self.years_line,
            has_license=self.has_license,
        )

    # --- transitions ---

    def on_preamble(self) -> ScanState:
        """Keep the current line above the header if it matches keep-first."""
        if self._at_eof:
            return ScanState.DONE
        if self.index == self.skip and self.language.keeps_first(self._line):
            self.index += 1
            self.skip = self.index
            return ScanState.PREAMBLE
        return ScanState.SCANNING

    def on_scanning(self) -> ScanState:
        """Skip blank lines and look for the start of a comment region."""
        if self._at_eof:
            logger.debug("%s: reached end of file without a comment region", self.content.path)
            return ScanState.DONE
        line: str = self._line
        if EMPTY_PATTERN.match(line):
            self.index += 1
            return ScanState.SCANNING
        kind: CommentKind | None = self.language.match_start(line)
        if kind is CommentKind.BLOCK:
            self.start = self.index
            return ScanState.INSIDE_BLOCK
        if kind is CommentKind.LINE:
            self.start = self.index
            return ScanState.INSIDE_LINE_RUN
        logger.debug(
            "%s: no header, giving up at line %d: >%s<", self.content.path, self.index, line
        )
        return ScanState.DONE

    def on_inside_block(self) -> ScanState:
        """Record markers until the block comment ends."""
        if self._at_eof:
            logger.debug(
                "%s: block comment opened at line %s is never closed, assuming no header",
                self.content.path,
                self.start,
            )
            self.start = None
            self.end = None
            self.years_line = None
            self.has_license = False
            return ScanState.DONE
        line: str = self._line
        # A license line never closes the block; a closing line records no year.
        if LICENSE_PATTERN.search(line):
            self.has_license = True
        elif self.language.match_end(CommentKind.BLOCK, line):
            self.end = self.index
            return ScanState.DONE
        elif YEARS_PATTERN.search(line):
            self.has_license = True
            self.years_line = self.index
        self.index += 1
        return ScanState.INSIDE_BLOCK

    def on_inside_line_run(self) -> ScanState:
        """Record markers while lines remain line comments."""
        if self._at_eof:
            # The whole remainder of the file is comment lines.
            self.end = len(self.content.lines) - 1
            return ScanState.DONE
        line: str = self._line
        if self.language.match_end(CommentKind.LINE, line):
            self.end = self.index - 1
            return ScanState.DONE
        self._record_markers(line)
        self.index += 1
        return ScanState.INSIDE_LINE_RUN

    def _record_markers(self, line: str) -> None:
        if LICENSE_PATTERN.search(line):
            self.has_license = True
        elif YEARS_PATTERN.search(line):
            self.has_license = True
            self.years_line = self.index


def locate_header(content: Content, language: LanguageProfile) -> HeaderFinding:
    """Locate the header region of ``content`` using ``language``'s comment syntax.

    Args:
        content (Content): Loaded file image.
        language (LanguageProfile): Comment syntax profile.

    Returns:
        HeaderFinding: Preamble size, region bounds, and license markers.
    """
    finding: HeaderFinding = HeaderScanner(content, language).run()
    logger.debug(
        "Info for %s: start=%s, end=%s, has_license=%s, skip=%d, len=%d, years_line=%s",
        content.path,
        finding.start,
        finding.end,
        finding.has_license,
        finding.skip,
        len(content),
        finding.years_line,
    )
    return finding
