# topmark:header:start
#
#   project      : Copywrite
#   file         : comparer.py
#   file_relpath : src/copywrite/pipeline/steps/comparer.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Comparer step: decide whether a file's header must be rewritten.

The decision is purely positional: the freshly formatted header lines are
compared one by one against the file's decoded lines, starting at the
detected region start. A header with a different line count is therefore
always stale, and a stored year range only matters through the rendered line
it appears on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from copywrite.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from copywrite.config.logging import CopywriteLogger
    from copywrite.pipeline.context import HeaderFinding

logger: CopywriteLogger = get_logger(__name__)


def needs_update(finding: HeaderFinding, header_lines: Sequence[str]) -> bool:
    """Return True if the file described by ``finding`` needs a new header.

    Args:
        finding (HeaderFinding): Scan result of the file.
        header_lines (Sequence[str]): Formatted header lines (no terminators).

    Returns:
        bool: True when no license was detected, when any header line differs
            from the file line at the same position, or when the header runs
            past the end of the file; False when every line matches.
    """
    if not finding.has_license:
        return True

    lines: tuple[str, ...] = finding.content.lines
    start: int = finding.start or 0
    for offset, expected in enumerate(header_lines):
        pos: int = start + offset
        if pos >= len(lines):
            logger.debug("Header runs past end of file at line %d", pos)
            return True
        if lines[pos] != expected:
            logger.debug("Header differs at line %d: >%s< != >%s<", pos, lines[pos], expected)
            return True
    return False
