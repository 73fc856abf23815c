# topmark:header:start
#
#   project      : Copywrite
#   file         : builder.py
#   file_relpath : src/copywrite/pipeline/steps/builder.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Header builder step: wrap rendered template lines in comment syntax."""

from __future__ import annotations

from typing import TYPE_CHECKING

from copywrite.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from copywrite.config.logging import CopywriteLogger
    from copywrite.languages.base import LanguageProfile

logger: CopywriteLogger = get_logger(__name__)


def format_header(template_lines: Sequence[str], language: LanguageProfile) -> list[str]:
    """Return the literal header lines for ``language``.

    The result is the profile's start line (if any), each template line wrapped
    in the line prefix and suffix, then the profile's end line (if any). Blank
    template lines use the right-trimmed prefix.

    Args:
        template_lines (Sequence[str]): Rendered template content lines.
        language (LanguageProfile): Target language profile.

    Returns:
        list[str]: Header lines without terminators.
    """
    header: list[str] = language.format(template_lines)
    logger.trace("Formatted %d header lines for %s", len(header), language.key)
    return header


class HeaderCache:
    """Formatted header lines memoized per language key.

    Profiles are per language, not per file, so the header only has to be
    formatted once per language within a run.

    Args:
        template_lines (Sequence[str]): Rendered template content lines.
    """

    def __init__(self, template_lines: Sequence[str]) -> None:
        self.template_lines: tuple[str, ...] = tuple(template_lines)
        self._headers: dict[str, list[str]] = {}

    def get(self, language: LanguageProfile) -> list[str]:
        """Return the (cached) header lines for ``language``."""
        header: list[str] | None = self._headers.get(language.key)
        if header is None:
            header = format_header(self.template_lines, language)
            self._headers[language.key] = header
        return header
