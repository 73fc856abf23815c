# topmark:header:start
#
#   project      : Copywrite
#   file         : runner.py
#   file_relpath : src/copywrite/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Sequential runner applying headers to a batch of files.

`apply_headers` is the single entry point used by the CLI. For every path it
resolves a language profile by extension and runs the per-file sequence::

    load_content -> locate_header -> needs_update -> format_header -> rewrite_file

Files whose extension matches no profile are skipped silently. Per-file read
and write errors are logged and recorded in the returned `RunSummary`; they
never abort the batch. Restricting the registry to languages that do not
exist raises before any file is touched.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from copywrite.config.logging import get_logger
from copywrite.errors import (
    ContentReadError,
    ContentWriteError,
    UnsupportedEncodingError,
)
from copywrite.languages.registry import get_language_registry
from copywrite.pipeline.status import FileOutcome, WriteAction
from copywrite.pipeline.steps.builder import HeaderCache
from copywrite.pipeline.steps.comparer import needs_update
from copywrite.pipeline.steps.reader import load_content
from copywrite.pipeline.steps.scanner import locate_header
from copywrite.pipeline.steps.writer import rewrite_file, select_action

if TYPE_CHECKING:
    import os
    from collections.abc import Iterable, Sequence

    from copywrite.config.logging import CopywriteLogger
    from copywrite.languages.base import LanguageProfile
    from copywrite.languages.registry import LanguageRegistry
    from copywrite.pipeline.context import Content, HeaderFinding

logger: CopywriteLogger = get_logger(__name__)


@dataclass(frozen=True)
class FileResult:
    """Outcome of processing one file.

    Attributes:
        path (Path): The processed file.
        language (str): Language key the file was resolved to.
        outcome (FileOutcome): What happened to the file.
        message (str | None): Error message for failed files.
    """

    path: Path
    language: str
    outcome: FileOutcome
    message: str | None = None


@dataclass
class RunSummary:
    """Results of one `apply_headers` call, in processing order."""

    results: list[FileResult] = field(default_factory=list)

    def add(self, result: FileResult) -> None:
        self.results.append(result)

    @property
    def changed(self) -> list[Path]:
        """Files that were rewritten (or would be, in check mode)."""
        return [r.path for r in self.results if r.outcome.changed]

    @property
    def failed(self) -> list[FileResult]:
        """Files skipped because of an error."""
        return [r for r in self.results if r.outcome.failed]

    def count(self, outcome: FileOutcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)


def process_file(
    path: Path,
    language: LanguageProfile,
    headers: HeaderCache,
    *,
    check: bool = False,
) -> FileResult:
    """Load, scan, compare and (if needed) rewrite a single file.

    Args:
        path (Path): File to process.
        language (LanguageProfile): Profile resolved for the file.
        headers (HeaderCache): Formatted header lines per language.
        check (bool): If True, report what would change without writing.

    Returns:
        FileResult: The outcome for ``path``.
    """
    try:
        content: Content = load_content(path)
    except UnsupportedEncodingError as e:
        logger.error("%s", e)
        return FileResult(path, language.key, FileOutcome.UNSUPPORTED_ENCODING, str(e))
    except ContentReadError as e:
        logger.error("%s", e)
        return FileResult(path, language.key, FileOutcome.UNREADABLE, str(e))

    finding: HeaderFinding = locate_header(content, language)
    header: list[str] = headers.get(language)

    if not needs_update(finding, header):
        logger.info("Header is up-to-date in file %s", path)
        return FileResult(path, language.key, FileOutcome.UP_TO_DATE)

    if check:
        action: WriteAction = select_action(finding)
        outcome = (
            FileOutcome.WOULD_REPLACE if action is WriteAction.REPLACE else FileOutcome.WOULD_INSERT
        )
        logger.info("Header %s in file %s", outcome.value, path)
        return FileResult(path, language.key, outcome)

    try:
        action = rewrite_file(path, finding, header)
    except ContentWriteError as e:
        logger.error("%s", e)
        return FileResult(path, language.key, FileOutcome.WRITE_FAILED, str(e))
    outcome = FileOutcome.REPLACED if action is WriteAction.REPLACE else FileOutcome.INSERTED
    return FileResult(path, language.key, outcome)


def apply_headers(
    file_paths: Iterable[str | os.PathLike[str]],
    template_lines: Sequence[str],
    languages: Iterable[str] | None = None,
    *,
    check: bool = False,
    registry: LanguageRegistry | None = None,
) -> RunSummary:
    """Apply the rendered template as a header to every supported file.

    Args:
        file_paths (Iterable[str | os.PathLike[str]]): Candidate files.
        template_lines (Sequence[str]): Rendered template content lines.
        languages (Iterable[str] | None): Optional language keys restricting which
            profiles are used.
        check (bool): If True, nothing is written; stale files are reported as
            ``would insert`` / ``would replace``.
        registry (LanguageRegistry | None): Registry to resolve extensions against;
            defaults to the built-in registry.

    Returns:
        RunSummary: Per-file outcomes.

    Raises:
        UnsupportedLanguageError: If ``languages`` contains no supported key.
    """
    if registry is None:
        registry = get_language_registry()
    if languages is not None:
        registry = registry.subset(languages)

    headers = HeaderCache(template_lines)
    summary = RunSummary()
    for raw_path in file_paths:
        path = Path(raw_path)
        language: LanguageProfile | None = registry.resolve_path(path)
        if language is None:
            logger.trace("No language profile for %s, skipping", path)
            continue
        logger.debug("Checking file %s (%s)", path, language.key)
        summary.add(process_file(path, language, headers, check=check))
    return summary
