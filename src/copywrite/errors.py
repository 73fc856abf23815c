# topmark:header:start
#
#   project      : Copywrite
#   file         : errors.py
#   file_relpath : src/copywrite/errors.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Exceptions raised by the Copywrite core.

The hierarchy separates three families so callers can react differently:

* configuration errors (`ConfigurationError` and subclasses) abort the whole run
  before any file is touched;
* per-file errors (`FileProcessingError` and subclasses) are logged and the file
  is skipped;
* version-control errors (`GitError` and subclasses) abort the invocation mode
  that needed git.

The CLI maps each concrete class to a distinct exit code (see
`copywrite.cli.exit_codes.ExitCode`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path


class CopywriteError(Exception):
    """Base class for all Copywrite errors."""


# --- Configuration errors ---


class ConfigurationError(CopywriteError):
    """Fatal error in the run configuration; nothing is processed."""


class ConfigError(ConfigurationError):
    """Malformed or invalid configuration file."""


class UnsupportedLanguageError(ConfigurationError):
    """None of the requested language keys is supported."""

    def __init__(self, requested: Iterable[str]) -> None:
        self.requested: tuple[str, ...] = tuple(requested)
        super().__init__(
            f"Specified languages {list(self.requested)} are not supported, "
            "see help for more information."
        )


class DuplicateExtensionError(ValueError):
    """Two language profiles claim the same file extension."""

    def __init__(self, extension: str, first: str, second: str) -> None:
        self.extension = extension
        super().__init__(
            f"Extension '{extension}' is claimed by both '{first}' and '{second}'"
        )


class TemplateError(ConfigurationError):
    """Base class for template loading/rendering failures."""


class TemplateNotFoundError(TemplateError):
    """The template file does not exist."""


class TemplateReadError(TemplateError):
    """The template file exists but cannot be read."""


class TemplateRenderError(TemplateError):
    """The template text failed to render."""


# --- Per-file errors ---


class FileProcessingError(CopywriteError):
    """Failure confined to a single file; processing continues with the next one."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class ContentReadError(FileProcessingError):
    """The file could not be read."""


class UnsupportedEncodingError(FileProcessingError):
    """The file carries a UTF-16 or UTF-32 byte-order mark."""


class ContentWriteError(FileProcessingError):
    """The destination file could not be created or written."""


# --- Version control errors ---


class GitError(CopywriteError):
    """Base class for git collaborator failures."""


class GitRepositoryNotFoundError(GitError):
    """No git repository encloses the requested path."""


class GitIndexError(GitError):
    """The git index (or staged diff) could not be read."""


class GitStageError(GitError):
    """Rewritten files could not be re-added to the index."""
