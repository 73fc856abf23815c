# topmark:header:start
#
#   project      : Copywrite
#   file         : errors.py
#   file_relpath : src/copywrite/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Click exceptions for the Copywrite CLI.

Usage:
    Core code raises `copywrite.errors.CopywriteError` subclasses; the CLI
    converts them with `to_cli_error` so Click prints the message and exits
    with the matching `ExitCode`.
"""

from __future__ import annotations

from typing import IO, Any

import click

from copywrite.cli.exit_codes import ExitCode
from copywrite.errors import (
    ConfigError,
    CopywriteError,
    GitIndexError,
    GitRepositoryNotFoundError,
    GitStageError,
    TemplateNotFoundError,
    TemplateReadError,
    TemplateRenderError,
    UnsupportedLanguageError,
)


class CopywriteCliError(click.ClickException):
    """Base class for all Copywrite CLI errors."""

    exit_code = ExitCode.USAGE_ERROR

    def format_message(self) -> str:
        """Return the plain error message text (Click adds an ``Error:`` prefix)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the error in bright red on stderr."""
        click.secho(f"Error: {self.format_message()}", file=file, err=True, fg="bright_red")


class CopywriteUsageError(CopywriteCliError):
    """Invalid combination of command-line flags."""

    exit_code = ExitCode.USAGE_ERROR


class CopywriteConfigError(CopywriteCliError):
    """Malformed or invalid configuration file."""

    exit_code = ExitCode.CONFIG_ERROR


class CopywriteInvalidPathError(CopywriteCliError):
    """The PATH argument does not exist."""

    exit_code = ExitCode.INVALID_PATH


class CopywriteUnsupportedLanguageError(CopywriteCliError):
    """None of the requested languages is supported."""

    exit_code = ExitCode.UNSUPPORTED_LANGUAGE


class CopywriteTemplateNotFoundError(CopywriteCliError):
    """Template file not found."""

    exit_code = ExitCode.TEMPLATE_NOT_FOUND


class CopywriteTemplateUnreadableError(CopywriteCliError):
    """Template file not readable."""

    exit_code = ExitCode.TEMPLATE_UNREADABLE


class CopywriteTemplateRenderError(CopywriteCliError):
    """Template rendering failed."""

    exit_code = ExitCode.TEMPLATE_RENDER_FAILED


class CopywriteGitRepositoryError(CopywriteCliError):
    """No git repository encloses the requested path."""

    exit_code = ExitCode.GIT_REPOSITORY_NOT_FOUND


class CopywriteGitIndexError(CopywriteCliError):
    """Git index or staged diff could not be read."""

    exit_code = ExitCode.GIT_INDEX_UNREADABLE


class CopywriteGitStageError(CopywriteCliError):
    """Rewritten files could not be re-staged."""

    exit_code = ExitCode.GIT_STAGE_FAILED


# Most specific classes first; lookup walks the list in order.
_ERROR_MAP: list[tuple[type[CopywriteError], type[CopywriteCliError]]] = [
    (UnsupportedLanguageError, CopywriteUnsupportedLanguageError),
    (TemplateNotFoundError, CopywriteTemplateNotFoundError),
    (TemplateReadError, CopywriteTemplateUnreadableError),
    (TemplateRenderError, CopywriteTemplateRenderError),
    (ConfigError, CopywriteConfigError),
    (GitRepositoryNotFoundError, CopywriteGitRepositoryError),
    (GitIndexError, CopywriteGitIndexError),
    (GitStageError, CopywriteGitStageError),
]


def to_cli_error(error: CopywriteError) -> CopywriteCliError:
    """Map a core exception to the CLI exception carrying its exit code.

    Args:
        error (CopywriteError): Exception raised by the core.

    Returns:
        CopywriteCliError: Click exception with the matching exit code; errors
            without a dedicated mapping become a `CopywriteUsageError`.
    """
    for core_cls, cli_cls in _ERROR_MAP:
        if isinstance(error, core_cls):
            return cli_cls(str(error))
    return CopywriteUsageError(str(error))
