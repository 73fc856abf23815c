# topmark:header:start
#
#   project      : Copywrite
#   file         : test_options.py
#   file_relpath : tests/cli/test_options.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Tests for option resolution helpers and the core-to-CLI error mapping."""

from __future__ import annotations

import logging

import pytest

from copywrite.cli.errors import CopywriteUsageError, to_cli_error
from copywrite.cli.exit_codes import ExitCode
from copywrite.cli.options import resolve_verbosity, split_csv_values
from copywrite.config.logging import TRACE_LEVEL
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
from tests.conftest import parametrize


@parametrize(
    "verbose, quiet, level",
    [
        (0, 0, logging.WARNING),
        (1, 0, logging.INFO),
        (2, 0, logging.DEBUG),
        (3, 0, TRACE_LEVEL),
        (5, 0, TRACE_LEVEL),
        (0, 1, logging.ERROR),
        (0, 2, logging.ERROR),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, level: int) -> None:
    assert resolve_verbosity(verbose, quiet) == level


def test_resolve_verbosity_rejects_both() -> None:
    with pytest.raises(CopywriteUsageError):
        resolve_verbosity(1, 1)


def test_split_csv_values() -> None:
    assert split_csv_values(("c, cpp", "rust", ",,")) == ["c", "cpp", "rust"]
    assert split_csv_values(()) == []


@parametrize(
    "error, code",
    [
        (UnsupportedLanguageError(["cobol"]), ExitCode.UNSUPPORTED_LANGUAGE),
        (TemplateNotFoundError("x"), ExitCode.TEMPLATE_NOT_FOUND),
        (TemplateReadError("x"), ExitCode.TEMPLATE_UNREADABLE),
        (TemplateRenderError("x"), ExitCode.TEMPLATE_RENDER_FAILED),
        (ConfigError("x"), ExitCode.CONFIG_ERROR),
        (GitRepositoryNotFoundError("x"), ExitCode.GIT_REPOSITORY_NOT_FOUND),
        (GitIndexError("x"), ExitCode.GIT_INDEX_UNREADABLE),
        (GitStageError("x"), ExitCode.GIT_STAGE_FAILED),
        (CopywriteError("x"), ExitCode.USAGE_ERROR),
    ],
)
def test_to_cli_error(error: CopywriteError, code: ExitCode) -> None:
    cli_error = to_cli_error(error)
    assert cli_error.exit_code == code
    assert cli_error.format_message() == str(error)


def test_exit_codes_are_distinct() -> None:
    values = [c.value for c in ExitCode]
    assert len(values) == len(set(values))
