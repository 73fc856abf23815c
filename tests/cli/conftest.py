# topmark:header:start
#
#   project      : Copywrite
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""CLI test helpers for running Copywrite in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click command, so relative PATH arguments, relative
template paths and config discovery resolve against the test directory.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from copywrite.cli.exit_codes import ExitCode
from copywrite.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

#: Minimal template used by the CLI tests.
TEMPLATE_TEXT: str = "Copyright (c) {{ year }} Example Corp\nSPDX-License-Identifier: MIT\n"


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``[".", "--check"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI without changing the working directory."""
    return CliRunner().invoke(cli, list(argv))


def write_template(directory: Path, name: str = "header.j2", text: str = TEMPLATE_TEXT) -> Path:
    """Write a template file and return its path."""
    path: Path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``.

    Args:
        result (Result): Result returned by `run_cli` or `run_cli_in`.
        code (ExitCode): Expected exit code.
    """
    assert result.exit_code == code, result.output


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert_exit(result, ExitCode.SUCCESS)


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2)."""
    # WOULD_CHANGE is a *normal* outcome; do not assert on exception.
    assert_exit(result, ExitCode.WOULD_CHANGE)
