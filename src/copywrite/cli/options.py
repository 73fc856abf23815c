# topmark:header:start
#
#   project      : Copywrite
#   file         : options.py
#   file_relpath : src/copywrite/cli/options.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Reusable Click options and their resolution logic.

The helpers here keep `copywrite.cli.main` thin: verbosity, file selection
and configuration options are declared once as decorators.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click

from copywrite.cli.errors import CopywriteUsageError
from copywrite.config.logging import TRACE_LEVEL

if TYPE_CHECKING:
    from collections.abc import Iterable

P = ParamSpec("P")
R = TypeVar("R")

LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: The logging level.

    Raises:
        CopywriteUsageError: If both ``-v`` and ``-q`` are given.

    Behavior:
        Three or more ``-v`` set TRACE, two set DEBUG, one sets INFO.
        Any ``-q`` sets ERROR. The default is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise CopywriteUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:  # -vv
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:  # -v
        return LOG_LEVELS["INFO"]

    if quiet_count >= 1:  # -q
        return LOG_LEVELS["ERROR"]

    return LOG_LEVELS["WARNING"]


def split_csv_values(values: Iterable[str]) -> list[str]:
    """Flatten repeated and comma-separated option values.

    ``("c,cpp", "rust")`` becomes ``["c", "cpp", "rust"]``; blank items are dropped.
    """
    out: list[str] = []
    for value in values:
        out.extend(item.strip() for item in value.split(",") if item.strip())
    return out


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (-v info, -vv debug, -vvv trace).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_file_selection_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add language, exclusion and git selection options to a command.

    Adds ``--language``, ``--exclude``, ``--git-index`` and ``--staged``.
    """
    f = click.option(
        "--language",
        "-l",
        "languages",
        multiple=True,
        metavar="KEY",
        help="Only process these languages (repeatable or comma-separated).",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        metavar="PATTERN",
        help="Exclude files and directories matching gitignore-style patterns.",
    )(f)
    f = click.option(
        "--git-index",
        "git_index",
        is_flag=True,
        help="Only process files present in the git index.",
    )(f)
    f = click.option(
        "--staged",
        "staged",
        is_flag=True,
        help="Only process staged files and re-stage the rewritten ones.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options to a command."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore copywrite.toml and pyproject.toml in the current directory.",
    )(f)
    f = click.option(
        "--config",
        "config_path",
        metavar="FILE",
        type=click.Path(dir_okay=False),
        help="Explicit config file (copywrite.toml or pyproject.toml).",
    )(f)
    return f
