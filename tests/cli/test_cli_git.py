# topmark:header:start
#
#   project      : Copywrite
#   file         : test_cli_git.py
#   file_relpath : tests/cli/test_cli_git.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""CLI tests for the git-backed selection modes (``--git-index`` and ``--staged``)."""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

import pytest

from copywrite.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in, write_template
from tests.conftest import mark_cli, mark_integration, write_bytes
from tests.vcs.conftest import git, init_repo

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


@mark_cli
@mark_integration
def test_git_index_restricts_to_tracked_files(tmp_path: Path) -> None:
    init_repo(tmp_path)
    write_template(tmp_path)
    tracked: Path = write_bytes(tmp_path, "src/a.c", b"int a;\n")
    untracked: Path = write_bytes(tmp_path, "src/b.c", b"int b;\n")
    git(tmp_path, "add", "src/a.c")

    assert_SUCCESS(run_cli_in(tmp_path, ["src", "-t", "header.j2", "--git-index"]))

    assert tracked.read_bytes() != b"int a;\n"
    assert untracked.read_bytes() == b"int b;\n"


@mark_cli
@mark_integration
def test_staged_mode_rewrites_and_restages(tmp_path: Path) -> None:
    init_repo(tmp_path)
    write_template(tmp_path)
    committed: Path = write_bytes(tmp_path, "src/old.c", b"int old;\n")
    git(tmp_path, "add", ".")
    git(tmp_path, "commit", "-q", "-m", "init")

    staged: Path = write_bytes(tmp_path, "src/new.c", b"int new;\n")
    git(tmp_path, "add", "src/new.c")

    assert_SUCCESS(run_cli_in(tmp_path, ["src", "-t", "header.j2", "--staged"]))

    assert committed.read_bytes() == b"int old;\n"
    assert staged.read_bytes().startswith(b"/*\n")
    # The rewritten file was re-added: nothing is left unstaged.
    assert git(tmp_path, "diff", "--name-only") == ""


@mark_cli
@mark_integration
def test_git_index_outside_repository(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    root: Path = tmp_path.resolve()
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(root.parent))
    write_template(root)
    write_bytes(root, "src/a.c", b"int a;\n")

    result = run_cli_in(root, ["src", "-t", "header.j2", "--git-index"])

    assert_exit(result, ExitCode.GIT_REPOSITORY_NOT_FOUND)


@mark_cli
@mark_integration
def test_staged_mode_from_a_subdirectory(tmp_path: Path) -> None:
    init_repo(tmp_path)
    sub: Path = tmp_path / "sub"
    write_template(sub)
    staged: Path = write_bytes(sub, "a.c", b"int a;\n")
    git(tmp_path, "add", "sub/a.c")

    assert_SUCCESS(run_cli_in(sub, [".", "-t", "header.j2", "--staged"]))

    assert staged.read_bytes().startswith(b"/*\n")
    assert git(tmp_path, "diff", "--name-only") == ""
