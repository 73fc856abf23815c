# topmark:header:start
#
#   project      : Copywrite
#   file         : git.py
#   file_relpath : src/copywrite/vcs/git.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Git collaborator: index listing, staged listing, and re-staging.

All operations shell out to the ``git`` executable. Paths reported by git are
relative to the repository root and are returned as resolved absolute paths so
they can be compared with paths produced by the filesystem walk.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

from copywrite.config.logging import get_logger
from copywrite.errors import GitIndexError, GitRepositoryNotFoundError, GitStageError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from copywrite.config.logging import CopywriteLogger

logger: CopywriteLogger = get_logger(__name__)


def _run_git(args: Sequence[str], cwd: Path) -> subprocess.CompletedProcess[bytes]:
    logger.debug("Running git %s in %s", " ".join(args), cwd)
    return subprocess.run(
        ["git", *args],
        cwd=cwd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        check=True,
    )


def _workdir(path: Path) -> Path:
    return path if path.is_dir() else path.parent


def _split_z(output: bytes) -> list[str]:
    return [s for s in output.decode("utf-8", errors="surrogateescape").split("\0") if s]


def discover_repository(path: Path) -> Path:
    """Return the root of the git repository enclosing ``path``.

    Raises:
        GitRepositoryNotFoundError: If ``path`` is not inside a git work tree or
            git is not available.
    """
    try:
        result = _run_git(["rev-parse", "--show-toplevel"], _workdir(path))
    except (OSError, subprocess.CalledProcessError) as e:
        stderr: str = (getattr(e, "stderr", None) or b"").decode("utf-8", errors="replace").strip()
        raise GitRepositoryNotFoundError(
            f"Could not find a git repository for {path}: {stderr or e}"
        ) from e
    return Path(result.stdout.decode("utf-8", errors="surrogateescape").strip()).resolve()


def index_files(path: Path) -> set[Path]:
    """Return every file in the git index of the repository enclosing ``path``.

    Raises:
        GitRepositoryNotFoundError: If no repository encloses ``path``.
        GitIndexError: If the index cannot be read.
    """
    root: Path = discover_repository(path)
    try:
        result = _run_git(["ls-files", "-z"], root)
    except (OSError, subprocess.CalledProcessError) as e:
        raise GitIndexError(f"Could not read the git index of {root}: {e}") from e
    files: set[Path] = {(root / rel).resolve() for rel in _split_z(result.stdout)}
    logger.debug("Git index of %s lists %d file(s)", root, len(files))
    return files


def staged_files(path: Path) -> list[Path]:
    """Return staged (added, copied, modified, renamed) files below ``path``.

    Raises:
        GitRepositoryNotFoundError: If no repository encloses ``path``.
        GitIndexError: If the staged diff cannot be read.
    """
    root: Path = discover_repository(path)
    try:
        result = _run_git(["diff", "--cached", "--name-only", "--diff-filter=ACMR", "-z"], root)
    except (OSError, subprocess.CalledProcessError) as e:
        raise GitIndexError(f"Could not list staged files of {root}: {e}") from e

    scope: Path = path.resolve()
    files: list[Path] = []
    for rel in _split_z(result.stdout):
        p: Path = (root / rel).resolve()
        if p == scope or scope in p.parents:
            files.append(p)
    logger.debug("%d staged file(s) below %s", len(files), scope)
    return sorted(files)


def stage_files(repo_root: Path, paths: Sequence[Path]) -> None:
    """Add ``paths`` to the index of the repository at ``repo_root``.

    Paths are resolved against the current directory before git runs in
    ``repo_root``.

    Raises:
        GitStageError: If ``git add`` fails.
    """
    if not paths:
        return
    try:
        _run_git(["add", "--", *(str(p.resolve()) for p in paths)], repo_root)
    except (OSError, subprocess.CalledProcessError) as e:
        raise GitStageError(f"Could not re-stage {len(paths)} file(s): {e}") from e
    logger.info("Re-staged %d file(s)", len(paths))
