# topmark:header:start
#
#   project      : Copywrite
#   file         : file_resolver.py
#   file_relpath : src/copywrite/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Resolve candidate files below a root path.

Exclusions are gitignore-style patterns (evaluated with pathspec) matched
against both the entry name and its POSIX path relative to the walk root, so
``build`` excludes every directory or file named ``build`` while
``src/generated/`` excludes one specific directory. Excluded directories are
pruned from the walk. Empty files are never candidates. The result is a
deterministic, sorted, de-duplicated list.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from copywrite.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from copywrite.config.logging import CopywriteLogger

logger: CopywriteLogger = get_logger(__name__)


def build_exclude_spec(patterns: Iterable[str]) -> PathSpec | None:
    """Compile exclusion patterns, or return None when there are none."""
    pats: list[str] = [p for p in (s.strip() for s in patterns) if p and not p.startswith("#")]
    if not pats:
        return None
    return PathSpec.from_lines(GitWildMatchPattern, pats)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


def _is_excluded(spec: PathSpec | None, path: Path, root: Path, *, is_dir: bool) -> bool:
    if spec is None:
        return False
    rel: str = _rel_for_match(path, root)
    candidates: list[str] = [path.name, rel]
    if is_dir:
        # Directory-only patterns ("build/") need a trailing slash to match.
        candidates += [f"{path.name}/", f"{rel}/"]
    return any(spec.match_file(c) for c in candidates)


def _is_empty(path: Path) -> bool:
    try:
        return path.stat().st_size == 0
    except OSError as e:
        logger.debug("Cannot stat %s: %s", path, e)
        return True


def walk(root: Path, excludes: Iterable[str] = ()) -> list[Path]:
    """Return the non-empty files below ``root`` that are not excluded.

    Args:
        root (Path): A directory to walk recursively (following symlinks) or a
            single file.
        excludes (Iterable[str]): Gitignore-style exclusion patterns.

    Returns:
        list[Path]: Sorted, de-duplicated candidate files.
    """
    spec: PathSpec | None = build_exclude_spec(excludes)
    found: set[Path] = set()

    if root.is_file():
        if _is_empty(root):
            logger.debug("%s is empty, skipping.", root)
        elif _is_excluded(spec, root, root.parent, is_dir=False):
            logger.info("File %s is excluded, skipping.", root)
        else:
            found.add(root)
        return sorted(found)

    for dirpath, dirnames, filenames in os.walk(root, followlinks=True):
        current = Path(dirpath)
        kept_dirs: list[str] = []
        for name in dirnames:
            if _is_excluded(spec, current / name, root, is_dir=True):
                logger.info("Directory %s is excluded, skipping.", current / name)
            else:
                kept_dirs.append(name)
        # Prune in place so os.walk does not descend into excluded directories.
        dirnames[:] = sorted(kept_dirs)

        for name in filenames:
            path: Path = current / name
            if not path.is_file():
                continue
            if _is_excluded(spec, path, root, is_dir=False):
                logger.info("File %s is excluded, skipping.", path)
                continue
            if _is_empty(path):
                logger.debug("%s is empty, skipping.", path)
                continue
            found.add(path)

    logger.debug("Resolved %d candidate file(s) below %s", len(found), root)
    return sorted(found)


def filter_to(paths: Iterable[Path], allowed: Collection[Path]) -> list[Path]:
    """Keep only the paths whose resolved absolute form is in ``allowed``.

    Args:
        paths (Iterable[Path]): Candidate paths.
        allowed (Collection[Path]): Resolved absolute paths to keep (e.g. the git index).

    Returns:
        list[Path]: The kept paths, in input order.
    """
    kept: list[Path] = []
    for p in paths:
        if p.resolve() in allowed:
            kept.append(p)
        else:
            logger.debug("%s is not in the allowed set, skipping.", p)
    return kept
