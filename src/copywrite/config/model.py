# topmark:header:start
#
#   project      : Copywrite
#   file         : model.py
#   file_relpath : src/copywrite/config/model.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Run configuration: mutable builder and immutable snapshot.

Configuration layers are merged into a `MutableConfig` in order of increasing
precedence (defaults, config file, command line) and then frozen into a
`Config` for processing.

Recognized TOML keys (``copywrite.toml`` top level or ``[tool.copywrite]``)::

    template = "header.j2"           # relative to the config file
    languages = ["python", "c"]
    exclude = ["build", "vendor/"]
    git_index = false
    staged = false
    check = false
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from copywrite.config.logging import get_logger
from copywrite.errors import ConfigError

if TYPE_CHECKING:
    from copywrite.config.io import TomlTable
    from copywrite.config.logging import CopywriteLogger

logger: CopywriteLogger = get_logger(__name__)

KEY_TEMPLATE = "template"
KEY_LANGUAGES = "languages"
KEY_EXCLUDE = "exclude"
KEY_GIT_INDEX = "git_index"
KEY_STAGED = "staged"
KEY_CHECK = "check"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        template (Path | None): Template file to render.
        languages (tuple[str, ...] | None): Language keys to restrict processing to;
            None means every supported language.
        exclude (tuple[str, ...]): Gitignore-style exclusion patterns.
        git_index (bool): Only process files present in the git index.
        staged (bool): Only process staged files and re-stage rewritten ones.
        check (bool): Report stale files without writing.
        config_files (tuple[Path, ...]): Config files merged into this snapshot.
    """

    template: Path | None
    languages: tuple[str, ...] | None
    exclude: tuple[str, ...]
    git_index: bool
    staged: bool
    check: bool
    config_files: tuple[Path, ...]

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this snapshot."""
        return MutableConfig(
            template=self.template,
            languages=list(self.languages) if self.languages is not None else None,
            exclude=list(self.exclude),
            git_index=self.git_index,
            staged=self.staged,
            check=self.check,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder. Call `freeze` to obtain a `Config`."""

    template: Path | None = None
    languages: list[str] | None = None
    exclude: list[str] = field(default_factory=list)
    git_index: bool = False
    staged: bool = False
    check: bool = False
    config_files: list[Path] = field(default_factory=list)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        return cls()

    def merge_toml(self, table: TomlTable, source: Path) -> MutableConfig:
        """Merge a Copywrite TOML table into this draft.

        Args:
            table (TomlTable): Settings table (top level of ``copywrite.toml`` or
                ``[tool.copywrite]``).
            source (Path): File the table was read from; relative template paths
                are resolved against its directory.

        Returns:
            MutableConfig: This draft, for chaining.

        Raises:
            ConfigError: If a known key has a value of the wrong type.
        """
        for key, value in table.items():
            if key == KEY_TEMPLATE:
                self.template = source.parent / _expect_str(key, value, source)
            elif key == KEY_LANGUAGES:
                self.languages = _expect_str_list(key, value, source)
            elif key == KEY_EXCLUDE:
                self.exclude = _expect_str_list(key, value, source)
            elif key == KEY_GIT_INDEX:
                self.git_index = _expect_bool(key, value, source)
            elif key == KEY_STAGED:
                self.staged = _expect_bool(key, value, source)
            elif key == KEY_CHECK:
                self.check = _expect_bool(key, value, source)
            else:
                logger.warning("Ignoring unknown configuration key '%s' in %s", key, source)
        self.config_files.append(source)
        logger.debug("Merged configuration from %s", source)
        return self

    def freeze(self) -> Config:
        """Freeze the draft into an immutable `Config` snapshot.

        Raises:
            ConfigError: If ``git_index`` and ``staged`` are both set.
        """
        if self.git_index and self.staged:
            raise ConfigError("'git_index' and 'staged' are mutually exclusive")
        return Config(
            template=self.template,
            languages=tuple(self.languages) if self.languages is not None else None,
            exclude=tuple(self.exclude),
            git_index=self.git_index,
            staged=self.staged,
            check=self.check,
            config_files=tuple(self.config_files),
        )


def _expect_str(key: str, value: Any, source: Path) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' in {source} must be a string")
    return value


def _expect_bool(key: str, value: Any, source: Path) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' in {source} must be a boolean")
    return value


def _expect_str_list(key: str, value: Any, source: Path) -> list[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' in {source} must be a string or a list of strings")
    return list(value)
