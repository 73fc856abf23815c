# topmark:header:start
#
#   project      : Copywrite
#   file         : registry.py
#   file_relpath : src/copywrite/languages/registry.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Registry of language profiles keyed by language identifier.

The registry is read-only after construction and validated up front: every
file extension belongs to exactly one profile, so resolving a path never
depends on iteration order.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import TYPE_CHECKING

from copywrite.config.logging import get_logger
from copywrite.errors import DuplicateExtensionError, UnsupportedLanguageError
from copywrite.languages.builtins import LANGUAGES

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from copywrite.config.logging import CopywriteLogger
    from copywrite.languages.base import LanguageProfile

logger: CopywriteLogger = get_logger(__name__)


class LanguageRegistry(Mapping[str, "LanguageProfile"]):
    """Immutable mapping of language keys to profiles with extension lookup.

    Args:
        profiles (Iterable[LanguageProfile]): Profiles to register.

    Raises:
        ValueError: If two profiles share a language key.
        DuplicateExtensionError: If two profiles claim the same extension.
    """

    def __init__(self, profiles: Iterable[LanguageProfile]) -> None:
        self._profiles: dict[str, LanguageProfile] = {}
        self._by_extension: dict[str, LanguageProfile] = {}
        for profile in profiles:
            if profile.key in self._profiles:
                raise ValueError(f"Language '{profile.key}' is registered twice")
            for ext in profile.extensions:
                owner: LanguageProfile | None = self._by_extension.get(ext)
                if owner is not None:
                    raise DuplicateExtensionError(ext, owner.key, profile.key)
                self._by_extension[ext] = profile
            self._profiles[profile.key] = profile

    def __getitem__(self, key: str) -> LanguageProfile:
        return self._profiles[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)

    def resolve(self, extension: str) -> LanguageProfile | None:
        """Return the profile owning ``extension`` (e.g. ``".py"``), if any."""
        return self._by_extension.get(extension)

    def resolve_path(self, path: Path) -> LanguageProfile | None:
        """Return the profile for ``path`` based on its suffix, if any."""
        if not path.suffix:
            return None
        return self.resolve(path.suffix)

    def subset(self, requested: Iterable[str]) -> LanguageRegistry:
        """Restrict the registry to the requested language keys.

        Unknown keys are logged and ignored as long as at least one requested
        key is supported.

        Args:
            requested (Iterable[str]): Language keys to keep.

        Returns:
            LanguageRegistry: A new registry holding only the requested profiles.

        Raises:
            UnsupportedLanguageError: If none of the requested keys is supported.
        """
        keys: list[str] = list(requested)
        unknown: list[str] = [k for k in keys if k not in self._profiles]
        kept: list[LanguageProfile] = [p for k, p in self._profiles.items() if k in keys]
        if not kept:
            raise UnsupportedLanguageError(keys)
        if unknown:
            logger.warning("Ignoring unsupported languages: %s", ", ".join(unknown))
        return LanguageRegistry(kept)


@functools.cache
def get_language_registry() -> LanguageRegistry:
    """Return (and cache) the registry of built-in language profiles."""
    registry = LanguageRegistry(LANGUAGES)
    logger.debug("Loaded %d language profiles", len(registry))
    return registry
