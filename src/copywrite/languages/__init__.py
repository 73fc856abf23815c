# topmark:header:start
#
#   project      : Copywrite
#   file         : __init__.py
#   file_relpath : src/copywrite/languages/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Language profiles and their registry."""

from __future__ import annotations

from copywrite.languages.base import (
    BlockLanguage,
    CommentKind,
    HeaderFormat,
    LanguageProfile,
    LineLanguage,
    PragmaLanguage,
)
from copywrite.languages.registry import LanguageRegistry, get_language_registry

__all__ = [
    "BlockLanguage",
    "CommentKind",
    "HeaderFormat",
    "LanguageProfile",
    "LanguageRegistry",
    "LineLanguage",
    "PragmaLanguage",
    "get_language_registry",
]
