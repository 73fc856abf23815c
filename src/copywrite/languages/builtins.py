# topmark:header:start
#
#   project      : Copywrite
#   file         : builtins.py
#   file_relpath : src/copywrite/languages/builtins.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Built-in language profiles.

Exports:
    LANGUAGES (list[LanguageProfile]): Concrete profiles for the C family,
        scripting languages, markup languages, and Protocol Buffers.

Notes:
    C-family languages emit ``/* ... */`` headers but also recognize an existing
    ``//`` run as a header candidate. Markup languages keep their XML
    declaration or DOCTYPE above the header; Python and shell scripts keep their
    shebang and encoding pragmas.
"""

from __future__ import annotations

import re

from copywrite.languages.base import (
    BlockLanguage,
    LanguageProfile,
    LineLanguage,
    PragmaLanguage,
)

C_BLOCK_START = re.compile(r"^\s*/\*")
C_BLOCK_END = re.compile(r"\*/\s*$")
C_LINE_COMMENT = re.compile(r"^\s*//")

XML_BLOCK_START = re.compile(r"^\s*<!--")
XML_BLOCK_END = re.compile(r"-->\s*$")

POUND_LINE_COMMENT = re.compile(r"^\s*#")


def c_style(key: str, *extensions: str, keep_first: re.Pattern[str] | None = None) -> BlockLanguage:
    """Return a C-style profile (``/* ... */`` with ``//`` fallback).

    Args:
        key (str): Language identifier.
        *extensions (str): File extensions including the leading dot.
        keep_first (re.Pattern[str] | None): Optional preamble pattern.

    Returns:
        BlockLanguage: The profile.
    """
    return BlockLanguage(
        key=key,
        extensions=extensions,
        keep_first=keep_first,
        block_start=C_BLOCK_START,
        block_end=C_BLOCK_END,
        line_comment=C_LINE_COMMENT,
        start_line="/*",
        end_line=" */",
        line_prefix=" * ",
    )


def xml_style(key: str, *extensions: str, keep_first: str = r"^\s*<\?xml.*\?>") -> BlockLanguage:
    """Return an XML-style profile (``<!-- ... -->``).

    Args:
        key (str): Language identifier.
        *extensions (str): File extensions including the leading dot.
        keep_first (str): Preamble pattern; defaults to the XML declaration.

    Returns:
        BlockLanguage: The profile.
    """
    return BlockLanguage(
        key=key,
        extensions=extensions,
        keep_first=re.compile(keep_first),
        block_start=XML_BLOCK_START,
        block_end=XML_BLOCK_END,
        start_line="<!--",
        end_line="-->",
        line_prefix="   ",
    )


LANGUAGES: list[LanguageProfile] = [
    c_style("c", ".c", ".cc", ".h"),
    c_style("cpp", ".cpp", ".hpp", ".cxx", ".hxx", ".ixx"),
    c_style("csharp", ".cs", ".csx"),
    c_style("rust", ".rs"),
    c_style("go", ".go"),
    c_style("swift", ".swift"),
    c_style("objective-c", ".m", ".mm"),
    c_style("kotlin", ".kt", ".kts", ".ktm"),
    c_style("java", ".java", ".jape"),
    c_style("javascript", ".js", ".cjs", ".mjs"),
    c_style("groovy", ".groovy"),
    c_style(
        "php",
        ".php",
        ".phtml",
        ".php3",
        ".php4",
        ".php5",
        ".php7",
        ".phps",
        ".php-s",
        ".pht",
        ".phar",
        # The open tag must stay on the first line.
        keep_first=re.compile(r"^\s*<\?php"),
    ),
    c_style("typescript", ".ts", ".tsx"),
    PragmaLanguage(
        key="python",
        extensions=(".py",),
        keep_first=re.compile(
            r"^#!|^# +pylint|^# +-\*-|^# +coding|^# +encoding|^# +type|^# +flake8"
        ),
        line_comment=POUND_LINE_COMMENT,
        marker="#",
        line_prefix="# ",
    ),
    xml_style("xml", ".xml"),
    xml_style("svg", ".svg"),
    xml_style("resx", ".resx"),
    LineLanguage(
        key="proto",
        extensions=(".proto",),
        line_comment=C_LINE_COMMENT,
        line_prefix="// ",
    ),
    xml_style("html", ".html", keep_first=r"^\s*<!DOCTYPE.*>"),
    BlockLanguage(
        key="css",
        extensions=(".css",),
        block_start=C_BLOCK_START,
        block_end=C_BLOCK_END,
        start_line="/*",
        end_line="*/",
        line_prefix=" * ",
    ),
    PragmaLanguage(
        key="script",
        extensions=(".sh", ".csh", ".pl"),
        keep_first=re.compile(r"^#!|^# -\*-"),
        line_comment=POUND_LINE_COMMENT,
        marker="##",
        line_prefix="## ",
    ),
]
