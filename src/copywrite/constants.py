# topmark:header:start
#
#   project      : Copywrite
#   file         : constants.py
#   file_relpath : src/copywrite/constants.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Copywrite constants."""

from __future__ import annotations

import re
from importlib.metadata import version as get_version
from typing import Final

COPYWRITE_VERSION: str = get_version("copywrite")

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: Final[str] = "COPYWRITE_LOG_LEVEL"

# Configuration discovery
CONFIG_FILE_NAME: Final[str] = "copywrite.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[str] = "copywrite"

# Line terminator appended to every newly written header line.
HEADER_NEWLINE: Final[str] = "\n"

# Markers evaluated inside a detected comment region.
YEARS_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(Copyright\s*(?:\(\s*[Cc©]\s*\)\s*))?([0-9][0-9][0-9][0-9](?:-[0-9][0-9]?[0-9]?[0-9]?)?)",
    re.IGNORECASE,
)
LICENSE_PATTERN: Final[re.Pattern[str]] = re.compile(r"license", re.IGNORECASE)
EMPTY_PATTERN: Final[re.Pattern[str]] = re.compile(r"^\s*$")
