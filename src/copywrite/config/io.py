# topmark:header:start
#
#   project      : Copywrite
#   file         : io.py
#   file_relpath : src/copywrite/config/io.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Load Copywrite configuration tables from TOML files.

Two sources are recognized:

- ``copywrite.toml``: settings at the top level of the document;
- ``pyproject.toml``: settings under ``[tool.copywrite]``.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from copywrite.config.logging import get_logger
from copywrite.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION
from copywrite.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from copywrite.config.logging import CopywriteLogger

logger: CopywriteLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): TOML document to read.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Error loading TOML from {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Error decoding TOML from {path}: {e}") from e
    data: Any = doc.unwrap()
    return cast("TomlTable", data) if isinstance(data, dict) else {}


def extract_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Copywrite table of a parsed document.

    For ``pyproject.toml`` this is ``[tool.copywrite]`` (None when absent);
    for any other file it is the whole document.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool")
    if not isinstance(tool, dict):
        return None
    table: Any = cast("TomlTable", tool).get(PYPROJECT_SECTION)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def load_config_table(path: Path) -> TomlTable:
    """Load the Copywrite table from an explicit config file.

    Raises:
        ConfigError: If the file is unreadable, malformed, or is a
            ``pyproject.toml`` without a ``[tool.copywrite]`` table.
    """
    table: TomlTable | None = extract_table(path, load_toml_dict(path))
    if table is None:
        raise ConfigError(f"No [tool.{PYPROJECT_SECTION}] table in {path}")
    return table


def discover_config(directory: Path) -> tuple[Path, TomlTable] | None:
    """Find a config file in ``directory``.

    ``copywrite.toml`` wins over ``pyproject.toml``; a ``pyproject.toml``
    without ``[tool.copywrite]`` is ignored.

    Returns:
        tuple[Path, TomlTable] | None: The config file and its table, if any.
    """
    candidate: Path = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate, load_config_table(candidate)

    candidate = directory / PYPROJECT_FILE_NAME
    if candidate.is_file():
        table: TomlTable | None = extract_table(candidate, load_toml_dict(candidate))
        if table is not None:
            return candidate, table
        logger.debug("%s has no [tool.%s] table", candidate, PYPROJECT_SECTION)
    return None
