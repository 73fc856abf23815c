# topmark:header:start
#
#   project      : Copywrite
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Tests for TOML config loading and discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from copywrite.config.io import discover_config, load_config_table, load_toml_dict
from copywrite.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path


def test_load_toml_dict_returns_plain_dicts(tmp_path: Path) -> None:
    path: Path = tmp_path / "copywrite.toml"
    path.write_text('template = "h.j2"\nlanguages = ["c"]\n', encoding="utf-8")
    data = load_toml_dict(path)
    assert data == {"template": "h.j2", "languages": ["c"]}
    assert type(data["languages"]) is list


def test_load_toml_dict_malformed(tmp_path: Path) -> None:
    path: Path = tmp_path / "copywrite.toml"
    path.write_text("template = \n", encoding="utf-8")
    with pytest.raises(ConfigError, match="Error decoding TOML"):
        load_toml_dict(path)


def test_load_toml_dict_missing(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Error loading TOML"):
        load_toml_dict(tmp_path / "nope.toml")


def test_load_config_table_from_pyproject(tmp_path: Path) -> None:
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n\n[tool.copywrite]\ncheck = true\n', encoding="utf-8")
    assert load_config_table(path) == {"check": True}


def test_load_config_table_pyproject_without_section(tmp_path: Path) -> None:
    path: Path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    with pytest.raises(ConfigError, match=r"No \[tool.copywrite\] table"):
        load_config_table(path)


def test_discover_prefers_copywrite_toml(tmp_path: Path) -> None:
    (tmp_path / "copywrite.toml").write_text("staged = true\n", encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text("[tool.copywrite]\ncheck = true\n", encoding="utf-8")
    found = discover_config(tmp_path)
    assert found == (tmp_path / "copywrite.toml", {"staged": True})


def test_discover_falls_back_to_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.copywrite]\ncheck = true\n", encoding="utf-8")
    assert discover_config(tmp_path) == (tmp_path / "pyproject.toml", {"check": True})


def test_discover_ignores_unrelated_pyproject(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text("[tool.other]\nx = 1\n", encoding="utf-8")
    assert discover_config(tmp_path) is None
    assert discover_config(tmp_path / "empty-dir") is None
