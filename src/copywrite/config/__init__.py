# topmark:header:start
#
#   project      : Copywrite
#   file         : __init__.py
#   file_relpath : src/copywrite/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Copywrite configuration: TOML discovery, merging and the frozen run snapshot."""

from __future__ import annotations

from copywrite.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]
