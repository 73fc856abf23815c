# topmark:header:start
#
#   project      : Copywrite
#   file         : __init__.py
#   file_relpath : src/copywrite/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Copywrite package.

Copywrite keeps copyright/license header blocks at the top of source files
up to date. It detects an existing header per language comment convention,
compares it against a freshly rendered template, and rewrites only the files
whose header is missing or stale.
"""

from __future__ import annotations
