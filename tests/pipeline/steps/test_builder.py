# topmark:header:start
#
#   project      : Copywrite
#   file         : test_builder.py
#   file_relpath : tests/pipeline/steps/test_builder.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Tests for header formatting and the per-language header cache."""

from __future__ import annotations

from copywrite.pipeline.steps.builder import HeaderCache, format_header
from tests.conftest import TEMPLATE_LINES
from tests.pipeline.conftest import language


def test_format_header_for_block_language() -> None:
    assert format_header(TEMPLATE_LINES, language("rust")) == [
        "/*",
        " * Copyright (c) 2024 Example Corp",
        " * SPDX-License-Identifier: MIT",
        " */",
    ]


def test_format_header_blank_lines_have_no_trailing_whitespace() -> None:
    header = format_header(["a", "", "b"], language("script"))
    assert header == ["##", "## a", "##", "## b", "##"]
    assert all(line == line.rstrip() for line in header)


def test_format_header_empty_template() -> None:
    assert format_header([], language("css")) == ["/*", "*/"]
    assert format_header([], language("proto")) == []


def test_header_cache_formats_once_per_language() -> None:
    cache = HeaderCache(TEMPLATE_LINES)
    first = cache.get(language("c"))
    assert cache.get(language("c")) is first
    assert cache.get(language("python")) != first
