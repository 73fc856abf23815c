# topmark:header:start
#
#   project      : Copywrite
#   file         : test_scanner.py
#   file_relpath : tests/pipeline/steps/test_scanner.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Tests for the header locator state machine."""

from __future__ import annotations

from copywrite.pipeline.status import ScanState
from copywrite.pipeline.steps.scanner import HeaderScanner
from tests.conftest import mark_pipeline, parametrize
from tests.pipeline.conftest import language, make_content, scan


@mark_pipeline
def test_block_header_with_copyright() -> None:
    finding = scan("/*\n * Copyright (c) 2019-2021 Acme\n */\nint main() {}\n")
    assert (finding.skip, finding.start, finding.end) == (0, 0, 2)
    assert finding.has_license
    assert finding.years_line == 1
    assert finding.is_replaceable


@mark_pipeline
def test_single_line_block_comment_with_a_year_is_not_a_header() -> None:
    # The closing line ends the block before its year is looked at.
    finding = scan("/* Copyright 2020 Acme */\nint x;\n")
    assert (finding.start, finding.end) == (0, 0)
    assert not finding.has_license
    assert finding.years_line is None
    assert not finding.is_replaceable


@mark_pipeline
def test_license_line_does_not_close_the_block() -> None:
    finding = scan("/* Licensed under MIT */\nint x;\n")
    assert finding.start is None
    assert finding.end is None


@mark_pipeline
def test_license_line_keeps_block_open_until_a_later_end() -> None:
    finding = scan("/* Licensed under MIT */\n */\nint x;\n")
    assert (finding.start, finding.end) == (0, 1)
    assert finding.has_license


@mark_pipeline
def test_year_on_the_closing_line_is_not_recorded() -> None:
    finding = scan("/*\n * Acme\n * 2024 */\n")
    assert finding.end == 2
    assert finding.years_line is None
    assert not finding.has_license


@mark_pipeline
def test_block_comment_without_markers() -> None:
    finding = scan("\n\n/* just a note */\nint x;\n")
    assert (finding.start, finding.end) == (2, 2)
    assert not finding.has_license
    assert not finding.is_replaceable


@mark_pipeline
def test_unterminated_block_means_no_header() -> None:
    finding = scan("/*\n * Copyright 2020 Acme\nint x;\n")
    assert finding.start is None
    assert finding.end is None
    assert finding.years_line is None
    assert not finding.has_license


@mark_pipeline
def test_line_comment_run_in_c_file() -> None:
    finding = scan("// Copyright 2022 Acme\n// License: MIT\nint x;\n")
    assert (finding.start, finding.end) == (0, 1)
    assert finding.has_license
    assert finding.years_line == 0


@mark_pipeline
def test_line_run_reaching_end_of_file() -> None:
    finding = scan("// License: MIT\n// more", key="proto")
    assert (finding.start, finding.end) == (0, 1)


@mark_pipeline
def test_code_first_means_no_header() -> None:
    finding = scan("int x; /* Copyright 2020 */\n")
    assert finding.start is None
    assert not finding.has_license


@mark_pipeline
def test_empty_and_blank_files() -> None:
    assert scan("").start is None
    assert scan("\n   \n\t\n").start is None


@mark_pipeline
def test_python_preamble_is_skipped() -> None:
    text = "#!/usr/bin/env python\n# -*- coding: utf-8 -*-\n\n# Copyright 2020 Acme\nimport os\n"
    finding = scan(text, key="python")
    assert finding.skip == 2
    assert (finding.start, finding.end) == (3, 3)
    assert finding.has_license


@mark_pipeline
def test_preamble_only_at_the_very_top() -> None:
    # A shebang further down is not a preamble line.
    finding = scan("# Copyright 2020\n#!/bin/sh\n", key="script")
    assert finding.skip == 0


@mark_pipeline
def test_xml_declaration_preamble() -> None:
    text = '<?xml version="1.0"?>\n<!--\n   License: MIT\n-->\n<root/>\n'
    finding = scan(text, key="xml")
    assert finding.skip == 1
    assert (finding.start, finding.end) == (1, 3)
    assert finding.is_replaceable


@mark_pipeline
@parametrize(
    "line, has_license",
    [
        (" * This file is LICENSED to you", True),
        (" * Copyright © 2010-12 Someone", True),
        (" * (C) 1999", True),
        (" * nothing to see", False),
    ],
)
def test_marker_detection(line: str, has_license: bool) -> None:
    finding = scan(f"/*\n{line}\n */\n")
    assert finding.has_license is has_license


@mark_pipeline
def test_scanner_ends_in_done_state() -> None:
    scanner = HeaderScanner(make_content("/* x */\n"), language("c"))
    scanner.run()
    assert scanner.state is ScanState.DONE
