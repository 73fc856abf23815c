# topmark:header:start
#
#   project      : Copywrite
#   file         : __init__.py
#   file_relpath : src/copywrite/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Copywrite header pipeline.

The per-file steps live in `copywrite.pipeline.steps`; `apply_headers` in
`copywrite.pipeline.runner` drives them over a batch of files.
"""

from __future__ import annotations

from copywrite.pipeline.runner import FileResult, RunSummary, apply_headers

__all__ = ["FileResult", "RunSummary", "apply_headers"]
