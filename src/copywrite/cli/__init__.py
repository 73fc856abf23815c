# topmark:header:start
#
#   project      : Copywrite
#   file         : __init__.py
#   file_relpath : src/copywrite/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Copywrite command-line interface."""
