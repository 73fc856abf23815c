# topmark:header:start
#
#   project      : Copywrite
#   file         : __main__.py
#   file_relpath : src/copywrite/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Module entry point for running Copywrite via ``python -m copywrite``.

Delegates to :func:`copywrite.cli.main.cli`, the single authoritative CLI
entry point.

Examples:
    Update headers below the current directory::

        python -m copywrite . --template header.j2
"""

from __future__ import annotations

from copywrite.cli.main import cli

if __name__ == "__main__":
    cli()
