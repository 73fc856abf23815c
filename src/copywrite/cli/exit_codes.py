# topmark:header:start
#
#   project      : Copywrite
#   file         : exit_codes.py
#   file_relpath : src/copywrite/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Exit codes for the Copywrite CLI.

Every fatal condition has its own code so scripts and pre-commit hooks can
tell them apart. ``WOULD_CHANGE=2`` shares its value with Click's own
usage-error code; Copywrite reports its own usage errors as ``USAGE_ERROR=64``.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Copywrite CLI.

    Attributes:
        SUCCESS: Run completed (per-file failures do not change the code).
        INVALID_PATH: The PATH argument does not exist.
        WOULD_CHANGE: ``--check``: at least one file would be rewritten.
        UNSUPPORTED_LANGUAGE: None of the requested languages is supported.
        TEMPLATE_NOT_FOUND: The template file does not exist.
        TEMPLATE_UNREADABLE: The template file cannot be read as UTF-8.
        TEMPLATE_RENDER_FAILED: The template failed to render.
        GIT_REPOSITORY_NOT_FOUND: No git repository encloses PATH.
        GIT_INDEX_UNREADABLE: The git index or staged diff cannot be read.
        GIT_STAGE_FAILED: Rewritten files could not be re-staged.
        USAGE_ERROR: Invalid combination of flags. Mirrors BSD ``EX_USAGE (64)``.
        CONFIG_ERROR: Malformed or invalid config file. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    INVALID_PATH = 1
    WOULD_CHANGE = 2

    UNSUPPORTED_LANGUAGE = 10

    TEMPLATE_NOT_FOUND = 21
    TEMPLATE_UNREADABLE = 22
    TEMPLATE_RENDER_FAILED = 23

    GIT_REPOSITORY_NOT_FOUND = 31
    GIT_INDEX_UNREADABLE = 32
    GIT_STAGE_FAILED = 33

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    CONFIG_ERROR = 78  # EX_CONFIG
