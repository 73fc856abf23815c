# topmark:header:start
#
#   project      : Copywrite
#   file         : writer.py
#   file_relpath : src/copywrite/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Writer step: splice a formatted header into a file.

Two strategies are used:

* **replace**: the detected region is a bounded license header. Raw lines
  before the region, the new header, and raw lines after the region are written.
* **insert**: anything else. Preamble lines, the new header, a blank separator
  line when a non-license comment region was found, and every remaining raw
  line are written.

Only the header lines are produced from text; all other bytes (including the
BOM and original line terminators) are copied verbatim from the raw lines.
The output is assembled in memory before the destination is truncated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from copywrite.config.logging import get_logger
from copywrite.constants import HEADER_NEWLINE
from copywrite.errors import ContentWriteError
from copywrite.pipeline.status import WriteAction

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from copywrite.config.logging import CopywriteLogger
    from copywrite.pipeline.context import HeaderFinding

logger: CopywriteLogger = get_logger(__name__)


def select_action(finding: HeaderFinding) -> WriteAction:
    """Return the splice strategy for ``finding``."""
    return WriteAction.REPLACE if finding.is_replaceable else WriteAction.INSERT


def render_bytes(finding: HeaderFinding, header_lines: Sequence[str]) -> bytes:
    """Return the new file content for ``finding`` with ``header_lines`` spliced in.

    Args:
        finding (HeaderFinding): Scan result of the file.
        header_lines (Sequence[str]): Formatted header lines (no terminators).

    Returns:
        bytes: The complete new file content.

    Raises:
        UnicodeEncodeError: If a header line cannot be encoded with the file's codec.
    """
    content = finding.content
    encoding: str = content.encoding
    header: list[bytes] = [f"{line}{HEADER_NEWLINE}".encode(encoding) for line in header_lines]

    parts: list[bytes] = [content.bom_bytes]
    if select_action(finding) is WriteAction.REPLACE:
        # is_replaceable guarantees both bounds
        assert finding.start is not None and finding.end is not None
        parts.extend(content.raw_lines[: finding.start])
        parts.extend(header)
        parts.extend(content.raw_lines[finding.end + 1 :])
    else:
        parts.extend(content.raw_lines[: finding.skip])
        parts.extend(header)
        if finding.start is not None and not finding.has_license:
            # Keep the existing non-license comment visually apart from the header.
            parts.append(HEADER_NEWLINE.encode(encoding))
        parts.extend(content.raw_lines[finding.skip :])
    return b"".join(parts)


def rewrite_file(path: Path, finding: HeaderFinding, header_lines: Sequence[str]) -> WriteAction:
    """Rewrite ``path`` with ``header_lines`` spliced in.

    Args:
        path (Path): Destination file (normally ``finding.content.path``).
        finding (HeaderFinding): Scan result of the file.
        header_lines (Sequence[str]): Formatted header lines (no terminators).

    Returns:
        WriteAction: The strategy that was applied.

    Raises:
        ContentWriteError: If the header cannot be encoded or the file cannot be
            created or written.
    """
    action: WriteAction = select_action(finding)
    try:
        data: bytes = render_bytes(finding, header_lines)
    except UnicodeEncodeError as e:
        raise ContentWriteError(
            path, f"Can't encode header for {path} as {finding.content.encoding}: {e}"
        ) from e

    if action is WriteAction.REPLACE:
        logger.info("Replacing header in file %s", path)
    else:
        logger.info("Adding header to file %s", path)

    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        raise ContentWriteError(path, f"Can't create file {path}: {e}") from e

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return action
