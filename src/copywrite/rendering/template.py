# topmark:header:start
#
#   project      : Copywrite
#   file         : template.py
#   file_relpath : src/copywrite/rendering/template.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Render the header template into content lines.

Templates use Jinja2 syntax. The variables available to a template are the
current year (``{{ year }}``) and every process environment variable, e.g.
``{{ USER }}``. Referencing an undefined variable is a render error.

The process environment is captured once into a `TemplateContext`, so
`render_template` is a pure function of the template text and that context.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import TYPE_CHECKING

import jinja2

from copywrite.config.logging import get_logger
from copywrite.errors import TemplateNotFoundError, TemplateReadError, TemplateRenderError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from copywrite.config.logging import CopywriteLogger

logger: CopywriteLogger = get_logger(__name__)


@dataclass(frozen=True)
class TemplateContext:
    """Immutable set of variables available to the header template.

    Attributes:
        variables (Mapping[str, str]): Variable names and their values.
    """

    variables: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_environment(
        cls,
        *,
        now: datetime | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> TemplateContext:
        """Build the context from the current year and the process environment.

        Environment variables are added after ``year``, so an environment
        variable named ``year`` takes precedence.

        Args:
            now (datetime | None): Reference time; defaults to the current UTC time.
            environ (Mapping[str, str] | None): Environment; defaults to ``os.environ``.

        Returns:
            TemplateContext: The frozen context.
        """
        now = now or datetime.now(timezone.utc)
        environ = os.environ if environ is None else environ
        variables: dict[str, str] = {"year": str(now.year)}
        for key, value in environ.items():
            logger.trace("Adding variable to context: %s = %s", key, value)
            variables[key] = value
        return cls(variables=MappingProxyType(variables))

    @property
    def year(self) -> str | None:
        return self.variables.get("year")


def _environment() -> jinja2.Environment:
    # Headers are plain text: no HTML autoescaping, and undefined names must fail.
    return jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        autoescape=False,
    )


def render_template(text: str, context: TemplateContext) -> list[str]:
    r"""Render ``text`` with ``context`` and split the result into lines.

    ``\r\n`` sequences are normalized to ``\n`` before splitting. As with any
    Jinja2 template, a single trailing newline of the template text is dropped.

    Args:
        text (str): Template source.
        context (TemplateContext): Variables available to the template.

    Returns:
        list[str]: Rendered content lines without terminators.

    Raises:
        TemplateRenderError: If the template has a syntax error or references an
            undefined variable.
    """
    try:
        rendered: str = _environment().from_string(text).render(dict(context.variables))
    except jinja2.TemplateError as e:
        raise TemplateRenderError(f"Could not render template: {e}") from e
    return rendered.replace("\r\n", "\n").split("\n")


def read_template(path: Path, context: TemplateContext) -> list[str]:
    """Read and render the template file at ``path``.

    Args:
        path (Path): Template file.
        context (TemplateContext): Variables available to the template.

    Returns:
        list[str]: Rendered content lines.

    Raises:
        TemplateNotFoundError: If ``path`` does not exist.
        TemplateReadError: If ``path`` cannot be read as UTF-8 text.
        TemplateRenderError: If rendering fails.
    """
    if not path.exists():
        raise TemplateNotFoundError(f"Can't find template {path}")
    logger.info("Using template %s", path)
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateReadError(f"Can't read template {path}: {e}") from e
    return render_template(text, context)
