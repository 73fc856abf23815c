# topmark:header:start
#
#   project      : Copywrite
#   file         : main.py
#   file_relpath : src/copywrite/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 The Copywrite Authors
#
# topmark:header:end

"""Copywrite command-line entry point.

Key ideas:
- Configuration is layered (defaults, config file, command line) into a
  frozen `Config` before anything is read from disk.
- Core exceptions are converted to `CopywriteCliError` subclasses at a single
  boundary so every fatal condition exits with its own code.
- Per-file failures are logged by the runner and never change the exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from copywrite.cli.errors import (
    CopywriteInvalidPathError,
    CopywriteUsageError,
    to_cli_error,
)
from copywrite.cli.exit_codes import ExitCode
from copywrite.cli.options import (
    common_config_options,
    common_file_selection_options,
    common_verbose_options,
    resolve_verbosity,
    split_csv_values,
)
from copywrite.config import Config, MutableConfig
from copywrite.config.io import discover_config, load_config_table
from copywrite.config.logging import get_logger, resolve_env_log_level, setup_logging
from copywrite.constants import COPYWRITE_VERSION
from copywrite.errors import CopywriteError
from copywrite.file_resolver import filter_to, walk
from copywrite.languages.registry import get_language_registry
from copywrite.pipeline.runner import apply_headers
from copywrite.pipeline.status import FileOutcome
from copywrite.rendering.template import TemplateContext, read_template
from copywrite.vcs.git import discover_repository, index_files, stage_files, staged_files

if TYPE_CHECKING:
    from copywrite.config.logging import CopywriteLogger
    from copywrite.languages.registry import LanguageRegistry
    from copywrite.pipeline.runner import RunSummary

logger: CopywriteLogger = get_logger(__name__)


def build_config(
    *,
    config_path: Path | None,
    no_config: bool,
    template: Path | None,
    languages: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    git_index: bool,
    staged: bool,
    check: bool,
) -> Config:
    """Layer defaults, the config file and command-line values into a `Config`.

    Command-line lists replace config-file lists when given; flags can only
    switch settings on.

    Raises:
        ConfigError: If the config file is malformed or the result is inconsistent.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    if config_path is not None:
        draft.merge_toml(load_config_table(config_path), config_path)
    elif not no_config:
        found = discover_config(Path.cwd())
        if found is not None:
            draft.merge_toml(found[1], found[0])

    if template is not None:
        draft.template = template
    requested: list[str] = split_csv_values(languages)
    if requested:
        draft.languages = requested
    if exclude_patterns:
        draft.exclude = list(exclude_patterns)
    if git_index:
        draft.git_index = True
    if staged:
        draft.staged = True
    if check:
        draft.check = True
    return draft.freeze()


def collect_files(root: Path, config: Config) -> list[Path]:
    """Return the candidate files below ``root`` for the configured selection mode."""
    candidates: list[Path] = walk(root, config.exclude)
    if config.staged:
        return filter_to(candidates, set(staged_files(root)))
    if config.git_index:
        return filter_to(candidates, index_files(root))
    return candidates


def print_summary(summary: RunSummary, *, check: bool) -> None:
    """Print one line per changed or failed file followed by totals."""
    for result in summary.results:
        if result.outcome == FileOutcome.UP_TO_DATE:
            continue
        click.echo(f"{result.outcome.color(result.outcome.value)}: {result.path}")

    changed: int = len(summary.changed)
    verb: str = "would be updated" if check else "updated"
    parts: list[str] = [f"{len(summary.results)} file(s) checked", f"{changed} {verb}"]
    if summary.failed:
        parts.append(f"{len(summary.failed)} failed")
    click.echo(", ".join(parts))


def print_languages(registry: LanguageRegistry) -> None:
    for key in sorted(registry):
        click.echo(f"{key}: {' '.join(registry[key].extensions)}")


def run(root: Path, config: Config, *, quiet: bool) -> RunSummary:
    """Render the template, select files, apply headers and re-stage if requested.

    Raises:
        CopywriteError: On any fatal configuration or git error.
    """
    if config.template is None:
        raise CopywriteUsageError(
            "No template given: pass --template or set 'template' in the config file."
        )

    registry: LanguageRegistry = get_language_registry()
    if config.languages is not None:
        registry = registry.subset(config.languages)

    template_lines: list[str] = read_template(config.template, TemplateContext.from_environment())
    files: list[Path] = collect_files(root, config)
    logger.info("Processing %d candidate file(s) below %s", len(files), root)

    summary: RunSummary = apply_headers(
        files, template_lines, check=config.check, registry=registry
    )

    if config.staged and not config.check and summary.changed:
        stage_files(discover_repository(root), summary.changed)

    if not quiet:
        print_summary(summary, check=config.check)
    return summary


class CopywriteCommand(click.Command):
    """Command that reports click's own usage errors with `ExitCode.USAGE_ERROR`.

    Click would exit with 2 on a bad option or value, and 2 is
    `ExitCode.WOULD_CHANGE`.
    """

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = ExitCode.USAGE_ERROR
            raise


@click.command(
    name="copywrite",
    cls=CopywriteCommand,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Insert or refresh copyright/license headers in source files below PATH.",
)
@click.argument(
    "path",
    required=False,
    type=click.Path(path_type=Path),
)
@click.option(
    "--template",
    "-t",
    "template",
    metavar="FILE",
    type=click.Path(path_type=Path, dir_okay=False),
    help="Jinja2 template rendered into the header ({{ year }} and environment variables).",
)
@common_file_selection_options
@click.option(
    "--check",
    "check",
    is_flag=True,
    help="Report files with missing or stale headers without writing (exit 2 if any).",
)
@common_config_options
@common_verbose_options
@click.option(
    "--list-languages",
    "list_languages",
    is_flag=True,
    help="List supported languages and their extensions, then exit.",
)
@click.version_option(COPYWRITE_VERSION, "--version", prog_name="copywrite")
@click.pass_context
def cli(
    ctx: click.Context,
    path: Path | None,
    template: Path | None,
    languages: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    git_index: bool,
    staged: bool,
    check: bool,
    config_path: str | None,
    no_config: bool,
    verbose: int,
    quiet: int,
    list_languages: bool,
) -> None:
    """Entry point for the Copywrite CLI."""
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    setup_logging(level=level_env if level_env is not None else level_cli)

    if list_languages:
        print_languages(get_language_registry())
        return

    if path is None:
        raise CopywriteUsageError("Missing argument 'PATH'.")
    if git_index and staged:
        raise CopywriteUsageError(
            "The '--git-index' and '--staged' options are mutually exclusive."
        )
    if not path.exists():
        raise CopywriteInvalidPathError(f"Path {path} does not exist")

    try:
        config: Config = build_config(
            config_path=Path(config_path) if config_path is not None else None,
            no_config=no_config,
            template=template,
            languages=languages,
            exclude_patterns=exclude_patterns,
            git_index=git_index,
            staged=staged,
            check=check,
        )
        summary: RunSummary = run(path, config, quiet=quiet > 0)
    except CopywriteError as e:
        raise to_cli_error(e) from e

    if config.check and summary.changed:
        ctx.exit(ExitCode.WOULD_CHANGE)


if __name__ == "__main__":
    cli()
