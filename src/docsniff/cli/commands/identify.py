# topmark:header:start
#
#   project      : DocSniff
#   file         : identify.py
#   file_relpath : src/docsniff/cli/commands/identify.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""DocSniff `identify` command.

Classifies each given path by content, by name, or both, and prints one result
per path. The exit code summarizes the run:

* ``0`` (SUCCESS): every path was identified;
* ``1`` (FAILURE): at least one path is of an unknown format;
* ``66`` (FILE_NOT_FOUND): at least one path does not exist (it is still
  reported, as unknown).
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import click

from docsniff.cli.cli_types import EnumChoiceParam
from docsniff.cli.config_resolver import resolve_config_from_click
from docsniff.cli.errors import DocsniffConfigError, DocsniffUnexpectedError
from docsniff.cli.exit_codes import ExitCode
from docsniff.cli.options import OutputFormat, output_format_option
from docsniff.cli.utils import render_markdown_table
from docsniff.config.logging import get_logger
from docsniff.config.types import SniffStrategy
from docsniff.constants import MIN_PREFIX_SIZE
from docsniff.errors import ConfigError, ExtensionTableError
from docsniff.formats.groups import is_cbx_engine_kind, is_image_engine_kind

if TYPE_CHECKING:
    from docsniff.cli.console import ConsoleLike
    from docsniff.config.logging import DocsniffLogger
    from docsniff.config.model import Config
    from docsniff.formats.kinds import FileKind
    from docsniff.sniff import Sniffer

logger: DocsniffLogger = get_logger(__name__)

UNKNOWN_LABEL = "unknown"


@dataclass(frozen=True, slots=True)
class IdentifyResult:
    """Outcome of classifying one path."""

    path: str
    kind: FileKind | None
    exists: bool

    @property
    def label(self) -> str:
        """Short kind name, or ``"unknown"``."""
        return str(self.kind) if self.kind is not None else UNKNOWN_LABEL

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON/NDJSON output."""
        return {
            "path": self.path,
            "kind": str(self.kind) if self.kind is not None else None,
            "id": self.kind.value if self.kind is not None else None,
            "description": self.kind.description if self.kind is not None else None,
            "exists": self.exists,
            "image_engine": is_image_engine_kind(self.kind),
            "cbx_engine": is_cbx_engine_kind(self.kind),
        }


def classify_path(sniffer: Sniffer, path: str, strategy: SniffStrategy) -> IdentifyResult:
    """Classify ``path`` with ``sniffer`` according to ``strategy``.

    Missing paths are reported as unknown without consulting the name table.
    """
    if not os.path.lexists(path):
        logger.info("Path not found: %s", path)
        return IdentifyResult(path=path, kind=None, exists=False)
    kind: FileKind | None
    if strategy is SniffStrategy.NAME:
        kind = sniffer.from_name(path)
    elif strategy is SniffStrategy.CONTENT:
        kind = sniffer.sniff(path)
    else:
        kind = sniffer.guess(path)
    logger.debug("identify %s [%s] -> %s", path, strategy.name.lower(), kind)
    return IdentifyResult(path=path, kind=kind, exists=True)


def exit_code_for(results: list[IdentifyResult]) -> ExitCode:
    """Summarize a run: missing inputs win over unknown formats."""
    if any(not r.exists for r in results):
        return ExitCode.FILE_NOT_FOUND
    if any(r.kind is None for r in results):
        return ExitCode.FAILURE
    return ExitCode.SUCCESS


@click.command(
    name="identify",
    help="Identify the document format of each PATH.",
    epilog="""
Prints one line per path ('path: kind'); unrecognized files are reported as 'unknown'.
Exit status: 0 if every path was identified, 1 if any was unknown, 66 if any path is missing.
""",
)
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@click.option(
    "--by",
    "strategy",
    type=EnumChoiceParam(SniffStrategy),
    default=None,
    help="Classify by 'name', by 'content', or 'guess' (content, then name; default).",
)
@click.option(
    "--prefix-size",
    "prefix_size",
    type=click.IntRange(min=MIN_PREFIX_SIZE),
    default=None,
    help="Number of leading bytes read for content sniffing (default: 2048).",
)
@output_format_option
def identify_command(
    *,
    paths: tuple[str, ...],
    strategy: SniffStrategy | None = None,
    prefix_size: int | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Identify document formats.

    Args:
        paths (tuple[str, ...]): Files or directories to classify.
        strategy (SniffStrategy | None): Classification strategy override.
        prefix_size (int | None): Content sniffing window override.
        output_format (OutputFormat | None): Output format (``default`` if None).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    config: Config = resolve_config_from_click(ctx=ctx, prefix_size=prefix_size, strategy=strategy)
    logger.debug("Effective config: %s", config)

    try:
        sniffer: Sniffer = config.build_sniffer()
    except ConfigError as e:
        raise DocsniffConfigError(str(e)) from e
    try:
        results: list[IdentifyResult] = [
            classify_path(sniffer, p, config.strategy) for p in paths
        ]
    except ExtensionTableError as e:
        raise DocsniffUnexpectedError(f"Internal suffix table is inconsistent: {e}") from e

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps([r.to_dict() for r in results], indent=2))
    elif fmt == OutputFormat.NDJSON:
        for r in results:
            console.print(json.dumps(r.to_dict()))
    elif fmt == OutputFormat.MARKDOWN:
        rows: list[list[str]] = [
            [f"`{r.path}`", r.label, r.kind.description if r.kind else ""] for r in results
        ]
        console.print(render_markdown_table(["Path", "Kind", "Description"], rows), nl=False)
    elif vlevel >= 0:
        for r in results:
            _print_result(console, r, vlevel)

    ctx.exit(exit_code_for(results))


def _print_result(console: ConsoleLike, result: IdentifyResult, vlevel: int) -> None:
    if result.kind is None:
        label: str = console.styled(UNKNOWN_LABEL, fg="yellow")
        if not result.exists:
            label += console.styled(" (not found)", dim=True)
        console.print(f"{result.path}: {label}")
        return
    line: str = f"{result.path}: {console.styled(result.label, bold=True)}"
    if vlevel > 0:
        line += f" {console.styled('(' + result.kind.description + ')', dim=True)}"
    console.print(line)
