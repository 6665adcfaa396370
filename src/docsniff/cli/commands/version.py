# topmark:header:start
#
#   project      : DocSniff
#   file         : version.py
#   file_relpath : src/docsniff/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""DocSniff `version` command.

Prints the current DocSniff version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from docsniff.cli.options import OutputFormat, output_format_option
from docsniff.constants import DOCSNIFF_VERSION

if TYPE_CHECKING:
    from docsniff.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of DocSniff.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of DocSniff.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": DOCSNIFF_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# DocSniff Version\n")
        console.print(f"**DocSniff version: {DOCSNIFF_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("DocSniff version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(DOCSNIFF_VERSION, bold=True)}")
    else:
        console.print(console.styled(DOCSNIFF_VERSION, bold=True))
