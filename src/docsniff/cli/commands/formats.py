# topmark:header:start
#
#   project      : DocSniff
#   file         : formats.py
#   file_relpath : src/docsniff/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""DocSniff `formats` command.

Lists every file kind DocSniff can report, with the suffixes and magic numbers
that identify it and the engine groups it belongs to. Suffixes added through
configuration are included.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from docsniff.cli.config_resolver import resolve_config_from_click
from docsniff.cli.errors import DocsniffConfigError
from docsniff.cli.options import OutputFormat, output_format_option
from docsniff.cli.utils import render_markdown_table
from docsniff.constants import DOCSNIFF_VERSION
from docsniff.errors import ConfigError
from docsniff.formats.groups import is_cbx_engine_kind, is_image_engine_kind
from docsniff.formats.kinds import FileKind
from docsniff.formats.signatures import signatures_for

if TYPE_CHECKING:
    from docsniff.cli.console import ConsoleLike
    from docsniff.config.model import Config
    from docsniff.formats.extensions import ExtensionTable


def _groups(kind: FileKind) -> list[str]:
    groups: list[str] = []
    if is_image_engine_kind(kind):
        groups.append("image")
    if is_cbx_engine_kind(kind):
        groups.append("cbx")
    return groups


def _serialize(kind: FileKind, table: ExtensionTable, *, details: bool) -> dict[str, Any]:
    data: dict[str, Any] = {
        "name": str(kind),
        "id": kind.value,
        "description": kind.description,
    }
    if details:
        data["extensions"] = table.suffixes_for(kind)
        data["signatures"] = [sig.hex(" ") for sig in signatures_for(kind)]
        data["groups"] = _groups(kind)
    return data


@click.command(
    name="formats",
    help="List all file kinds DocSniff can identify.",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (suffixes, magic numbers, engine groups).",
)
@output_format_option
def formats_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List supported file kinds.

    Args:
        show_details (bool): If True, also show suffixes, signatures and groups.
        output_format (OutputFormat | None): Output format (``default`` if None).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = int(ctx.obj.get("verbosity_level", 0))

    config: Config = resolve_config_from_click(ctx=ctx)
    try:
        table: ExtensionTable = config.build_sniffer().extensions
    except ConfigError as e:
        raise DocsniffConfigError(str(e)) from e

    kinds: list[FileKind] = list(FileKind)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        payload = [_serialize(k, table, details=show_details) for k in kinds]
        console.print(json.dumps(payload, indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for k in kinds:
            console.print(json.dumps(_serialize(k, table, details=show_details)))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# Supported File Kinds\n")
        console.print(f"DocSniff version **{DOCSNIFF_VERSION}** identifies the following kinds:\n")
        if show_details:
            headers = ["Kind", "Extensions", "Signatures", "Groups", "Description"]
            rows = [
                [
                    f"`{k}`",
                    ", ".join(table.suffixes_for(k)),
                    ", ".join(f"`{s.hex(' ')}`" for s in signatures_for(k)),
                    ", ".join(_groups(k)),
                    k.description,
                ]
                for k in kinds
            ]
        else:
            headers = ["Kind", "Description"]
            rows = [[f"`{k}`", k.description] for k in kinds]
        console.print(render_markdown_table(headers, rows))
        return

    # OutputFormat.DEFAULT (human output)
    if vlevel > 0:
        console.print(console.styled("Supported file kinds:\n", bold=True, underline=True))

    num_width: int = len(str(len(kinds)))
    name_width: int = max(len(str(k)) for k in kinds)
    for idx, k in enumerate(kinds, start=1):
        descr: str = console.styled(k.description, dim=True)
        console.print(f"{idx:>{num_width}}. {str(k):<{name_width}} {descr}")
        if not show_details:
            continue
        exts: list[str] = table.suffixes_for(k)
        sigs: list[bytes] = signatures_for(k)
        groups: list[str] = _groups(k)
        if exts:
            console.print(f"      extensions : {', '.join(exts)}")
        if sigs:
            console.print(f"      signatures : {', '.join(s.hex(' ') for s in sigs)}")
        if groups:
            console.print(f"      groups     : {', '.join(groups)}")
