# topmark:header:start
#
#   project      : DocSniff
#   file         : main.py
#   file_relpath : src/docsniff/cli/main.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""DocSniff Click CLI.

Group-level options are initialized once and placed into ``ctx.obj``; the
subcommands read the console and the config options from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docsniff.cli.commands.formats import formats_command
from docsniff.cli.commands.identify import identify_command
from docsniff.cli.commands.version import version_command
from docsniff.cli.console import ClickConsole
from docsniff.cli.options import (
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from docsniff.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from docsniff.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, color, config options) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_paths (tuple[str, ...]): Files given with ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    ctx.obj["config_paths"] = tuple(config_paths)
    ctx.obj["no_config"] = no_config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DocSniff: identify document, e-book, comic and image formats.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the DocSniff CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_paths=config_paths,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'docsniff identify [PATHS...]' to identify files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(identify_command)

cli.add_command(formats_command)

if __name__ == "__main__":
    cli()
