# topmark:header:start
#
#   project      : DocSniff
#   file         : config_resolver.py
#   file_relpath : src/docsniff/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Resolve DocSniff configuration from Click parameters.

Bridges CLI parsing and the config layer: group-level options (``--config``,
``--no-config``) are read from ``ctx.obj`` and combined with per-command
overrides.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from docsniff.cli.cli_types import build_args_namespace
from docsniff.cli.errors import DocsniffConfigError
from docsniff.config.logging import get_logger
from docsniff.config.model import MutableConfig
from docsniff.errors import ConfigError

if TYPE_CHECKING:
    import click

    from docsniff.cli.cli_types import ArgsNamespace
    from docsniff.config.logging import DocsniffLogger
    from docsniff.config.model import Config
    from docsniff.config.types import SniffStrategy

logger: DocsniffLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    ctx: click.Context,
    prefix_size: int | None = None,
    strategy: SniffStrategy | None = None,
) -> Config:
    """Build a frozen `Config` from the Click context and command overrides.

    Resolution order (lowest → highest precedence):
      1. Built-in defaults.
      2. ``pyproject.toml`` (``[tool.docsniff]``) and then ``docsniff.toml`` in the
         working directory, unless ``--no-config`` is set.
      3. Explicit config files passed via ``--config``, merged in order.
      4. CLI overrides, applied last.

    Args:
        ctx (click.Context): Click context carrying the group-level options.
        prefix_size (int | None): ``--prefix-size`` override.
        strategy (SniffStrategy | None): ``--by`` override.

    Returns:
        Config: The merged, validated configuration.

    Raises:
        DocsniffConfigError: If any config source is missing or invalid.
    """
    obj: dict[str, Any] = ctx.obj or {}
    args: ArgsNamespace = build_args_namespace(
        no_config=bool(obj.get("no_config", False)),
        config_files=[str(p) for p in obj.get("config_paths", ())],
        prefix_size=prefix_size,
        strategy=strategy,
    )
    logger.trace("ArgsNamespace: %s", args)

    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in args.get("config_files") or []],
            no_config=bool(args.get("no_config")),
        )
        draft = draft.apply_cli_args(args)
        return draft.freeze()
    except ConfigError as e:
        raise DocsniffConfigError(str(e)) from e
