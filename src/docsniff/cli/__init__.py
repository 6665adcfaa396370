# topmark:header:start
#
#   project      : DocSniff
#   file         : __init__.py
#   file_relpath : src/docsniff/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""DocSniff CLI package.

This package groups all Click command definitions and supporting utilities
for the DocSniff command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        docsniff = "docsniff.cli.main:cli"

All subcommands live in `docsniff.cli.commands`.
"""

from __future__ import annotations

__all__: list[str] = []
