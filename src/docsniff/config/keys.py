# topmark:header:start
#
#   project      : DocSniff
#   file         : keys.py
#   file_relpath : src/docsniff/config/keys.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Canonical TOML section and key names for DocSniff configuration.

The same keys are used at the top level of ``docsniff.toml`` and inside
``[tool.docsniff]`` in ``pyproject.toml``::

    prefix_size = 4096
    strategy = "content"

    [extensions]
    ".cbz2" = "cbz"
    ".azw3" = "mobi"

Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DocSniff configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_DOCSNIFF: Final[str] = "docsniff"

    # Top-level keys
    KEY_PREFIX_SIZE: Final[str] = "prefix_size"
    KEY_STRATEGY: Final[str] = "strategy"

    # [extensions]: suffix -> kind name
    SECTION_EXTENSIONS: Final[str] = "extensions"
