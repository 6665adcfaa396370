# topmark:header:start
#
#   project      : DocSniff
#   file         : types.py
#   file_relpath : src/docsniff/config/types.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Lightweight config types and aliases.

Kept free of imports from the rest of the library so any module can depend on it.
"""

from __future__ import annotations

# For runtime type checks, prefer collections.abc
from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

TomlTable = dict[str, Any]


class SniffStrategy(str, Enum):
    """How a path is classified."""

    NAME = "Classify by file name only"
    CONTENT = "Classify by file content only"
    GUESS = "Classify by content, fall back to the file name (default)"

    @classmethod
    def from_name(cls, key_name: str | None) -> SniffStrategy | None:
        """Finds the SniffStrategy member by its case-insensitive name (e.g., 'guess').

        Args:
            key_name (str | None): The member name (e.g., "content") or None.

        Returns:
            SniffStrategy | None: The matching member or None if the key is None or
                unmatched.
        """
        if key_name is None:
            return None
        return cls.__members__.get(key_name.upper())
