# topmark:header:start
#
#   project      : DocSniff
#   file         : io.py
#   file_relpath : src/docsniff/config/io.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""TOML I/O helpers for DocSniff configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
getters never raise: a missing or mistyped key yields a default and a log
record, leaving value validation to `docsniff.config.model`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from docsniff.config.keys import Toml
from docsniff.config.logging import get_logger
from docsniff.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from docsniff.config.logging import DocsniffLogger
    from docsniff.config.types import TomlTable

logger: DocsniffLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``docsniff.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_docsniff_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the DocSniff section of a parsed config document.

    For ``pyproject.toml`` this is ``[tool.docsniff]``; other files are used whole.

    Args:
        path (Path): Path the document was read from.
        data (TomlTable): The parsed document.

    Returns:
        TomlTable | None: The section, or None when a ``pyproject.toml`` has no
            ``[tool.docsniff]`` table.
    """
    if path.name != "pyproject.toml":
        return data
    tool_tbl: TomlTable = get_table_value(data, Toml.SECTION_TOOL)
    section: TomlTable = get_table_value(tool_tbl, Toml.SECTION_DOCSNIFF)
    if not section:
        logger.debug("No [tool.docsniff] section in %s", path)
        return None
    return section


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected table for key %s, got %r; ignoring it", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected string for key %s, got %s: %r", key, type(value).__name__, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Booleans are rejected even though ``bool`` is an ``int`` subclass.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        int | None: The integer value, or ``None`` when absent or not an integer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Expected integer for key %s, got %s: %r", key, type(value).__name__, value)
    return None
