# topmark:header:start
#
#   project      : DocSniff
#   file         : file.py
#   file_relpath : src/docsniff/utils/file.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Bounded, fail-soft file reads used by the sniffers."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from docsniff.config.logging import DocsniffLogger, get_logger

if TYPE_CHECKING:
    from os import PathLike

logger: DocsniffLogger = get_logger(__name__)


def read_n(path: str | PathLike[str], n: int) -> bytes:
    """Read up to ``n`` bytes from the start of a file.

    Args:
        path (str | PathLike[str]): File to read.
        n (int): Maximum number of bytes to read.

    Returns:
        bytes: The bytes read; empty if the file is missing, empty or unreadable.
    """
    try:
        with open(path, "rb") as fh:
            return fh.read(n)
    except OSError as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return b""


def starts_with(path: str | PathLike[str], prefix: bytes) -> bool:
    """Return True if the file at ``path`` begins with ``prefix``."""
    return read_n(path, len(prefix)) == prefix


def is_directory(path: str | PathLike[str]) -> bool:
    """Return True if ``path`` names an existing directory."""
    return os.path.isdir(path)


def file_size(path: str | PathLike[str]) -> int | None:
    """Return the size of the file at ``path``, or None if it cannot be stat'ed."""
    try:
        return os.path.getsize(path)
    except OSError as exc:
        logger.debug("Cannot stat %s: %s", path, exc)
        return None
