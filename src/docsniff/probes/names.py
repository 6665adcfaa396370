# topmark:header:start
#
#   project      : DocSniff
#   file         : names.py
#   file_relpath : src/docsniff/probes/names.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Filename probes for formats that are not part of the suffix table."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from os import PathLike

DJVU_SUFFIXES: Final[tuple[str, ...]] = (".djvu", ".djv")
ENGINE_MULTI_SUFFIXES: Final[tuple[str, ...]] = (".vbkm",)


def is_djvu_file_name(path: str | PathLike[str]) -> bool:
    """Return True if ``path`` carries a DjVu suffix (case-insensitive)."""
    return os.fspath(path).lower().endswith(DJVU_SUFFIXES)


def is_engine_multi_file_name(path: str | PathLike[str]) -> bool:
    """Return True if ``path`` names a virtual bookmark collection (``.vbkm``)."""
    return os.fspath(path).lower().endswith(ENGINE_MULTI_SUFFIXES)
