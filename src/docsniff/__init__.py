# topmark:header:start
#
#   project      : DocSniff
#   file         : __init__.py
#   file_relpath : src/docsniff/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""DocSniff package.

DocSniff identifies the format of document, e-book, comic-book archive and image
files from their leading bytes, their container structure, or their name. It
exposes a small typed API and a CLI (``docsniff identify``).

Example:
    >>> from docsniff import FileKind, file_type_from_file_name
    >>> file_type_from_file_name("report.PDF") is FileKind.PDF
    True
"""

from __future__ import annotations

from docsniff.errors import ConfigError, DocsniffError, ExtensionTableError
from docsniff.formats.groups import is_cbx_engine_kind, is_image_engine_kind
from docsniff.formats.kinds import FileKind
from docsniff.sniff import (
    Sniffer,
    file_type_from_file_name,
    guess_file_type,
    is_image_engine_supported_file,
    sniff_file_type,
    sniff_file_type_from_data,
)

__all__ = [
    "ConfigError",
    "DocsniffError",
    "ExtensionTableError",
    "FileKind",
    "Sniffer",
    "file_type_from_file_name",
    "guess_file_type",
    "is_cbx_engine_kind",
    "is_image_engine_kind",
    "is_image_engine_supported_file",
    "sniff_file_type",
    "sniff_file_type_from_data",
]
