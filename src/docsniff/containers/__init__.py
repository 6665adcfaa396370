# topmark:header:start
#
#   project      : DocSniff
#   file         : __init__.py
#   file_relpath : src/docsniff/containers/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Path-based inspectors for container formats (ZIP, PalmDB).

Inspectors open the file themselves and fail closed: malformed or unreadable
input yields False, never an exception.
"""

from __future__ import annotations

from docsniff.containers.palmdb import (
    PdbDocType,
    PdbReader,
    get_pdb_doc_type,
    is_mobi_file,
    parse_pdb,
)
from docsniff.containers.zip import (
    is_epub_file,
    is_xps_archive,
    open_zip_archive,
    read_zip_entry,
)

__all__ = [
    "PdbDocType",
    "PdbReader",
    "get_pdb_doc_type",
    "is_epub_file",
    "is_mobi_file",
    "is_xps_archive",
    "open_zip_archive",
    "parse_pdb",
    "read_zip_entry",
]
