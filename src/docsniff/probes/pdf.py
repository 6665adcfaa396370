# topmark:header:start
#
#   project      : DocSniff
#   file         : pdf.py
#   file_relpath : src/docsniff/probes/pdf.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""PDF probes (file name and leading bytes)."""

from __future__ import annotations

import os
import re
from typing import TYPE_CHECKING, Final

from docsniff.config.logging import DocsniffLogger, get_logger

if TYPE_CHECKING:
    from os import PathLike

logger: DocsniffLogger = get_logger(__name__)

PDF_HEADER: Final[bytes] = b"%PDF-"

# Readers accept a PDF header preceded by junk within the first KiB.
PDF_HEADER_WINDOW: Final[int] = 1024

# "doc.pdf:12:0" addresses an object embedded inside doc.pdf
_EMBED_MARKS_RE: Final[re.Pattern[str]] = re.compile(r"\.pdf(?::\d+:\d+)+$", re.IGNORECASE)


def is_pdf_file_content(data: bytes) -> bool:
    """Return True if ``data`` looks like the start of a PDF file.

    Args:
        data (bytes): Leading bytes of the file.

    Returns:
        bool: True if the ``%PDF-`` header occurs within the first KiB.
    """
    if len(data) < 8:
        return False
    return PDF_HEADER in data[:PDF_HEADER_WINDOW]


def is_pdf_file_name(path: str | PathLike[str]) -> bool:
    """Return True if ``path`` names a PDF file or an object embedded in one.

    Embedded objects are addressed as ``<file>.pdf:<num>:<gen>`` (one or more
    marks), a form that carries no recognizable extension of its own.
    """
    name: str = os.fspath(path)
    if name.lower().endswith(".pdf"):
        return True
    return _EMBED_MARKS_RE.search(name) is not None
