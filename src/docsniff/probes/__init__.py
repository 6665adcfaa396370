# topmark:header:start
#
#   project      : DocSniff
#   file         : __init__.py
#   file_relpath : src/docsniff/probes/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Boolean content and filename probes.

Probes are fast and side-effect free. Content probes take the leading bytes of a
file; they never raise for short or garbage input and simply answer False/None.
"""

from __future__ import annotations

from docsniff.probes.images import detect_image_format
from docsniff.probes.names import is_djvu_file_name, is_engine_multi_file_name
from docsniff.probes.pdf import is_pdf_file_content, is_pdf_file_name
from docsniff.probes.postscript import is_ps_file_content

__all__ = [
    "detect_image_format",
    "is_djvu_file_name",
    "is_engine_multi_file_name",
    "is_pdf_file_content",
    "is_pdf_file_name",
    "is_ps_file_content",
]
