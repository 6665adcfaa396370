# topmark:header:start
#
#   project      : DocSniff
#   file         : postscript.py
#   file_relpath : src/docsniff/probes/postscript.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""PostScript content probe.

Three forms are accepted:

* plain PostScript text starting with ``%!PS-Adobe-``;
* Windows EPS binary files (DOS EPS header ``C5 D0 D3 C6``, Adobe technical
  note 5002), where a little-endian offset at byte 4 points at the PostScript
  section;
* PJL (Printer Job Language) jobs that carry PostScript after the PJL preamble.
"""

from __future__ import annotations

import struct
from typing import Final

from docsniff.config.logging import DocsniffLogger, get_logger

logger: DocsniffLogger = get_logger(__name__)

PS_MIN_SIZE: Final[int] = 64

PS_HEADER: Final[bytes] = b"%!PS-Adobe-"
EPS_BINARY_HEADER: Final[bytes] = b"\xc5\xd0\xd3\xc6"
PJL_HEADER: Final[bytes] = b"\x1b%-12345X@PJL"

# An offset this close to the end of the buffer cannot be checked; accept it.
_EPS_OFFSET_SLACK: Final[int] = 12


def is_ps_file_content(data: bytes) -> bool:
    """Return True if ``data`` looks like the start of a PostScript file.

    Args:
        data (bytes): Leading bytes of the file.

    Returns:
        bool: True for plain PostScript, Windows EPS and PJL-wrapped PostScript.
            Buffers shorter than 64 bytes are never PostScript.
    """
    n: int = len(data)
    if n < PS_MIN_SIZE:
        return False

    if data.startswith(EPS_BINARY_HEADER):
        (ps_start,) = struct.unpack_from("<I", data, 4)
        logger.trace("EPS binary header, PostScript section at offset %d", ps_start)
        return ps_start >= n - _EPS_OFFSET_SLACK or data.startswith(PS_HEADER, ps_start)

    if data.startswith(PS_HEADER):
        return True

    if data.startswith(PJL_HEADER):
        return data.find(b"\n" + PS_HEADER, len(PJL_HEADER)) != -1

    return False
