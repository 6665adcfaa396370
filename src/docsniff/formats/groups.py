# topmark:header:start
#
#   project      : DocSniff
#   file         : groups.py
#   file_relpath : src/docsniff/formats/groups.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Static groups of structurally related file kinds.

Downstream code uses these groups to pick a rendering engine: raster images are
handled by the image engine, comic-book and plain archives by the archive
(CBX) engine.
"""

from __future__ import annotations

from typing import Final

from docsniff.formats.kinds import FileKind

IMAGE_ENGINE_KINDS: Final[frozenset[FileKind]] = frozenset(
    {
        FileKind.PNG,
        FileKind.JPEG,
        FileKind.GIF,
        FileKind.TIFF,
        FileKind.BMP,
        FileKind.TGA,
        FileKind.JXR,
        FileKind.HDP,
        FileKind.WDP,
        FileKind.WEBP,
        FileKind.JP2,
    }
)

CBX_ENGINE_KINDS: Final[frozenset[FileKind]] = frozenset(
    {
        FileKind.CBZ,
        FileKind.CBR,
        FileKind.CB7,
        FileKind.CBT,
        FileKind.ZIP,
        FileKind.RAR,
        FileKind.SEVEN_Z,
        FileKind.TAR,
    }
)


def is_image_engine_kind(kind: FileKind | None) -> bool:
    """Return True if ``kind`` is a raster image format."""
    return kind in IMAGE_ENGINE_KINDS


def is_cbx_engine_kind(kind: FileKind | None) -> bool:
    """Return True if ``kind`` is a comic-book or plain archive format."""
    return kind in CBX_ENGINE_KINDS
