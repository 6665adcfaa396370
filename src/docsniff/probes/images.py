# topmark:header:start
#
#   project      : DocSniff
#   file         : images.py
#   file_relpath : src/docsniff/probes/images.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Generic raster image sniffer.

Formats with a magic number are recognized through the `filetype` package.
Two cases it does not cover are handled here:

* JPEG 2000 files whose signature box is not followed by a ``jp2 `` file
  type box, and raw codestreams (``FF 4F FF 51``);
* Truevision Targa, which has no magic number: it is accepted when the
  optional ``TRUEVISION-XFILE`` footer is present, or when every header field
  holds a value a real TGA image could have.
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING, Final

import filetype

from docsniff.config.logging import DocsniffLogger, get_logger
from docsniff.formats.kinds import FileKind

if TYPE_CHECKING:
    from filetype.types.base import Type

logger: DocsniffLogger = get_logger(__name__)

# `filetype` reports matches by extension; only the formats DocSniff renders are mapped.
_FILETYPE_EXTENSIONS: Final[dict[str, FileKind]] = {
    "bmp": FileKind.BMP,
    "gif": FileKind.GIF,
    "jpg": FileKind.JPEG,
    "jxr": FileKind.JXR,
    "png": FileKind.PNG,
    "apng": FileKind.PNG,
    "tif": FileKind.TIFF,
    # Canon raw files are TIFF containers
    "cr2": FileKind.TIFF,
    "webp": FileKind.WEBP,
    "jpx": FileKind.JP2,
}

JP2_SIGNATURE_BOX: Final[bytes] = b"\x00\x00\x00\x0cjP  \r\n\x87\n"
J2K_CODESTREAM: Final[bytes] = b"\xff\x4f\xff\x51"

TGA_HEADER_SIZE: Final[int] = 18
TGA_FOOTER_SIZE: Final[int] = 26
TGA_FOOTER_SIGNATURE: Final[bytes] = b"TRUEVISION-XFILE.\x00"

# Base image types (RLE flag 0x08 masked off): color-mapped, true-color, grayscale
_TGA_IMAGE_TYPES: Final[frozenset[int]] = frozenset({1, 2, 3})
_TGA_BIT_DEPTHS: Final[frozenset[int]] = frozenset({8, 15, 16, 24, 32})


def _has_tga_footer(data: bytes) -> bool:
    if len(data) < TGA_HEADER_SIZE + TGA_FOOTER_SIZE:
        return False
    return data.endswith(TGA_FOOTER_SIGNATURE)


def _has_tga_header(data: bytes) -> bool:
    if len(data) < TGA_HEADER_SIZE:
        return False
    (
        _id_length,
        cmap_type,
        image_type,
        _cmap_first,
        _cmap_length,
        _cmap_entry_size,
        _x_origin,
        _y_origin,
        width,
        height,
        bit_depth,
        flags,
    ) = struct.unpack_from("<BBBHHBHHHHBB", data, 0)

    base_type: int = image_type & ~0x08
    if cmap_type > 1 or base_type not in _TGA_IMAGE_TYPES:
        return False
    # A color map is present exactly for color-mapped images
    if (cmap_type == 1) != (base_type == 1):
        return False
    if bit_depth not in _TGA_BIT_DEPTHS or width == 0 or height == 0:
        return False
    # Interleaving bits are obsolete and always zero in practice
    return flags & 0xC0 == 0


def is_tga_content(data: bytes) -> bool:
    """Return True if ``data`` plausibly holds a Targa image."""
    return _has_tga_footer(data) or _has_tga_header(data)


def detect_image_format(data: bytes) -> FileKind | None:
    """Return the raster image kind of ``data``, if any.

    Args:
        data (bytes): Leading bytes of the file.

    Returns:
        FileKind | None: One of BMP, GIF, JPEG, JXR, PNG, TGA, TIFF, WEBP, JP2, or None.
    """
    if not data:
        return None

    match: Type | None = filetype.image_match(bytearray(data))
    if match is not None:
        kind: FileKind | None = _FILETYPE_EXTENSIONS.get(match.extension)
        logger.trace("filetype matched %s -> %s", match.extension, kind)
        if kind is not None:
            return kind

    if data.startswith((JP2_SIGNATURE_BOX, J2K_CODESTREAM)):
        return FileKind.JP2
    if is_tga_content(data):
        return FileKind.TGA
    return None
