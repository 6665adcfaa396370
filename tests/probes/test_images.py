# topmark:header:start
#
#   project      : DocSniff
#   file         : test_images.py
#   file_relpath : tests/probes/test_images.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Tests for the raster image sniffer."""

from __future__ import annotations

import pytest

from docsniff.formats.kinds import FileKind
from docsniff.probes.images import detect_image_format, is_tga_content
from tests.helpers import (
    BMP_BYTES,
    GIF_BYTES,
    J2K_BYTES,
    JP2_BYTES,
    JP2_SIGNATURE,
    JPEG_BYTES,
    JXR_BYTES,
    PNG_BYTES,
    TIFF_BE_BYTES,
    TIFF_LE_BYTES,
    WEBP_BYTES,
    tga_bytes,
    tga_footer,
)


@pytest.mark.parametrize(
    "data, expected",
    [
        (PNG_BYTES, FileKind.PNG),
        (JPEG_BYTES, FileKind.JPEG),
        (GIF_BYTES, FileKind.GIF),
        (BMP_BYTES, FileKind.BMP),
        (TIFF_LE_BYTES, FileKind.TIFF),
        (TIFF_BE_BYTES, FileKind.TIFF),
        (WEBP_BYTES, FileKind.WEBP),
        (JXR_BYTES, FileKind.JXR),
        (JP2_BYTES, FileKind.JP2),
        (JP2_SIGNATURE + b"\x00" * 8, FileKind.JP2),
        (J2K_BYTES, FileKind.JP2),
        (tga_bytes(), FileKind.TGA),
    ],
    ids=[
        "png",
        "jpeg",
        "gif",
        "bmp",
        "tiff-le",
        "tiff-be",
        "webp",
        "jxr",
        "jp2",
        "jp2-signature-only",
        "j2k-codestream",
        "tga",
    ],
)
def test_detect_image_format(data: bytes, expected: FileKind) -> None:
    """Each supported raster format is recognized from its leading bytes."""
    assert detect_image_format(data) is expected


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"hello, world",
        b"%PDF-1.7\n",
        b"PK\x03\x04\x14\x00\x00\x00",
        b"\x00" * 64,
        bytes(range(7, 250)),
    ],
)
def test_non_images(data: bytes) -> None:
    """Documents, archives and garbage are not images."""
    assert detect_image_format(data) is None


def test_formats_outside_the_image_kinds_are_ignored() -> None:
    """Photoshop files are images to `filetype`, but not to DocSniff."""
    assert detect_image_format(b"8BPS\x00\x01" + b"\x00" * 32) is None


def test_tga_with_colormap() -> None:
    """Color-mapped images must declare a color map."""
    assert is_tga_content(tga_bytes(image_type=1, cmap_type=1, bit_depth=8))
    assert not is_tga_content(tga_bytes(image_type=1, cmap_type=0, bit_depth=8))
    assert not is_tga_content(tga_bytes(image_type=2, cmap_type=1))


def test_tga_rle_variant() -> None:
    """RLE-compressed image types set bit 3 of the image type."""
    assert is_tga_content(tga_bytes(image_type=10))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"image_type": 0},
        {"image_type": 4},
        {"bit_depth": 12},
        {"width": 0},
        {"height": 0},
        {"flags": 0x40},
    ],
)
def test_tga_header_rejections(kwargs: dict[str, int]) -> None:
    """Header fields a real Targa image cannot have are rejected."""
    assert not is_tga_content(tga_bytes(**kwargs))


def test_tga_footer_is_sufficient() -> None:
    """The TGA 2.0 footer identifies the file regardless of the header."""
    data: bytes = b"\xff" * 32 + tga_footer()
    assert is_tga_content(data)
    assert detect_image_format(data) is FileKind.TGA


def test_tga_truncated_header() -> None:
    """Fewer than 18 bytes cannot hold a Targa header."""
    assert not is_tga_content(tga_bytes()[:17])
