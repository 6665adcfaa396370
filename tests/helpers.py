# topmark:header:start
#
#   project      : DocSniff
#   file         : helpers.py
#   file_relpath : tests/helpers.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Builders for the byte-level fixtures used across the test suite.

Every builder returns the smallest payload that the corresponding probe accepts,
so tests can tweak single bytes to exercise the rejection paths.
"""

from __future__ import annotations

import io
import struct
import zipfile
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

PNG_BYTES: bytes = (
    b"\x89PNG\r\n\x1a\n"
    + struct.pack(">I", 13)
    + b"IHDR"
    + struct.pack(">IIBBBBB", 1, 1, 8, 6, 0, 0, 0)
    + b"\x00\x00\x00\x00"
    + struct.pack(">I", 0)
    + b"IEND"
    + b"\xaeB`\x82"
)
JPEG_BYTES: bytes = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00"
GIF_BYTES: bytes = b"GIF89a\x01\x00\x01\x00\x80\x00\x00\xff\xff\xff\x00\x00\x00;"
BMP_BYTES: bytes = b"BM" + struct.pack("<IHHI", 58, 0, 0, 54) + b"\x00" * 48
TIFF_LE_BYTES: bytes = b"II*\x00\x08\x00\x00\x00\x00\x00" + b"\x00" * 8
TIFF_BE_BYTES: bytes = b"MM\x00*\x00\x00\x00\x08\x00\x00" + b"\x00" * 8
WEBP_BYTES: bytes = b"RIFF" + struct.pack("<I", 26) + b"WEBPVP8 " + b"\x00" * 18
JXR_BYTES: bytes = b"II\xbc\x01\x08\x00\x00\x00" + b"\x00" * 8
JP2_SIGNATURE: bytes = b"\x00\x00\x00\x0cjP  \r\n\x87\n"
JP2_BYTES: bytes = JP2_SIGNATURE + struct.pack(">I", 20) + b"ftypjp2 " + b"\x00" * 48
J2K_BYTES: bytes = b"\xff\x4f\xff\x51\x00\x2f" + b"\x00" * 16

PDF_BYTES: bytes = b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<< /Type /Catalog >>\nendobj\n"
PS_BYTES: bytes = (
    b"%!PS-Adobe-3.0\n%%Creator: docsniff tests\n%%Pages: 1\n%%EndComments\nshowpage\n"
)


def tga_bytes(
    *,
    image_type: int = 2,
    cmap_type: int = 0,
    width: int = 2,
    height: int = 2,
    bit_depth: int = 24,
    flags: int = 0,
) -> bytes:
    """Return an uncompressed Targa image (header plus pixel data, no footer)."""
    header: bytes = struct.pack(
        "<BBBHHBHHHHBB",
        0,
        cmap_type,
        image_type,
        0,
        0,
        0,
        0,
        0,
        width,
        height,
        bit_depth,
        flags,
    )
    return header + b"\x10" * (width * height * max(bit_depth // 8, 1))


def tga_footer() -> bytes:
    """Return a TGA 2.0 footer (no extension or developer area)."""
    return struct.pack("<II", 0, 0) + b"TRUEVISION-XFILE.\x00"


def eps_bytes(ps: bytes = PS_BYTES, *, ps_start: int | None = None) -> bytes:
    """Return a Windows binary EPS file wrapping ``ps``.

    Args:
        ps (bytes): PostScript section.
        ps_start (int | None): Offset written to the header; defaults to the
            real offset of the PostScript section.
    """
    header_size: int = 30
    start: int = header_size if ps_start is None else ps_start
    header: bytes = b"\xc5\xd0\xd3\xc6" + struct.pack(
        "<IIIIIIH", start, len(ps), 0, 0, 0, 0, 0xFFFF
    )
    return header + ps


def pjl_bytes(ps: bytes = PS_BYTES) -> bytes:
    """Return a PJL job that switches the printer to PostScript."""
    return b"\x1b%-12345X@PJL JOB\r\n@PJL ENTER LANGUAGE = POSTSCRIPT\r\n" + ps


def zip_bytes(entries: Mapping[str, bytes]) -> bytes:
    """Return a ZIP archive holding ``entries`` (stored, in the given order)."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_STORED) as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buf.getvalue()


def write_zip(path: Path, entries: Mapping[str, bytes]) -> Path:
    """Write a ZIP archive with ``entries`` to ``path`` and return ``path``."""
    path.write_bytes(zip_bytes(entries))
    return path


def epub_entries(mimetype: bytes = b"application/epub+zip") -> dict[str, bytes]:
    """Return the entries of a minimal EPUB container."""
    return {
        "mimetype": mimetype,
        "META-INF/container.xml": b"<container/>",
        "OEBPS/content.opf": b"<package/>",
    }


def xps_entries() -> dict[str, bytes]:
    """Return the entries of a minimal XPS package."""
    return {
        "[Content_Types].xml": b"<Types/>",
        "_rels/.rels": b"<Relationships/>",
        "FixedDocSeq.fdseq": b"<FixedDocumentSequence/>",
    }


def pdb_bytes(
    db_type: bytes = b"BOOK",
    creator: bytes = b"MOBI",
    *,
    name: bytes = b"docsniff-test",
    offsets: Iterable[int] | None = None,
    record_data: bytes = b"\x00" * 16,
) -> bytes:
    """Return a PalmDB file with one data blob shared by all records.

    Args:
        db_type (bytes): 4-byte database type.
        creator (bytes): 4-byte creator id.
        name (bytes): Database name (at most 31 bytes).
        offsets (Iterable[int] | None): Record offsets; by default two records
            pointing into ``record_data``.
        record_data (bytes): Bytes appended after the record list.
    """
    record_list_end: int = 78 + 2 * 8
    offs: list[int] = (
        list(offsets) if offsets is not None else [record_list_end, record_list_end + 8]
    )
    header: bytes = struct.pack(
        ">32sHHIIIIII4s4sIIH",
        name,
        0,
        0,
        0,
        0,
        0,
        0,
        0,
        0,
        db_type,
        creator,
        0,
        0,
        len(offs),
    )
    records: bytes = b"".join(
        struct.pack(">IB3s", off, 0, idx.to_bytes(3, "big")) for idx, off in enumerate(offs)
    )
    return header + records + record_data
