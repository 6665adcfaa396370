# topmark:header:start
#
#   project      : DocSniff
#   file         : zip.py
#   file_relpath : src/docsniff/containers/zip.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Inspectors for ZIP-based containers (EPUB, XPS).

ZIP access fails closed: an input that cannot be opened as a ZIP archive, or a
missing or unreadable entry, makes the inspector answer False rather than raise.
"""

from __future__ import annotations

import zipfile
from contextlib import contextmanager
from typing import TYPE_CHECKING, Final

from docsniff.config.logging import DocsniffLogger, get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator
    from os import PathLike

logger: DocsniffLogger = get_logger(__name__)

EPUB_MIMETYPE_ENTRY: Final[str] = "mimetype"
EPUB_MIMETYPES: Final[frozenset[bytes]] = frozenset(
    {
        b"application/epub+zip",
        # iBooks files are EPUBs with a different mimetype
        b"application/x-ibooks+zip",
    }
)

# OPC package relationships; interleaved packages may only have the pieces
XPS_RELS_ENTRIES: Final[tuple[str, ...]] = (
    "_rels/.rels",
    "_rels/.rels/[0].piece",
    "_rels/.rels/[0].last.piece",
)

_ZIP_WHITESPACE: Final[bytes] = b" \t\r\n\x0b\x0c"


@contextmanager
def open_zip_archive(path: str | PathLike[str]) -> Iterator[zipfile.ZipFile | None]:
    """Open ``path`` as a ZIP archive for reading.

    Yields:
        zipfile.ZipFile | None: The open archive, or None if ``path`` cannot be
            opened as ZIP. The archive is closed when the context exits.
    """
    try:
        archive = zipfile.ZipFile(path)
    except (OSError, zipfile.BadZipFile, ValueError) as exc:
        logger.debug("Not a readable ZIP archive: %s (%s)", path, exc)
        yield None
        return
    try:
        yield archive
    finally:
        archive.close()


def find_zip_entry(archive: zipfile.ZipFile, name: str) -> zipfile.ZipInfo | None:
    """Return the entry named ``name`` (case-insensitive), or None."""
    wanted: str = name.lower()
    for info in archive.infolist():
        if info.filename.lower() == wanted:
            return info
    return None


def read_zip_entry(archive: zipfile.ZipFile, name: str) -> bytes | None:
    """Return the content of the entry named exactly ``name``, or None if absent or unreadable."""
    try:
        info: zipfile.ZipInfo = archive.getinfo(name)
    except KeyError:
        return None
    try:
        return archive.read(info)
    except (OSError, zipfile.BadZipFile, NotImplementedError, RuntimeError, ValueError) as exc:
        # RuntimeError: encrypted entry; NotImplementedError: unsupported compression
        logger.debug("Cannot read ZIP entry %r: %s", name, exc)
        return None


def is_epub_file(path: str | PathLike[str]) -> bool:
    """Return True if ``path`` is a ZIP archive with an EPUB ``mimetype`` entry.

    The ``mimetype`` entry may appear anywhere in the archive (EPUB requires it to
    be first, but many files in the wild get this wrong). Trailing whitespace in
    its content is ignored.
    """
    with open_zip_archive(path) as archive:
        if archive is None:
            return False
        mimetype: bytes | None = read_zip_entry(archive, EPUB_MIMETYPE_ENTRY)
    if mimetype is None:
        return False
    result: bool = mimetype.rstrip(_ZIP_WHITESPACE) in EPUB_MIMETYPES
    logger.trace("EPUB mimetype %r -> %s", mimetype[:64], result)
    return result


def is_xps_archive(path: str | PathLike[str]) -> bool:
    """Return True if ``path`` is a ZIP archive with an OPC relationships part."""
    with open_zip_archive(path) as archive:
        if archive is None:
            return False
        for name in XPS_RELS_ENTRIES:
            if find_zip_entry(archive, name) is not None:
                return True
    return False
