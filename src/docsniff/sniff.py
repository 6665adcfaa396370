# topmark:header:start
#
#   project      : DocSniff
#   file         : sniff.py
#   file_relpath : src/docsniff/sniff.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Classify files by content, by name, or both.

The classifier combines the static registries in `docsniff.formats` with the
content probes and container inspectors. Content sniffing runs, in order:

1. directories: an unpacked EPUB (``<dir>/mimetype``) is EPUB, anything else unknown;
2. the leading bytes of the file: PDF, PostScript, image formats, then the
   magic-number table;
3. for ZIP files, the XPS and EPUB inspectors (EPUB is checked last and wins);
4. for still unknown files, the Mobipocket inspector.

Name-based classification uses the suffix table, then the PDF filename rule.

"Unknown" is always reported as ``None``; classification never raises for
unreadable or malformed input.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from docsniff.config.logging import DocsniffLogger, get_logger
from docsniff.constants import DEFAULT_PREFIX_SIZE, EPUB_DIR_MIMETYPE
from docsniff.containers.palmdb import is_mobi_file
from docsniff.containers.zip import is_epub_file, is_xps_archive
from docsniff.formats.extensions import BUILTIN_EXTENSIONS, ExtensionTable
from docsniff.formats.groups import is_image_engine_kind
from docsniff.formats.kinds import FileKind
from docsniff.formats.signatures import match_signature
from docsniff.probes.images import detect_image_format
from docsniff.probes.pdf import is_pdf_file_content, is_pdf_file_name
from docsniff.probes.postscript import is_ps_file_content
from docsniff.utils.file import is_directory, read_n, starts_with

if TYPE_CHECKING:
    from os import PathLike

logger: DocsniffLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Sniffer:
    """A configured file classifier.

    Attributes:
        prefix_size (int): Number of leading bytes read for content sniffing.
        extensions (ExtensionTable): Suffix table used for name-based
            classification; checked once before its first use.
    """

    prefix_size: int = DEFAULT_PREFIX_SIZE
    extensions: ExtensionTable = field(default=BUILTIN_EXTENSIONS)

    def sniff_data(self, data: bytes) -> FileKind | None:
        """Classify a byte buffer (usually the head of a file).

        FB2 is never detected here: it is plain XML and only recognized by name.

        Args:
            data (bytes): Leading bytes of a file; may be empty.

        Returns:
            FileKind | None: The detected kind, or None if unknown.
        """
        if is_pdf_file_content(data):
            return FileKind.PDF
        if is_ps_file_content(data):
            return FileKind.PS
        kind: FileKind | None = detect_image_format(data)
        if kind is not None:
            return kind
        return match_signature(data)

    def sniff(self, path: str | PathLike[str] | None) -> FileKind | None:
        """Classify the file or directory at ``path`` by its content.

        Args:
            path (str | PathLike[str] | None): File or directory to inspect; None
                is unknown.

        Returns:
            FileKind | None: The detected kind, or None if unknown or unreadable.
        """
        if path is None:
            return None
        if is_directory(path):
            mimetype_path: str = os.path.join(os.fspath(path), "mimetype")
            if starts_with(mimetype_path, EPUB_DIR_MIMETYPE):
                return FileKind.EPUB
            return None

        data: bytes = read_n(path, self.prefix_size)
        if not data:
            logger.debug("Nothing to sniff in %s", path)
            return None

        kind: FileKind | None = self.sniff_data(data)
        if kind is FileKind.ZIP:
            if is_xps_archive(path):
                kind = FileKind.XPS
            if is_epub_file(path):
                kind = FileKind.EPUB
        if kind is None and is_mobi_file(path):
            kind = FileKind.MOBI

        logger.trace("Sniffed %s -> %s", path, kind)
        return kind

    def from_name(self, path: str | PathLike[str] | None) -> FileKind | None:
        """Classify ``path`` by its name only (directories are reported as DIR).

        Args:
            path (str | PathLike[str] | None): Path to classify; None is unknown.

        Returns:
            FileKind | None: The kind implied by the name, or None.

        Raises:
            ExtensionTableError: If the suffix table fails its one-time check.
        """
        self.extensions.verify()
        if path is None:
            return None
        if is_directory(path):
            return FileKind.DIR
        kind: FileKind | None = self.extensions.match(path)
        if kind is not None:
            return kind
        if is_pdf_file_name(path):
            return FileKind.PDF
        return None

    def guess(self, path: str | PathLike[str] | None, sniff: bool = True) -> FileKind | None:
        """Classify by content when ``sniff`` is set, falling back to the name.

        Args:
            path (str | PathLike[str] | None): Path to classify; None is unknown.
            sniff (bool): Try content sniffing first.

        Returns:
            FileKind | None: The detected kind, or None.
        """
        if sniff:
            kind: FileKind | None = self.sniff(path)
            if kind is not None:
                return kind
        return self.from_name(path)

    def is_image_engine_supported_file(
        self, path: str | PathLike[str] | None, sniff: bool
    ) -> bool:
        """Return True if ``path`` is a single image the image engine can open."""
        if sniff:
            return is_image_engine_kind(self.sniff(path))
        return is_image_engine_kind(self.from_name(path))


DEFAULT_SNIFFER: Sniffer = Sniffer()


def sniff_file_type_from_data(data: bytes) -> FileKind | None:
    """Classify a byte buffer by content. See `Sniffer.sniff_data`."""
    return DEFAULT_SNIFFER.sniff_data(data)


def sniff_file_type(path: str | PathLike[str] | None) -> FileKind | None:
    """Classify a file or directory by content. See `Sniffer.sniff`."""
    return DEFAULT_SNIFFER.sniff(path)


def file_type_from_file_name(path: str | PathLike[str] | None) -> FileKind | None:
    """Classify a path by name. See `Sniffer.from_name`."""
    return DEFAULT_SNIFFER.from_name(path)


def guess_file_type(path: str | PathLike[str] | None, sniff: bool = True) -> FileKind | None:
    """Classify by content, then by name. See `Sniffer.guess`."""
    return DEFAULT_SNIFFER.guess(path, sniff=sniff)


def is_image_engine_supported_file(path: str | PathLike[str] | None, sniff: bool) -> bool:
    """Return True if ``path`` is an image-engine kind, by content or by name."""
    return DEFAULT_SNIFFER.is_image_engine_supported_file(path, sniff)
