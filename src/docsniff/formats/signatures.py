# topmark:header:start
#
#   project      : DocSniff
#   file         : signatures.py
#   file_relpath : src/docsniff/formats/signatures.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Magic-number table for container and document formats.

Entries are tested in table order and the first matching prefix wins; there is
no longest-match search. Image formats are not listed here: they are recognized
by `docsniff.probes.images.detect_image_format`, which runs earlier.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from docsniff.config.logging import DocsniffLogger, get_logger
from docsniff.formats.kinds import FileKind

logger: DocsniffLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SignatureEntry:
    """A magic-number prefix and the kind it identifies.

    Attributes:
        signature (bytes): Leading bytes of the format (may contain NULs).
        kind (FileKind): Kind reported on match.
    """

    signature: bytes
    kind: FileKind

    def matches(self, data: bytes) -> bool:
        """Return True if ``data`` starts with this entry's signature."""
        return data[: len(self.signature)] == self.signature


SIGNATURES: Final[tuple[SignatureEntry, ...]] = (
    # RAR 1.5-4.x and RAR 5.0 share the leading bytes
    SignatureEntry(b"Rar!\x1a\x07\x00", FileKind.RAR),
    SignatureEntry(b"Rar!\x1a\x07\x01\x00", FileKind.RAR),
    SignatureEntry(b"7z\xbc\xaf\x27\x1c", FileKind.SEVEN_Z),
    SignatureEntry(b"PK\x03\x04", FileKind.ZIP),
    SignatureEntry(b"ITSF", FileKind.CHM),
    SignatureEntry(b"AT&T", FileKind.DJVU),
)


def match_signature(
    data: bytes,
    table: tuple[SignatureEntry, ...] = SIGNATURES,
) -> FileKind | None:
    """Return the kind of the first table entry whose signature prefixes ``data``.

    Args:
        data (bytes): Leading bytes of a file. Buffers shorter than a signature
            simply do not match it.
        table (tuple[SignatureEntry, ...]): Ordered signature table.

    Returns:
        FileKind | None: The matched kind, or None.
    """
    for entry in table:
        if entry.matches(data):
            logger.trace("signature %r matched: %s", entry.signature, entry.kind)
            return entry.kind
    return None


def signatures_for(kind: FileKind) -> list[bytes]:
    """Return the signatures registered for ``kind`` (in table order)."""
    return [e.signature for e in SIGNATURES if e.kind is kind]
