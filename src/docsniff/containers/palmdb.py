# topmark:header:start
#
#   project      : DocSniff
#   file         : palmdb.py
#   file_relpath : src/docsniff/containers/palmdb.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""PalmOS database (PDB) header reader and Mobipocket detection.

A PDB file starts with a fixed 78-byte header followed by one 8-byte entry per
record::

    offset  size  field
         0    32  database name (NUL padded)
        32     2  attributes
        34     2  version
        36    12  creation / modification / backup dates
        48     4  modification number
        52     8  app info / sort info offsets
        60     4  type       (e.g. "BOOK")
        64     4  creator    (e.g. "MOBI")
        68     8  unique id seed / next record list
        76     2  number of records

    record entry: 4-byte data offset, 1-byte attributes, 3-byte unique id

All integers are big-endian. Only the header and the record list are read;
record data is never decoded.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from docsniff.config.logging import DocsniffLogger, get_logger
from docsniff.utils.file import file_size, read_n

if TYPE_CHECKING:
    from os import PathLike

logger: DocsniffLogger = get_logger(__name__)

PDB_HEADER_SIZE: Final[int] = 78
PDB_RECORD_ENTRY_SIZE: Final[int] = 8

_HEADER_STRUCT: Final[struct.Struct] = struct.Struct(">32sHHIIIIII4s4sIIH")
_RECORD_STRUCT: Final[struct.Struct] = struct.Struct(">IB3s")


class PdbDocType(Enum):
    """Document types stored in PalmDoc-family databases, keyed by type+creator."""

    UNKNOWN = b""
    MOBIPOCKET = b"BOOKMOBI"
    PALMDOC = b"TEXtREAd"
    TEALDOC = b"TEXtTlDc"
    PLUCKER = b"DataPlkr"


def get_pdb_doc_type(db_type: bytes) -> PdbDocType:
    """Map an 8-byte type+creator identifier to a `PdbDocType`."""
    for doc_type in PdbDocType:
        if doc_type.value and doc_type.value == db_type:
            return doc_type
    return PdbDocType.UNKNOWN


@dataclass(frozen=True, slots=True)
class PdbRecord:
    """One entry of the record list.

    Attributes:
        offset (int): Absolute file offset of the record data.
        attributes (int): Record attribute flags.
        unique_id (int): 24-bit record identifier.
    """

    offset: int
    attributes: int
    unique_id: int


@dataclass(frozen=True, slots=True)
class PdbHeader:
    """Decoded PDB header.

    Attributes:
        name (str): Database name (decoded as Latin-1, NULs stripped).
        attributes (int): Database attribute flags.
        version (int): Application-specific version.
        type (bytes): 4-byte database type.
        creator (bytes): 4-byte creator id.
        num_records (int): Number of records declared by the header.
    """

    name: str
    attributes: int
    version: int
    type: bytes
    creator: bytes
    num_records: int

    @property
    def db_type(self) -> bytes:
        """The 8-byte type+creator identifier (e.g. ``b"BOOKMOBI"``)."""
        return self.type + self.creator


@dataclass(frozen=True, slots=True)
class PdbReader:
    """A successfully parsed PDB header and record list."""

    header: PdbHeader
    records: tuple[PdbRecord, ...]

    @property
    def doc_type(self) -> PdbDocType:
        """Document type derived from the header's type and creator."""
        return get_pdb_doc_type(self.header.db_type)


def parse_pdb(data: bytes, total_size: int | None = None) -> PdbReader | None:
    """Parse a PDB header and its record list.

    Args:
        data (bytes): Leading bytes of the file; must cover the header and the
            full record list.
        total_size (int | None): Size of the whole file, used to validate record
            offsets. Defaults to ``len(data)``.

    Returns:
        PdbReader | None: The parsed database, or None if ``data`` is not a
            well-formed PDB (too short, no records, truncated record list, or
            record offsets that decrease or point past the end of the file).
    """
    if len(data) < PDB_HEADER_SIZE:
        return None
    size: int = len(data) if total_size is None else total_size

    fields = _HEADER_STRUCT.unpack_from(data, 0)
    raw_name: bytes = fields[0]
    header = PdbHeader(
        name=raw_name.split(b"\x00", 1)[0].decode("latin-1"),
        attributes=fields[1],
        version=fields[2],
        type=fields[9],
        creator=fields[10],
        num_records=fields[13],
    )
    if header.num_records == 0:
        logger.trace("PDB has no records")
        return None

    needed: int = PDB_HEADER_SIZE + header.num_records * PDB_RECORD_ENTRY_SIZE
    if len(data) < needed:
        logger.trace("PDB record list truncated (%d < %d bytes)", len(data), needed)
        return None

    records: list[PdbRecord] = []
    prev_offset: int = 0
    for idx in range(header.num_records):
        offset, attributes, uid = _RECORD_STRUCT.unpack_from(
            data, PDB_HEADER_SIZE + idx * PDB_RECORD_ENTRY_SIZE
        )
        if offset < prev_offset or offset > size:
            logger.trace("PDB record %d has invalid offset %d", idx, offset)
            return None
        prev_offset = offset
        records.append(PdbRecord(offset, attributes, int.from_bytes(uid, "big")))

    return PdbReader(header=header, records=tuple(records))


def read_pdb(path: str | PathLike[str]) -> PdbReader | None:
    """Read and parse the PDB header and record list of the file at ``path``.

    The record list is only read once the header's record count is known to fit
    inside the file.
    """
    head: bytes = read_n(path, PDB_HEADER_SIZE)
    if len(head) < PDB_HEADER_SIZE:
        return None
    (num_records,) = struct.unpack_from(">H", head, PDB_HEADER_SIZE - 2)
    if num_records == 0:
        logger.trace("PDB has no records: %s", path)
        return None
    needed: int = PDB_HEADER_SIZE + num_records * PDB_RECORD_ENTRY_SIZE
    size: int | None = file_size(path)
    if size is None or needed > size:
        logger.trace("PDB record list of %s runs past the end of the file", path)
        return None
    data: bytes = read_n(path, needed)
    return parse_pdb(data, total_size=size)


def is_mobi_file(path: str | PathLike[str]) -> bool:
    """Return True if ``path`` is a PalmDB container holding a Mobipocket book.

    Other PalmDoc-family subtypes (PalmDoc, TealDoc, Plucker) share the container
    but are not Mobipocket and are rejected.
    """
    reader: PdbReader | None = read_pdb(path)
    if reader is None:
        return False
    return reader.doc_type is PdbDocType.MOBIPOCKET
