# topmark:header:start
#
#   project      : DocSniff
#   file         : test_palmdb.py
#   file_relpath : tests/containers/test_palmdb.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Tests for the PalmDB header reader and Mobipocket detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from docsniff.containers import palmdb
from docsniff.containers.palmdb import (
    PDB_HEADER_SIZE,
    PdbDocType,
    PdbReader,
    get_pdb_doc_type,
    is_mobi_file,
    parse_pdb,
    read_pdb,
)
from tests.helpers import pdb_bytes

if TYPE_CHECKING:
    from os import PathLike
    from pathlib import Path


def test_parse_mobipocket_header() -> None:
    """Header fields and the record list are decoded."""
    reader: PdbReader | None = parse_pdb(pdb_bytes())
    assert reader is not None
    assert reader.header.name == "docsniff-test"
    assert reader.header.db_type == b"BOOKMOBI"
    assert reader.header.num_records == 2
    assert [r.offset for r in reader.records] == [94, 102]
    assert [r.unique_id for r in reader.records] == [0, 1]
    assert reader.doc_type is PdbDocType.MOBIPOCKET


@pytest.mark.parametrize(
    "db_type, expected",
    [
        (b"BOOKMOBI", PdbDocType.MOBIPOCKET),
        (b"TEXtREAd", PdbDocType.PALMDOC),
        (b"TEXtTlDc", PdbDocType.TEALDOC),
        (b"DataPlkr", PdbDocType.PLUCKER),
        (b"DATAPLKR", PdbDocType.UNKNOWN),
        (b"", PdbDocType.UNKNOWN),
    ],
)
def test_get_pdb_doc_type(db_type: bytes, expected: PdbDocType) -> None:
    """Type and creator are compared exactly."""
    assert get_pdb_doc_type(db_type) is expected


def test_parse_rejects_short_header() -> None:
    """Fewer than 78 bytes cannot hold a PDB header."""
    assert parse_pdb(pdb_bytes()[: PDB_HEADER_SIZE - 1]) is None


def test_parse_rejects_empty_database() -> None:
    """A database without records is not a book."""
    assert parse_pdb(pdb_bytes(offsets=[])) is None


def test_parse_rejects_truncated_record_list() -> None:
    """The record list must be complete."""
    assert parse_pdb(pdb_bytes()[: PDB_HEADER_SIZE + 12]) is None


def test_parse_rejects_decreasing_offsets() -> None:
    """Record offsets never go backwards."""
    assert parse_pdb(pdb_bytes(offsets=[102, 94])) is None


def test_parse_rejects_offsets_past_the_end() -> None:
    """Record offsets must point into the file."""
    data: bytes = pdb_bytes()
    assert parse_pdb(data, total_size=100) is None
    assert parse_pdb(data, total_size=1_000_000) is not None


def test_read_pdb_and_is_mobi_file(tmp_path: Path) -> None:
    """Mobipocket books are detected from the file."""
    path: Path = tmp_path / "book.bin"
    path.write_bytes(pdb_bytes())
    reader: PdbReader | None = read_pdb(path)
    assert reader is not None
    assert reader.doc_type is PdbDocType.MOBIPOCKET
    assert is_mobi_file(path)


@pytest.mark.parametrize(
    "db_type, creator",
    [(b"TEXt", b"REAd"), (b"TEXt", b"TlDc"), (b"Data", b"Plkr"), (b"BOOK", b"XXXX")],
)
def test_other_palmdb_subtypes_are_not_mobi(tmp_path: Path, db_type: bytes, creator: bytes) -> None:
    """PalmDoc, TealDoc and Plucker share the container but are not Mobipocket."""
    path: Path = tmp_path / "doc.pdb"
    path.write_bytes(pdb_bytes(db_type, creator))
    assert read_pdb(path) is not None
    assert not is_mobi_file(path)


def test_is_mobi_file_fails_soft(tmp_path: Path) -> None:
    """Missing, empty and foreign files are not Mobipocket."""
    empty: Path = tmp_path / "empty.mobi"
    empty.write_bytes(b"")
    text: Path = tmp_path / "text.mobi"
    text.write_bytes(b"hello\n" * 40)
    assert not is_mobi_file(tmp_path / "missing.mobi")
    assert not is_mobi_file(empty)
    assert not is_mobi_file(text)


@pytest.mark.parametrize("num_records", [0, 0xFFFF])
def test_read_pdb_rejects_impossible_record_count(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, num_records: int
) -> None:
    """A record count that cannot fit in the file stops after the fixed header."""
    head: bytes = b"\x00" * (PDB_HEADER_SIZE - 2) + num_records.to_bytes(2, "big")
    path: Path = tmp_path / "foreign.bin"
    path.write_bytes(head + b"\x00" * 64)

    sizes: list[int] = []
    real_read_n = palmdb.read_n

    def recording_read_n(p: str | PathLike[str], n: int) -> bytes:
        sizes.append(n)
        return real_read_n(p, n)

    monkeypatch.setattr(palmdb, "read_n", recording_read_n)
    assert read_pdb(path) is None
    assert sizes == [PDB_HEADER_SIZE]
