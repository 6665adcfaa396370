# topmark:header:start
#
#   project      : DocSniff
#   file         : extensions.py
#   file_relpath : src/docsniff/formats/extensions.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Ordered filename-suffix table.

Matching is a case-insensitive "ends-with" test that stops at the first hit, so
table order matters: compound suffixes such as ``.fb2.zip`` must come before the
generic suffixes they end with (``.zip``). Each entry pairs a suffix with its kind
in a single record; `ExtensionTable.verify` is a one-time consistency check that
treats any inconsistency as a fatal configuration error.

Notes:
    * `ExtensionTable` instances are immutable. Use
      `ExtensionTable.with_overrides` to derive a table with extra suffixes.
    * `BUILTIN_EXTENSIONS` is built once at import time.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from docsniff.config.logging import DocsniffLogger, get_logger
from docsniff.errors import ExtensionTableError
from docsniff.formats.kinds import FileKind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence
    from os import PathLike

logger: DocsniffLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ExtensionEntry:
    """A filename suffix and the kind it identifies.

    Attributes:
        suffix (str): Suffix including the leading dot; may contain several dots
            (e.g. ``.fb2.zip``). Stored lower-cased.
        kind (FileKind): Kind reported on match.
    """

    suffix: str
    kind: FileKind

    def __post_init__(self) -> None:
        if not self.suffix.startswith(".") or len(self.suffix) < 2:
            raise ExtensionTableError(f"Invalid suffix {self.suffix!r}: must start with '.'")
        object.__setattr__(self, "suffix", self.suffix.lower())

    def matches(self, name: str) -> bool:
        """Return True if ``name`` (already lower-cased) ends with this suffix."""
        return name.endswith(self.suffix)


class ExtensionTable:
    """Immutable, ordered sequence of `ExtensionEntry` records.

    Args:
        entries (Iterable[ExtensionEntry]): Entries in match order.
    """

    __slots__ = ("_entries", "_verified", "_lock")

    def __init__(self, entries: Iterable[ExtensionEntry]) -> None:
        self._entries: tuple[ExtensionEntry, ...] = tuple(entries)
        self._verified: bool = False
        self._lock: threading.Lock = threading.Lock()

    @classmethod
    def from_pairs(cls, suffixes: Sequence[str], kinds: Sequence[FileKind]) -> ExtensionTable:
        """Build a table from two parallel sequences.

        Args:
            suffixes (Sequence[str]): Suffixes in match order.
            kinds (Sequence[FileKind]): Kinds aligned with ``suffixes``.

        Returns:
            ExtensionTable: The assembled table.

        Raises:
            ExtensionTableError: If the sequences differ in length.
        """
        if len(suffixes) != len(kinds):
            raise ExtensionTableError(
                f"Suffix/kind tables are misaligned: {len(suffixes)} suffixes "
                f"for {len(kinds)} kinds"
            )
        return cls(ExtensionEntry(s, k) for s, k in zip(suffixes, kinds))

    @property
    def entries(self) -> tuple[ExtensionEntry, ...]:
        """Entries in match order."""
        return self._entries

    def __iter__(self) -> Iterator[ExtensionEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ExtensionTable({len(self._entries)} entries)"

    def match(self, path: str | PathLike[str]) -> FileKind | None:
        """Return the kind paired with the first suffix that ``path`` ends with.

        Args:
            path (str | PathLike[str]): File name or path; only its tail is inspected.

        Returns:
            FileKind | None: The matched kind, or None.
        """
        name: str = os.fspath(path).lower()
        for entry in self._entries:
            if entry.matches(name):
                return entry.kind
        return None

    def suffixes_for(self, kind: FileKind) -> list[str]:
        """Return the suffixes registered for ``kind`` (in table order)."""
        return [e.suffix for e in self._entries if e.kind is kind]

    def with_overrides(self, extra: Iterable[ExtensionEntry]) -> ExtensionTable:
        """Derive a table that also recognizes ``extra`` suffixes.

        An extra entry whose suffix already exists replaces that entry in place,
        keeping its position (and thus its precedence). New suffixes are placed
        ahead of all existing entries.

        Args:
            extra (Iterable[ExtensionEntry]): Additional entries, in priority order.

        Returns:
            ExtensionTable: A new, unverified table.
        """
        replacements: dict[str, ExtensionEntry] = {}
        new_entries: list[ExtensionEntry] = []
        existing: set[str] = {e.suffix for e in self._entries}
        for entry in extra:
            if entry.suffix in existing:
                replacements[entry.suffix] = entry
            elif entry.suffix not in {e.suffix for e in new_entries}:
                new_entries.append(entry)
        merged: list[ExtensionEntry] = list(new_entries)
        merged.extend(replacements.get(e.suffix, e) for e in self._entries)
        return ExtensionTable(merged)

    def verify(self) -> None:
        """Run the one-time consistency check.

        Checks that a case-varied name built from the first and the last suffix
        resolves to the paired kind, and that no entry is unreachable because an
        earlier suffix with a different kind is one of its trailing substrings.
        Later calls return immediately.

        Raises:
            ExtensionTableError: If the table is inconsistent.
        """
        if self._verified:
            return
        with self._lock:
            if self._verified:
                return
            self._check()
            self._verified = True
            logger.debug("Extension table verified (%d entries)", len(self._entries))

    def _check(self) -> None:
        if not self._entries:
            raise ExtensionTableError("Extension table is empty")

        for probe in (self._entries[0], self._entries[-1]):
            name: str = "foo" + probe.suffix.upper()
            found: FileKind | None = self.match(name)
            if found is not probe.kind:
                raise ExtensionTableError(
                    f"{name!r} resolved to {found} instead of {probe.kind}"
                )

        for idx, later in enumerate(self._entries):
            for earlier in self._entries[:idx]:
                if later.suffix.endswith(earlier.suffix) and later.kind is not earlier.kind:
                    raise ExtensionTableError(
                        f"Suffix {later.suffix!r} ({later.kind}) is shadowed by "
                        f"earlier suffix {earlier.suffix!r} ({earlier.kind})"
                    )


_BUILTIN_SUFFIXES: Final[tuple[str, ...]] = (
    # Compound suffixes first so that they are not classified as their last part
    ".fb2.zip",
    ".ps.gz",
    ".ps",
    ".eps",
    ".vbkm",
    ".fb2",
    ".fb2z",
    ".zfb2",
    ".cbz",
    ".cbr",
    ".cb7",
    ".cbt",
    ".zip",
    ".rar",
    ".7z",
    ".tar",
    ".pdf",
    ".xps",
    ".oxps",
    ".chm",
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".tif",
    ".tiff",
    ".bmp",
    ".tga",
    ".jxr",
    ".hdp",
    ".wdp",
    ".webp",
    ".epub",
    ".mobi",
    ".prc",
    ".azw",
    ".azw1",
    ".azw3",
    ".jp2",
)

_BUILTIN_KINDS: Final[tuple[FileKind, ...]] = (
    FileKind.FB2,
    FileKind.PS,
    FileKind.PS,
    FileKind.PS,
    FileKind.VBKM,
    FileKind.FB2,
    FileKind.FB2,
    FileKind.FB2,
    FileKind.CBZ,
    FileKind.CBR,
    FileKind.CB7,
    FileKind.CBT,
    FileKind.ZIP,
    FileKind.RAR,
    FileKind.SEVEN_Z,
    FileKind.TAR,
    FileKind.PDF,
    FileKind.XPS,
    FileKind.XPS,
    FileKind.CHM,
    FileKind.PNG,
    FileKind.JPEG,
    FileKind.JPEG,
    FileKind.GIF,
    FileKind.TIFF,
    FileKind.TIFF,
    FileKind.BMP,
    FileKind.TGA,
    FileKind.JXR,
    FileKind.HDP,
    FileKind.WDP,
    FileKind.WEBP,
    FileKind.EPUB,
    FileKind.MOBI,
    FileKind.MOBI,
    FileKind.MOBI,
    FileKind.MOBI,
    FileKind.MOBI,
    FileKind.JP2,
)

BUILTIN_EXTENSIONS: Final[ExtensionTable] = ExtensionTable.from_pairs(
    _BUILTIN_SUFFIXES, _BUILTIN_KINDS
)


def match_extension(
    path: str | PathLike[str],
    table: ExtensionTable = BUILTIN_EXTENSIONS,
) -> FileKind | None:
    """Return the kind for the first suffix in ``table`` that ``path`` ends with."""
    return table.match(path)


def verify_extensions_match(table: ExtensionTable = BUILTIN_EXTENSIONS) -> None:
    """Run the one-time consistency check for ``table`` (idempotent)."""
    table.verify()
