# topmark:header:start
#
#   project      : DocSniff
#   file         : kinds.py
#   file_relpath : src/docsniff/formats/kinds.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Closed set of file kinds recognized by DocSniff.

A `FileKind` is an opaque tag: callers compare members by identity and must not
parse `FileKind.value`. The value string is a stable identifier used for
diagnostics and machine-readable output only.

Classification functions return ``FileKind | None`` where ``None`` stands for
"unknown".
"""

from __future__ import annotations

from enum import Enum


class FileKind(Enum):
    """Document, image and archive formats that DocSniff can identify.

    Attributes:
        value (str): Stable identifier (e.g. ``"filePDF"``) for diagnostics.
        description (str): Human-readable description.
    """

    PDF = ("filePDF", "Portable Document Format")
    PS = ("filePS", "PostScript / Encapsulated PostScript")
    VBKM = ("fileVbkm", "Virtual bookmark collection")
    XPS = ("fileXPS", "XML Paper Specification (XPS/OpenXPS)")
    DJVU = ("fileDjVu", "DjVu document")
    CHM = ("fileChm", "Compiled HTML Help")
    PNG = ("filePng", "PNG image")
    JPEG = ("fileJpeg", "JPEG image")
    GIF = ("fileGif", "GIF image")
    TIFF = ("fileTiff", "TIFF image")
    BMP = ("fileBmp", "Windows bitmap")
    TGA = ("fileTga", "Truevision Targa image")
    JXR = ("fileJxr", "JPEG XR image")
    HDP = ("fileHdp", "HD Photo image")
    WDP = ("fileWdp", "Windows Media Photo image")
    WEBP = ("fileWebp", "WebP image")
    JP2 = ("fileJp2", "JPEG 2000 image")
    CBZ = ("fileCbz", "Comic book archive (ZIP)")
    CBR = ("fileCbr", "Comic book archive (RAR)")
    CB7 = ("fileCb7", "Comic book archive (7z)")
    CBT = ("fileCbt", "Comic book archive (TAR)")
    ZIP = ("fileZip", "ZIP archive")
    RAR = ("fileRar", "RAR archive")
    SEVEN_Z = ("file7Z", "7-Zip archive")
    TAR = ("fileTar", "TAR archive")
    FB2 = ("fileFb2", "FictionBook 2")
    DIR = ("fileDir", "Directory")
    EPUB = ("fileEpub", "EPUB e-book")
    MOBI = ("fileMobi", "Mobipocket e-book")

    def __new__(cls, ident: str, description: str) -> FileKind:
        obj = object.__new__(cls)
        obj._value_ = ident
        obj.description = description
        return obj

    description: str

    @classmethod
    def from_name(cls, key_name: str | None) -> FileKind | None:
        """Find a member by its case-insensitive name or identifier.

        Both the member name (``"seven_z"``) and the identifier (``"file7Z"``) are
        accepted, so configuration files can use either spelling.

        Args:
            key_name (str | None): The member name or identifier, or None.

        Returns:
            FileKind | None: The matching member, or None if unmatched.
        """
        if key_name is None:
            return None
        member: FileKind | None = cls.__members__.get(key_name.upper())
        if member is not None:
            return member
        folded: str = key_name.lower()
        for kind in cls:
            if kind.value.lower() == folded:
                return kind
        return None

    def __str__(self) -> str:
        return self.name.lower()
