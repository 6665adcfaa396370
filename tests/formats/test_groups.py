# topmark:header:start
#
#   project      : DocSniff
#   file         : test_groups.py
#   file_relpath : tests/formats/test_groups.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Tests for the engine groups of file kinds."""

from __future__ import annotations

import pytest

from docsniff.formats.groups import (
    CBX_ENGINE_KINDS,
    IMAGE_ENGINE_KINDS,
    is_cbx_engine_kind,
    is_image_engine_kind,
)
from docsniff.formats.kinds import FileKind


def test_groups_are_disjoint() -> None:
    """A kind is handled by at most one of the two engines."""
    assert not IMAGE_ENGINE_KINDS & CBX_ENGINE_KINDS


@pytest.mark.parametrize(
    "kind",
    [
        FileKind.PNG,
        FileKind.JPEG,
        FileKind.GIF,
        FileKind.TIFF,
        FileKind.BMP,
        FileKind.TGA,
        FileKind.JXR,
        FileKind.HDP,
        FileKind.WDP,
        FileKind.WEBP,
        FileKind.JP2,
    ],
)
def test_image_engine_kinds(kind: FileKind) -> None:
    """Raster image kinds belong to the image engine."""
    assert is_image_engine_kind(kind)
    assert not is_cbx_engine_kind(kind)


@pytest.mark.parametrize(
    "kind",
    [
        FileKind.CBZ,
        FileKind.CBR,
        FileKind.CB7,
        FileKind.CBT,
        FileKind.ZIP,
        FileKind.RAR,
        FileKind.SEVEN_Z,
        FileKind.TAR,
    ],
)
def test_cbx_engine_kinds(kind: FileKind) -> None:
    """Comic book and plain archive kinds belong to the archive engine."""
    assert is_cbx_engine_kind(kind)
    assert not is_image_engine_kind(kind)


@pytest.mark.parametrize("kind", [None, FileKind.PDF, FileKind.EPUB, FileKind.DIR, FileKind.FB2])
def test_document_kinds_are_in_neither_group(kind: FileKind | None) -> None:
    """Documents, directories and unknown are not engine kinds."""
    assert not is_image_engine_kind(kind)
    assert not is_cbx_engine_kind(kind)
