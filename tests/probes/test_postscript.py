# topmark:header:start
#
#   project      : DocSniff
#   file         : test_postscript.py
#   file_relpath : tests/probes/test_postscript.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Tests for the PostScript content probe."""

from __future__ import annotations

from docsniff.probes.postscript import PS_MIN_SIZE, is_ps_file_content
from tests.helpers import PS_BYTES, eps_bytes, pjl_bytes


def test_plain_postscript() -> None:
    """Text PostScript starts with the Adobe DSC header."""
    assert len(PS_BYTES) >= PS_MIN_SIZE
    assert is_ps_file_content(PS_BYTES)


def test_short_buffers_are_never_postscript() -> None:
    """Fewer than 64 bytes is not enough to decide, even with a valid header."""
    assert not is_ps_file_content(PS_BYTES[: PS_MIN_SIZE - 1])
    assert is_ps_file_content(PS_BYTES[:PS_MIN_SIZE])


def test_windows_binary_eps() -> None:
    """A DOS EPS header pointing at a PostScript section is accepted."""
    assert is_ps_file_content(eps_bytes())


def test_binary_eps_with_section_beyond_the_buffer() -> None:
    """The section may start past the bytes read; the header alone then decides."""
    assert is_ps_file_content(eps_bytes(ps_start=1_000_000))


def test_binary_eps_pointing_at_garbage() -> None:
    """An in-buffer offset must land on the PostScript header."""
    assert not is_ps_file_content(eps_bytes(ps_start=40))


def test_pjl_wrapped_postscript() -> None:
    """PJL jobs carrying PostScript are PostScript."""
    assert is_ps_file_content(pjl_bytes())


def test_pjl_without_postscript() -> None:
    """PJL jobs in another printer language are not."""
    assert not is_ps_file_content(pjl_bytes(b"\x1bE\x1b&l0O" + b" " * 80))


def test_other_content() -> None:
    """Arbitrary data is rejected."""
    assert not is_ps_file_content(b"%PDF-1.4\n" + b"\x00" * 100)
    assert not is_ps_file_content(b"")
