# topmark:header:start
#
#   project      : DocSniff
#   file         : __init__.py
#   file_relpath : src/docsniff/formats/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Static format registries: kinds, groups, magic numbers and filename suffixes."""

from __future__ import annotations

from docsniff.formats.extensions import (
    BUILTIN_EXTENSIONS,
    ExtensionEntry,
    ExtensionTable,
    match_extension,
    verify_extensions_match,
)
from docsniff.formats.groups import (
    CBX_ENGINE_KINDS,
    IMAGE_ENGINE_KINDS,
    is_cbx_engine_kind,
    is_image_engine_kind,
)
from docsniff.formats.kinds import FileKind
from docsniff.formats.signatures import SIGNATURES, SignatureEntry, match_signature

__all__ = [
    "BUILTIN_EXTENSIONS",
    "CBX_ENGINE_KINDS",
    "IMAGE_ENGINE_KINDS",
    "SIGNATURES",
    "ExtensionEntry",
    "ExtensionTable",
    "FileKind",
    "SignatureEntry",
    "is_cbx_engine_kind",
    "is_image_engine_kind",
    "match_extension",
    "match_signature",
    "verify_extensions_match",
]
