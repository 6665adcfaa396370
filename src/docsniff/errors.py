# topmark:header:start
#
#   project      : DocSniff
#   file         : errors.py
#   file_relpath : src/docsniff/errors.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Library exceptions for DocSniff.

Classification itself never raises for unrecognized, missing or malformed input:
those outcomes are reported as ``None`` ("unknown"). The exceptions below cover
programming and configuration errors only.
"""

from __future__ import annotations


class DocsniffError(Exception):
    """Base class for all DocSniff library errors."""


class ExtensionTableError(DocsniffError):
    """The suffix table is inconsistent (misaligned or shadowed entries).

    This is a fatal configuration error: continuing would silently produce
    wrong classifications.
    """


class ConfigError(DocsniffError):
    """Invalid or malformed DocSniff configuration."""
