# topmark:header:start
#
#   project      : DocSniff
#   file         : constants.py
#   file_relpath : src/docsniff/constants.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""DocSniff Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DOCSNIFF_VERSION: str = get_version("docsniff")

# Bytes read from the head of a file for content sniffing
DEFAULT_PREFIX_SIZE: int = 2048

# Smallest prefix that still lets every content probe decide
MIN_PREFIX_SIZE: int = 64

# Config file names looked up in the working directory:
PYPROJECT_TOML_NAME: str = "pyproject.toml"
DOCSNIFF_TOML_NAME: str = "docsniff.toml"

EPUB_DIR_MIMETYPE: bytes = b"application/epub+zip"
