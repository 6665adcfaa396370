# topmark:header:start
#
#   project      : DocSniff
#   file         : __main__.py
#   file_relpath : src/docsniff/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Module entry point for running DocSniff via ``python -m docsniff``.

Delegates to `docsniff.cli.main.cli`, the same entry point as the ``docsniff``
console script.

Examples:
    Identify a few files::

        python -m docsniff identify book.epub scan.tif
"""

from __future__ import annotations

from docsniff.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
