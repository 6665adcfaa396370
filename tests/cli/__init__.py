# topmark:header:start
#
#   project      : DocSniff
#   file         : __init__.py
#   file_relpath : tests/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Tests for docsniff.cli."""
