# topmark:header:start
#
#   project      : DocSniff
#   file         : __init__.py
#   file_relpath : src/docsniff/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""DocSniff subcommands (``identify``, ``formats``, ``version``)."""
