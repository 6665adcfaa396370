# topmark:header:start
#
#   project      : DocSniff
#   file         : exit_codes.py
#   file_relpath : src/docsniff/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Exit codes for the DocSniff CLI.

DocSniff aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DocSniff CLI.

    Attributes:
        SUCCESS: Every requested path was identified.
        FAILURE: At least one path could not be identified.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: An input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).

    Usage:
        ```python
        import subprocess
        from docsniff.cli.exit_codes import ExitCode

        result = subprocess.run(["docsniff", "identify", "book.epub"])
        if result.returncode == ExitCode.FAILURE:
            print("Unknown document format.")
        ```
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
