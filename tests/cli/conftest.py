# topmark:header:start
#
#   project      : DocSniff
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""CLI test helpers for running DocSniff in a controlled working directory.

Config discovery reads ``pyproject.toml`` and ``docsniff.toml`` from the working
directory, so most tests go through `run_cli_in`, which switches to a temporary
directory for the duration of the command.
"""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from docsniff.cli.exit_codes import ExitCode
from docsniff.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g.
            ``["identify", "book.epub"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(tmp_path, ["identify", "report.pdf"])
        assert res.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(cwd)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper for commands that do not depend on files or on config
    discovery (e.g. ``--help``), or together with ``--no-config``.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--help"]``.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def parse_json_output(result: Result) -> Any:
    """Parse the standard output of a ``--format json`` run."""
    return json.loads(result.stdout)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that at least one path was not identified (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_FILE_NOT_FOUND(result: Result) -> None:
    """Assert that at least one input path was missing (code 66)."""
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def assert_CONFIG_ERROR(result: Result) -> None:
    """Assert that configuration could not be loaded (code 78)."""
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command line was rejected by DocSniff (code 64)."""
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
