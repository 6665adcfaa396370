# topmark:header:start
#
#   project      : DocSniff
#   file         : utils.py
#   file_relpath : src/docsniff/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2026 DocSniff contributors
#
# topmark:header:end

"""Rendering helpers shared by CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

# Markdown needs at least three dashes per separator cell
_MIN_COLUMN_WIDTH = 3


def render_markdown_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a left-aligned GitHub-flavoured Markdown table.

    Args:
        headers (Sequence[str]): Column headers.
        rows (Sequence[Sequence[str]]): Table rows, each as long as ``headers``.

    Returns:
        str: The table, one line per row, ending with a newline (empty if there
            are no headers).

    Raises:
        ValueError: If a row does not have one cell per header.
    """
    if not headers:
        return ""
    if any(len(row) != len(headers) for row in rows):
        raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [
        max(_MIN_COLUMN_WIDTH, len(header), *(len(row[col]) for row in rows))
        for col, header in enumerate(headers)
    ]

    def _line(cells: Sequence[str]) -> str:
        padded = (f"{cell:<{width}}" for cell, width in zip(cells, widths))
        return "| " + " | ".join(padded) + " |"

    lines: list[str] = [_line(headers), _line(["-" * w for w in widths])]
    lines.extend(_line(row) for row in rows)
    return "\n".join(lines) + "\n"
