# topmark:header:start
#
#   project      : OutFormat
#   file         : utils.py
#   file_relpath : src/outformat/cli/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering helpers shared by CLI commands."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from outformat.cli.console import ClickConsole


_RULES = {
    "left": lambda w: "-" * w,
    "right": lambda w: "-" * (w - 1) + ":",
    "center": lambda w: ":" + "-" * max(1, w - 2) + ":",
}


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Lay out ``rows`` as a Markdown pipe table whose columns line up in plain text.

    ``align`` maps a column index to ``"left"`` (the default), ``"right"`` or
    ``"center"``. An empty ``headers`` yields an empty string; a row with the
    wrong number of cells raises `ValueError`.
    """
    if not headers:
        return ""
    table = [[str(cell) for cell in headers]]
    for row in rows:
        if len(row) != len(headers):
            raise ValueError(f"Row {list(row)!r} does not match {len(headers)} header column(s)")
        table.append([str(cell) for cell in row])

    widths = [max(len(line[col]) for line in table) for col in range(len(headers))]
    styles = align or {}
    rule = [
        _RULES.get(styles.get(col, "").lower(), _RULES["left"])(max(1, width))
        for col, width in enumerate(widths)
    ]

    def fmt(cells: Sequence[str]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |\n"

    return fmt(table[0]) + fmt(rule) + "".join(fmt(line) for line in table[1:])


def emit_json(console: ClickConsole, payload: Any) -> None:
    """Print ``payload`` as one indented JSON document."""
    console.print(json.dumps(payload, indent=2))


def emit_ndjson(console: ClickConsole, records: Sequence[Mapping[str, Any]]) -> None:
    """Print each record as a single-line JSON object."""
    for record in records:
        console.print(json.dumps(record))
