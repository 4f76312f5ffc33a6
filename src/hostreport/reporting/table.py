"""Table renderer: turns a sequence of uniform records into an HTML fragment."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from html import escape
from typing import Any

from hostreport.models.records import Record

# Shown in place of a table when a collector found nothing or failed.
NOT_INSTALLED = "<p class='not-installed'>Not Installed</p>"

NOT_IMPLEMENTED = "<p class='not-implemented'>Not Implemented Yet</p>"

Row = Record | Mapping[str, Any]


def format_value(value: Any) -> str:
    """Display form of a field value (unescaped)."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, float):
        return f"{value:.2f}"
    return str(value)


def _as_mapping(row: Row) -> Mapping[str, Any]:
    if isinstance(row, Record):
        return row.as_row()
    return row


def render_table(rows: Sequence[Row] | None) -> str:
    """Render records as an HTML table, or the "Not Installed" placeholder if empty.

    Columns come from the first record; a later mapping missing one of
    those keys renders an empty cell.
    """
    if not rows:
        return NOT_INSTALLED

    mappings = [_as_mapping(row) for row in rows]
    headers = list(mappings[0].keys())

    lines = ["<table>", "<thead>"]
    lines.append("<tr>" + "".join(f"<th>{escape(str(h))}</th>" for h in headers) + "</tr>")
    lines.append("</thead>")
    lines.append("<tbody>")
    for mapping in mappings:
        cells = "".join(
            f"<td>{escape(format_value(mapping.get(h)))}</td>" for h in headers
        )
        lines.append(f"<tr>{cells}</tr>")
    lines.append("</tbody>")
    lines.append("</table>")
    return "\n".join(lines)
