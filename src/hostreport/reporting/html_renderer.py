"""HTML report assembler: arranges tabs into a single self-contained page."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from html import escape
from pathlib import Path

from hostreport.models.report import Tab
from hostreport.reporting.html_template import HTML_FOOTER, HTML_HEADER, ON_LOAD_TEMPLATE

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Server Information Report"


def _header(title: str, first_tab: str | None) -> str:
    on_load = ON_LOAD_TEMPLATE.replace("{{FIRST_TAB}}", first_tab) if first_tab else ""
    return HTML_HEADER.replace("{{TITLE}}", escape(title)).replace("{{ON_LOAD}}", on_load)


def assemble(tabs: Sequence[Tab], title: str = DEFAULT_TITLE) -> str:
    """Assemble tabs into a full HTML document.

    Buttons and content divs are emitted in input order and the first tab is
    shown when the page loads. Tab contents are inserted as-is; labels and the
    title are escaped.

    Raises:
        ValueError: If two tabs share an id
    """
    seen: set[str] = set()
    for tab in tabs:
        if tab.id in seen:
            raise ValueError(f"Duplicate tab id '{tab.id}'")
        seen.add(tab.id)

    parts = [_header(title, tabs[0].id if tabs else None)]

    parts.append("<div class='tab-buttons'>")
    for tab in tabs:
        parts.append(
            f"<button id='btn_{tab.id}' onclick=\"showTab('{tab.id}')\">"
            f"{escape(tab.label)}</button>"
        )
    parts.append("</div>")

    for tab in tabs:
        parts.append(f"<div id='{tab.id}' class='tab'>")
        parts.append(tab.content)
        parts.append("</div>")

    parts.append(HTML_FOOTER)
    return "\n".join(parts)


def write_report(html: str, output_path: Path | str) -> Path:
    """Write the document as UTF-8, replacing any previous report."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    logger.debug("Report written to %s (%d characters)", path, len(html))
    return path


class HtmlReportRenderer:
    """Renders tabs as a self-contained HTML page, optionally writing it to disk."""

    def __init__(self, title: str = DEFAULT_TITLE) -> None:
        self.title = title

    def render(self, tabs: Sequence[Tab], output_path: Path | str | None = None) -> str:
        """Render tabs as HTML.

        Args:
            tabs: Tabs in display order
            output_path: Optional path to write the HTML file

        Returns:
            HTML string
        """
        html = assemble(tabs, self.title)
        if output_path:
            write_report(html, output_path)
        return html
