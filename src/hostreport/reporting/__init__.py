"""Report rendering: tables, tabbed page assembly and the report pipeline."""

from hostreport.reporting.html_renderer import HtmlReportRenderer, assemble, write_report
from hostreport.reporting.table import NOT_IMPLEMENTED, NOT_INSTALLED, render_table

__all__ = [
    "HtmlReportRenderer",
    "assemble",
    "write_report",
    "render_table",
    "NOT_INSTALLED",
    "NOT_IMPLEMENTED",
]
