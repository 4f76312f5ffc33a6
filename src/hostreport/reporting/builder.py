"""Report pipeline: run collectors, render their tables and assemble the page."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from html import escape
from pathlib import Path

from hostreport.collectors.base import DEFAULT_TIMEOUT, Collector
from hostreport.collectors.firewall import FirewallProfileCollector, FirewallRuleCollector
from hostreport.collectors.network import NetworkCollector
from hostreport.collectors.storage import StorageCollector
from hostreport.collectors.system import SystemInfoCollector
from hostreport.config import ReportConfig
from hostreport.models.enums import TAB_LABELS, TabId
from hostreport.models.report import Tab
from hostreport.reporting.html_renderer import DEFAULT_TITLE, HtmlReportRenderer
from hostreport.reporting.table import NOT_IMPLEMENTED, render_table

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Section:
    """One table within a tab, with an optional heading above it."""

    collector: Collector
    heading: str | None = None


@dataclass(frozen=True)
class TabSource:
    """Where a tab's content comes from. A tab without sections is a placeholder."""

    tab_id: str
    label: str = ""
    sections: tuple[Section, ...] = field(default_factory=tuple)

    def render(self) -> str:
        if not self.sections:
            return NOT_IMPLEMENTED
        parts = []
        for section in self.sections:
            if section.heading:
                parts.append(f"<h3>{escape(section.heading)}</h3>")
            parts.append(render_table(section.collector.run()))
        return "\n".join(parts)


def _source(tab_id: TabId, *sections: Section) -> TabSource:
    return TabSource(tab_id=tab_id.value, label=TAB_LABELS.get(tab_id, ""), sections=sections)


def default_sources(timeout: float | None = DEFAULT_TIMEOUT) -> list[TabSource]:
    """The fixed tab set of the report, in display order."""
    return [
        _source(TabId.SYSTEM_INFO, Section(SystemInfoCollector(timeout))),
        _source(TabId.NETWORK, Section(NetworkCollector(timeout))),
        _source(
            TabId.FIREWALL,
            Section(FirewallProfileCollector(timeout), "Profiles"),
            Section(FirewallRuleCollector(timeout), "Local Rules"),
        ),
        _source(TabId.STORAGE, Section(StorageCollector(timeout))),
        _source(TabId.APPLICATIONS),
        _source(TabId.SERVER_ROLES),
        _source(TabId.SHARES),
        _source(TabId.PRINTERS),
    ]


def build_tabs(sources: Sequence[TabSource]) -> list[Tab]:
    """Collect and render every source into a tab, preserving order."""
    tabs = []
    for source in sources:
        logger.info("Building tab %s", source.tab_id)
        tabs.append(Tab(id=source.tab_id, label=source.label, content=source.render()))
    return tabs


def build_report(sources: Sequence[TabSource], title: str = DEFAULT_TITLE) -> str:
    """Run all sources and return the assembled HTML document."""
    return HtmlReportRenderer(title).render(build_tabs(sources))


def generate_report(
    config: ReportConfig, sources: Sequence[TabSource] | None = None
) -> Path:
    """Produce the report file described by config and return its path."""
    if sources is None:
        sources = default_sources(config.command_timeout)
    output_path = config.resolved_output_path()
    HtmlReportRenderer(config.title).render(build_tabs(sources), output_path=output_path)
    logger.info("Report written to %s", output_path)
    return output_path
