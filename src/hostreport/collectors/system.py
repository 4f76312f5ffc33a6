"""Host summary collector: parses the free-form output of `systeminfo`."""

from __future__ import annotations

from hostreport.collectors.base import Collector, run_command
from hostreport.models.records import SystemInfoEntry


def parse_systeminfo(text: str) -> list[SystemInfoEntry]:
    """Parse colon-delimited `systeminfo` output into key/value entries.

    Indented lines continue the previous value (hotfix and network card
    lists) and are appended to it separated by "; ".
    """
    pairs: list[list[str]] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        if line[0].isspace() and pairs:
            extra = line.strip()
            previous = pairs[-1][1]
            pairs[-1][1] = f"{previous}; {extra}" if previous else extra
            continue
        key, sep, value = line.partition(":")
        if not sep or not key.strip():
            continue
        pairs.append([key.strip(), value.strip()])
    return [SystemInfoEntry(name=key, value=value) for key, value in pairs]


class SystemInfoCollector(Collector):
    """Host summary: OS, hardware, domain, hotfixes, network cards."""

    @property
    def name(self) -> str:
        return "system_info"

    def collect(self) -> list[SystemInfoEntry]:
        return parse_systeminfo(run_command(["systeminfo"], timeout=self.timeout))
