"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from hostreport.collectors.base import Collector
from hostreport.collectors.storage import volume_usage
from hostreport.exceptions import CommandError
from hostreport.models.enums import TAB_LABELS, TabId
from hostreport.models.records import (
    FirewallProfile,
    FirewallRule,
    NetworkInterface,
    Record,
    SystemInfoEntry,
    VolumeUsage,
)
from hostreport.reporting.builder import Section, TabSource

FIXTURES_DIR = Path(__file__).parent / "fixtures"


class StaticCollector(Collector):
    """Collector returning canned records, or failing when records is None."""

    def __init__(self, records: list[Record] | None, name: str = "static") -> None:
        super().__init__(timeout=None)
        self._records = records
        self._name = name
        self.calls = 0

    @property
    def name(self) -> str:
        return self._name

    def collect(self) -> list[Record]:
        self.calls += 1
        if self._records is None:
            raise CommandError(self._name, "command not found")
        return list(self._records)


@pytest.fixture
def make_collector():
    return StaticCollector


@pytest.fixture
def system_records() -> list[SystemInfoEntry]:
    return [
        SystemInfoEntry(name="Host Name", value="WEB-01"),
        SystemInfoEntry(name="OS Name", value="Microsoft Windows Server 2022 Standard"),
    ]


@pytest.fixture
def network_records() -> list[NetworkInterface]:
    return [
        NetworkInterface(
            interface_alias="Ethernet0",
            interface_description="Intel(R) 82574L Gigabit",
            ipv4_address="10.0.0.5",
            ipv6_address="",
            ipv4_default_gateway="10.0.0.1",
            dns_server="10.0.0.2, 10.0.0.3",
            ipv6_enabled=False,
        )
    ]


@pytest.fixture
def firewall_profile_records() -> list[FirewallProfile]:
    return [
        FirewallProfile(name="Domain", enabled=True, default_inbound_action="Block"),
        FirewallProfile(name="Public", enabled=False, default_inbound_action="NotConfigured"),
    ]


@pytest.fixture
def firewall_rule_records() -> list[FirewallRule]:
    return [
        FirewallRule(
            display_name="Allow <HTTPS> & RDP",
            direction="Inbound",
            action="Allow",
            profile="Any",
            protocol="TCP",
            local_port="443, 3389",
            remote_port="Any",
        )
    ]


@pytest.fixture
def storage_records() -> list[VolumeUsage]:
    return [volume_usage("C", "C:\\", used_gb=5.0, free_gb=10.0)]


@pytest.fixture
def full_sources(
    system_records,
    network_records,
    firewall_profile_records,
    firewall_rule_records,
    storage_records,
) -> list[TabSource]:
    """All four real tabs backed by canned data plus the four placeholders."""

    def source(tab_id: TabId, *sections: Section) -> TabSource:
        return TabSource(tab_id=tab_id.value, label=TAB_LABELS.get(tab_id, ""), sections=sections)

    return [
        source(TabId.SYSTEM_INFO, Section(StaticCollector(system_records))),
        source(TabId.NETWORK, Section(StaticCollector(network_records))),
        source(
            TabId.FIREWALL,
            Section(StaticCollector(firewall_profile_records), "Profiles"),
            Section(StaticCollector(firewall_rule_records), "Local Rules"),
        ),
        source(TabId.STORAGE, Section(StaticCollector(storage_records))),
        source(TabId.APPLICATIONS),
        source(TabId.SERVER_ROLES),
        source(TabId.SHARES),
        source(TabId.PRINTERS),
    ]


@pytest.fixture
def systeminfo_output() -> str:
    return (FIXTURES_DIR / "systeminfo.txt").read_text(encoding="utf-8")


@pytest.fixture
def sample_config_path() -> Path:
    return FIXTURES_DIR / "sample_config.yaml"
