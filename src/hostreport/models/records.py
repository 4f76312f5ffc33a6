"""Record schemas: one fixed row shape per collector.

Column headers in the rendered report are the field aliases, in declaration
order, so every row of a table shares the same columns.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """A single table row with named, ordered fields."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @classmethod
    def field_names(cls) -> list[str]:
        """Column headers for this record type."""
        return [info.alias or name for name, info in cls.model_fields.items()]

    def as_row(self) -> dict[str, Any]:
        """Return the record as an ordered header -> value mapping."""
        return self.model_dump(by_alias=True)


class SystemInfoEntry(Record):
    """One key/value line of the host summary."""

    name: str = Field(alias="Property")
    value: str = Field("", alias="Value")


class NetworkInterface(Record):
    """IP configuration of a single network interface."""

    interface_alias: str = Field(alias="InterfaceAlias")
    interface_description: str = Field("", alias="InterfaceDescription")
    ipv4_address: str = Field("", alias="IPv4Address")
    ipv6_address: str = Field("", alias="IPv6Address")
    ipv4_default_gateway: str = Field("", alias="IPv4DefaultGateway")
    dns_server: str = Field("", alias="DNSServer")
    ipv6_enabled: bool = Field(False, alias="IPv6Enabled")


class FirewallProfile(Record):
    """State of one Windows Firewall profile (Domain, Private, Public)."""

    name: str = Field(alias="Name")
    enabled: bool = Field(False, alias="Enabled")
    default_inbound_action: str = Field("", alias="DefaultInboundAction")
    default_outbound_action: str = Field("", alias="DefaultOutboundAction")


class FirewallRule(Record):
    """A locally defined, enabled firewall rule with its port filter."""

    display_name: str = Field(alias="DisplayName")
    direction: str = Field("", alias="Direction")
    action: str = Field("", alias="Action")
    profile: str = Field("", alias="Profile")
    protocol: str = Field("", alias="Protocol")
    local_port: str = Field("", alias="LocalPort")
    remote_port: str = Field("", alias="RemotePort")


class VolumeUsage(Record):
    """Space usage of a filesystem volume, in gigabytes."""

    name: str = Field(alias="Name")
    root: str = Field("", alias="Root")
    used_gb: float = Field(0.0, ge=0.0, alias="Used (GB)")
    free_gb: float = Field(0.0, ge=0.0, alias="Free (GB)")
    total_gb: float = Field(0.0, ge=0.0, alias="Total (GB)")
