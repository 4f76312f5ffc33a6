"""Firewall collectors: profile status and locally defined enabled rules."""

from __future__ import annotations

from typing import Any

from hostreport.collectors.base import Collector, is_true, join_values, ps_json
from hostreport.models.records import FirewallProfile, FirewallRule

# Enum-typed properties are stringified in PowerShell; ConvertTo-Json
# would otherwise emit their numeric values.
PROFILE_SCRIPT = (
    "Get-NetFirewallProfile | Select-Object Name, "
    "@{Name='Enabled';Expression={$_.Enabled.ToString()}}, "
    "@{Name='DefaultInboundAction';Expression={$_.DefaultInboundAction.ToString()}}, "
    "@{Name='DefaultOutboundAction';Expression={$_.DefaultOutboundAction.ToString()}}"
)

# The port filter is read in the same pipeline; a rule without one leaves
# Protocol and the port lists null.
RULE_SCRIPT = (
    "Get-NetFirewallRule -PolicyStore ActiveStore -Enabled True "
    "| Where-Object { $_.PolicyStoreSourceType.ToString() -eq 'Local' } "
    "| ForEach-Object { "
    "$pf = $_ | Get-NetFirewallPortFilter -ErrorAction SilentlyContinue; "
    "[pscustomobject]@{ "
    "Name = $_.Name; "
    "DisplayName = $_.DisplayName; "
    "Enabled = $_.Enabled.ToString(); "
    "Direction = $_.Direction.ToString(); "
    "Action = $_.Action.ToString(); "
    "Profile = $_.Profile.ToString(); "
    "PolicyStoreSourceType = $_.PolicyStoreSourceType.ToString(); "
    "Protocol = $pf.Protocol; "
    "LocalPort = $pf.LocalPort; "
    "RemotePort = $pf.RemotePort "
    "} }"
)

LOCAL_SOURCE = "Local"


class FirewallProfileCollector(Collector):
    """Enabled state and default actions of each firewall profile."""

    @property
    def name(self) -> str:
        return "firewall_profiles"

    def collect(self) -> list[FirewallProfile]:
        return [
            FirewallProfile(
                name=str(entry.get("Name") or ""),
                enabled=is_true(entry.get("Enabled")),
                default_inbound_action=join_values(entry.get("DefaultInboundAction")),
                default_outbound_action=join_values(entry.get("DefaultOutboundAction")),
            )
            for entry in ps_json(PROFILE_SCRIPT, timeout=self.timeout)
        ]


def select_local_rules(entries: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Keep enabled rules from the local policy store, sorted by display name."""
    selected = [
        e for e in entries
        if is_true(e.get("Enabled")) and str(e.get("PolicyStoreSourceType")) == LOCAL_SOURCE
    ]
    return sorted(selected, key=lambda e: str(e.get("DisplayName") or "").casefold())


class FirewallRuleCollector(Collector):
    """Locally defined enabled rules with their protocol and ports."""

    @property
    def name(self) -> str:
        return "firewall_rules"

    def collect(self) -> list[FirewallRule]:
        return [
            FirewallRule(
                display_name=str(entry.get("DisplayName") or entry.get("Name") or ""),
                direction=join_values(entry.get("Direction")),
                action=join_values(entry.get("Action")),
                profile=join_values(entry.get("Profile")),
                protocol=join_values(entry.get("Protocol")),
                local_port=join_values(entry.get("LocalPort")),
                remote_port=join_values(entry.get("RemotePort")),
            )
            for entry in select_local_rules(ps_json(RULE_SCRIPT, timeout=self.timeout))
        ]
