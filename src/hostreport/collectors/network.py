"""Network collector: per-interface IP configuration and IPv6 binding state."""

from __future__ import annotations

import logging

from hostreport.collectors.base import Collector, is_true, join_values, ps_json
from hostreport.exceptions import CommandError
from hostreport.models.records import NetworkInterface

logger = logging.getLogger(__name__)

# Flattens the nested CIM objects so every address list arrives as a JSON array.
IP_CONFIGURATION_SCRIPT = (
    "Get-NetIPConfiguration | ForEach-Object { [pscustomobject]@{ "
    "InterfaceAlias = $_.InterfaceAlias; "
    "InterfaceDescription = $_.InterfaceDescription; "
    "IPv4Address = @($_.IPv4Address | ForEach-Object { $_.IPAddress }); "
    "IPv6Address = @($_.IPv6Address | ForEach-Object { $_.IPAddress }); "
    "IPv4DefaultGateway = @($_.IPv4DefaultGateway | ForEach-Object { $_.NextHop }); "
    "DNSServer = @($_.DNSServer | ForEach-Object { $_.ServerAddresses }) "
    "} }"
)

BINDING_SCRIPT = (
    "Get-NetAdapterBinding -ComponentID ms_tcpip6 -ErrorAction SilentlyContinue "
    "| Select-Object Name, Enabled"
)


class NetworkCollector(Collector):
    """Addresses, gateways and DNS servers for each configured interface."""

    @property
    def name(self) -> str:
        return "network"

    def collect(self) -> list[NetworkInterface]:
        configs = ps_json(IP_CONFIGURATION_SCRIPT, timeout=self.timeout)
        bindings = self._ipv6_bindings()
        interfaces = []
        for entry in configs:
            alias = str(entry.get("InterfaceAlias") or "")
            if not alias:
                continue
            interfaces.append(
                NetworkInterface(
                    interface_alias=alias,
                    interface_description=join_values(entry.get("InterfaceDescription")),
                    ipv4_address=join_values(entry.get("IPv4Address")),
                    ipv6_address=join_values(entry.get("IPv6Address")),
                    ipv4_default_gateway=join_values(entry.get("IPv4DefaultGateway")),
                    dns_server=join_values(entry.get("DNSServer")),
                    ipv6_enabled=bindings.get(alias, False),
                )
            )
        return interfaces

    def _ipv6_bindings(self) -> dict[str, bool]:
        """Whether IPv6 is bound, keyed by adapter name.

        Pseudo-interfaces such as loopback have no adapter and no entry.
        """
        try:
            entries = ps_json(BINDING_SCRIPT, timeout=self.timeout)
        except CommandError as e:
            logger.debug("IPv6 binding query failed: %s", e)
            return {}
        bindings: dict[str, bool] = {}
        for entry in entries:
            name = str(entry.get("Name") or "")
            if name:
                bindings[name] = bindings.get(name, False) or is_true(entry.get("Enabled"))
        return bindings
