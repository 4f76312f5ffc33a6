"""Collectors: each queries one OS subsystem and returns uniform records."""

from hostreport.collectors.base import Collector
from hostreport.collectors.firewall import FirewallProfileCollector, FirewallRuleCollector
from hostreport.collectors.network import NetworkCollector
from hostreport.collectors.storage import StorageCollector
from hostreport.collectors.system import SystemInfoCollector

__all__ = [
    "Collector",
    "SystemInfoCollector",
    "NetworkCollector",
    "FirewallProfileCollector",
    "FirewallRuleCollector",
    "StorageCollector",
]
