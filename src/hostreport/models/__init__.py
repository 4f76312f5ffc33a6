"""Domain models for hostreport."""

from hostreport.models.enums import TAB_LABELS, TabId
from hostreport.models.records import (
    FirewallProfile,
    FirewallRule,
    NetworkInterface,
    Record,
    SystemInfoEntry,
    VolumeUsage,
)
from hostreport.models.report import Tab

__all__ = [
    "TabId",
    "TAB_LABELS",
    "Record",
    "SystemInfoEntry",
    "NetworkInterface",
    "FirewallProfile",
    "FirewallRule",
    "VolumeUsage",
    "Tab",
]
