"""Shared enumerations for hostreport."""

from enum import StrEnum


class TabId(StrEnum):
    """Report tabs, in the order they appear in the page."""

    SYSTEM_INFO = "System_Info"
    NETWORK = "Network"
    FIREWALL = "Firewall"
    STORAGE = "Storage"
    APPLICATIONS = "Applications"
    SERVER_ROLES = "Server_Roles"
    SHARES = "Shares"
    PRINTERS = "Printers"


# Tabs without an entry here are labelled with their id.
TAB_LABELS: dict[TabId, str] = {
    TabId.SYSTEM_INFO: "System Info",
    TabId.SERVER_ROLES: "Server Roles",
}
