"""Storage collector: used/free/total space of each filesystem drive."""

from __future__ import annotations

import logging

from hostreport.collectors.base import Collector, ps_json
from hostreport.models.records import VolumeUsage

logger = logging.getLogger(__name__)

DRIVE_SCRIPT = "Get-PSDrive -PSProvider FileSystem | Select-Object Name, Root, Used, Free"

BYTES_PER_GB = 1024**3


def to_gb(size_bytes: int | float | None) -> float:
    """Convert a byte count to gigabytes rounded to 2 decimals."""
    return round((size_bytes or 0) / BYTES_PER_GB, 2)


def volume_usage(name: str, root: str, used_gb: float, free_gb: float) -> VolumeUsage:
    """Build a volume row; the total is the rounded sum of used and free space."""
    return VolumeUsage(
        name=name,
        root=root,
        used_gb=round(used_gb, 2),
        free_gb=round(free_gb, 2),
        total_gb=round(used_gb + free_gb, 2),
    )


class StorageCollector(Collector):
    """Filesystem volumes with sizes in gigabytes."""

    @property
    def name(self) -> str:
        return "storage"

    def collect(self) -> list[VolumeUsage]:
        volumes = []
        for entry in ps_json(DRIVE_SCRIPT, timeout=self.timeout):
            name = str(entry.get("Name") or "")
            used, free = entry.get("Used"), entry.get("Free")
            if used is None and free is None:
                # Removable drive without media or unreachable mapping.
                logger.debug("Skipping drive %s with no size information", name)
                continue
            volumes.append(
                volume_usage(name, str(entry.get("Root") or ""), to_gb(used), to_gb(free))
            )
        return volumes
