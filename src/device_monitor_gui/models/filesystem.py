from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from device_monitor_gui.models.units import format_bytes


class AttributeKey(str, Enum):
    """Attribute names every volume query must resolve to an integer."""

    SIZE = "fs_size"
    FREE_SIZE = "fs_free_size"
    NUMBER = "fs_number"
    NODES = "fs_nodes"
    FREE_NODES = "fs_free_nodes"


@dataclass(frozen=True)
class VolumeStats:
    path: str
    total_bytes: int
    free_bytes: int
    volume_id: int
    total_nodes: int
    free_nodes_count: int
    raw_debug_snapshot: str

    @property
    def used_bytes(self) -> int:
        return self.total_bytes - self.free_bytes

    def get_total_disk_space(self) -> str:
        return format_bytes(self.total_bytes)

    def get_free_disk_space(self) -> str:
        return format_bytes(self.free_bytes)

    def get_used_disk_space(self) -> str:
        return format_bytes(self.used_bytes)
