from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class BatteryReading:
    percent: float
    # None when the platform cannot tell whether AC power is connected.
    power_plugged: bool | None


@dataclass(frozen=True)
class DeviceInfo:
    name: str
    system_version: str
    model: str
    multitasking_supported: bool
    battery: BatteryReading | None
    collected_at: datetime
