from __future__ import annotations

import logging
import platform
from datetime import datetime

import psutil

from device_monitor_gui.models.device import BatteryReading, DeviceInfo

logger = logging.getLogger(__name__)


class DeviceInfoCollector:
    def collect(self) -> DeviceInfo:
        uname = platform.uname()
        system_version = " ".join(x for x in (uname.system, uname.release) if x) or "Unknown"
        cpus = psutil.cpu_count(logical=True) or 1

        return DeviceInfo(
            name=uname.node or "Unknown",
            system_version=system_version,
            model=uname.machine or "Unknown",
            multitasking_supported=cpus > 1,
            battery=self._battery(),
            collected_at=datetime.now(),
        )

    def _battery(self) -> BatteryReading | None:
        sensors_battery = getattr(psutil, "sensors_battery", None)
        if sensors_battery is None:
            return None
        try:
            b = sensors_battery()
        except (OSError, psutil.Error) as e:
            logger.warning("Battery sensor unavailable: %s", e)
            return None
        if b is None:
            return None
        return BatteryReading(percent=float(b.percent), power_plugged=b.power_plugged)


def battery_state(reading: BatteryReading) -> str:
    if reading.power_plugged is None:
        return "Unknown"
    if reading.power_plugged:
        return "Full" if reading.percent >= 100.0 else "Charging"
    return "Unplugged"


def format_battery(reading: BatteryReading | None) -> str:
    if reading is None or reading.percent <= 0.0:
        return "Unavailable"
    return f"{reading.percent:g}% ({battery_state(reading)})"
