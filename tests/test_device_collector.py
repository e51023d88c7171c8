from collections import namedtuple

import pytest

from device_monitor_gui.collectors import device_collector
from device_monitor_gui.collectors.device_collector import (
    DeviceInfoCollector,
    battery_state,
    format_battery,
)
from device_monitor_gui.models.device import BatteryReading

sbattery = namedtuple("sbattery", "percent secsleft power_plugged")


@pytest.mark.parametrize(
    "reading, expected",
    [
        (None, "Unavailable"),
        (BatteryReading(percent=0.0, power_plugged=True), "Unavailable"),
        (BatteryReading(percent=87.5, power_plugged=True), "87.5% (Charging)"),
        (BatteryReading(percent=100.0, power_plugged=True), "100% (Full)"),
        (BatteryReading(percent=42.0, power_plugged=False), "42% (Unplugged)"),
        (BatteryReading(percent=42.0, power_plugged=None), "42% (Unknown)"),
    ],
)
def test_format_battery(reading, expected) -> None:
    assert format_battery(reading) == expected


def test_battery_state_full_requires_power() -> None:
    assert battery_state(BatteryReading(percent=100.0, power_plugged=False)) == "Unplugged"


def test_collect_reads_platform_and_battery(monkeypatch) -> None:
    monkeypatch.setattr(device_collector.psutil, "sensors_battery", lambda: sbattery(55.0, 3600, False))
    monkeypatch.setattr(device_collector.psutil, "cpu_count", lambda logical=True: 8)

    info = DeviceInfoCollector().collect()

    assert info.name
    assert info.system_version
    assert info.model
    assert info.multitasking_supported is True
    assert info.battery == BatteryReading(percent=55.0, power_plugged=False)


def test_collect_without_battery(monkeypatch) -> None:
    monkeypatch.setattr(device_collector.psutil, "sensors_battery", lambda: None)
    monkeypatch.setattr(device_collector.psutil, "cpu_count", lambda logical=True: None)

    info = DeviceInfoCollector().collect()

    assert info.battery is None
    assert info.multitasking_supported is False


def test_battery_sensor_error_is_logged(monkeypatch, caplog) -> None:
    def broken():
        raise OSError("no sysfs")

    monkeypatch.setattr(device_collector.psutil, "sensors_battery", broken)

    with caplog.at_level("WARNING", logger=device_collector.__name__):
        info = DeviceInfoCollector().collect()

    assert info.battery is None
    assert "Battery sensor unavailable" in caplog.text
