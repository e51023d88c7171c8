from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QGridLayout, QGroupBox, QLabel, QVBoxLayout, QWidget

from device_monitor_gui.collectors.device_collector import format_battery
from device_monitor_gui.models.device import DeviceInfo

_ORIENTATIONS = {
    Qt.ScreenOrientation.PortraitOrientation: "Portrait",
    Qt.ScreenOrientation.InvertedPortraitOrientation: "Portrait (upside-down)",
    Qt.ScreenOrientation.LandscapeOrientation: "Landscape (left)",
    Qt.ScreenOrientation.InvertedLandscapeOrientation: "Landscape (right)",
}


def describe_orientation(orientation: Qt.ScreenOrientation | None) -> str:
    if orientation is None:
        return "Unknown"
    return _ORIENTATIONS.get(orientation, "Unknown")


class DeviceInfoPage(QWidget):
    def __init__(self) -> None:
        super().__init__()

        self._rows: dict[str, QLabel] = {}
        info = self._group("Info", ["Name", "System Version", "Model"])
        extra = self._group("Additional", ["Multitasking Support?", "Orientation", "Battery Level"])

        layout = QVBoxLayout(self)
        layout.addWidget(info)
        layout.addWidget(extra)
        layout.addStretch(1)

    def _group(self, title: str, labels: list[str]) -> QGroupBox:
        gb = QGroupBox(title)
        grid = QGridLayout(gb)
        for r, label in enumerate(labels):
            value = QLabel("-")
            value.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
            value.setTextInteractionFlags(Qt.TextSelectableByMouse)
            value.setStyleSheet("font-weight: bold;")
            grid.addWidget(QLabel(label), r, 0)
            grid.addWidget(value, r, 1)
            self._rows[label] = value
        grid.setColumnStretch(1, 1)
        return gb

    def set_data(self, info: DeviceInfo) -> None:
        self._rows["Name"].setText(info.name)
        self._rows["System Version"].setText(info.system_version)
        self._rows["Model"].setText(info.model)
        self._rows["Multitasking Support?"].setText("Yes" if info.multitasking_supported else "No")
        self._rows["Battery Level"].setText(format_battery(info.battery))

    def set_orientation(self, orientation: Qt.ScreenOrientation | None) -> None:
        self._rows["Orientation"].setText(describe_orientation(orientation))
