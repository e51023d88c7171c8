from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QFont
from PySide6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from device_monitor_gui.models.filesystem import VolumeStats
from device_monitor_gui.models.units import format_count


def _value_label() -> QLabel:
    lbl = QLabel("-")
    f = QFont(lbl.font())
    f.setBold(True)
    lbl.setFont(f)
    lbl.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
    lbl.setTextInteractionFlags(Qt.TextSelectableByMouse)
    return lbl


def _section(title: str, rows: list[str]) -> tuple[QGroupBox, dict[str, QLabel]]:
    gb = QGroupBox(title)
    grid = QGridLayout(gb)
    values: dict[str, QLabel] = {}
    for r, label in enumerate(rows):
        grid.addWidget(QLabel(label), r, 0)
        values[label] = _value_label()
        grid.addWidget(values[label], r, 1)
    grid.setColumnStretch(1, 1)
    return gb, values


class FilesystemPage(QWidget):
    queryRequested = Signal(str)

    def __init__(self, presets: list[str], path: str) -> None:
        super().__init__()

        self._path = QComboBox()
        self._path.setEditable(True)
        self._path.addItems(presets)
        self._path.setCurrentText(path)

        query_btn = QPushButton("Query")
        query_btn.clicked.connect(self._on_query_clicked)  # type: ignore[arg-type]

        path_box = QGroupBox("Path")
        path_row = QHBoxLayout(path_box)
        path_row.addWidget(self._path, 1)
        path_row.addWidget(query_btn)

        self._error = QLabel("")
        self._error.setWordWrap(True)
        self._error.setStyleSheet("color: #b00020;")
        self._error.setVisible(False)

        usage, self._usage = _section("Usage", ["Total Size", "Free Size", "Used Size"])
        attrs, self._attrs = _section("Attributes", ["Volume Number", "Nodes", "Free Nodes"])

        debug = QGroupBox("Debug Data")
        self._debug = QPlainTextEdit()
        self._debug.setReadOnly(True)
        QVBoxLayout(debug).addWidget(self._debug)

        layout = QVBoxLayout(self)
        layout.addWidget(path_box)
        layout.addWidget(self._error)
        layout.addWidget(usage)
        layout.addWidget(attrs)
        layout.addWidget(debug, 1)

    def current_path(self) -> str:
        return self._path.currentText().strip() or "/"

    def _on_query_clicked(self) -> None:
        self.queryRequested.emit(self.current_path())

    def set_stats(self, stats: VolumeStats) -> None:
        self._error.setVisible(False)
        self._usage["Total Size"].setText(stats.get_total_disk_space())
        self._usage["Free Size"].setText(stats.get_free_disk_space())
        self._usage["Used Size"].setText(stats.get_used_disk_space())
        self._attrs["Volume Number"].setText(format_count(stats.volume_id))
        self._attrs["Nodes"].setText(format_count(stats.total_nodes))
        self._attrs["Free Nodes"].setText(format_count(stats.free_nodes_count))
        self._debug.setPlainText(stats.raw_debug_snapshot)

    def set_error(self, message: str) -> None:
        for lbl in (*self._usage.values(), *self._attrs.values()):
            lbl.setText("-")
        self._debug.clear()
        self._error.setText(f"Attributes unavailable: {message}")
        self._error.setVisible(True)
