from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QApplication, QGroupBox, QPushButton, QVBoxLayout, QWidget


class DiagnosticsPage(QWidget):
    clicked = Signal(str)

    def __init__(self) -> None:
        super().__init__()

        click_btn = QPushButton("Play Input Click")
        click_btn.clicked.connect(self._play_input_click)  # type: ignore[arg-type]

        gb = QGroupBox("Device Functions")
        QVBoxLayout(gb).addWidget(click_btn)

        layout = QVBoxLayout(self)
        layout.addWidget(gb)
        layout.addStretch(1)

    def _play_input_click(self) -> None:
        QApplication.beep()
        self.clicked.emit("Input click played")
