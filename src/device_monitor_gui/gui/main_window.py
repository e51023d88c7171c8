from __future__ import annotations

import logging
from typing import Any

from PySide6.QtCore import QThreadPool
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QMainWindow,
    QSplitter,
    QStackedWidget,
    QTreeWidget,
    QTreeWidgetItem,
)

from device_monitor_gui.collectors.device_collector import DeviceInfoCollector
from device_monitor_gui.collectors.filesystem_collector import FilesystemReporter
from device_monitor_gui.gui.pages.device_page import DeviceInfoPage
from device_monitor_gui.gui.pages.diagnostics_page import DiagnosticsPage
from device_monitor_gui.gui.pages.filesystem_page import FilesystemPage
from device_monitor_gui.gui.workers import Worker, WorkerJob
from device_monitor_gui.models.device import DeviceInfo
from device_monitor_gui.models.filesystem import VolumeStats
from device_monitor_gui.services.config_service import ConfigService

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, config: ConfigService | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Device Monitor")
        self.resize(760, 640)

        self._config = config or ConfigService()
        fs_settings = self._config.filesystem_settings()

        self._reporter = FilesystemReporter()
        self._device_collector = DeviceInfoCollector()

        self._thread_pool = QThreadPool.globalInstance()
        self._fs_req_id = 0
        self._device_req_id = 0
        self._active_workers: set[Worker] = set()

        self._nav = QTreeWidget()
        self._nav.setHeaderHidden(True)

        self._pages = QStackedWidget()
        self._device = DeviceInfoPage()
        self._filesystem = FilesystemPage(presets=fs_settings.presets, path=fs_settings.path)
        self._diagnostics = DiagnosticsPage()

        self._pages.addWidget(self._device)
        self._pages.addWidget(self._filesystem)
        self._pages.addWidget(self._diagnostics)

        self._nav_items: dict[str, int] = {
            "Device Information": 0,
            "Disk Information": 1,
            "Diagnostic Functions": 2,
        }
        for title in self._nav_items.keys():
            self._nav.addTopLevelItem(QTreeWidgetItem([title]))
        self._nav.setCurrentItem(self._nav.topLevelItem(0))

        splitter = QSplitter()
        splitter.addWidget(self._nav)
        splitter.addWidget(self._pages)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)
        self.setCentralWidget(splitter)

        self.statusBar().showMessage("Ready")

        self._nav.currentItemChanged.connect(self._on_nav_changed)  # type: ignore[arg-type]
        self._filesystem.queryRequested.connect(self._on_filesystem_query)  # type: ignore[arg-type]
        self._diagnostics.clicked.connect(self.statusBar().showMessage)  # type: ignore[arg-type]

        self.refresh_device()
        self.refresh_filesystem(fs_settings.path)

    def _on_nav_changed(self, current: QTreeWidgetItem | None, _prev: QTreeWidgetItem | None) -> None:
        if current is None:
            return
        idx = self._nav_items.get(current.text(0))
        if idx is None:
            return
        self._pages.setCurrentIndex(idx)
        if idx == 0:
            self.refresh_device()

    def _on_filesystem_query(self, path: str) -> None:
        try:
            self._config.remember_path(path)
        except OSError as e:
            logger.warning("Could not save config: %s", e)
        self.refresh_filesystem(path)

    def _start(self, job: WorkerJob, on_result: Any, on_error: Any) -> None:
        w = Worker(job)
        self._active_workers.add(w)
        w.signals.result.connect(on_result)  # type: ignore[arg-type]
        w.signals.error.connect(on_error)  # type: ignore[arg-type]
        w.signals.finished.connect(lambda _w=w: self._active_workers.discard(_w))  # type: ignore[arg-type]
        self._thread_pool.start(w)

    def refresh_filesystem(self, path: str) -> None:
        self._fs_req_id += 1
        self.statusBar().showMessage(f"Querying {path} ...")
        self._start(
            WorkerJob(req_id=self._fs_req_id, fn=lambda: self._reporter.query(path)),
            self._on_filesystem_result,
            self._on_filesystem_error,
        )

    def refresh_device(self) -> None:
        self._device_req_id += 1
        screen = QGuiApplication.primaryScreen()
        self._device.set_orientation(screen.orientation() if screen is not None else None)
        self._start(
            WorkerJob(req_id=self._device_req_id, fn=self._device_collector.collect),
            self._on_device_result,
            self._on_worker_error,
        )

    def _on_filesystem_result(self, req_id: int, res: Any) -> None:
        if req_id != self._fs_req_id or not isinstance(res, VolumeStats):
            return
        self._filesystem.set_stats(res)
        self.statusBar().showMessage(f"Disk information updated: {res.path}")

    def _on_filesystem_error(self, req_id: int, msg: str) -> None:
        if req_id != self._fs_req_id:
            return
        self._filesystem.set_error(msg)
        self._on_worker_error(req_id, msg)

    def _on_device_result(self, req_id: int, res: Any) -> None:
        if req_id != self._device_req_id or not isinstance(res, DeviceInfo):
            return
        self._device.set_data(res)

    def _on_worker_error(self, _req_id: int, msg: str) -> None:
        self.statusBar().showMessage(f"Error: {msg}")
