import faulthandler
import logging
import sys

from PySide6.QtWidgets import QApplication

from device_monitor_gui.gui.main_window import MainWindow
from device_monitor_gui.services.config_service import ConfigService

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def run() -> None:
    faulthandler.enable()
    config = ConfigService()
    configure_logging(config.log_level())

    app = QApplication(sys.argv)
    app.setApplicationName("Device Monitor")

    w = MainWindow(config=config)
    w.show()

    raise SystemExit(app.exec())
