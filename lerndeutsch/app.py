"""Application entry point and setup for the LernDeutsch vocabulary trainer."""

import logging
import sys
from typing import Optional

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from lerndeutsch.core.config import log_level
from lerndeutsch.core.host import GameHost
from lerndeutsch.core.words import LessonRepository
from lerndeutsch.ui.main_window import MainWindow
from lerndeutsch.ui.qt_scheduler import QtScheduler


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def load_lessons() -> tuple[Optional[LessonRepository], Optional[str]]:
    """Load the lesson databases; on failure return the error text instead."""
    try:
        return LessonRepository(), None
    except (FileNotFoundError, ValueError) as e:
        logging.error("Failed to load databases: %s", e)
        return None, str(e)


def run() -> None:
    """Initialize the application, load lessons, and start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("LernDeutsch")
    app.setApplicationDisplayName("LernDeutsch")

    lessons, load_error = load_lessons()
    host = GameHost(scheduler=QtScheduler())

    window = MainWindow(lessons=lessons, host=host, load_error=load_error)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(1280, geometry.width()), min(860, geometry.height()))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
