"""
Application setup - builds the shared context once at startup.
"""

import logging
import sys
from dataclasses import dataclass

from PyQt6.QtCore import QtMsgType, qInstallMessageHandler
from PyQt6.QtWidgets import QApplication, QFileDialog, QMainWindow

from core.file_store import DesktopFileStore
from core.recent_files import RecentFilesManager
from core.settings import SettingsManager
from ui.recent_menu import RecentFilesMenu

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Services shared by the whole application, passed to whoever needs them."""

    settings: SettingsManager
    file_store: DesktopFileStore
    recent_files: RecentFilesManager


def create_context(settings: SettingsManager | None = None) -> AppContext:
    """Create the application context from the stored settings."""
    settings = settings or SettingsManager()
    file_store = DesktopFileStore(settings.get_data_dir() or None)
    recent_files = RecentFilesManager(file_store, max_entries=settings.get_max_recent_files())
    logger.debug("Using data directory %s", file_store.user_dir)
    return AppContext(settings=settings, file_store=file_store, recent_files=recent_files)


def qt_message_handler(msg_type: QtMsgType, context, message: str):
    """Route Qt messages through logging."""
    if msg_type == QtMsgType.QtWarningMsg:
        logger.warning("Qt: %s", message)
    elif msg_type in (QtMsgType.QtCriticalMsg, QtMsgType.QtFatalMsg):
        logger.error("Qt: %s", message)
    else:
        logger.debug("Qt: %s", message)


class MainWindow(QMainWindow):
    """Minimal window with a File menu backed by the recent files list."""

    def __init__(self, context: AppContext):
        super().__init__()
        self.context = context
        self.setWindowTitle("DeskUtils")

        file_menu = self.menuBar().addMenu(self.tr("&File"))
        open_action = file_menu.addAction(self.tr("&Open..."))
        open_action.triggered.connect(self._open_file)

        self.recent_menu = RecentFilesMenu(context.recent_files, self)
        self.recent_menu.file_selected.connect(self.open_file_path)
        file_menu.addMenu(self.recent_menu)

    def _open_file(self):
        filepath, _ = QFileDialog.getOpenFileName(self, self.tr("Open File"))
        if filepath:
            self.open_file_path(filepath)

    def open_file_path(self, filepath: str):
        """Record the file as recently opened."""
        self.context.recent_files.add_recent_file(filepath)
        self.statusBar().showMessage(filepath)


def run_app() -> int:
    """Initialize and run the application."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    qInstallMessageHandler(qt_message_handler)

    app = QApplication(sys.argv)
    app.setApplicationName("DeskUtils")
    app.setOrganizationName("DeskUtils")

    context = create_context()

    window = MainWindow(context)
    window.show()
    return app.exec()
