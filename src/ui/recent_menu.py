"""
Recent files submenu for the File menu.
"""

from pathlib import Path

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import QMenu

from core.recent_files import RecentFilesManager


class RecentFilesMenu(QMenu):
    """Menu listing the recent files, rebuilt whenever the list changes."""

    # Emitted with the chosen file path
    file_selected = pyqtSignal(str)

    def __init__(self, recent_files: RecentFilesManager, parent=None):
        super().__init__(parent)
        self.setTitle(self.tr("Recent"))
        self.recent_files = recent_files
        # Held weakly - no need to unregister when the menu goes away
        self.recent_files.add_listener(self)
        self.rebuild()

    def recent_files_changed(self):
        """Called by the manager after every change."""
        self.rebuild()

    def rebuild(self):
        """Update the recent files menu."""
        # Rebuilds can run from inside an action's own triggered signal
        for action in self.actions():
            self.removeAction(action)
            action.deleteLater()

        files = self.recent_files.get_recent_files()
        if files:
            for i, filepath in enumerate(files):
                display_name = self.recent_files.display_name(filepath)
                # Add number shortcut for first 9 files
                if i < 9:
                    display_name = f"&{i + 1}  {display_name}"

                action = QAction(display_name, self)
                action.setData(str(filepath))
                action.triggered.connect(self._open_recent_file)
                self.addAction(action)

            self.addSeparator()

            clear_action = QAction(self.tr("Clear Recent"), self)
            clear_action.triggered.connect(self.recent_files.clear_recent_files)
            self.addAction(clear_action)
        else:
            no_recent = QAction(self.tr("No recent files"), self)
            no_recent.setEnabled(False)
            self.addAction(no_recent)

    def _open_recent_file(self):
        """Forward the chosen file, refreshing the menu if it has vanished."""
        action = self.sender()
        if action:
            filepath = action.data()
            if Path(filepath).exists():
                self.file_selected.emit(filepath)
            else:
                self.rebuild()
