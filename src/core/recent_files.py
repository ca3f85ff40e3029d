"""
Recent files manager - tracks and persists recently opened files.

The list lives in a plain text file ("data/recentfiles") with one absolute
path per line. It is re-read on every query and rewritten in full on every
change; nothing is cached in memory. All operations are best-effort and
never raise: read failures yield an empty list, write failures are dropped.
"""

import logging
import os
import threading
from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal

from core.file_store import DesktopFileStore
from core.listeners import WeakListenerList

logger = logging.getLogger(__name__)

RECENT_FILES_PATH = "data/recentfiles"
MAX_RECENT_FILES = 5


class RecentFilesManager(QObject):
    """Manages the list of recently opened files.

    Only existing files are listed; entries for removed files are skipped
    when the list is read. Listeners registered with add_listener() are
    held weakly and are called without arguments after every change, as
    is the files_changed signal.
    """

    # Signal emitted when the recent files list changes
    files_changed = pyqtSignal()

    def __init__(
        self,
        file_store: DesktopFileStore,
        max_entries: int = MAX_RECENT_FILES,
        storage_path: str = RECENT_FILES_PATH,
        parent=None,
    ):
        super().__init__(parent)
        self.file_store = file_store
        self.max_entries = max_entries
        self.storage_path = storage_path
        self._listeners = WeakListenerList()
        self._lock = threading.RLock()

    def get_recent_files(self) -> list[Path]:
        """Get the recent files, most recent first. Returns [] on any error."""
        # Writes truncate before refilling, so never read halfway through one
        with self._lock:
            content = self._read_storage()
        if content is None:
            return []
        files = []
        # Only the first max_entries lines are considered, even if some are gone
        for line in content.split("\n")[: self.max_entries]:
            if line and os.path.exists(line):
                files.append(Path(line))
        return files

    def add_recent_file(self, filepath: str | os.PathLike):
        """Move a file to the top of the list, store it and notify listeners.

        Files that do not exist are ignored.
        """
        if not os.path.exists(filepath):
            return
        filepath = Path(os.path.abspath(filepath))

        with self._lock:
            # Hand-edited storage may list the same file more than once
            files = [f for f in self.get_recent_files() if f != filepath]
            files.insert(0, filepath)
            del files[self.max_entries :]

            self._write_storage(files)
            self._notify_listeners()

    def clear_recent_files(self):
        """Clear the stored list and notify listeners."""
        with self._lock:
            self._write_storage([])
            self._notify_listeners()

    def add_listener(self, listener):
        """Register a listener for list changes.

        The listener is either an object with a recent_files_changed()
        method or a callable taking no arguments. Only a weak reference is
        kept, so unregistering is not necessary.
        """
        self._listeners.add(listener)

    def remove_all_listeners(self):
        """Remove all registered listeners."""
        self._listeners.clear()

    @staticmethod
    def display_name(filepath: str | os.PathLike) -> str:
        """Menu label: the file name, then its folder with the home directory as ~."""
        path = Path(filepath)
        if not path.parent.name:
            return path.name
        folder = path.parent
        try:
            folder = Path("~") / folder.relative_to(Path.home())
        except (ValueError, RuntimeError):
            # Outside the home directory, or no home directory at all
            pass
        return f"{path.name} ({folder})"

    def _read_storage(self) -> str | None:
        """Read the raw storage text, or None if missing or unreadable."""
        try:
            path = self.file_store.find_file(self.storage_path)
            if path is None:
                # No history yet
                return None
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeError):
            logger.debug("Could not read recent files", exc_info=True)
            return None

    def _write_storage(self, files: list[Path]) -> bool:
        """Overwrite the storage file. Returns False if the write failed."""
        try:
            path = self.file_store.create_file(self.storage_path)
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                for file in files:
                    f.write(f"{file}\n")
        except (OSError, UnicodeError):
            logger.debug("Could not save recent files", exc_info=True)
            return False
        return True

    def _notify_listeners(self):
        for listener in self._listeners.get_all():
            callback = getattr(listener, "recent_files_changed", listener)
            try:
                callback()
            except Exception:
                logger.exception("Recent files listener failed")
        self.files_changed.emit()
