"""
Application settings for the desktop utilities.
"""

from PyQt6.QtCore import QSettings

DEFAULT_MAX_RECENT_FILES = 5
MAX_RECENT_FILES_LIMIT = 50


class SettingsManager:
    """Manages persisted utility settings."""

    def __init__(self):
        self.settings = QSettings("DeskUtils", "Utils")

    # Data location
    def get_data_dir(self) -> str:
        """Get the user data directory override ("" means platform default)."""
        value = self.settings.value("data_dir", "")
        if not isinstance(value, str):
            return ""
        return value

    def set_data_dir(self, path: str):
        """Set the user data directory override."""
        self.settings.setValue("data_dir", str(path))

    # Recent files
    def get_max_recent_files(self) -> int:
        """Get the capacity of the recent files list."""
        try:
            value = self.settings.value("max_recent_files", DEFAULT_MAX_RECENT_FILES)
            if value is None:
                return DEFAULT_MAX_RECENT_FILES
            value = int(value)
            if value <= 0 or value > MAX_RECENT_FILES_LIMIT:
                return DEFAULT_MAX_RECENT_FILES
            return value
        except (ValueError, TypeError):
            return DEFAULT_MAX_RECENT_FILES

    def set_max_recent_files(self, count: int):
        """Set the capacity of the recent files list."""
        count = max(1, min(MAX_RECENT_FILES_LIMIT, int(count)))
        self.settings.setValue("max_recent_files", count)
