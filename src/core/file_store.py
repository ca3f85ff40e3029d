"""
Platform file store - maps logical paths like "data/recentfiles" to files
in the per-user application data directory.
"""

import logging
from pathlib import Path, PurePosixPath

from PyQt6.QtCore import QStandardPaths

from core.exceptions import InvalidFormatError

logger = logging.getLogger(__name__)


class DesktopFileStore:
    """Resolves logical paths inside the user and shared data directories.

    Reads search the writable user directory first, then the read-only
    shared directories. Writes always go to the user directory.
    """

    def __init__(self, user_dir: str | Path | None = None, shared_dirs=None):
        locations = QStandardPaths.standardLocations(
            QStandardPaths.StandardLocation.AppDataLocation
        )
        if user_dir:
            self.user_dir = Path(user_dir)
        else:
            writable = QStandardPaths.writableLocation(
                QStandardPaths.StandardLocation.AppDataLocation
            )
            self.user_dir = Path(writable) if writable else Path.home() / ".deskutils"
        if shared_dirs is None:
            shared_dirs = [loc for loc in locations if Path(loc) != self.user_dir]
        self.shared_dirs = [Path(d) for d in shared_dirs]

    def resolve(self, logical_path: str, base: Path | None = None) -> Path:
        """Map a logical path onto a concrete path below base (user dir by default)."""
        parts = PurePosixPath(logical_path.replace("\\", "/")).parts if logical_path else ()
        if not parts:
            raise InvalidFormatError("Empty logical path")
        if parts[0] == "/" or ".." in parts or Path(logical_path).is_absolute():
            raise InvalidFormatError(f"Logical path must be relative: {logical_path!r}")
        return (base or self.user_dir).joinpath(*parts)

    def find_file(self, logical_path: str) -> Path | None:
        """Find an existing file for the logical path, or None. Never creates anything."""
        try:
            candidates = [self.resolve(logical_path, base) for base in self._search_dirs()]
        except InvalidFormatError:
            logger.debug("Rejected logical path %r", logical_path, exc_info=True)
            return None
        for candidate in candidates:
            try:
                if candidate.is_file():
                    return candidate
            except OSError:
                # Unreachable directory or overlong name: treat as absent
                logger.debug("Could not look up %s", candidate, exc_info=True)
        return None

    def create_file(self, logical_path: str) -> Path:
        """Create (or reuse) the file for the logical path in the user directory.

        Parent directories are created as needed. Raises OSError on failure.
        """
        path = self.resolve(logical_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch(exist_ok=True)
        return path

    def _search_dirs(self) -> list[Path]:
        return [self.user_dir, *self.shared_dirs]
