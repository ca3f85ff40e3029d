# =============================================================================
# tests/conftest.py — Shared pytest fixtures for DeskUtils
# =============================================================================
#
# This file is auto-loaded by pytest before any test module runs.
# It provides:
#   - QApplication lifecycle management (one instance per session)
#   - Settings isolation so tests never touch the real configuration
#   - A file store rooted in a temporary directory
#   - Factories for temporary "opened" files
#
# Usage in tests:
#   def test_something(recent_files, make_files):
#       ...
#
# =============================================================================

import sys

import pytest

# ---------------------------------------------------------------------------
# QApplication singleton — PyQt6 requires exactly one per process
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def qapp():
    """
    Create or reuse a QApplication instance for the test session.

    PyQt6 enforces a single QApplication per process. If one already
    exists (e.g., from pytest-qt), we reuse it.
    """
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        # No window system needed for headless testing
        app = QApplication([*sys.argv, "-platform", "offscreen"])
        app.setApplicationName("DeskUtils-Tests")

    yield app

    # Note: We do NOT call app.quit() here. Let the process exit handle it.


# ---------------------------------------------------------------------------
# Settings isolation — prevent tests from reading/writing real settings
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """
    Redirect QSettings to a temp directory so tests never touch real config.

    This runs automatically for every test (autouse=True).
    """
    from PyQt6.QtCore import QSettings

    # Use IniFormat in a temp directory instead of system registry/plist
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)
    for fmt in (QSettings.Format.IniFormat, QSettings.Format.NativeFormat):
        QSettings.setPath(fmt, QSettings.Scope.UserScope, str(tmp_path / "settings"))


# ---------------------------------------------------------------------------
# Recent files — store and manager rooted in tmp_path
# ---------------------------------------------------------------------------


@pytest.fixture
def data_dir(tmp_path):
    """The user data directory for the file store (not created up front)."""
    return tmp_path / "appdata"


@pytest.fixture
def file_store(data_dir):
    """A DesktopFileStore with no shared directories."""
    from core.file_store import DesktopFileStore

    return DesktopFileStore(data_dir, shared_dirs=[])


@pytest.fixture
def recent_files(file_store):
    """A RecentFilesManager with the default capacity."""
    from core.recent_files import RecentFilesManager

    manager = RecentFilesManager(file_store)
    yield manager
    manager.remove_all_listeners()


@pytest.fixture
def storage_file(data_dir):
    """Path of the persisted recent files list."""
    return data_dir / "data" / "recentfiles"


@pytest.fixture
def make_files(tmp_path):
    """
    Factory fixture that creates existing documents.

    Usage:
        def test_add(make_files):
            a, b = make_files("a.txt", "b.txt")
    """
    docs = tmp_path / "docs"
    docs.mkdir(exist_ok=True)

    def _factory(*names: str):
        paths = []
        for name in names:
            path = docs / name
            path.write_text(f"# {name}\n", encoding="utf-8")
            paths.append(path.resolve())
        return paths

    return _factory
