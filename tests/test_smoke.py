"""
Smoke tests - verify basic imports and instantiation work.

These tests catch runtime errors that static analysis misses:
- Wrong import modules (e.g., QStandardPaths from wrong PyQt6 submodule)
- Undefined attributes (e.g., referencing renamed variables)
- Missing dependencies
"""


class TestImports:
    """Verify all modules can be imported without errors."""

    def test_import_recent_files(self):
        """Import RecentFilesManager - catches import errors in the core chain."""
        from core.recent_files import RecentFilesManager

        assert RecentFilesManager is not None

    def test_import_recent_menu(self):
        """Import RecentFilesMenu."""
        from ui.recent_menu import RecentFilesMenu

        assert RecentFilesMenu is not None

    def test_import_app(self):
        """Import the application entry points."""
        from app import create_context, run_app

        assert create_context is not None
        assert run_app is not None


class TestInstantiation:
    """Verify main components can be instantiated."""

    def test_main_window_creates(self, qtbot, data_dir):
        """MainWindow instantiates without error - catches attribute errors."""
        from app import MainWindow, create_context
        from core.settings import SettingsManager

        sm = SettingsManager()
        sm.set_data_dir(str(data_dir))
        window = MainWindow(create_context(sm))
        qtbot.addWidget(window)

        assert window.recent_menu is not None
        assert window.context.recent_files is not None
