"""
Unit tests for the settings manager.

Tests:
- Defaults and persistence
- Canvas defaults clamping
- Path resolution
- Corrupt settings files
"""

import json
from pathlib import Path

from models.canvas import CanvasSettings
from services.settings_manager import (
    SettingsManager, AppSettings, get_settings, reset_settings_manager,
)


class TestDefaults:
    """Tests for default settings."""

    def test_defaults(self, settings_manager):
        """Test default settings."""
        settings = settings_manager.settings
        assert settings.canvas.range == 20
        assert settings.canvas.zoom == 600
        assert settings.ui.show_point_labels
        assert settings.ui.confirm_delete

    def test_default_paths(self, settings_manager):
        """Test default workspace paths."""
        assert settings_manager.get_projects_file().name == "projects.json"
        assert settings_manager.get_export_dir().name == "exports"

    def test_app_settings_round_trip(self):
        """Test settings serialization."""
        settings = AppSettings()
        settings.canvas.range = 12
        settings.ui.confirm_delete = False
        restored = AppSettings.from_dict(settings.to_dict())
        assert restored.canvas.range == 12
        assert not restored.ui.confirm_delete


class TestPersistence:
    """Tests for saving and loading settings."""

    def test_save_and_reload(self, temp_dir):
        """Test saving settings and loading them again."""
        path = temp_dir / "cfg" / "settings.json"
        manager = SettingsManager(config_override=str(path))
        manager.set_canvas_defaults(CanvasSettings(range=10, zoom=800))
        manager.set_export_dir(str(temp_dir / "out"))

        reloaded = SettingsManager(config_override=str(path))
        assert reloaded.get_canvas_defaults() == CanvasSettings(range=10, zoom=800)
        assert reloaded.get_export_dir() == temp_dir / "out"

    def test_canvas_defaults_clamped(self, settings_manager):
        """Test that stored canvas defaults are clamped."""
        settings_manager.settings.canvas.range = 500
        settings_manager.settings.canvas.zoom = 10
        assert settings_manager.get_canvas_defaults() == CanvasSettings(range=50, zoom=400)

    def test_export_dir_from_file_path(self, settings_manager, temp_dir):
        """Test setting the export folder from a file path."""
        target = temp_dir / "image.png"
        target.write_bytes(b"")
        settings_manager.set_export_dir(str(target))
        assert settings_manager.get_export_dir() == temp_dir

    def test_corrupt_file_uses_defaults(self, temp_dir):
        """Test loading a corrupt settings file."""
        path = temp_dir / "settings.json"
        path.write_text("{not json", encoding="utf-8")
        manager = SettingsManager(config_override=str(path))
        assert manager.load() is False
        assert manager.settings.canvas.range == 20

    def test_window_geometry(self, settings_manager):
        """Test saving window geometry."""
        settings_manager.save_window_geometry(b"\x01\x02", b"\x03")
        assert settings_manager.get_window_geometry() == (b"\x01\x02", b"\x03")

    def test_reset(self, settings_manager):
        """Test resetting to defaults."""
        settings_manager.set_canvas_defaults(CanvasSettings(range=7, zoom=700))
        settings_manager.reset()
        data = json.loads(Path(settings_manager.settings_path).read_text(encoding="utf-8"))
        assert data["canvas"] == {"range": 20, "zoom": 600}


class TestGlobalInstance:
    """Tests for the global settings manager."""

    def test_singleton(self, temp_dir):
        """Test the global settings manager."""
        reset_settings_manager()
        try:
            first = get_settings(str(temp_dir / "settings.json"))
            assert get_settings() is first
        finally:
            reset_settings_manager()
