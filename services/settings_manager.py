"""
Settings Manager.

Handles application settings with JSON file storage.
"""

import base64
import json
import logging
import os
import platform
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional

from models.canvas import CanvasSettings

logger = logging.getLogger(__name__)


@dataclass
class CanvasDefaults:
    """Canvas settings a fresh session starts with."""
    range: int = 20
    zoom: int = 600

    def to_canvas_settings(self) -> CanvasSettings:
        return CanvasSettings(range=self.range, zoom=self.zoom).clamped()


@dataclass
class UISettings:
    """User interface settings."""
    show_point_labels: bool = True
    show_original_title: bool = True
    confirm_delete: bool = True


@dataclass
class PathSettings:
    """
    Workspace and file path settings.

    Empty values mean "use the platform default".
    """
    projects_file: str = ""
    export_dir: str = ""

    def get_projects_file(self) -> Path:
        """Get the project store file."""
        if self.projects_file:
            return Path(self.projects_file)
        return self._get_default_workspace() / "projects.json"

    def get_export_dir(self) -> Path:
        """Get the directory PNG exports are written to."""
        if self.export_dir:
            return Path(self.export_dir)
        return self._get_default_workspace() / "exports"

    def _get_default_workspace(self) -> Path:
        """Get platform-specific default workspace directory."""
        system = platform.system()

        if system == "Windows":
            # Use Documents folder on Windows
            docs = Path(os.environ.get("USERPROFILE", "~")) / "Documents"
            return docs.expanduser() / "GeometryWorkbench"
        elif system == "Darwin":  # macOS
            return Path.home() / "Documents" / "GeometryWorkbench"
        else:  # Linux and others
            return Path.home() / "geometry-workbench"


@dataclass
class AppSettings:
    """Complete application settings."""
    canvas: CanvasDefaults = field(default_factory=CanvasDefaults)
    ui: UISettings = field(default_factory=UISettings)
    paths: PathSettings = field(default_factory=PathSettings)
    window_geometry: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "canvas": asdict(self.canvas),
            "ui": asdict(self.ui),
            "paths": asdict(self.paths),
            "window_geometry": self.window_geometry,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary."""
        settings = cls()

        if "canvas" in data:
            settings.canvas = CanvasDefaults(**data["canvas"])
        if "ui" in data:
            settings.ui = UISettings(**data["ui"])
        if "paths" in data:
            settings.paths = PathSettings(**data["paths"])
        if "window_geometry" in data:
            settings.window_geometry = data["window_geometry"]

        return settings


class SettingsManager:
    """
    Manages application settings with JSON file storage.

    Settings file location:
    - Windows: %APPDATA%/GeometryWorkbench/settings.json
    - Linux: ~/.config/GeometryWorkbench/settings.json
    - macOS: ~/Library/Application Support/GeometryWorkbench/settings.json
    """

    APP_NAME = "GeometryWorkbench"
    SETTINGS_FILE = "settings.json"

    def __init__(self, config_override: Optional[str] = None):
        """
        Initialize settings manager.

        Args:
            config_override: Optional path to override config file location.
                            Useful for testing.
        """
        self._settings = AppSettings()
        self._config_override = config_override
        self._settings_path = self._get_settings_path()
        self._ensure_settings_dir()
        self.load()

    @property
    def settings(self) -> AppSettings:
        """Get current settings."""
        return self._settings

    @property
    def settings_path(self) -> str:
        """Get the settings file path."""
        return str(self._settings_path)

    @property
    def paths(self) -> PathSettings:
        """Get path settings."""
        return self._settings.paths

    def get_projects_file(self) -> Path:
        return self._settings.paths.get_projects_file()

    def get_export_dir(self) -> Path:
        return self._settings.paths.get_export_dir()

    def set_export_dir(self, path: str):
        """Set the export directory; a file path uses its directory."""
        if os.path.isfile(path):
            path = os.path.dirname(path)
        self._settings.paths.export_dir = path
        self.save()

    def get_canvas_defaults(self) -> CanvasSettings:
        return self._settings.canvas.to_canvas_settings()

    def set_canvas_defaults(self, canvas: CanvasSettings):
        """Remember the last canvas range/zoom for the next session."""
        self._settings.canvas = CanvasDefaults(range=canvas.range, zoom=canvas.zoom)
        self.save()

    def _get_settings_path(self) -> Path:
        """Get platform-specific settings directory."""
        if self._config_override:
            return Path(self._config_override)

        system = platform.system()

        if system == "Windows":
            base = os.environ.get("APPDATA", os.path.expanduser("~"))
            config_dir = Path(base) / self.APP_NAME
        elif system == "Darwin":  # macOS
            config_dir = Path.home() / "Library" / "Application Support" / self.APP_NAME
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
            config_dir = Path(xdg_config) / self.APP_NAME

        return config_dir / self.SETTINGS_FILE

    def _ensure_settings_dir(self):
        """Create settings directory if it doesn't exist."""
        self._settings_path.parent.mkdir(parents=True, exist_ok=True)

    def load(self) -> bool:
        """Load settings from file."""
        if not self._settings_path.exists():
            return False

        try:
            with open(self._settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._settings = AppSettings.from_dict(data)
            return True
        except (OSError, ValueError, TypeError) as e:
            logger.warning(f"Error loading settings: {e}")
            return False

    def save(self) -> bool:
        """Save settings to file."""
        try:
            self._ensure_settings_dir()
            with open(self._settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.error(f"Error saving settings: {e}")
            return False

    def reset(self):
        """Reset settings to defaults."""
        self._settings = AppSettings()
        self.save()

    def save_window_geometry(self, geometry: bytes, state: bytes):
        """Save window geometry and state."""
        self._settings.window_geometry = {
            "geometry": base64.b64encode(geometry).decode("ascii"),
            "state": base64.b64encode(state).decode("ascii"),
        }
        self.save()

    def get_window_geometry(self) -> tuple:
        """Get saved window geometry and state."""
        geo = self._settings.window_geometry
        if not geo:
            return None, None

        try:
            geometry = base64.b64decode(geo.get("geometry", ""))
            state = base64.b64decode(geo.get("state", ""))
            return geometry, state
        except ValueError:
            return None, None


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings(config_override: Optional[str] = None) -> SettingsManager:
    """
    Get the global settings manager instance.

    Args:
        config_override: Optional path to override config location.
                        Only used on first call to initialize.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager(config_override)
    return _settings_manager


def reset_settings_manager():
    """Reset the global settings manager (useful for testing)."""
    global _settings_manager
    _settings_manager = None
