"""Services package."""

from .transform_engine import (
    translate,
    reflect,
    rotate,
    enlarge,
    apply,
    apply_cached,
    is_applied,
    default_spec,
    mode_of,
    describe,
    format_coordinate,
    format_point,
    has_moved,
)
from .shape_editor import ShapeEditor, ClickAction, status_text
from .project_store import ProjectStore, STORAGE_KEY
from .image_exporter import ExportError, export_png, export_filename, compose_export_image
from .settings_manager import (
    SettingsManager,
    AppSettings,
    CanvasDefaults,
    UISettings,
    PathSettings,
    get_settings,
    reset_settings_manager,
)

__all__ = [
    # Transformations
    "translate",
    "reflect",
    "rotate",
    "enlarge",
    "apply",
    "apply_cached",
    "is_applied",
    "default_spec",
    "mode_of",
    "describe",
    "format_coordinate",
    "format_point",
    "has_moved",
    # Shape editing
    "ShapeEditor",
    "ClickAction",
    "status_text",
    # Persistence
    "ProjectStore",
    "STORAGE_KEY",
    # Export
    "ExportError",
    "export_png",
    "export_filename",
    "compose_export_image",
    # Settings
    "SettingsManager",
    "AppSettings",
    "CanvasDefaults",
    "UISettings",
    "PathSettings",
    "get_settings",
    "reset_settings_manager",
]
