"""
Models package.

This package contains all data models for the geometry workbench.

- Geometry values (Point, the four transformation specs)
- Canvas display settings and pixel mapping
- Saved projects
- Observable session state
"""

from .geometry import (
    TransformationMode,
    ReflectionAxis,
    RotationDirection,
    Point,
    ORIGIN,
    Shape,
    Translation,
    Reflection,
    Rotation,
    Enlargement,
    TransformSpec,
    SPEC_TYPES,
    point_label,
)
from .canvas import (
    CanvasSettings,
    MIN_RANGE,
    MAX_RANGE,
    MIN_ZOOM,
    MAX_ZOOM,
    ZOOM_STEP,
    snap_to_grid,
)
from .project import (
    Project,
    EMPTY_PROJECT_ID,
    DATE_FORMAT,
    format_date,
    create_empty_project,
    sort_projects,
)
from .session import SessionState


__all__ = [
    # Geometry
    "TransformationMode",
    "ReflectionAxis",
    "RotationDirection",
    "Point",
    "ORIGIN",
    "Shape",
    "Translation",
    "Reflection",
    "Rotation",
    "Enlargement",
    "TransformSpec",
    "SPEC_TYPES",
    "point_label",
    # Canvas
    "CanvasSettings",
    "MIN_RANGE",
    "MAX_RANGE",
    "MIN_ZOOM",
    "MAX_ZOOM",
    "ZOOM_STEP",
    "snap_to_grid",
    # Project
    "Project",
    "EMPTY_PROJECT_ID",
    "DATE_FORMAT",
    "format_date",
    "create_empty_project",
    "sort_projects",
    # Session
    "SessionState",
]
