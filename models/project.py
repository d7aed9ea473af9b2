"""
Project Model - a saved snapshot of a workbench session.

A project holds everything needed to restore the canvas exactly:
- The plotted shape and whether it is closed
- The active transformation mode
- The parameters of all four transformations (not just the active one)
- Canvas display settings

JSON layout (keys as persisted):
    {
      "id": 1718000000000,
      "date": "6/10/2024, 09:13:20",
      "points": [{"x": 0, "y": 0}, ...],
      "mode": "rotation",
      "isShapeClosed": true,
      "translation": {"dx": 0, "dy": 0},
      "reflection": {"axis": "x", "m": 1, "c": 0},
      "rotation": {"angle": 90, "center": null, "direction": "anticlockwise"},
      "enlargement": {"scale": 1, "center": null},
      "canvasSettings": {"range": 20, "zoom": 600}
    }
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .canvas import CanvasSettings
from .geometry import (
    Point, Shape, TransformationMode, TransformSpec,
    Translation, Reflection, Rotation, Enlargement,
)


# Reserved id of the "Empty Project" record that always exists
EMPTY_PROJECT_ID = 0

DATE_FORMAT = "%d/%m/%Y, %H:%M:%S"


def format_date(when: Optional[datetime] = None) -> str:
    """Display string stored alongside each project."""
    return (when or datetime.now()).strftime(DATE_FORMAT)


@dataclass
class Project:
    """Persisted workbench snapshot."""
    id: int
    date: str = ""
    points: Shape = ()
    mode: TransformationMode = TransformationMode.TRANSLATION
    is_shape_closed: bool = False
    translation: Translation = field(default_factory=Translation)
    reflection: Reflection = field(default_factory=Reflection)
    rotation: Rotation = field(default_factory=Rotation)
    enlargement: Enlargement = field(default_factory=Enlargement)
    canvas_settings: CanvasSettings = field(default_factory=CanvasSettings)

    @property
    def is_empty_project(self) -> bool:
        return self.id == EMPTY_PROJECT_ID

    @property
    def title(self) -> str:
        if self.is_empty_project:
            return "Empty Project"
        return f"{self.mode.title} #{self.id}"

    @property
    def active_spec(self) -> TransformSpec:
        """Parameters of the transformation selected by ``mode``."""
        return {
            TransformationMode.TRANSLATION: self.translation,
            TransformationMode.REFLECTION: self.reflection,
            TransformationMode.ROTATION: self.rotation,
            TransformationMode.ENLARGEMENT: self.enlargement,
        }[self.mode]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "date": self.date,
            "points": [p.to_dict() for p in self.points],
            "mode": self.mode.value,
            "isShapeClosed": self.is_shape_closed,
            "translation": self.translation.to_dict(),
            "reflection": self.reflection.to_dict(),
            "rotation": self.rotation.to_dict(),
            "enlargement": self.enlargement.to_dict(),
            "canvasSettings": self.canvas_settings.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        """
        Create from dictionary.

        Missing sections fall back to defaults; records saved before
        enlargement existed simply get the default enlargement.
        """
        try:
            mode = TransformationMode(data.get("mode", "translation"))
        except ValueError:
            mode = TransformationMode.TRANSLATION

        return cls(
            id=int(data["id"]),
            date=data.get("date", ""),
            points=tuple(Point.from_dict(p) for p in data.get("points", [])),
            mode=mode,
            is_shape_closed=bool(data.get("isShapeClosed", False)),
            translation=Translation.from_dict(data.get("translation") or {}),
            reflection=Reflection.from_dict(data.get("reflection") or {}),
            rotation=Rotation.from_dict(data.get("rotation") or {}),
            enlargement=Enlargement.from_dict(data.get("enlargement") or {}),
            canvas_settings=CanvasSettings.from_dict(data.get("canvasSettings") or {}),
        )


def create_empty_project(when: Optional[datetime] = None) -> Project:
    """The reset target: no points, every transformation at its default."""
    return Project(
        id=EMPTY_PROJECT_ID,
        date=format_date(when),
    )


def sort_projects(projects: List[Project]) -> List[Project]:
    """Newest first; the empty project (id 0) naturally sorts last."""
    return sorted(projects, key=lambda p: p.id, reverse=True)
