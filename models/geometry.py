"""
Geometry data models.

Points, shapes and the four transformation parameter sets that the
transform engine understands. All of these are immutable: the UI builds
a new value on every change instead of editing one in place.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union


class TransformationMode(Enum):
    """Active transformation; the value is the persisted tag."""
    TRANSLATION = "translation"
    REFLECTION = "reflection"
    ROTATION = "rotation"
    ENLARGEMENT = "enlargement"

    @property
    def title(self) -> str:
        return self.value.capitalize()


class ReflectionAxis(Enum):
    """Mirror line for a reflection."""
    X = "x"              # Horizontal axis (y = 0)
    Y = "y"              # Vertical axis (x = 0)
    CUSTOM = "custom"    # y = m*x + c


class RotationDirection(Enum):
    CLOCKWISE = "clockwise"
    ANTICLOCKWISE = "anticlockwise"

    @property
    def opposite(self) -> "RotationDirection":
        if self is RotationDirection.CLOCKWISE:
            return RotationDirection.ANTICLOCKWISE
        return RotationDirection.CLOCKWISE


@dataclass(frozen=True)
class Point:
    """2D point in grid coordinates."""
    x: float = 0.0
    y: float = 0.0

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict) -> "Point":
        return cls(x=float(data.get("x", 0)), y=float(data.get("y", 0)))


ORIGIN = Point(0, 0)

# Ordered points; index i of a transformed shape corresponds to index i here.
Shape = Tuple[Point, ...]


@dataclass(frozen=True)
class Translation:
    """Move every point by (dx, dy)."""
    dx: float = 0
    dy: float = 0

    def to_dict(self) -> dict:
        return {"dx": self.dx, "dy": self.dy}

    @classmethod
    def from_dict(cls, data: dict) -> "Translation":
        return cls(dx=float(data.get("dx", 0)), dy=float(data.get("dy", 0)))


@dataclass(frozen=True)
class Reflection:
    """
    Mirror every point in a line.

    ``m`` and ``c`` only matter for ``ReflectionAxis.CUSTOM``, where the
    mirror line is y = m*x + c.
    """
    axis: ReflectionAxis = ReflectionAxis.X
    m: float = 1
    c: float = 0

    def to_dict(self) -> dict:
        return {"axis": self.axis.value, "m": self.m, "c": self.c}

    @classmethod
    def from_dict(cls, data: dict) -> "Reflection":
        try:
            axis = ReflectionAxis(data.get("axis", "x"))
        except ValueError:
            axis = ReflectionAxis.X
        return cls(axis=axis, m=float(data.get("m", 1)), c=float(data.get("c", 0)))


@dataclass(frozen=True)
class Rotation:
    """Rotate by ``angle`` degrees about ``center`` (origin when None)."""
    angle: float = 0
    center: Optional[Point] = None
    direction: RotationDirection = RotationDirection.ANTICLOCKWISE

    def to_dict(self) -> dict:
        return {
            "angle": self.angle,
            "center": self.center.to_dict() if self.center else None,
            "direction": self.direction.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Rotation":
        center = data.get("center")
        try:
            direction = RotationDirection(data.get("direction", "anticlockwise"))
        except ValueError:
            direction = RotationDirection.ANTICLOCKWISE
        return cls(
            angle=float(data.get("angle", 0)),
            center=Point.from_dict(center) if center else None,
            direction=direction,
        )


@dataclass(frozen=True)
class Enlargement:
    """Scale distances from ``center`` (origin when None) by ``scale``."""
    scale: float = 1
    center: Optional[Point] = None

    def to_dict(self) -> dict:
        return {
            "scale": self.scale,
            "center": self.center.to_dict() if self.center else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Enlargement":
        center = data.get("center")
        return cls(
            scale=float(data.get("scale", 1)),
            center=Point.from_dict(center) if center else None,
        )


TransformSpec = Union[Translation, Reflection, Rotation, Enlargement]

SPEC_TYPES = {
    TransformationMode.TRANSLATION: Translation,
    TransformationMode.REFLECTION: Reflection,
    TransformationMode.ROTATION: Rotation,
    TransformationMode.ENLARGEMENT: Enlargement,
}


def point_label(index: int, suffix: str = "") -> str:
    """Letter label for the point at ``index`` (A, B, C, ...)."""
    return chr(65 + index) + suffix
