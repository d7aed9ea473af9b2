"""
Canvas display settings and the grid <-> pixel mapping.

The canvas is a square ``zoom`` pixels wide showing grid coordinates
from ``-range`` to ``+range`` on both axes. Screen y grows downward, so
the y axis is inverted.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .geometry import Point


MIN_RANGE = 5
MAX_RANGE = 50
MIN_ZOOM = 400
MAX_ZOOM = 2000
ZOOM_STEP = 50


@dataclass(frozen=True)
class CanvasSettings:
    """Grid half-width and canvas pixel size."""
    range: int = 20
    zoom: int = 600

    @property
    def center(self) -> float:
        return self.zoom / 2

    @property
    def unit(self) -> float:
        """Pixels per grid unit."""
        return self.zoom / (2 * self.range)

    def to_pixel(self, p: Point) -> Tuple[float, float]:
        """Map a grid point to canvas pixel coordinates."""
        return (self.center + p.x * self.unit, self.center - p.y * self.unit)

    def from_pixel(self, px: float, py: float) -> Point:
        """Map canvas pixel coordinates back to (unsnapped) grid coordinates."""
        return Point((px - self.center) / self.unit, (self.center - py) / self.unit)

    def clamped(self) -> "CanvasSettings":
        """Settings limited to the ranges the sliders allow."""
        return CanvasSettings(
            range=max(MIN_RANGE, min(MAX_RANGE, int(self.range))),
            zoom=max(MIN_ZOOM, min(MAX_ZOOM, int(self.zoom))),
        )

    def to_dict(self) -> dict:
        return {"range": self.range, "zoom": self.zoom}

    @classmethod
    def from_dict(cls, data: dict) -> "CanvasSettings":
        return cls(
            range=int(data.get("range", 20)), zoom=int(data.get("zoom", 600))
        ).clamped()


def snap_to_grid(p: Point) -> Point:
    """Round half up to the nearest integer grid point."""
    return Point(math.floor(p.x + 0.5), math.floor(p.y + 0.5))
