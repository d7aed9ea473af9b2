"""
Shape Editor.

Turns canvas clicks into shape edits on the session state:
- Click on empty grid: add a point (snapped to integers)
- Click on an existing point of an open shape: delete it
- Click near the first point (3+ points, open shape): close the shape
- While picking a center: set the rotation/enlargement center
"""

import logging
import math
from dataclasses import replace
from enum import Enum, auto
from typing import Optional

from models.canvas import snap_to_grid
from models.geometry import (
    Point, Rotation, Enlargement, ReflectionAxis, TransformationMode,
)
from models.session import SessionState
from services.transform_engine import default_spec

logger = logging.getLogger(__name__)


class ClickAction(Enum):
    """What a canvas click did."""
    ADDED = auto()
    DELETED = auto()
    CLOSED = auto()
    CENTER_SET = auto()
    IGNORED = auto()


# Pixel radius around an existing point that counts as clicking it
DELETE_TOLERANCE_PX = 15

# Grid distance from the first point that closes the shape
CLOSE_TOLERANCE = 0.8

# Minimum number of points before a shape can be closed
MIN_CLOSE_POINTS = 3


class ShapeEditor:
    """Applies click and button actions to a SessionState."""

    def __init__(self, session: SessionState):
        self.session = session

    def handle_click(self, px: float, py: float) -> ClickAction:
        """
        Handle a click at canvas pixel coordinates.

        Args:
            px: Pixel x relative to the canvas top-left
            py: Pixel y relative to the canvas top-left

        Returns:
            The action taken
        """
        session = self.session
        settings = session.canvas_settings
        points = session.points
        closed = session.is_shape_closed

        pt = snap_to_grid(settings.from_pixel(px, py))

        # Closing takes priority over deleting the first point
        if len(points) >= MIN_CLOSE_POINTS and not closed:
            first = points[0]
            fx, fy = settings.to_pixel(first)
            if (math.hypot(px - fx, py - fy) <= DELETE_TOLERANCE_PX
                    or math.hypot(pt.x - first.x, pt.y - first.y) <= CLOSE_TOLERANCE):
                session.set_shape(points, True)
                logger.debug(f"Closed shape with {len(points)} points")
                return ClickAction.CLOSED

        if not closed:
            for i, existing in enumerate(points):
                ex, ey = settings.to_pixel(existing)
                if math.hypot(px - ex, py - ey) <= DELETE_TOLERANCE_PX:
                    session.set_shape(points[:i] + points[i + 1:], closed)
                    logger.debug(f"Deleted point {i} at {existing}")
                    return ClickAction.DELETED

        if session.picking_center and session.mode in (
            TransformationMode.ROTATION, TransformationMode.ENLARGEMENT
        ):
            self.set_center(pt)
            return ClickAction.CENTER_SET

        if not closed:
            session.set_shape(points + (pt,), False)
            logger.debug(f"Added point {pt}")
            return ClickAction.ADDED

        return ClickAction.IGNORED

    def set_center(self, center: Optional[Point]):
        """Set (or clear, with None) the active rotation/enlargement center."""
        spec = self.session.active_spec
        if not isinstance(spec, (Rotation, Enlargement)):
            return
        self.session.set_spec(replace(spec, center=center))
        self.session.picking_center = False
        logger.debug(f"{self.session.mode.title} center set to {center}")

    def start_center_pick(self):
        if self.session.mode in (TransformationMode.ROTATION, TransformationMode.ENLARGEMENT):
            self.session.picking_center = True

    def change_mode(self, mode: TransformationMode):
        """Switch mode; the new mode's parameters start from their defaults."""
        self.session.picking_center = False
        self.session.set_spec(default_spec(mode))
        self.session.mode = mode

    def reset(self):
        """Reset the active transformation to its defaults."""
        self.session.picking_center = False
        self.session.set_spec(default_spec(self.session.mode))

    def clear(self):
        """Remove every point, reopen the shape and reset the transformation."""
        self.session.set_shape((), False)
        self.reset()


def status_text(session: SessionState) -> str:
    """Status bar hint for the current session state."""
    points = session.points
    if not points:
        return "Click anywhere on the grid to plot your first point."
    if not session.is_shape_closed:
        return (f"Plotting point {len(points) + 1}... "
                "Click near the first point to close the shape.")

    mode = session.mode
    if session.picking_center and mode == TransformationMode.ROTATION:
        return "Click anywhere on the canvas to set the center of rotation."
    if session.picking_center and mode == TransformationMode.ENLARGEMENT:
        return "Click anywhere on the canvas to set the center of enlargement."
    if mode == TransformationMode.REFLECTION:
        reflection = session.reflection
        if reflection.axis == ReflectionAxis.CUSTOM:
            return (f"Adjust 'm' and 'c' sliders to reflect across "
                    f"y={reflection.m:.0f}x+{reflection.c:.0f}.")
    return "Shape closed! Use the controls to transform it."
