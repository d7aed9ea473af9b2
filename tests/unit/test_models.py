"""
Unit tests for geometry and canvas model classes.

Tests:
- Point and spec value semantics
- Enum tags and helpers
- Canvas pixel mapping and clamping
- Grid snapping
"""

import dataclasses
import pytest

from models.geometry import (
    Point, ORIGIN, TransformationMode, ReflectionAxis, RotationDirection,
    Translation, Reflection, Rotation, Enlargement, SPEC_TYPES, point_label,
)
from models.canvas import (
    CanvasSettings, snap_to_grid, MIN_RANGE, MAX_RANGE, MIN_ZOOM, MAX_ZOOM,
)


class TestPoint:
    """Tests for Point."""

    def test_defaults_to_origin(self):
        """Test the default point."""
        assert Point() == ORIGIN

    def test_immutable(self):
        """Test that points cannot be modified."""
        p = Point(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5

    def test_hashable(self):
        """Test using points as dict keys."""
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2

    def test_to_tuple(self):
        """Test converting a point to a tuple."""
        assert Point(3, -4).to_tuple() == (3, -4)


class TestEnums:
    """Tests for mode and option enums."""

    def test_mode_titles(self):
        """Test mode display titles."""
        assert TransformationMode.TRANSLATION.title == "Translation"
        assert TransformationMode.ENLARGEMENT.title == "Enlargement"

    def test_mode_tags(self):
        """Test the stored mode tags."""
        assert [m.value for m in TransformationMode] == [
            "translation", "reflection", "rotation", "enlargement"
        ]

    def test_reflection_axis_tags(self):
        """Test the stored reflection axis tags."""
        assert ReflectionAxis("custom") == ReflectionAxis.CUSTOM

    def test_direction_opposite(self):
        """Test reversing the rotation direction."""
        assert RotationDirection.CLOCKWISE.opposite == RotationDirection.ANTICLOCKWISE
        assert RotationDirection.ANTICLOCKWISE.opposite == RotationDirection.CLOCKWISE

    def test_spec_types_cover_every_mode(self):
        """Test that every mode has a spec type."""
        assert set(SPEC_TYPES) == set(TransformationMode)


class TestSpecs:
    """Tests for transformation spec defaults."""

    def test_defaults(self):
        """Test default transformation parameters."""
        assert Translation() == Translation(dx=0, dy=0)
        assert Reflection().axis == ReflectionAxis.X
        assert Reflection().m == 1
        assert Rotation().center is None
        assert Rotation().direction == RotationDirection.ANTICLOCKWISE
        assert Enlargement().scale == 1

    def test_replace_builds_new_value(self):
        """Test that replace() leaves the original spec alone."""
        spec = Rotation(angle=30)
        moved = dataclasses.replace(spec, center=Point(1, 1))
        assert spec.center is None
        assert moved.center == Point(1, 1)
        assert moved.angle == 30


class TestPointLabel:
    """Tests for point letters."""

    def test_letters(self):
        """Test point letters."""
        assert point_label(0) == "A"
        assert point_label(2) == "C"

    def test_suffix(self):
        """Test point letters with a prime suffix."""
        assert point_label(1, "'") == "B'"


class TestCanvasSettings:
    """Tests for the grid <-> pixel mapping."""

    def test_defaults(self):
        """Test default canvas settings."""
        settings = CanvasSettings()
        assert settings.range == 20
        assert settings.zoom == 600
        assert settings.unit == 15
        assert settings.center == 300

    def test_origin_maps_to_center(self):
        """Test that the origin is at the canvas center."""
        assert CanvasSettings().to_pixel(ORIGIN) == (300, 300)

    def test_y_axis_inverted(self):
        """Test that positive y is drawn upward."""
        px, py = CanvasSettings().to_pixel(Point(2, 3))
        assert px == 330
        assert py == 255

    def test_round_trip(self):
        """Test mapping a point to pixels and back."""
        settings = CanvasSettings(range=10, zoom=800)
        p = Point(-3, 7)
        assert settings.from_pixel(*settings.to_pixel(p)) == p

    def test_clamped(self):
        """Test clamping to the slider limits."""
        assert CanvasSettings(range=1, zoom=100).clamped() == CanvasSettings(MIN_RANGE, MIN_ZOOM)
        assert CanvasSettings(range=99, zoom=9999).clamped() == CanvasSettings(MAX_RANGE, MAX_ZOOM)
        assert CanvasSettings(range=12, zoom=700).clamped() == CanvasSettings(12, 700)


class TestSnapToGrid:
    """Tests for grid snapping."""

    def test_rounds_to_nearest(self):
        """Test snapping to the nearest grid point."""
        assert snap_to_grid(Point(1.4, -2.6)) == Point(1, -3)

    def test_half_rounds_up(self):
        """Test that halves round up."""
        assert snap_to_grid(Point(0.5, -0.5)) == Point(1, 0)
        assert snap_to_grid(Point(2.5, -1.5)) == Point(3, -1)
