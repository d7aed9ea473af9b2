"""
Unit tests for the shape editor.

Tests:
- Adding, deleting and closing via canvas clicks
- Center picking for rotation and enlargement
- Mode change, reset and clear
- Status bar hints
"""

import pytest

from tests.conftest import pixel_of
from models.canvas import CanvasSettings
from models.geometry import (
    Point, TransformationMode, Translation, Reflection, ReflectionAxis,
    Rotation, Enlargement,
)
from services.shape_editor import ShapeEditor, ClickAction, status_text


def click(editor: ShapeEditor, x: float, y: float, dx: float = 0, dy: float = 0) -> ClickAction:
    """Click the canvas at grid point (x, y), offset by (dx, dy) pixels."""
    px, py = pixel_of(editor.session, x, y)
    return editor.handle_click(px + dx, py + dy)


class TestPlotting:
    """Tests for adding and deleting points."""

    def test_click_adds_snapped_point(self, editor, session):
        """Test that a click adds the nearest grid point."""
        assert click(editor, 2, 3, dx=4, dy=-3) == ClickAction.ADDED
        assert session.points == (Point(2, 3),)
        assert not session.is_shape_closed

    def test_points_keep_click_order(self, editor, session):
        """Test that points are kept in click order."""
        for x, y in [(1, 1), (5, 1), (5, 5)]:
            click(editor, x, y)
        assert session.points == (Point(1, 1), Point(5, 1), Point(5, 5))

    def test_click_on_existing_point_deletes_it(self, editor, session):
        """Test deleting a point by clicking it."""
        click(editor, 2, 3)
        click(editor, 5, 5)
        assert click(editor, 5, 5, dx=5, dy=5) == ClickAction.DELETED
        assert session.points == (Point(2, 3),)

    def test_click_beyond_tolerance_adds(self, editor, session):
        """Test that a click two units away adds a point."""
        click(editor, 0, 0)
        # 30 px away is two grid units at the default zoom
        assert click(editor, 2, 0) == ClickAction.ADDED
        assert len(session.points) == 2

    def test_adjacent_click_deletes_at_default_zoom(self, editor, session):
        """Test that one grid unit (15 px at the default zoom) is within delete reach."""
        assert session.canvas_settings.unit == 15
        click(editor, 0, 0)
        assert click(editor, 1, 0) == ClickAction.DELETED
        assert session.points == ()

    def test_first_point_deleted_with_fewer_than_three(self, editor, session):
        """Test that the first point is deleted while closing is not possible."""
        click(editor, 0, 0)
        click(editor, 4, 0)
        assert click(editor, 0, 0) == ClickAction.DELETED
        assert session.points == (Point(4, 0),)

    def test_emits_changed(self, editor, session):
        """Test that a click notifies listeners."""
        events = []
        session.changed.connect(lambda: events.append("changed"))
        click(editor, 1, 1)
        assert events


class TestClosing:
    """Tests for closing the shape."""

    @pytest.fixture
    def open_triangle(self, editor, session):
        for x, y in [(0, 0), (4, 0), (4, 4)]:
            click(editor, x, y)
        return session

    def test_click_on_first_point_closes(self, editor, open_triangle):
        """Test closing the shape at the first point."""
        assert click(editor, 0, 0, dx=3, dy=2) == ClickAction.CLOSED
        assert open_triangle.is_shape_closed
        assert len(open_triangle.points) == 3

    def test_closed_shape_ignores_clicks(self, editor, open_triangle):
        """Test that a closed shape ignores clicks."""
        click(editor, 0, 0)
        assert click(editor, 10, 10) == ClickAction.IGNORED
        assert click(editor, 4, 0) == ClickAction.IGNORED
        assert len(open_triangle.points) == 3

    def test_close_at_high_zoom_uses_grid_tolerance(self, editor, session):
        """Test closing within grid tolerance at high zoom."""
        session.canvas_settings = CanvasSettings(range=5, zoom=2000)
        for x, y in [(0, 0), (3, 0), (3, 3)]:
            click(editor, x, y)
        # 0.4 units = 80 px away, well beyond the pixel tolerance
        px, py = pixel_of(session, 0.4, 0)
        assert editor.handle_click(px, py) == ClickAction.CLOSED


class TestCenterPicking:
    """Tests for setting rotation / enlargement centers."""

    def test_sets_rotation_center(self, editor, closed_session):
        """Test picking the center of rotation."""
        editor.change_mode(TransformationMode.ROTATION)
        editor.start_center_pick()
        assert closed_session.picking_center

        assert click(editor, 3, -2) == ClickAction.CENTER_SET
        assert closed_session.rotation.center == Point(3, -2)
        assert not closed_session.picking_center

    def test_sets_enlargement_center(self, editor, closed_session):
        """Test picking the center of enlargement."""
        editor.change_mode(TransformationMode.ENLARGEMENT)
        editor.start_center_pick()
        click(editor, -1, 4)
        assert closed_session.enlargement.center == Point(-1, 4)

    def test_center_pick_on_open_shape_does_not_add(self, editor, session):
        """Test that picking a center adds no point."""
        click(editor, 1, 1)
        editor.change_mode(TransformationMode.ROTATION)
        editor.start_center_pick()
        assert click(editor, 8, 8) == ClickAction.CENTER_SET
        assert session.points == (Point(1, 1),)

    def test_no_center_pick_in_translation(self, editor, session):
        """Test that translation has no center."""
        editor.start_center_pick()
        assert not session.picking_center

    def test_reset_center(self, editor, closed_session):
        """Test clearing a picked center."""
        editor.change_mode(TransformationMode.ROTATION)
        editor.set_center(Point(2, 2))
        editor.set_center(None)
        assert closed_session.rotation.center is None


class TestModeAndReset:
    """Tests for change_mode, reset and clear."""

    def test_change_mode_resets_new_mode(self, editor, session):
        """Test that a new mode starts from defaults."""
        session.set_spec(Reflection(axis=ReflectionAxis.CUSTOM, m=3, c=2))
        editor.change_mode(TransformationMode.REFLECTION)
        assert session.mode == TransformationMode.REFLECTION
        assert session.reflection == Reflection()

    def test_change_mode_keeps_other_specs(self, editor, session):
        """Test that other modes keep their parameters."""
        session.set_spec(Translation(dx=3, dy=1))
        editor.change_mode(TransformationMode.ROTATION)
        assert session.translation == Translation(dx=3, dy=1)

    def test_change_mode_cancels_picking(self, editor, session):
        """Test that changing mode cancels center picking."""
        editor.change_mode(TransformationMode.ROTATION)
        editor.start_center_pick()
        editor.change_mode(TransformationMode.ENLARGEMENT)
        assert not session.picking_center

    def test_reset_active_spec(self, editor, closed_session):
        """Test resetting the current transformation."""
        editor.change_mode(TransformationMode.ROTATION)
        closed_session.set_spec(Rotation(angle=90, center=Point(1, 1)))
        editor.reset()
        assert closed_session.rotation == Rotation()
        assert len(closed_session.points) == 3

    def test_clear(self, editor, closed_session):
        """Test clearing the shape."""
        editor.change_mode(TransformationMode.ENLARGEMENT)
        closed_session.set_spec(Enlargement(scale=3))
        editor.clear()
        assert closed_session.points == ()
        assert not closed_session.is_shape_closed
        assert closed_session.enlargement == Enlargement()


class TestStatusText:
    """Tests for status bar hints."""

    def test_empty(self, session):
        """Test the hint with no points."""
        assert status_text(session) == "Click anywhere on the grid to plot your first point."

    def test_plotting(self, editor, session):
        """Test the hint while plotting."""
        click(editor, 0, 0)
        click(editor, 2, 0)
        assert status_text(session) == (
            "Plotting point 3... Click near the first point to close the shape."
        )

    def test_closed(self, closed_session):
        """Test the hint for a closed shape."""
        assert status_text(closed_session) == "Shape closed! Use the controls to transform it."

    def test_picking_rotation_center(self, editor, closed_session):
        """Test the hint while picking a rotation center."""
        editor.change_mode(TransformationMode.ROTATION)
        editor.start_center_pick()
        assert status_text(closed_session) == (
            "Click anywhere on the canvas to set the center of rotation."
        )

    def test_picking_enlargement_center(self, editor, closed_session):
        """Test the hint while picking an enlargement center."""
        editor.change_mode(TransformationMode.ENLARGEMENT)
        editor.start_center_pick()
        assert status_text(closed_session) == (
            "Click anywhere on the canvas to set the center of enlargement."
        )

    def test_custom_reflection(self, editor, closed_session):
        """Test the hint for a custom reflection line."""
        editor.change_mode(TransformationMode.REFLECTION)
        closed_session.set_spec(Reflection(axis=ReflectionAxis.CUSTOM, m=2, c=3))
        assert status_text(closed_session) == (
            "Adjust 'm' and 'c' sliders to reflect across y=2x+3."
        )
