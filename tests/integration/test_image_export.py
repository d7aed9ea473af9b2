"""
Integration tests for canvas rendering and PNG export.

Uses an offscreen QApplication; no display is required.
"""

import pytest
from PyQt6.QtGui import QImage, QColor

from models.canvas import CanvasSettings
from models.geometry import TransformationMode, Rotation, Translation
from models.project import Project
from services.image_exporter import (
    EXPORT_PADDING, ExportError, export_png, export_filename, export_title,
    compose_export_image,
)
from views.shape_renderer import ShapeRenderer, THUMBNAIL_SIZE


@pytest.fixture
def snapshot(qapp, triangle) -> QImage:
    return ShapeRenderer.render_image(
        triangle, True, Rotation(angle=90), CanvasSettings(range=10, zoom=400)
    )


class TestRenderer:
    """Tests for the shape renderer."""

    def test_image_matches_zoom(self, snapshot):
        """Test that the rendered image is zoom pixels square."""
        assert not snapshot.isNull()
        assert snapshot.width() == 400
        assert snapshot.height() == 400

    def test_empty_shape_renders(self, qapp):
        """Test rendering a grid with no points."""
        image = ShapeRenderer.render_image((), False, Translation(), CanvasSettings())
        assert image.width() == 600

    def test_thumbnail_size(self, qapp, triangle):
        """Test the project browser thumbnail size."""
        project = Project(id=1, points=triangle, is_shape_closed=True)
        pixmap = ShapeRenderer.render_thumbnail(project)
        assert pixmap.width() == THUMBNAIL_SIZE
        assert pixmap.height() == THUMBNAIL_SIZE


class TestExportNames:
    """Tests for export file names and titles."""

    def test_filename(self):
        """Test the exported image file name."""
        assert export_filename(TransformationMode.ROTATION, 42) == "rotation-shape-42.png"

    def test_title(self):
        """Test the title drawn above the exported image."""
        assert export_title(TransformationMode.ENLARGEMENT) == "Enlargement of Shapes"


class TestExport:
    """Tests for composing and writing the PNG."""

    def test_padding_added(self, snapshot):
        """Test that the export is padded on every side."""
        framed = compose_export_image(snapshot, TransformationMode.ROTATION)
        assert framed.width() == snapshot.width() + 2 * EXPORT_PADDING
        assert framed.height() == snapshot.height() + 2 * EXPORT_PADDING

    def test_border_is_white(self, snapshot):
        """Test that the padding is filled white."""
        framed = compose_export_image(snapshot, TransformationMode.ROTATION)
        assert framed.pixelColor(2, framed.height() - 2) == QColor("#ffffff")

    def test_writes_png(self, snapshot, temp_dir):
        """Test writing the PNG file to disk."""
        path = export_png(snapshot, TransformationMode.ROTATION, 42, temp_dir / "exports")
        assert path == temp_dir / "exports" / "rotation-shape-42.png"
        assert path.exists()

        written = QImage(str(path))
        assert written.width() == 400 + 120
        assert written.height() == 400 + 120

    def test_unwritable_directory_raises(self, snapshot, temp_dir):
        """Test that a failed write raises ExportError."""
        blocker = temp_dir / "not_a_dir"
        blocker.write_text("file", encoding="utf-8")
        with pytest.raises(ExportError):
            export_png(snapshot, TransformationMode.TRANSLATION, 1, blocker)
