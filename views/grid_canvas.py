"""
Grid canvas for plotting and transforming shapes.

Draws the coordinate grid with the original and transformed shapes and
routes mouse clicks to the shape editor. The widget is exactly
``zoom`` x ``zoom`` pixels; the main window puts it in a scroll area.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QMouseEvent, QImage
from PyQt6.QtWidgets import QWidget, QSizePolicy

from models.session import SessionState
from services.settings_manager import UISettings
from services.shape_editor import ShapeEditor, ClickAction
from views.shape_renderer import ShapeRenderer

# Setup logger for this module
logger = logging.getLogger(__name__)


class GridCanvas(QWidget):
    """
    Canvas widget showing the workbench grid.

    Redraws whenever the session changes.
    """

    # Signals
    canvasClicked = pyqtSignal(object)  # ClickAction

    def __init__(self, session: SessionState, editor: ShapeEditor,
                 ui_settings: Optional[UISettings] = None, parent=None):
        super().__init__(parent)
        self.session = session
        self.editor = editor
        self.ui_settings = ui_settings or UISettings()

        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setCursor(Qt.CursorShape.CrossCursor)
        self._apply_size()

        self.session.changed.connect(self.update)
        self.session.canvasSettingsChanged.connect(lambda _: self._apply_size())

    def _apply_size(self):
        zoom = self.session.canvas_settings.zoom
        self.setFixedSize(zoom, zoom)

    def paintEvent(self, event):
        """Draw grid, shapes and decorations."""
        painter = QPainter(self)
        if not painter.isActive():
            return
        session = self.session
        ShapeRenderer.render_scene(
            painter,
            session.points,
            session.is_shape_closed,
            session.active_spec,
            session.canvas_settings,
            show_labels=self.ui_settings.show_point_labels,
            show_title=self.ui_settings.show_original_title,
        )
        painter.end()

    def mousePressEvent(self, event: QMouseEvent):
        """Add, delete or close points, or set a transformation center."""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.position()
        action = self.editor.handle_click(pos.x(), pos.y())
        if action != ClickAction.IGNORED:
            logger.debug(f"Canvas click at ({pos.x():.0f}, {pos.y():.0f}): {action.name}")
        self.canvasClicked.emit(action)

    def snapshot(self) -> QImage:
        """Render the current canvas off-screen for export."""
        session = self.session
        return ShapeRenderer.render_image(
            session.points,
            session.is_shape_closed,
            session.active_spec,
            session.canvas_settings,
            show_labels=self.ui_settings.show_point_labels,
            show_title=self.ui_settings.show_original_title,
        )
