"""
Shape Renderer.

Renders the coordinate grid, shapes and transformation decorations to a
QPainter for use in:
- The main grid canvas
- PNG export
- Project browser thumbnails

This provides a unified rendering pipeline that both the canvas and the
exporter use, ensuring consistent appearance. The renderer only draws;
transformed points come from the transform engine.
"""

import math
from typing import Optional, Sequence

from PyQt6.QtCore import Qt, QRectF, QPointF
from PyQt6.QtGui import (
    QPainter, QColor, QPen, QBrush, QFont, QPainterPath, QPixmap, QImage,
)

from models.canvas import CanvasSettings
from models.geometry import (
    Point, TransformSpec, Reflection, ReflectionAxis, Rotation, Enlargement,
    point_label,
)
from models.project import Project
from services.transform_engine import apply_cached, is_applied, format_point


COLORS = {
    "background": QColor("#FFFFFF"),
    "grid": QColor("#f1f5f9"),            # Light slate
    "axis": QColor("#334155"),            # Dark slate
    "tick_label": QColor("#64748b"),      # Slate
    "original": QColor("#be185d"),        # Pink
    "transformed": QColor("#0ea5e9"),     # Sky blue
    "reflection_line": QColor("#607d8b"),
    "rotation_center": QColor("#9c27b0"), # Purple
    "enlargement_center": QColor("#009688"),  # Teal
    "thumbnail_axis": QColor("#e2e8f0"),
    "thumbnail_shape": QColor("#d81b60"),
}

# Tick labels are thinned to every other unit from this range upward
DENSE_RANGE = 15

POINT_RADIUS = 6
POINT_INNER_RADIUS = 2
CENTER_RADIUS = 8
THUMBNAIL_SIZE = 80


def _pt(settings: CanvasSettings, p: Point) -> QPointF:
    x, y = settings.to_pixel(p)
    return QPointF(x, y)


class ShapeRenderer:
    """
    Static utility class for rendering the workbench.

    Provides methods to:
    - Draw the axes and grid
    - Draw original and transformed shapes with point labels
    - Draw reflection lines and rotation/enlargement centers
    - Create thumbnails and off-screen images
    """

    @staticmethod
    def render_grid(painter: QPainter, settings: CanvasSettings):
        """Draw background, grid lines, axes, ticks and tick labels."""
        n = settings.range
        size = settings.zoom
        cx = cy = settings.center
        unit = settings.unit
        tick = max(4.0, unit * 0.15)

        painter.save()
        painter.fillRect(QRectF(0, 0, size, size), COLORS["background"])

        # Grid lines
        painter.setPen(QPen(COLORS["grid"], 1))
        for i in range(-n, n + 1):
            if i == 0:
                continue
            x = cx + i * unit
            y = cy - i * unit
            painter.drawLine(QPointF(x, 0), QPointF(x, size))
            painter.drawLine(QPointF(0, y), QPointF(size, y))

        # Main axes
        axis_pen = QPen(COLORS["axis"], 2)
        painter.setPen(axis_pen)
        painter.drawLine(QPointF(0, cy), QPointF(size, cy))
        painter.drawLine(QPointF(cx, 0), QPointF(cx, size))

        # Ticks and labels
        font = QFont()
        font.setPixelSize(max(10, size // 60))
        font.setBold(True)
        painter.setFont(font)
        fm = painter.fontMetrics()
        text_height = fm.height()

        for i in range(-n, n + 1):
            if i == 0:
                continue
            x = cx + i * unit
            y = cy - i * unit
            show_label = i % 2 == 0 or n < DENSE_RANGE

            painter.setPen(axis_pen)
            painter.drawLine(QPointF(x, cy - tick), QPointF(x, cy + tick))
            painter.drawLine(QPointF(cx - tick, y), QPointF(cx + tick, y))

            if show_label:
                painter.setPen(COLORS["tick_label"])
                text = str(i)
                width = fm.horizontalAdvance(text)
                # Below the x axis, centered on the tick
                painter.drawText(
                    QRectF(x - width, cy + tick + 4, width * 2, text_height),
                    Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
                    text,
                )
                # Left of the y axis, right-aligned
                painter.drawText(
                    QRectF(cx - tick - 4 - width * 2, y - text_height / 2, width * 2, text_height),
                    Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter,
                    text,
                )

        painter.setPen(COLORS["tick_label"])
        width = fm.horizontalAdvance("0")
        painter.drawText(
            QRectF(cx - 4 - width * 2, cy + 4, width * 2, text_height),
            Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignTop,
            "0",
        )
        painter.restore()

    @staticmethod
    def render_shape(painter: QPainter,
                     points: Sequence[Point],
                     settings: CanvasSettings,
                     color: QColor,
                     closed: bool,
                     fill: bool = True,
                     title: str = "",
                     show_labels: bool = True,
                     label_suffix: str = "",
                     show_coordinates: bool = False):
        """
        Render a polygon or polyline with dot markers.

        Args:
            painter: QPainter to render to
            points: Shape in grid coordinates
            settings: Canvas mapping
            color: Stroke, dot and label color
            closed: Close the path back to the first point (3+ points only)
            fill: Fill the interior with a translucent color
            title: Optional text centered above the shape
            show_labels: Letter each point (A, B, ...)
            label_suffix: Appended to each letter, e.g. "'" for A'
            show_coordinates: Append "(x, y)" to each label
        """
        if not points:
            return

        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        pixels = [_pt(settings, p) for p in points]
        path = QPainterPath(pixels[0])
        for px in pixels[1:]:
            path.lineTo(px)
        if closed and len(points) > 2:
            path.closeSubpath()

        if fill:
            fill_color = QColor(color)
            fill_color.setAlpha(0x30)
            painter.fillPath(path, QBrush(fill_color))

        pen = QPen(color, 3)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        painter.setPen(pen)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(path)

        label_font = QFont()
        label_font.setPixelSize(12)
        label_font.setBold(True)

        for i, (p, px) in enumerate(zip(points, pixels)):
            # Outer dot
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(color)
            painter.drawEllipse(px, POINT_RADIUS, POINT_RADIUS)
            # Inner dot
            painter.setBrush(COLORS["background"])
            painter.drawEllipse(px, POINT_INNER_RADIUS, POINT_INNER_RADIUS)

            if show_labels or show_coordinates:
                text = ""
                if show_labels:
                    text += point_label(i, label_suffix)
                if show_coordinates:
                    text += f" {format_point(p)}"
                ShapeRenderer._draw_outlined_text(
                    painter, QPointF(px.x() + 8, px.y() - 8), text, color, label_font
                )

        if title:
            ShapeRenderer._draw_title(painter, pixels, title, color)

        painter.restore()

    @staticmethod
    def render_center(painter: QPainter, center: Optional[Point],
                      settings: CanvasSettings, color: QColor):
        """Draw a rotation/enlargement center marker with its coordinates."""
        if center is None:
            return

        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        px = _pt(settings, center)

        painter.setBrush(color)
        painter.setPen(QPen(COLORS["background"], 2))
        painter.drawEllipse(px, CENTER_RADIUS, CENTER_RADIUS)

        font = QFont()
        font.setPixelSize(12)
        font.setBold(True)
        painter.setFont(font)
        text = format_point(center)
        width = painter.fontMetrics().horizontalAdvance(text)
        ShapeRenderer._draw_outlined_text(
            painter, QPointF(px.x() - width / 2, px.y() + 24), text, color, font
        )
        painter.restore()

    @staticmethod
    def render_reflection_line(painter: QPainter, m: float, c: float,
                               settings: CanvasSettings,
                               color: QColor = COLORS["reflection_line"]):
        """Draw the dashed mirror line y = m*x + c across the visible range."""
        n = settings.range
        start = _pt(settings, Point(-n, m * -n + c))
        end = _pt(settings, Point(n, m * n + c))

        painter.save()
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        pen = QPen(color, 2)
        pen.setDashPattern([4, 3])  # in pen widths: 8px dash, 6px gap
        painter.setPen(pen)
        painter.drawLine(start, end)
        painter.restore()

    @staticmethod
    def render_scene(painter: QPainter,
                     points: Sequence[Point],
                     closed: bool,
                     spec: TransformSpec,
                     settings: CanvasSettings,
                     show_labels: bool = True,
                     show_title: bool = True):
        """
        Render the full workbench: grid, original shape, decorations for
        the active transformation and, when it is applied, the
        transformed shape.
        """
        ShapeRenderer.render_grid(painter, settings)
        ShapeRenderer.render_shape(
            painter, points, settings, COLORS["original"], closed,
            title="Original" if show_title else "",
            show_labels=show_labels,
        )

        if isinstance(spec, Reflection) and spec.axis == ReflectionAxis.CUSTOM:
            ShapeRenderer.render_reflection_line(painter, spec.m, spec.c, settings)
        applied = is_applied(spec)
        if applied and isinstance(spec, Rotation):
            ShapeRenderer.render_center(painter, spec.center, settings, COLORS["rotation_center"])
        elif applied and isinstance(spec, Enlargement):
            ShapeRenderer.render_center(painter, spec.center, settings, COLORS["enlargement_center"])

        if applied and points:
            transformed = apply_cached(tuple(points), spec)
            ShapeRenderer.render_shape(
                painter, transformed, settings, COLORS["transformed"], closed,
                show_labels=show_labels, label_suffix="'",
            )

    @staticmethod
    def render_image(points: Sequence[Point], closed: bool, spec: TransformSpec,
                     settings: CanvasSettings, show_labels: bool = True,
                     show_title: bool = True) -> QImage:
        """Render the workbench off-screen at canvas size."""
        image = QImage(settings.zoom, settings.zoom, QImage.Format.Format_ARGB32)
        image.fill(COLORS["background"])

        painter = QPainter(image)
        ShapeRenderer.render_scene(painter, points, closed, spec, settings,
                                   show_labels, show_title)
        painter.end()
        return image

    @staticmethod
    def render_thumbnail(project: Project, size: int = THUMBNAIL_SIZE) -> QPixmap:
        """
        Create a preview pixmap for the project browser.

        Args:
            project: Project to preview
            size: Size of the square pixmap

        Returns:
            QPixmap with the axes and the project's original shape
        """
        pixmap = QPixmap(size, size)
        pixmap.fill(Qt.GlobalColor.transparent)

        painter = QPainter(pixmap)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        settings = CanvasSettings(range=project.canvas_settings.range, zoom=size)
        mid = settings.center
        painter.setPen(QPen(COLORS["thumbnail_axis"], 1))
        painter.drawLine(QPointF(0, mid), QPointF(size, mid))
        painter.drawLine(QPointF(mid, 0), QPointF(mid, size))

        points = project.points
        if points:
            pixels = [_pt(settings, p) for p in points]
            path = QPainterPath(pixels[0])
            for px in pixels[1:]:
                path.lineTo(px)
            if project.is_shape_closed:
                path.closeSubpath()

            painter.setPen(QPen(COLORS["thumbnail_shape"], 2))
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawPath(path)

            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(COLORS["thumbnail_shape"])
            for px in pixels:
                painter.drawEllipse(px, 1.5, 1.5)

        painter.end()
        return pixmap

    @staticmethod
    def _draw_outlined_text(painter: QPainter, pos: QPointF, text: str,
                            color: QColor, font: QFont):
        """Draw text with a white outline so it stays readable over grid lines."""
        path = QPainterPath()
        path.addText(pos, font, text)

        outline = QPen(QColor(255, 255, 255, 204), 3)
        outline.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        painter.setPen(outline)
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(path)

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(color)
        painter.drawPath(path)

    @staticmethod
    def _draw_title(painter: QPainter, pixels: Sequence[QPointF], title: str, color: QColor):
        """Draw the title centered 20px above the top of the shape."""
        min_x = min(p.x() for p in pixels)
        max_x = max(p.x() for p in pixels)
        min_y = min(p.y() for p in pixels)
        if not all(math.isfinite(v) for v in (min_x, max_x, min_y)):
            return

        font = QFont()
        font.setPixelSize(14)
        font.setBold(True)
        painter.setFont(font)
        width = painter.fontMetrics().horizontalAdvance(title)
        ShapeRenderer._draw_outlined_text(
            painter, QPointF((min_x + max_x) / 2 - width / 2, min_y - 20), title, color, font
        )
