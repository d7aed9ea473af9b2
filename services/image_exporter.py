"""
Image Exporter.

Writes a PNG of the canvas framed by a white border with a centered
title naming the transformation, e.g. "Rotation of Shapes".
"""

import logging
from pathlib import Path

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QImage, QPainter, QColor, QFont

from models.geometry import TransformationMode

logger = logging.getLogger(__name__)


EXPORT_PADDING = 60
TITLE_COLOR = QColor("#c2185b")
TITLE_FONT_SIZE = 24
TITLE_BASELINE = 40


class ExportError(Exception):
    """Raised when an exported image cannot be written."""


def export_filename(mode: TransformationMode, project_id: int) -> str:
    return f"{mode.value}-shape-{project_id}.png"


def export_title(mode: TransformationMode) -> str:
    return f"{mode.title} of Shapes"


def compose_export_image(snapshot: QImage, mode: TransformationMode) -> QImage:
    """
    Frame a canvas snapshot for export.

    Args:
        snapshot: Rendered canvas
        mode: Active transformation, used for the title

    Returns:
        New image EXPORT_PADDING pixels larger than ``snapshot`` on every side
    """
    width = snapshot.width() + EXPORT_PADDING * 2
    height = snapshot.height() + EXPORT_PADDING * 2

    image = QImage(width, height, QImage.Format.Format_ARGB32)
    image.fill(QColor("#ffffff"))

    painter = QPainter(image)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)
    painter.drawImage(EXPORT_PADDING, EXPORT_PADDING, snapshot)

    font = QFont()
    font.setPixelSize(TITLE_FONT_SIZE)
    font.setBold(True)
    painter.setFont(font)
    painter.setPen(TITLE_COLOR)

    # Center horizontally with the baseline at TITLE_BASELINE
    metrics = painter.fontMetrics()
    rect = QRectF(0, TITLE_BASELINE - metrics.ascent(), width, metrics.height())
    painter.drawText(
        rect,
        Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop,
        export_title(mode),
    )
    painter.end()
    return image


def export_png(snapshot: QImage, mode: TransformationMode, project_id: int,
               directory: Path) -> Path:
    """
    Write the framed snapshot as ``{mode}-shape-{id}.png`` in ``directory``.

    Returns:
        Path of the written file

    Raises:
        ExportError: if the directory cannot be created or the write fails
    """
    directory = Path(directory)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ExportError(f"Cannot create export directory {directory}: {e}") from e

    path = directory / export_filename(mode, project_id)
    image = compose_export_image(snapshot, mode)
    if not image.save(str(path), "PNG"):
        raise ExportError(f"Failed to write {path}")

    logger.info(f"Exported {path}")
    return path
