"""
Coordinate table dialog.

Lists each point of the shape next to its transformed image.
"""

from typing import Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QLabel, QTableWidget, QTableWidgetItem,
    QHeaderView, QDialogButtonBox, QAbstractItemView,
)

from models.geometry import Point, TransformSpec, point_label
from services.transform_engine import apply_cached, format_point, has_moved, describe


CHANGED_BACKGROUND = QColor("#E0F2FE")
CHANGED_FOREGROUND = QColor("#0369A1")


class CoordinateTableDialog(QDialog):
    """Read-only table of original and transformed coordinates."""

    HEADERS = ["Point", "Original", "Transformed"]

    def __init__(self, points: Sequence[Point], spec: TransformSpec, parent=None):
        super().__init__(parent)
        self._points = tuple(points)
        self._spec = spec
        self._setup_ui()
        self._populate()

    def _setup_ui(self):
        self.setWindowTitle("Coordinates")
        self.setMinimumSize(420, 360)

        layout = QVBoxLayout(self)

        self._summary_label = QLabel(describe(self._spec))
        self._summary_label.setStyleSheet("font-weight: bold; color: #374151;")
        layout.addWidget(self._summary_label)

        self._table = QTableWidget(0, len(self.HEADERS))
        self._table.setHorizontalHeaderLabels(self.HEADERS)
        self._table.verticalHeader().setVisible(False)
        self._table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self._table.setSelectionMode(QAbstractItemView.SelectionMode.NoSelection)
        self._table.setAlternatingRowColors(True)
        header = self._table.horizontalHeader()
        header.setSectionResizeMode(0, QHeaderView.ResizeMode.ResizeToContents)
        header.setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        header.setSectionResizeMode(2, QHeaderView.ResizeMode.Stretch)
        layout.addWidget(self._table)

        self._empty_label = QLabel("Plot some points on the grid to see their coordinates.")
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._empty_label.setStyleSheet("color: #9CA3AF; font-style: italic; padding: 24px;")
        layout.addWidget(self._empty_label)

        note = QLabel("Values are rounded to 2 decimal places.")
        note.setStyleSheet("color: #6B7280; font-size: 11px;")
        layout.addWidget(note)

        button_box = QDialogButtonBox(QDialogButtonBox.StandardButton.Close)
        button_box.rejected.connect(self.reject)
        layout.addWidget(button_box)

    def _populate(self):
        points = self._points
        has_points = bool(points)
        self._table.setVisible(has_points)
        self._empty_label.setVisible(not has_points)
        if not has_points:
            return

        transformed = apply_cached(points, self._spec)
        self._table.setRowCount(len(points))
        bold = QFont()
        bold.setBold(True)

        for row, (original, moved) in enumerate(zip(points, transformed)):
            label_item = QTableWidgetItem(point_label(row))
            label_item.setFont(bold)
            label_item.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
            self._table.setItem(row, 0, label_item)
            self._table.setItem(row, 1, QTableWidgetItem(format_point(original)))

            moved_item = QTableWidgetItem(format_point(moved))
            if has_moved(original, moved):
                moved_item.setBackground(CHANGED_BACKGROUND)
                moved_item.setForeground(CHANGED_FOREGROUND)
                moved_item.setFont(bold)
            self._table.setItem(row, 2, moved_item)

    def row_count(self) -> int:
        return self._table.rowCount() if self._points else 0

    def cell_text(self, row: int, column: int) -> str:
        item = self._table.item(row, column)
        return item.text() if item else ""
