"""
Transform Panel Widget.

Mode selector plus the parameter controls for each transformation:
- Translation: X/Y move sliders
- Reflection: X-axis / Y-axis / custom line with slope and intercept
- Rotation: angle slider, direction, center picking
- Enlargement: scale factor slider, center picking

Slider ranges clamp every parameter; each change builds a new spec and
hands it to the session.
"""

from dataclasses import replace
from typing import Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QHBoxLayout, QVBoxLayout, QPushButton, QSlider, QLabel,
    QFrame, QStackedWidget, QButtonGroup,
)

from models.canvas import CanvasSettings
from models.geometry import (
    TransformationMode, Reflection, ReflectionAxis, Rotation, RotationDirection,
    Translation, Enlargement,
)
from models.session import SessionState
from services.shape_editor import ShapeEditor
from services.transform_engine import format_point


# Extra translation room beyond the visible grid
TRANSLATION_MARGIN = 40

MAX_ANGLE = 360
MAX_SCALE = 10.0
SCALE_STEPS_PER_UNIT = 10  # slider step 0.1

MODE_ICONS = {
    TransformationMode.TRANSLATION: "⇄",
    TransformationMode.REFLECTION: "⇋",
    TransformationMode.ROTATION: "↻",
    TransformationMode.ENLARGEMENT: "⤢",
}

MODE_COLORS = {
    TransformationMode.TRANSLATION: "#3B82F6",
    TransformationMode.REFLECTION: "#10B981",
    TransformationMode.ROTATION: "#F97316",
    TransformationMode.ENLARGEMENT: "#8B5CF6",
}


class SliderControl(QWidget):
    """Labelled horizontal slider with a value read-out."""

    valueChanged = pyqtSignal(int)

    def __init__(self, label: str, minimum: int, maximum: int, step: int = 1,
                 formatter=str, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._formatter = formatter

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        header = QHBoxLayout()
        name_label = QLabel(label)
        name_label.setStyleSheet("font-weight: bold; color: #4B5563; font-size: 12px;")
        header.addWidget(name_label)
        header.addStretch()
        self._value_label = QLabel()
        self._value_label.setStyleSheet("""
            font-family: monospace;
            font-weight: bold;
            color: #2563EB;
            background: #EFF6FF;
            border-radius: 4px;
            padding: 2px 6px;
        """)
        header.addWidget(self._value_label)
        layout.addLayout(header)

        self._slider = QSlider(Qt.Orientation.Horizontal)
        self._slider.setRange(minimum, maximum)
        self._slider.setSingleStep(step)
        self._slider.setPageStep(step)
        self._slider.valueChanged.connect(self._on_value_changed)
        layout.addWidget(self._slider)

        self._update_label(self._slider.value())

    @property
    def slider(self) -> QSlider:
        return self._slider

    def value(self) -> int:
        return self._slider.value()

    def set_value(self, value: int):
        """Set without emitting valueChanged."""
        self._slider.blockSignals(True)
        self._slider.setValue(int(round(value)))
        self._slider.blockSignals(False)
        self._update_label(self._slider.value())

    def set_range(self, minimum: int, maximum: int):
        self._slider.blockSignals(True)
        self._slider.setRange(minimum, maximum)
        self._slider.blockSignals(False)
        self._update_label(self._slider.value())

    def _on_value_changed(self, value: int):
        self._update_label(value)
        self.valueChanged.emit(value)

    def _update_label(self, value: int):
        self._value_label.setText(self._formatter(value))


def _toggle_button(text: str) -> QPushButton:
    button = QPushButton(text)
    button.setCheckable(True)
    button.setCursor(Qt.CursorShape.PointingHandCursor)
    return button


class TransformPanel(QFrame):
    """
    Mode buttons and a stacked page of parameter controls per mode.
    """

    def __init__(self, session: SessionState, editor: ShapeEditor,
                 parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.session = session
        self.editor = editor
        self._setup_ui()
        self._connect_signals()
        self._sync_from_session()

    def _setup_ui(self):
        self.setStyleSheet("""
            TransformPanel {
                background: white;
                border: 1px solid #E5E7EB;
                border-radius: 12px;
            }
            QPushButton {
                background: #F9FAFB;
                color: #6B7280;
                border: 2px solid transparent;
                border-radius: 8px;
                padding: 8px 12px;
                font-weight: bold;
            }
            QPushButton:hover {
                background: #F3F4F6;
            }
            QPushButton:checked {
                background: #EFF6FF;
                color: #1D4ED8;
                border-color: #3B82F6;
            }
            QSlider::groove:horizontal {
                height: 6px;
                background: #E5E7EB;
                border-radius: 3px;
            }
            QSlider::handle:horizontal {
                width: 14px;
                height: 14px;
                margin: -4px 0;
                background: #2563EB;
                border-radius: 7px;
            }
            QSlider::sub-page:horizontal {
                background: #93C5FD;
                border-radius: 3px;
            }
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(12)

        # Mode selector
        mode_layout = QHBoxLayout()
        mode_layout.setSpacing(8)
        self._mode_group = QButtonGroup(self)
        self._mode_group.setExclusive(True)
        self._mode_buttons = {}
        for mode in TransformationMode:
            button = _toggle_button(f"{MODE_ICONS[mode]}  {mode.title}")
            button.setToolTip(f"{mode.title} mode")
            self._mode_group.addButton(button)
            self._mode_buttons[mode] = button
            mode_layout.addWidget(button)
        layout.addLayout(mode_layout)

        # Per-mode controls
        self._stack = QStackedWidget()
        self._pages = {
            TransformationMode.TRANSLATION: self._create_translation_page(),
            TransformationMode.REFLECTION: self._create_reflection_page(),
            TransformationMode.ROTATION: self._create_rotation_page(),
            TransformationMode.ENLARGEMENT: self._create_enlargement_page(),
        }
        for page in self._pages.values():
            self._stack.addWidget(page)
        layout.addWidget(self._stack)

        self._apply_ranges(self.session.canvas_settings)

    def _create_translation_page(self) -> QWidget:
        page = QWidget()
        layout = QHBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)

        self._dx_slider = SliderControl("X Move", -60, 60)
        self._dy_slider = SliderControl("Y Move", -60, 60)
        layout.addWidget(self._dx_slider)
        layout.addWidget(self._dy_slider)
        return page

    def _create_reflection_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)

        axis_layout = QHBoxLayout()
        self._axis_group = QButtonGroup(self)
        self._axis_buttons = {
            ReflectionAxis.X: _toggle_button("X-Axis"),
            ReflectionAxis.Y: _toggle_button("Y-Axis"),
            ReflectionAxis.CUSTOM: _toggle_button("y = mx + c"),
        }
        for button in self._axis_buttons.values():
            self._axis_group.addButton(button)
            axis_layout.addWidget(button)
        layout.addLayout(axis_layout)

        self._line_controls = QWidget()
        line_layout = QHBoxLayout(self._line_controls)
        line_layout.setContentsMargins(0, 0, 0, 0)
        line_layout.setSpacing(16)
        self._m_slider = SliderControl("Slope (m)", -20, 20)
        self._c_slider = SliderControl("Intercept (c)", -20, 20)
        line_layout.addWidget(self._m_slider)
        line_layout.addWidget(self._c_slider)
        layout.addWidget(self._line_controls)
        return page

    def _create_rotation_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)

        self._angle_slider = SliderControl("Angle", 0, MAX_ANGLE, formatter=lambda v: f"{v}°")
        layout.addWidget(self._angle_slider)

        row = QHBoxLayout()
        self._direction_group = QButtonGroup(self)
        self._direction_buttons = {
            RotationDirection.ANTICLOCKWISE: _toggle_button("↺ Anticlockwise"),
            RotationDirection.CLOCKWISE: _toggle_button("↻ Clockwise"),
        }
        for button in self._direction_buttons.values():
            self._direction_group.addButton(button)
            row.addWidget(button)
        row.addStretch()
        self._rotation_center_btn = QPushButton("Set Center")
        self._rotation_reset_center_btn = QPushButton("Reset Center")
        row.addWidget(self._rotation_center_btn)
        row.addWidget(self._rotation_reset_center_btn)
        layout.addLayout(row)

        self._rotation_center_label = QLabel()
        self._rotation_center_label.setStyleSheet("color: #6B7280; font-size: 12px;")
        layout.addWidget(self._rotation_center_label)
        return page

    def _create_enlargement_page(self) -> QWidget:
        page = QWidget()
        layout = QVBoxLayout(page)
        layout.setContentsMargins(0, 0, 0, 0)

        self._scale_slider = SliderControl(
            "Scale Factor", 0, int(MAX_SCALE * SCALE_STEPS_PER_UNIT),
            formatter=lambda v: f"{v / SCALE_STEPS_PER_UNIT:.1f}",
        )
        layout.addWidget(self._scale_slider)

        row = QHBoxLayout()
        row.addStretch()
        self._enlargement_center_btn = QPushButton("Set Center")
        self._enlargement_reset_center_btn = QPushButton("Reset Center")
        row.addWidget(self._enlargement_center_btn)
        row.addWidget(self._enlargement_reset_center_btn)
        layout.addLayout(row)

        self._enlargement_center_label = QLabel()
        self._enlargement_center_label.setStyleSheet("color: #6B7280; font-size: 12px;")
        layout.addWidget(self._enlargement_center_label)
        return page

    def _connect_signals(self):
        for mode, button in self._mode_buttons.items():
            button.clicked.connect(lambda _=False, m=mode: self._on_mode_clicked(m))

        # Translation
        self._dx_slider.valueChanged.connect(
            lambda v: self.session.set_spec(replace(self.session.translation, dx=v)))
        self._dy_slider.valueChanged.connect(
            lambda v: self.session.set_spec(replace(self.session.translation, dy=v)))

        # Reflection
        for axis, button in self._axis_buttons.items():
            button.clicked.connect(
                lambda _=False, a=axis: self.session.set_spec(replace(self.session.reflection, axis=a)))
        self._m_slider.valueChanged.connect(
            lambda v: self.session.set_spec(replace(self.session.reflection, m=v)))
        self._c_slider.valueChanged.connect(
            lambda v: self.session.set_spec(replace(self.session.reflection, c=v)))

        # Rotation
        self._angle_slider.valueChanged.connect(
            lambda v: self.session.set_spec(replace(self.session.rotation, angle=v)))
        for direction, button in self._direction_buttons.items():
            button.clicked.connect(
                lambda _=False, d=direction: self.session.set_spec(
                    replace(self.session.rotation, direction=d)))
        self._rotation_center_btn.clicked.connect(self.editor.start_center_pick)
        self._rotation_reset_center_btn.clicked.connect(lambda: self.editor.set_center(None))

        # Enlargement
        self._scale_slider.valueChanged.connect(
            lambda v: self.session.set_spec(
                replace(self.session.enlargement, scale=v / SCALE_STEPS_PER_UNIT)))
        self._enlargement_center_btn.clicked.connect(self.editor.start_center_pick)
        self._enlargement_reset_center_btn.clicked.connect(lambda: self.editor.set_center(None))

        # Session -> controls
        self.session.changed.connect(self._sync_from_session)
        self.session.canvasSettingsChanged.connect(self._apply_ranges)

    def _on_mode_clicked(self, mode: TransformationMode):
        if mode != self.session.mode:
            self.editor.change_mode(mode)

    def _apply_ranges(self, settings: CanvasSettings):
        """Slider limits follow the visible grid range."""
        max_move = settings.range + TRANSLATION_MARGIN
        self._dx_slider.set_range(-max_move, max_move)
        self._dy_slider.set_range(-max_move, max_move)
        self._m_slider.set_range(-settings.range, settings.range)
        self._c_slider.set_range(-settings.range, settings.range)

    def _sync_from_session(self):
        """Reflect the session's current values in the controls."""
        session = self.session
        mode = session.mode

        self._mode_buttons[mode].setChecked(True)
        self._stack.setCurrentWidget(self._pages[mode])

        translation: Translation = session.translation
        self._dx_slider.set_value(translation.dx)
        self._dy_slider.set_value(translation.dy)

        reflection: Reflection = session.reflection
        self._axis_buttons[reflection.axis].setChecked(True)
        self._line_controls.setVisible(reflection.axis == ReflectionAxis.CUSTOM)
        self._m_slider.set_value(reflection.m)
        self._c_slider.set_value(reflection.c)

        rotation: Rotation = session.rotation
        self._angle_slider.set_value(rotation.angle)
        self._direction_buttons[rotation.direction].setChecked(True)
        self._rotation_center_label.setText(self._center_text(rotation.center))

        enlargement: Enlargement = session.enlargement
        self._scale_slider.set_value(enlargement.scale * SCALE_STEPS_PER_UNIT)
        self._enlargement_center_label.setText(self._center_text(enlargement.center))

        picking = session.picking_center
        for button in (self._rotation_center_btn, self._enlargement_center_btn):
            button.setText("Click the grid..." if picking else "Set Center")
            button.setEnabled(not picking)

    @staticmethod
    def _center_text(center) -> str:
        if center is None:
            return "Center: Origin (0, 0)"
        return f"Center: {format_point(center)}"
