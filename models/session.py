"""
Workbench session state.

Holds the shape being edited, the active mode and the parameters of all
four transformations for the lifetime of the window. Every setter stores
a new immutable value and emits a signal so views can redraw.
"""

from typing import Iterable, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from .canvas import CanvasSettings
from .geometry import (
    Point, Shape, TransformationMode, TransformSpec,
    Translation, Reflection, Rotation, Enlargement,
)
from .project import Project


class SessionState(QObject):
    """
    Observable session state.

    Emits signals when state changes to update UI.
    """

    # Signals
    shapeChanged = pyqtSignal()                      # points or closure
    modeChanged = pyqtSignal(TransformationMode)
    specChanged = pyqtSignal(object)                 # TransformSpec
    canvasSettingsChanged = pyqtSignal(object)       # CanvasSettings
    centerPickingChanged = pyqtSignal(bool)
    changed = pyqtSignal()                           # any of the above

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._points: Shape = ()
        self._is_shape_closed = False
        self._mode = TransformationMode.TRANSLATION
        self._translation = Translation()
        self._reflection = Reflection()
        self._rotation = Rotation()
        self._enlargement = Enlargement()
        self._canvas_settings = CanvasSettings()
        self._picking_center = False

    # ---- shape ----

    @property
    def points(self) -> Shape:
        return self._points

    @property
    def is_shape_closed(self) -> bool:
        return self._is_shape_closed

    def set_shape(self, points: Iterable[Point], closed: bool):
        self._points = tuple(points)
        self._is_shape_closed = closed
        self.shapeChanged.emit()
        self.changed.emit()

    # ---- mode ----

    @property
    def mode(self) -> TransformationMode:
        return self._mode

    @mode.setter
    def mode(self, value: TransformationMode):
        if self._mode != value:
            self._mode = value
            self.modeChanged.emit(value)
            self.changed.emit()

    # ---- transformation parameters ----

    @property
    def translation(self) -> Translation:
        return self._translation

    @property
    def reflection(self) -> Reflection:
        return self._reflection

    @property
    def rotation(self) -> Rotation:
        return self._rotation

    @property
    def enlargement(self) -> Enlargement:
        return self._enlargement

    @property
    def active_spec(self) -> TransformSpec:
        return self.spec_for(self._mode)

    def spec_for(self, mode: TransformationMode) -> TransformSpec:
        return {
            TransformationMode.TRANSLATION: self._translation,
            TransformationMode.REFLECTION: self._reflection,
            TransformationMode.ROTATION: self._rotation,
            TransformationMode.ENLARGEMENT: self._enlargement,
        }[mode]

    def set_spec(self, spec: TransformSpec):
        """Replace the stored parameters of the spec's own variant."""
        if isinstance(spec, Translation):
            self._translation = spec
        elif isinstance(spec, Reflection):
            self._reflection = spec
        elif isinstance(spec, Rotation):
            self._rotation = spec
        elif isinstance(spec, Enlargement):
            self._enlargement = spec
        else:
            raise TypeError(f"Unknown transformation spec: {spec!r}")
        self.specChanged.emit(spec)
        self.changed.emit()

    # ---- center picking (rotation / enlargement) ----

    @property
    def picking_center(self) -> bool:
        """True while the next canvas click sets the active spec's center."""
        return self._picking_center

    @picking_center.setter
    def picking_center(self, value: bool):
        if self._picking_center != value:
            self._picking_center = value
            self.centerPickingChanged.emit(value)
            self.changed.emit()

    # ---- canvas ----

    @property
    def canvas_settings(self) -> CanvasSettings:
        return self._canvas_settings

    @canvas_settings.setter
    def canvas_settings(self, value: CanvasSettings):
        if self._canvas_settings != value:
            self._canvas_settings = value
            self.canvasSettingsChanged.emit(value)
            self.changed.emit()

    # ---- projects ----

    def snapshot(self, project_id: int, date: str) -> Project:
        """Capture the current state as a project record."""
        return Project(
            id=project_id,
            date=date,
            points=self._points,
            mode=self._mode,
            is_shape_closed=self._is_shape_closed,
            translation=self._translation,
            reflection=self._reflection,
            rotation=self._rotation,
            enlargement=self._enlargement,
            canvas_settings=self._canvas_settings,
        )

    def restore(self, project: Project):
        """Replace the whole session with a saved project."""
        self._translation = project.translation
        self._reflection = project.reflection
        self._rotation = project.rotation
        self._enlargement = project.enlargement
        self._picking_center = False
        self.canvas_settings = project.canvas_settings
        self.mode = project.mode
        self.specChanged.emit(self.active_spec)
        self.set_shape(project.points, project.is_shape_closed)
