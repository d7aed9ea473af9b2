"""Views package."""

from .shape_renderer import ShapeRenderer
from .grid_canvas import GridCanvas
from .transform_panel import TransformPanel, SliderControl
from .coordinate_table_dialog import CoordinateTableDialog
from .projects_dialog import ProjectsDialog
from .main_window import MainWindow

__all__ = [
    "ShapeRenderer",
    "GridCanvas",
    "TransformPanel",
    "SliderControl",
    "CoordinateTableDialog",
    "ProjectsDialog",
    "MainWindow",
]
