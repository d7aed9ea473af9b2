"""
Main application window.

Assembles all UI components and manages the application layout.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
    QToolBar, QPushButton, QLabel, QSlider, QScrollArea,
    QStatusBar, QMessageBox, QFrame, QFileDialog,
)

from models import (
    SessionState, CanvasSettings, Project,
    MIN_RANGE, MAX_RANGE, MIN_ZOOM, MAX_ZOOM, ZOOM_STEP,
    format_date,
)
from services import (
    ProjectStore, ShapeEditor, ExportError, export_png, status_text,
    get_settings,
)
from views.grid_canvas import GridCanvas
from views.transform_panel import TransformPanel
from views.coordinate_table_dialog import CoordinateTableDialog
from views.projects_dialog import ProjectsDialog

logger = logging.getLogger(__name__)


class WorkbenchToolbar(QToolBar):
    """Toolbar with project and table actions."""

    def __init__(self, parent=None):
        super().__init__("Workbench", parent)
        self.setMovable(False)
        self._setup_ui()

    def _setup_ui(self):
        self.setStyleSheet("""
            QToolBar {
                background: #F9FAFB;
                border-bottom: 1px solid #E5E7EB;
                padding: 8px 16px;
                spacing: 8px;
            }
            QPushButton {
                padding: 8px 16px;
                border-radius: 6px;
                font-weight: 500;
                font-size: 13px;
            }
        """)

        title = QLabel("Transformation Workbench")
        title.setStyleSheet("font-size: 15px; font-weight: bold; color: #be185d; padding-right: 16px;")
        self.addWidget(title)

        self.projects_btn = QPushButton("Projects")
        self.projects_btn.setStyleSheet("""
            QPushButton {
                background: white;
                color: #374151;
                border: 1px solid #D1D5DB;
            }
            QPushButton:hover {
                background: #F3F4F6;
            }
        """)
        self.addWidget(self.projects_btn)

        self.save_btn = QPushButton("Save")
        self.save_btn.setStyleSheet("""
            QPushButton {
                background: #be185d;
                color: white;
                border: none;
            }
            QPushButton:hover {
                background: #9d174d;
            }
        """)
        self.addWidget(self.save_btn)

        self.coordinates_btn = QPushButton("Coordinates")
        self.coordinates_btn.setStyleSheet("""
            QPushButton {
                background: #0ea5e9;
                color: white;
                border: none;
            }
            QPushButton:hover {
                background: #0284c7;
            }
        """)
        self.addWidget(self.coordinates_btn)


class CanvasControls(QFrame):
    """Bottom bar with grid range and zoom sliders plus Reset / Clear."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self):
        self.setStyleSheet("""
            CanvasControls {
                background: #F9FAFB;
                border-top: 1px solid #E5E7EB;
            }
            QLabel {
                color: #4B5563;
                font-size: 12px;
            }
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(16, 8, 16, 8)
        layout.setSpacing(12)

        layout.addWidget(QLabel("Grid Range:"))
        self.range_slider = QSlider(Qt.Orientation.Horizontal)
        self.range_slider.setRange(MIN_RANGE, MAX_RANGE)
        self.range_slider.setFixedWidth(160)
        layout.addWidget(self.range_slider)
        self.range_label = QLabel()
        self.range_label.setMinimumWidth(40)
        layout.addWidget(self.range_label)

        layout.addSpacing(16)

        layout.addWidget(QLabel("Zoom:"))
        self.zoom_slider = QSlider(Qt.Orientation.Horizontal)
        self.zoom_slider.setRange(MIN_ZOOM, MAX_ZOOM)
        self.zoom_slider.setSingleStep(ZOOM_STEP)
        self.zoom_slider.setPageStep(ZOOM_STEP)
        self.zoom_slider.setFixedWidth(160)
        layout.addWidget(self.zoom_slider)
        self.zoom_label = QLabel()
        self.zoom_label.setMinimumWidth(56)
        layout.addWidget(self.zoom_label)

        layout.addStretch()

        self.reset_btn = QPushButton("Reset")
        self.reset_btn.setToolTip("Reset the active transformation")
        layout.addWidget(self.reset_btn)

        self.clear_btn = QPushButton("Clear")
        self.clear_btn.setToolTip("Remove all points")
        self.clear_btn.setStyleSheet("color: #DC2626;")
        layout.addWidget(self.clear_btn)

    def set_values(self, settings: CanvasSettings):
        """Show the given canvas settings without emitting."""
        for slider, value in ((self.range_slider, settings.range),
                              (self.zoom_slider, settings.zoom)):
            slider.blockSignals(True)
            slider.setValue(value)
            slider.blockSignals(False)
        self.range_label.setText(f"±{settings.range}")
        self.zoom_label.setText(f"{settings.zoom}px")


class MainWindow(QMainWindow):
    """
    Main application window.

    Layout:
    ┌─────────────────────────────────────────────────────┐
    │  Toolbar (Projects, Save, Coordinates)              │
    ├─────────────────────────────────────────────────────┤
    │  Transform panel (mode buttons + parameters)        │
    ├─────────────────────────────────────────────────────┤
    │                                                     │
    │  Grid canvas (scrollable)                           │
    │                                                     │
    ├─────────────────────────────────────────────────────┤
    │  Grid Range / Zoom / Reset / Clear                  │
    ├─────────────────────────────────────────────────────┤
    │  Status Bar                                         │
    └─────────────────────────────────────────────────────┘
    """

    def __init__(self, store: Optional[ProjectStore] = None):
        super().__init__()

        # Settings manager (JSON file based)
        self.settings_manager = get_settings()

        # Models
        self.session = SessionState()
        self.session.canvas_settings = self.settings_manager.get_canvas_defaults()
        self.editor = ShapeEditor(self.session)
        self.store = store or ProjectStore(self.settings_manager.get_projects_file())
        self.store.ensure_empty_project()

        # Setup
        self._setup_window()
        self._setup_menu()
        self._setup_toolbar()
        self._setup_central_widget()
        self._setup_status_bar()
        self._connect_signals()

        # Restore window geometry
        self._load_window_settings()
        self._refresh_status()

    def _load_window_settings(self):
        """Restore window geometry and state."""
        geometry, state = self.settings_manager.get_window_geometry()
        if geometry:
            self.restoreGeometry(geometry)
        if state:
            self.restoreState(state)

    def _save_window_settings(self):
        """Save window geometry and state."""
        self.settings_manager.save_window_geometry(
            self.saveGeometry(),
            self.saveState()
        )

    def closeEvent(self, event):
        """Handle window close - save settings."""
        self.settings_manager.set_canvas_defaults(self.session.canvas_settings)
        self._save_window_settings()
        super().closeEvent(event)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle("Geometry Transformation Workbench")
        self.setMinimumSize(900, 700)
        self.resize(1100, 900)

        self.setStyleSheet("""
            QMainWindow {
                background: #F3F4F6;
            }
        """)

    def _setup_menu(self):
        """Create menu bar."""
        menubar = self.menuBar()

        # File menu
        file_menu = menubar.addMenu("&File")

        projects_action = QAction("&Projects...", self)
        projects_action.setShortcut(QKeySequence.StandardKey.Open)
        projects_action.triggered.connect(self._on_show_projects)
        file_menu.addAction(projects_action)

        save_action = QAction("&Save", self)
        save_action.setShortcut(QKeySequence.StandardKey.Save)
        save_action.triggered.connect(self._on_save)
        file_menu.addAction(save_action)

        export_dir_action = QAction("Export &Folder...", self)
        export_dir_action.triggered.connect(self._on_choose_export_dir)
        file_menu.addAction(export_dir_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Edit menu
        edit_menu = menubar.addMenu("&Edit")

        reset_action = QAction("&Reset Transformation", self)
        reset_action.setShortcut(QKeySequence("Ctrl+R"))
        reset_action.triggered.connect(self.editor.reset)
        edit_menu.addAction(reset_action)

        clear_action = QAction("&Clear Shape", self)
        clear_action.setShortcut(QKeySequence("Ctrl+Shift+Delete"))
        clear_action.triggered.connect(self.editor.clear)
        edit_menu.addAction(clear_action)

        # View menu
        view_menu = menubar.addMenu("&View")

        coordinates_action = QAction("&Coordinates...", self)
        coordinates_action.setShortcut(QKeySequence("Ctrl+T"))
        coordinates_action.triggered.connect(self._on_show_coordinates)
        view_menu.addAction(coordinates_action)

        # Help menu
        help_menu = menubar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self._on_about)
        help_menu.addAction(about_action)

    def _setup_toolbar(self):
        """Create and add toolbar."""
        self.toolbar = WorkbenchToolbar()
        self.addToolBar(self.toolbar)

        self.toolbar.projects_btn.clicked.connect(self._on_show_projects)
        self.toolbar.save_btn.clicked.connect(self._on_save)
        self.toolbar.coordinates_btn.clicked.connect(self._on_show_coordinates)

    def _setup_central_widget(self):
        """Create the main layout with all panels."""
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        panel_container = QWidget()
        panel_layout = QVBoxLayout(panel_container)
        panel_layout.setContentsMargins(12, 12, 12, 8)
        self.transform_panel = TransformPanel(self.session, self.editor)
        panel_layout.addWidget(self.transform_panel)
        layout.addWidget(panel_container)

        # Center - grid canvas
        self.canvas = GridCanvas(self.session, self.editor, self.settings_manager.settings.ui)
        self.scroll_area = QScrollArea()
        self.scroll_area.setWidget(self.canvas)
        self.scroll_area.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.scroll_area.setStyleSheet("""
            QScrollArea {
                border: none;
                background: #F3F4F6;
            }
        """)
        layout.addWidget(self.scroll_area, 1)

        self.canvas_controls = CanvasControls()
        self.canvas_controls.set_values(self.session.canvas_settings)
        layout.addWidget(self.canvas_controls)

    def _setup_status_bar(self):
        """Create status bar."""
        status = QStatusBar()
        status.setStyleSheet("""
            QStatusBar {
                background: #F9FAFB;
                border-top: 1px solid #E5E7EB;
                padding: 4px 8px;
                color: #6B7280;
                font-size: 12px;
            }
        """)
        self.setStatusBar(status)

        self._point_count_label = QLabel("Points: 0")
        status.addWidget(self._point_count_label)

        # Spacer
        status.addWidget(QWidget(), 1)

        self._instruction_label = QLabel()
        status.addWidget(self._instruction_label)

    def _connect_signals(self):
        """Connect all signals."""
        self.session.changed.connect(self._refresh_status)
        self.session.canvasSettingsChanged.connect(self.canvas_controls.set_values)

        controls = self.canvas_controls
        controls.range_slider.valueChanged.connect(self._on_range_changed)
        controls.zoom_slider.valueChanged.connect(self._on_zoom_changed)
        controls.reset_btn.clicked.connect(self.editor.reset)
        controls.clear_btn.clicked.connect(self.editor.clear)

    def _refresh_status(self):
        """Update status bar from the session."""
        self._point_count_label.setText(f"Points: {len(self.session.points)}")
        self._instruction_label.setText(status_text(self.session))

    def _on_range_changed(self, value: int):
        settings = self.session.canvas_settings
        self.session.canvas_settings = CanvasSettings(range=value, zoom=settings.zoom).clamped()

    def _on_zoom_changed(self, value: int):
        # Snap to the slider step
        value = MIN_ZOOM + round((value - MIN_ZOOM) / ZOOM_STEP) * ZOOM_STEP
        settings = self.session.canvas_settings
        self.session.canvas_settings = CanvasSettings(range=settings.range, zoom=value).clamped()

    def _on_save(self):
        """Save the session as a new project and export a PNG."""
        if not self.session.points:
            QMessageBox.warning(self, "Save", "Cannot save an empty shape!")
            return

        project = self.session.snapshot(self.store.new_project_id(), format_date())
        if not self.store.save(project):
            QMessageBox.critical(
                self, "Error",
                f"Failed to save project to:\n{self.store.filepath}"
            )
            return

        try:
            path = export_png(
                self.canvas.snapshot(), project.mode, project.id,
                self.settings_manager.get_export_dir(),
            )
        except ExportError as e:
            logger.error(f"Export failed: {e}")
            QMessageBox.warning(self, "Export Failed", str(e))
            self.statusBar().showMessage(f"Project #{project.id} saved!", 3000)
            return

        self.statusBar().showMessage(f"Project #{project.id} saved! Image: {path.name}", 3000)

    def _on_choose_export_dir(self):
        """Choose the folder saved images are written to."""
        path = QFileDialog.getExistingDirectory(
            self, "Select Export Folder", str(self.settings_manager.get_export_dir())
        )
        if path:
            self.settings_manager.set_export_dir(path)
            self.statusBar().showMessage(f"Images will be saved to {path}", 3000)

    def load_project(self, project: Project):
        """Replace the session with a saved project."""
        self.session.restore(project)
        if project.is_empty_project:
            message = "Empty project loaded!"
        else:
            message = f"Project #{project.id} loaded!"
        logger.info(message)
        self.statusBar().showMessage(message, 3000)

    def _on_show_projects(self):
        """Open the projects browser."""
        dialog = ProjectsDialog(self.store, self.settings_manager.settings.ui, self)
        if dialog.exec():
            project = dialog.get_project()
            if project is not None:
                self.load_project(project)

    def _on_show_coordinates(self):
        """Show original and transformed coordinates."""
        dialog = CoordinateTableDialog(self.session.points, self.session.active_spec, self)
        dialog.exec()

    def _on_about(self):
        """Show about dialog."""
        QMessageBox.about(
            self,
            "About Geometry Workbench",
            "<h3>Geometry Transformation Workbench</h3>"
            "<p>Plot a polygon on a grid and explore transformations.</p>"
            "<p><b>Transformations:</b></p>"
            "<ul>"
            "<li>Translation</li>"
            "<li>Reflection (axes or y = mx + c)</li>"
            "<li>Rotation about any center</li>"
            "<li>Enlargement about any center</li>"
            "</ul>"
            f"<p><b>Projects:</b> {self.store.filepath}</p>"
        )
