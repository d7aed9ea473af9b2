"""
Projects Dialog - browse, load and delete saved workbench projects.
"""

import logging
from typing import Optional

from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QPushButton,
    QListWidget, QListWidgetItem, QDialogButtonBox, QMessageBox,
)

from models.project import Project, EMPTY_PROJECT_ID
from services.project_store import ProjectStore
from services.settings_manager import UISettings
from services.transform_engine import describe
from views.shape_renderer import ShapeRenderer, THUMBNAIL_SIZE

logger = logging.getLogger(__name__)


def project_description(project: Project) -> str:
    """One-line summary shown under the project title."""
    if project.is_empty_project:
        return "Start with a clean slate."
    return describe(project.active_spec)


class ProjectsDialog(QDialog):
    """Dialog listing saved projects, newest first."""

    def __init__(self, store: ProjectStore, ui_settings: Optional[UISettings] = None,
                 parent=None):
        super().__init__(parent)
        self.store = store
        self.ui_settings = ui_settings or UISettings()
        self._selected_project: Optional[Project] = None

        self._setup_ui()
        self._load_projects()

    def _setup_ui(self):
        self.setWindowTitle("Projects")
        self.setMinimumSize(520, 480)

        layout = QVBoxLayout(self)

        header = QHBoxLayout()
        title = QLabel("Saved Projects")
        title.setStyleSheet("font-size: 16px; font-weight: bold; color: #111827;")
        header.addWidget(title)
        header.addStretch()
        refresh_btn = QPushButton("Refresh")
        refresh_btn.clicked.connect(self._load_projects)
        header.addWidget(refresh_btn)
        layout.addLayout(header)

        self._project_list = QListWidget()
        self._project_list.setIconSize(QSize(THUMBNAIL_SIZE, THUMBNAIL_SIZE))
        self._project_list.setSpacing(4)
        self._project_list.setStyleSheet("""
            QListWidget {
                background: #F9FAFB;
                border: 1px solid #E5E7EB;
                border-radius: 8px;
            }
            QListWidget::item {
                background: white;
                border: 1px solid #E5E7EB;
                border-radius: 6px;
                padding: 6px;
                color: #374151;
            }
            QListWidget::item:selected {
                border-color: #3B82F6;
                background: #EFF6FF;
                color: #1D4ED8;
            }
        """)
        self._project_list.itemDoubleClicked.connect(lambda _: self._on_load())
        self._project_list.itemSelectionChanged.connect(self._on_selection_changed)
        layout.addWidget(self._project_list)

        btn_layout = QHBoxLayout()
        self._delete_btn = QPushButton("Delete")
        self._delete_btn.setEnabled(False)
        self._delete_btn.setStyleSheet("color: #DC2626;")
        self._delete_btn.clicked.connect(self._on_delete)
        btn_layout.addWidget(self._delete_btn)
        btn_layout.addStretch()

        button_box = QDialogButtonBox(QDialogButtonBox.StandardButton.Cancel)
        self._load_btn = button_box.addButton("Load", QDialogButtonBox.ButtonRole.AcceptRole)
        self._load_btn.setEnabled(False)
        button_box.accepted.connect(self._on_load)
        button_box.rejected.connect(self.reject)
        btn_layout.addWidget(button_box)

        layout.addLayout(btn_layout)

    def _load_projects(self):
        """Fill the list from the store."""
        self._project_list.clear()
        projects = self.store.list_projects()

        for project in projects:
            text = f"{project.title}\n{project.date}\n{project_description(project)}"
            item = QListWidgetItem(QIcon(ShapeRenderer.render_thumbnail(project)), text)
            item.setData(Qt.ItemDataRole.UserRole, project.id)
            self._project_list.addItem(item)

        if not projects:
            item = QListWidgetItem("(No saved projects)")
            item.setFlags(Qt.ItemFlag.NoItemFlags)
            self._project_list.addItem(item)

        self._on_selection_changed()

    def _selected_id(self) -> Optional[int]:
        items = self._project_list.selectedItems()
        if not items:
            return None
        return items[0].data(Qt.ItemDataRole.UserRole)

    def _on_selection_changed(self):
        project_id = self._selected_id()
        self._load_btn.setEnabled(project_id is not None)
        self._delete_btn.setEnabled(project_id is not None and project_id != EMPTY_PROJECT_ID)

    def _on_load(self):
        project_id = self._selected_id()
        if project_id is None:
            return

        project = self.store.get(project_id)
        if project is None:
            QMessageBox.warning(self, "Error", f"Project #{project_id} no longer exists.")
            self._load_projects()
            return

        logger.debug(f"Selected project #{project_id} for loading")
        self._selected_project = project
        self.accept()

    def _on_delete(self):
        project_id = self._selected_id()
        if project_id is None or project_id == EMPTY_PROJECT_ID:
            return

        if self.ui_settings.confirm_delete:
            reply = QMessageBox.question(
                self,
                "Delete Project",
                f"Delete project #{project_id}?\n\nThis cannot be undone.",
                QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
                QMessageBox.StandardButton.No
            )
            if reply != QMessageBox.StandardButton.Yes:
                return

        if not self.store.delete(project_id):
            QMessageBox.warning(self, "Error", f"Failed to delete project #{project_id}.")
        self._load_projects()

    def get_project(self) -> Optional[Project]:
        """Get the project chosen for loading."""
        return self._selected_project
