"""
Project store for saving and loading workbench snapshots.

A single JSON file acts as a local key-value store. All projects live
under one fixed key as a mapping from project id to project record:

    {
      "geometryProjects": {
        "0": { ...empty project... },
        "1718000000000": { ... }
      }
    }

A missing or unreadable store is treated as an empty collection.
"""

import json
import logging
import time
from pathlib import Path
from typing import Dict, List, Optional

from models.project import (
    Project, EMPTY_PROJECT_ID, create_empty_project, sort_projects,
)

logger = logging.getLogger(__name__)


# Fixed key the project collection is stored under
STORAGE_KEY = "geometryProjects"


class ProjectStore:
    """
    Handles saving, loading and deleting projects.

    The store file is re-read on every operation.
    """

    def __init__(self, filepath: Path):
        self._filepath = Path(filepath)
        self._last_id = 0

    @property
    def filepath(self) -> Path:
        """Get the backing store file path."""
        return self._filepath

    def load_all(self) -> Dict[int, Project]:
        """
        Load every stored project.

        Returns:
            Mapping of project id to Project; empty if the store is
            missing, unreadable or not valid JSON
        """
        raw = self._read_collection()
        projects: Dict[int, Project] = {}
        for key, record in raw.items():
            try:
                project = Project.from_dict(record)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed project record {key!r}: {e}")
                continue
            projects[project.id] = project
        return projects

    def list_projects(self) -> List[Project]:
        """All projects, newest first (the empty project last)."""
        return sort_projects(list(self.load_all().values()))

    def get(self, project_id: int) -> Optional[Project]:
        return self.load_all().get(project_id)

    def ensure_empty_project(self) -> Project:
        """Make sure the id-0 empty project exists, creating it if needed."""
        projects = self.load_all()
        empty = projects.get(EMPTY_PROJECT_ID)
        if empty is None:
            empty = create_empty_project()
            projects[EMPTY_PROJECT_ID] = empty
            self._write_collection(projects)
            logger.info("Created empty project record")
        return empty

    def save(self, project: Project) -> bool:
        """
        Add or replace a project.

        Args:
            project: The project to store

        Returns:
            True if successful, False otherwise
        """
        projects = self.load_all()
        projects[project.id] = project
        if self._write_collection(projects):
            logger.info(f"Saved project #{project.id}")
            return True
        return False

    def delete(self, project_id: int) -> bool:
        """
        Delete a project.

        The empty project cannot be deleted.

        Returns:
            True if a project was removed
        """
        if project_id == EMPTY_PROJECT_ID:
            logger.warning("Refusing to delete the empty project")
            return False

        projects = self.load_all()
        if project_id not in projects:
            return False
        del projects[project_id]
        if self._write_collection(projects):
            logger.info(f"Deleted project #{project_id}")
            return True
        return False

    def new_project_id(self) -> int:
        """Creation timestamp in milliseconds, strictly increasing."""
        now = int(time.time() * 1000)
        self._last_id = max(now, self._last_id + 1)
        return self._last_id

    def _read_collection(self) -> dict:
        if not self._filepath.exists():
            return {}

        try:
            with open(self._filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read project store {self._filepath}: {e}")
            return {}

        collection = data.get(STORAGE_KEY) if isinstance(data, dict) else None
        if not isinstance(collection, dict):
            return {}
        return collection

    def _write_collection(self, projects: Dict[int, Project]) -> bool:
        data = {
            STORAGE_KEY: {
                str(pid): project.to_dict()
                for pid, project in projects.items()
            }
        }
        try:
            self._filepath.parent.mkdir(parents=True, exist_ok=True)
            with open(self._filepath, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            return True
        except OSError as e:
            logger.error(f"Error saving projects: {e}")
            return False
