"""
Pytest configuration and shared fixtures for geometry workbench tests.
"""

import os
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

# Qt rendering tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from models.geometry import Point, Rotation, RotationDirection
from models.session import SessionState
from services.project_store import ProjectStore
from services.shape_editor import ShapeEditor
from services.settings_manager import SettingsManager, reset_settings_manager


# ============== Temporary Directory Fixtures ==============

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    tmp = tempfile.mkdtemp(prefix="geometry_workbench_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


# ============== Shape Fixtures ==============

@pytest.fixture
def triangle() -> tuple:
    """Right triangle with a vertex on the origin."""
    return (Point(0, 0), Point(2, 0), Point(2, 2))


@pytest.fixture
def square() -> tuple:
    """Unit-ish square away from the origin."""
    return (Point(1, 1), Point(4, 1), Point(4, 4), Point(1, 4))


@pytest.fixture
def quarter_turn() -> Rotation:
    """90 degrees anticlockwise about the origin."""
    return Rotation(angle=90, direction=RotationDirection.ANTICLOCKWISE)


# ============== Service Fixtures ==============

@pytest.fixture
def store(temp_dir: Path) -> ProjectStore:
    """Project store backed by a file in a temp directory."""
    return ProjectStore(temp_dir / "projects.json")


@pytest.fixture
def session() -> SessionState:
    """Fresh session with default canvas (range 20, zoom 600)."""
    return SessionState()


@pytest.fixture
def editor(session: SessionState) -> ShapeEditor:
    return ShapeEditor(session)


@pytest.fixture
def closed_session(session: SessionState, triangle: tuple) -> SessionState:
    """Session holding the closed triangle."""
    session.set_shape(triangle, True)
    return session


@pytest.fixture
def settings_manager(temp_dir: Path) -> Generator[SettingsManager, None, None]:
    """Settings manager writing to a temp config file."""
    manager = SettingsManager(config_override=str(temp_dir / "config" / "settings.json"))
    yield manager
    reset_settings_manager()


# ============== Qt Fixtures ==============

@pytest.fixture(scope="session")
def qapp():
    """Offscreen QApplication shared by all rendering tests."""
    from PyQt6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


# ============== Helper Functions ==============

def assert_points_close(actual, expected, tol: float = 1e-9):
    """Assert two point sequences match coordinate-wise within ``tol``."""
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        assert abs(a.x - e.x) <= tol, f"{a} != {e}"
        assert abs(a.y - e.y) <= tol, f"{a} != {e}"


def pixel_of(session: SessionState, x: float, y: float) -> tuple:
    """Canvas pixel position of grid point (x, y)."""
    return session.canvas_settings.to_pixel(Point(x, y))
