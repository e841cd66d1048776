import os

import pytest

# Must be set before the first Qt import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from habitrings.model.geometry_primitives import Point
from habitrings.render.surface import RecordingSurface


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def origin():
    return Point(0.0, 0.0)
