"""Shared fixtures for patternbook tests."""

import pytest
from PySide6.QtCore import QCoreApplication, Qt

from patternbook.memento.editor import Editor
from patternbook.memento.history import EditorHistory
from patternbook.state.canvas import Canvas
from patternbook.state.tools import ToolBase, ToolType


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    """Headless Qt application so QObject signals behave as in the real app."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


class RecordingTool(ToolBase):
    """Tool that records every call made on it."""

    def __init__(self, name: str = "recording") -> None:
        super().__init__()
        self.name = name
        self.calls = []

    @property
    def tool_type(self) -> ToolType:
        return ToolType.SELECTION

    @property
    def cursor(self):
        return Qt.CursorShape.PointingHandCursor

    def on_pointer_down(self) -> None:
        self.calls.append("down")

    def on_pointer_up(self) -> None:
        self.calls.append("up")

    def on_deactivate(self) -> None:
        self.calls.append("deactivate")


@pytest.fixture
def recording_tool_factory():
    return RecordingTool


@pytest.fixture
def canvas():
    return Canvas()


@pytest.fixture
def editor():
    return Editor()


@pytest.fixture
def history():
    return EditorHistory()
