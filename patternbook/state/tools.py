"""
Tool framework and implementations for the State pattern canvas.

Each tool reacts to the pointer events the canvas forwards to it. Tools are
stateless: they never read canvas fields, so any tool can be swapped in
without the canvas knowing which one it holds.

Tools:
- SelectionTool: Select a region, draw the selection box on release
- EraserTool: Start an erase stroke, erase from the canvas on release
"""

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Union

from PySide6.QtCore import Qt

from patternbook.services.logging_service import get_logger


class ToolType(Enum):
    """Enum for tool types."""
    SELECTION = auto()
    ERASER = auto()


class ToolBase(ABC):
    """
    Base class for all tools.

    Tools handle the pointer events forwarded by the canvas.
    """

    def __init__(self) -> None:
        self._logger = get_logger(__name__)

    @property
    @abstractmethod
    def tool_type(self) -> ToolType:
        """Return the type of this tool."""
        pass

    @property
    @abstractmethod
    def cursor(self) -> Qt.CursorShape:
        """Return the cursor to use when this tool is active."""
        pass

    @abstractmethod
    def on_pointer_down(self) -> None:
        """Handle pointer press event."""
        pass

    @abstractmethod
    def on_pointer_up(self) -> None:
        """Handle pointer release event."""
        pass

    def on_deactivate(self) -> None:
        """Called when tool is deactivated (another tool selected)."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SelectionTool(ToolBase):
    """
    Selection tool.

    Pointer down starts selecting a region; pointer up draws the
    selection box around it.
    """

    @property
    def tool_type(self) -> ToolType:
        return ToolType.SELECTION

    @property
    def cursor(self) -> Qt.CursorShape:
        return Qt.CursorShape.ArrowCursor

    def on_pointer_down(self) -> None:
        self._logger.info("selection tool selected")

    def on_pointer_up(self) -> None:
        self._logger.info("draw box")


class EraserTool(ToolBase):
    """
    Eraser tool.

    Pointer down begins an erase stroke; pointer up commits the erase.
    """

    @property
    def tool_type(self) -> ToolType:
        return ToolType.ERASER

    @property
    def cursor(self) -> Qt.CursorShape:
        return Qt.CursorShape.CrossCursor

    def on_pointer_down(self) -> None:
        self._logger.info("eraser tool selected")

    def on_pointer_up(self) -> None:
        self._logger.info("erasing from canvas")


def create_tool(tool_type: Union[ToolType, str]) -> ToolBase:
    """
    Factory function to create tools by type.

    Args:
        tool_type: The type of tool to create, or its name ("eraser").

    Returns:
        A new instance of the requested tool.

    Raises:
        ValueError: If the type or name is unknown.
    """
    if isinstance(tool_type, str):
        try:
            tool_type = ToolType[tool_type.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown tool type: {tool_type}") from None

    tool_classes = {
        ToolType.SELECTION: SelectionTool,
        ToolType.ERASER: EraserTool,
    }

    if tool_type not in tool_classes:
        raise ValueError(f"Unknown tool type: {tool_type}")

    return tool_classes[tool_type]()
