"""State pattern: a canvas whose behavior follows the active tool."""

from patternbook.state.canvas import Canvas
from patternbook.state.tools import EraserTool, SelectionTool, ToolBase, ToolType, create_tool

__all__ = [
    "Canvas",
    "EraserTool",
    "SelectionTool",
    "ToolBase",
    "ToolType",
    "create_tool",
]
