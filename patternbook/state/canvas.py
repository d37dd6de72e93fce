"""
Canvas for the State pattern demo.

The Canvas holds exactly one active tool and forwards pointer events to it.
Switching the tool changes how the canvas reacts to later events without any
per-tool branching in the canvas itself.

Signals are emitted synchronously in the calling thread; no Qt event loop
is required.
"""

from typing import Optional

from PySide6.QtCore import QObject, Qt, Signal

from patternbook.exceptions import NoToolSetError
from patternbook.services.logging_service import get_logger
from patternbook.state.tools import ToolBase


class Canvas(QObject):
    """
    Context that delegates pointer events to the active tool.

    Signals:
        tool_changed: Emitted with the new tool after set_tool().
        pointer_dispatched: Emitted with the event name ("pointer_down" or
            "pointer_up") and the tool that handled it.
    """

    tool_changed = Signal(object)  # ToolBase
    pointer_dispatched = Signal(str, object)

    def __init__(self, tool: Optional[ToolBase] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._logger = get_logger(__name__)
        self._active_tool: Optional[ToolBase] = None

        if tool is not None:
            self.set_tool(tool)

    # ─── Tool Management ──────────────────────────────────────────────────

    def set_tool(self, tool: ToolBase) -> None:
        """
        Set the active tool.

        The outgoing tool gets on_deactivate(); nothing is called on the
        incoming tool until the next pointer event.
        """
        if not isinstance(tool, ToolBase):
            raise TypeError(f"Expected a ToolBase, got {type(tool).__name__}")

        previous = self._active_tool
        if previous is not None and previous is not tool:
            previous.on_deactivate()

        self._active_tool = tool
        self._logger.debug(f"Active tool set to {tool!r}")
        self.tool_changed.emit(tool)

    @property
    def active_tool(self) -> Optional[ToolBase]:
        return self._active_tool

    @property
    def cursor(self) -> Qt.CursorShape:
        """Cursor a host view should display for the active tool."""
        if self._active_tool is None:
            return Qt.CursorShape.ArrowCursor
        return self._active_tool.cursor

    # ─── Pointer Events ───────────────────────────────────────────────────

    def on_pointer_down(self) -> None:
        tool = self._require_tool("pointer_down")
        tool.on_pointer_down()
        self.pointer_dispatched.emit("pointer_down", tool)

    def on_pointer_up(self) -> None:
        tool = self._require_tool("pointer_up")
        tool.on_pointer_up()
        self.pointer_dispatched.emit("pointer_up", tool)

    def _require_tool(self, event_name: str) -> ToolBase:
        if self._active_tool is None:
            self._logger.warning(f"Rejected {event_name}: no tool set on canvas")
            raise NoToolSetError(f"Cannot dispatch {event_name}: no tool set on canvas")
        return self._active_tool
