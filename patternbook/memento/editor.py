"""
Editor and its snapshots for the Memento pattern demo.

The Editor owns mutable content and can capture it into an EditorState at any
time. An EditorState is frozen and keeps its own copy of the content, so later
edits never reach back into a snapshot.
"""

import copy
from dataclasses import dataclass
from typing import Any, Optional

from PySide6.QtCore import QObject, Signal

from patternbook.services.logging_service import get_logger


@dataclass(frozen=True)
class EditorState:
    """Immutable snapshot of editor content."""
    content: Any

    def get_content(self) -> Any:
        return self.content


class Editor(QObject):
    """
    Originator holding the current content.

    Signals:
        content_changed: Emitted with the new content after set_content()
            or restore().
    """

    content_changed = Signal(object)

    def __init__(self, content: Any = "", parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._logger = get_logger(__name__)
        self._content: Any = content

    def get_content(self) -> Any:
        return self._content

    def set_content(self, content: Any) -> None:
        """Replace the current content."""
        self._content = content
        self.content_changed.emit(content)

    def create_state(self) -> EditorState:
        """
        Capture the current content.

        Returns:
            A new EditorState holding a deep copy of the content.
        """
        state = EditorState(copy.deepcopy(self._content))
        self._logger.debug(f"Captured editor state: {state.content!r}")
        return state

    def restore(self, state: EditorState) -> None:
        """Set the content back to the value captured in state."""
        if not isinstance(state, EditorState):
            raise TypeError(f"Expected an EditorState, got {type(state).__name__}")

        # Copy again so the stored snapshot stays independent of later edits
        self.set_content(copy.deepcopy(state.content))
        self._logger.debug(f"Restored editor state: {state.content!r}")
