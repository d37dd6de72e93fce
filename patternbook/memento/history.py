"""
Undo history for the Memento pattern demo.

EditorHistory is a LIFO stack of EditorState snapshots. It treats snapshots as
opaque values and is the only owner of its storage: push(), pop() and clear()
are the only ways to change it.
"""

from typing import List, Optional

from PySide6.QtCore import QObject, Signal

from patternbook.exceptions import EmptyHistoryError
from patternbook.memento.editor import EditorState
from patternbook.services.logging_service import get_logger


class EditorHistory(QObject):
    """
    Caretaker storing editor snapshots in capture order.

    Unbounded by default. With max_size set, pushing onto a full history
    discards the oldest snapshot and logs a warning.

    Signals:
        size_changed: Emitted with the new number of stored snapshots.
    """

    size_changed = Signal(int)

    def __init__(self, max_size: Optional[int] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        if max_size is not None and (isinstance(max_size, bool) or not isinstance(max_size, int)):
            raise TypeError(f"max_size must be an int or None, got {type(max_size).__name__}")
        if max_size is not None and max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")

        self._logger = get_logger(__name__)
        self._states: List[EditorState] = []
        self._max_size = max_size

    @property
    def max_size(self) -> Optional[int]:
        return self._max_size

    @property
    def is_empty(self) -> bool:
        return not self._states

    def __len__(self) -> int:
        return len(self._states)

    def push(self, state: EditorState) -> None:
        """Store a snapshot as the most recent entry."""
        if not isinstance(state, EditorState):
            raise TypeError(f"Expected an EditorState, got {type(state).__name__}")

        self._states.append(state)
        if self._max_size is not None and len(self._states) > self._max_size:
            self._states.pop(0)
            self._logger.warning(
                f"History limit of {self._max_size} reached, discarded oldest state"
            )

        self.size_changed.emit(len(self._states))

    def pop(self) -> EditorState:
        """
        Remove and return the most recently pushed snapshot.

        Raises:
            EmptyHistoryError: If no snapshots are stored.
        """
        if not self._states:
            self._logger.warning("Pop requested on empty history")
            raise EmptyHistoryError("Cannot pop from an empty history")

        state = self._states.pop()
        self.size_changed.emit(len(self._states))
        return state

    def peek(self) -> EditorState:
        """Return the most recent snapshot without removing it."""
        if not self._states:
            self._logger.warning("Peek requested on empty history")
            raise EmptyHistoryError("Cannot peek into an empty history")
        return self._states[-1]

    def clear(self) -> None:
        """Drop all stored snapshots."""
        self._states.clear()
        self.size_changed.emit(0)
