"""Memento pattern: editor snapshots and a LIFO history."""

from patternbook.memento.editor import Editor, EditorState
from patternbook.memento.history import EditorHistory

__all__ = ["Editor", "EditorHistory", "EditorState"]
