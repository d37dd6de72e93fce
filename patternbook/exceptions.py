"""Exceptions raised by the pattern components."""


class PatternbookError(Exception):
    """Base exception for patternbook errors."""
    pass


class NoToolSetError(PatternbookError):
    """Raised when a pointer event is dispatched before any tool is set."""
    pass


class EmptyHistoryError(PatternbookError, IndexError):
    """Raised when popping or peeking an empty editor history."""
    pass
