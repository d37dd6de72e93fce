"""
Patternbook - executable design-pattern demonstrations.

This package contains the runnable pattern examples:
- state: Canvas that delegates pointer events to the active tool
- memento: Editor content snapshots and the undo history that stores them
- services: Application services (config, logging)
"""

__version__ = "0.1.0"
