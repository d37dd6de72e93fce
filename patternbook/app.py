"""
Patternbook - executable design-pattern demonstrations.

This is the main entry point for the demo runner.
Run with: python -m patternbook.app [state|memento|all]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from patternbook.exceptions import PatternbookError
from patternbook.memento.editor import Editor
from patternbook.memento.history import EditorHistory
from patternbook.services.config_service import ConfigService
from patternbook.services.logging_service import get_logger, setup_logging
from patternbook.state.canvas import Canvas
from patternbook.state.tools import EraserTool, SelectionTool, create_tool

DEMOS = ("state", "memento", "all")


def run_state_demo(canvas: Optional[Canvas] = None) -> Canvas:
    """
    Drive the canvas through both tools.

    Returns:
        The canvas, left with the selection tool active.
    """
    logger = get_logger(__name__)
    canvas = canvas if canvas is not None else Canvas()

    logger.info("State demo: eraser")
    canvas.set_tool(EraserTool())
    canvas.on_pointer_up()
    canvas.on_pointer_down()

    logger.info("State demo: selection")
    canvas.set_tool(SelectionTool())
    canvas.on_pointer_up()
    canvas.on_pointer_down()

    return canvas


def run_memento_demo(
    editor: Optional[Editor] = None,
    history: Optional[EditorHistory] = None,
) -> Tuple[Editor, EditorHistory]:
    """
    Edit, snapshot after each edit, then undo once.

    Returns:
        The editor and the history after the undo.
    """
    logger = get_logger(__name__)
    editor = editor if editor is not None else Editor()
    history = history if history is not None else EditorHistory()

    for content in ("Hello", "I am", "Muhammad"):
        editor.set_content(content)
        history.push(editor.create_state())
    logger.info(f"editor.value={editor.get_content()}")

    editor.restore(history.pop())
    logger.info(f"editor.value={editor.get_content()}")

    return editor, history


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="patternbook",
        description="Run the State and Memento pattern demonstrations.",
    )
    parser.add_argument(
        "demo",
        nargs="?",
        choices=DEMOS,
        default="all",
        help="Which demonstration to run (default: all)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: ~/.config/patternbook/config.json)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the demo runner.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    args = build_parser().parse_args(argv)

    config = ConfigService(args.config)
    try:
        setup_logging(
            log_level=logging.DEBUG if args.debug else config.log_level,
            log_to_file=config.log_to_file,
        )
    except ValueError as e:
        setup_logging()
        get_logger(__name__).error(f"Invalid logging configuration: {e}")
        return 1
    logger = get_logger(__name__)

    try:
        if args.demo in ("state", "all"):
            run_state_demo(Canvas(create_tool(config.default_tool)))

        if args.demo in ("memento", "all"):
            run_memento_demo(history=EditorHistory(max_size=config.history_limit))

    except (PatternbookError, ValueError) as e:
        logger.error(f"Demo failed: {e}")
        return 1

    logger.info(f"Demo '{args.demo}' finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
