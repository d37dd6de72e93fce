"""
Logging service for Patternbook.

This module provides centralized logging configuration with console and file output.
Pattern components report their reactions (tool events, history changes) through
the loggers returned by get_logger(). Log files are stored in
~/.local/share/patternbook/logs/ when file logging is enabled.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union


# Default log directory following XDG Base Directory Specification
DEFAULT_LOG_DIR = Path.home() / ".local" / "share" / "patternbook" / "logs"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Module-level flag to track if logging has been set up
_logging_initialized = False


def parse_log_level(level: Union[int, str]) -> int:
    """
    Convert a level name such as "debug" or "INFO" to a logging constant.

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def setup_logging(
    log_level: Union[int, str] = logging.INFO,
    log_to_file: bool = False,
    log_dir: Optional[Path] = None,
) -> None:
    """
    Configure the logging system for Patternbook.

    Args:
        log_level: The logging level (e.g., logging.DEBUG or "DEBUG").
        log_to_file: Whether to also log to a file.
        log_dir: Directory for log files. Defaults to ~/.local/share/patternbook/logs/

    This function should be called once at application startup.
    """
    global _logging_initialized

    if _logging_initialized:
        return

    level = parse_log_level(log_level)

    if log_dir is None:
        log_dir = DEFAULT_LOG_DIR

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    # Console handler - always enabled
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)

    if log_to_file:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)

            log_filename = f"patternbook_{datetime.now().strftime('%Y%m%d')}.log"
            log_path = log_dir / log_filename

            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
            root_logger.addHandler(file_handler)

        except (OSError, PermissionError) as e:
            # Console only
            console_handler.setLevel(logging.WARNING)
            root_logger.warning(f"Could not create log file: {e}. Logging to console only.")

    _logging_initialized = True


def reset_logging() -> None:
    """Allow setup_logging() to configure the root logger again."""
    global _logging_initialized
    _logging_initialized = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    Args:
        name: The name for the logger, typically __name__ of the calling module.

    Returns:
        A configured Logger instance.

    Usage:
        from patternbook.services.logging_service import get_logger
        logger = get_logger(__name__)
        logger.info("Canvas created")
    """
    return logging.getLogger(name)
