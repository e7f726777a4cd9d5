"""Logging configuration for sclogparser."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from sclogparser.config.paths import get_data_dir

# Module-level logger
_logger: Optional[logging.Logger] = None

# Constants
LOGGER_NAME = "sclogparser"
LOG_FILENAME = "sclogparser.log"
MAX_BYTES = 5 * 1024 * 1024  # 5MB
BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_log_path(portable: bool = False) -> Path:
    """Get the path to the log file."""
    return get_data_dir(portable=portable) / LOG_FILENAME


def setup_logging(
    portable: bool = False,
    console: bool = True,
    verbose: bool = False,
) -> logging.Logger:
    """
    Configure and return the application logger.

    Args:
        portable: If True, use portable data directory for log file
        console: If True, also log to stderr
        verbose: Log DEBUG messages instead of INFO

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        return _logger

    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Prevent duplicate handlers if called multiple times
    if logger.handlers:
        _logger = logger
        return logger

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # File handler with rotation
    try:
        log_path = get_log_path(portable=portable)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=MAX_BYTES,
            backupCount=BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        # If we can't create log file, continue without file logging
        print(f"Warning: Could not create log file: {e}", file=sys.stderr)

    # Console goes to stderr so rendered RTF on stdout stays clean
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the application logger.

    Handlers are only attached by setup_logging(); library code that runs
    before (or without) it logs through whatever the host application set up.
    """
    if _logger is None:
        return logging.getLogger(LOGGER_NAME)
    return _logger
