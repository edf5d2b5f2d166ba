"""Handler creation for the logging system.

Handlers are only ever attached to a QueueListener; the root ``livecheck``
logger itself carries a single QueueHandler so coroutines never block on
stream or file I/O.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from livecheck.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
    ROOT_LOGGER_NAME,
)
from livecheck.exceptions import ConfigurationError
from livecheck.logger.formatters import HybridConsoleFormatter
from livecheck.logger.state import _LoggerState


def _create_console_handler(console_level: str) -> logging.StreamHandler:
    """Create console handler with hybrid formatting.

    Args:
        console_level: Log level for console (e.g., "DEBUG", "WARNING")

    Returns:
        Configured StreamHandler writing to stderr

    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(
        HybridConsoleFormatter(
            LOG_CONSOLE_FORMAT,
            datefmt=LOG_CONSOLE_DATE_FORMAT,
        )
    )
    console_handler.setLevel(getattr(logging, console_level, logging.WARNING))
    return console_handler


def _create_file_handler(log_file: Path, file_level: str) -> RotatingFileHandler:
    """Create rotating file handler.

    Args:
        log_file: Path to log file
        file_level: Log level for file (e.g., "DEBUG", "INFO")

    Returns:
        Configured RotatingFileHandler

    Raises:
        ConfigurationError: If the log directory or file cannot be opened

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=str(log_file),
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"Failed to setup file logging: {e}"
        raise ConfigurationError(msg, target=str(log_file)) from e

    file_handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, datefmt=LOG_FILE_DATE_FORMAT)
    )
    file_handler.setLevel(getattr(logging, file_level, logging.INFO))
    return file_handler


def build_handlers(
    console_level: str,
    file_level: str,
    log_file: Path | None,
) -> list[logging.Handler]:
    """Create the console handler and, if requested, the file handler.

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    console_handler = _create_console_handler(console_level)
    if log_file is None:
        return [console_handler]
    try:
        file_handler = _create_file_handler(log_file, file_level)
    except ConfigurationError:
        console_handler.close()
        raise
    return [console_handler, file_handler]


def install_handlers(
    state: _LoggerState, handlers: list[logging.Handler]
) -> None:
    """Attach already-built handlers to the root logger via QueueListener.

    Any QueueHandler left on the root logger is replaced. The caller stops
    the previous listener.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)  # Filter at handlers
    root_logger.propagate = False

    for handler in root_logger.handlers[:]:
        handler.close()
        root_logger.removeHandler(handler)

    state.log_queue = queue.Queue(-1)
    state.queue_listener = QueueListener(
        state.log_queue,
        *handlers,
        respect_handler_level=True,
    )
    state.queue_listener.start()

    root_logger.addHandler(QueueHandler(state.log_queue))
    state.root_initialized = True


def setup_root_logger(
    state: _LoggerState,
    console_level: str,
    file_level: str,
    log_file: Path | None,
) -> None:
    """Initialize root logger with handlers via QueueListener.

    Args:
        state: Logger state object
        console_level: Console log level
        file_level: File log level
        log_file: Path to log file, or None to disable file logging

    Raises:
        ConfigurationError: If handler setup fails; the root logger is left
            untouched in that case

    """
    handlers = build_handlers(console_level, file_level, log_file)
    install_handlers(state, handlers)
