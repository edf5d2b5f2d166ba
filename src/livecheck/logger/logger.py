"""Public logging API.

- setup_logging(): initialize the root logger once and return a child
- get_logger(): convenience wrapper used by every module
- configure_logging(): apply levels from a LivecheckConfig at runtime
- flush_all_handlers() / clear_logger_state(): test and shutdown helpers
"""

from __future__ import annotations

import atexit
import contextlib
import logging
import os
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from livecheck.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    LOG_FILE_NAME,
    ROOT_LOGGER_NAME,
)
from livecheck.logger.handlers import (
    build_handlers,
    install_handlers,
    setup_root_logger,
)
from livecheck.logger.state import get_state

if TYPE_CHECKING:
    from livecheck.config import LivecheckConfig


def default_log_file() -> Path | None:
    """Return the bootstrap log file path.

    File logging is off unless ``LIVECHECK_LOG_DIR`` is set; a library
    should not write under the user's home directory by default.
    """
    env_log_dir = os.getenv(ENV_LOG_DIR)
    if env_log_dir:
        return Path(env_log_dir).expanduser() / LOG_FILE_NAME
    return None


def flush_all_handlers() -> None:
    """Wait for the queue to drain and flush every listener handler."""
    state = get_state()
    if state.queue_listener is None or state.log_queue is None:
        return

    # QueueListener doesn't use task_done(), so poll the queue
    deadline = time.monotonic() + 5.0
    while not state.log_queue.empty() and time.monotonic() < deadline:
        time.sleep(0.01)
    time.sleep(0.05)

    for handler in state.queue_listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _cleanup_logging() -> None:
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        state.queue_listener = None


atexit.register(_cleanup_logging)


def setup_logging(
    name: str = ROOT_LOGGER_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure logging with the QueueHandler architecture.

    The root logger is initialized exactly once; later calls only return
    the requested child logger.

    Args:
        name: Logger name, typically __name__
        console_level: Console log level ("DEBUG", "INFO", "WARNING", ...)
        file_level: File log level
        log_file: Path to log file; defaults to ``$LIVECHECK_LOG_DIR``

    Returns:
        Logger instance

    Raises:
        ConfigurationError: If file logging setup fails

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            setup_root_logger(
                state,
                console_level or DEFAULT_CONSOLE_LOG_LEVEL,
                file_level or DEFAULT_LOG_LEVEL,
                log_file if log_file is not None else default_log_file(),
            )

    return logging.getLogger(name)


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger in the ``livecheck`` hierarchy.

    Usage:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Fetching %s", url)

    """
    return setup_logging(name=name)


def configure_logging(config: LivecheckConfig) -> None:
    """Apply log levels (and an optional log file) from configuration.

    Handler levels are updated in place. If the config names a log file and
    none is attached yet, the root logger is rebuilt with one.

    Args:
        config: Loaded livecheck configuration

    Raises:
        ConfigurationError: If the log file cannot be opened; the current
            handlers keep running

    """
    state = get_state()
    has_file_handler = state.queue_listener is not None and any(
        isinstance(handler, RotatingFileHandler)
        for handler in state.queue_listener.handlers
    )

    if config.log_file is not None and not has_file_handler:
        with state.lock:
            # Built first: a bad log file must not tear down working logging
            handlers = build_handlers(
                config.console_log_level,
                config.log_level,
                config.log_file,
            )
            _stop_listener()
            # Same root logger object, so module-level loggers stay attached
            install_handlers(state, handlers)
    else:
        setup_logging()
        console_level = getattr(logging, config.console_log_level)
        file_level = getattr(logging, config.log_level)
        if state.queue_listener is not None:
            for handler in state.queue_listener.handlers:
                if isinstance(handler, RotatingFileHandler):
                    handler.setLevel(file_level)
                else:
                    handler.setLevel(console_level)


def _stop_listener() -> None:
    """Stop the listener thread and close its handlers (caller holds lock)."""
    state = get_state()
    if state.queue_listener is not None:
        flush_all_handlers()
        state.queue_listener.stop()
        for handler in state.queue_listener.handlers:
            handler.close()
        state.queue_listener = None


def clear_logger_state() -> None:
    """Stop the listener and detach all livecheck handlers.

    Intended for tests; disrupts active logging. Logger objects are kept in
    the logging manager so module-level ``logger`` references stay valid.
    """
    state = get_state()
    with state.lock:
        _stop_listener()
        state.log_queue = None
        state.root_initialized = False

        for logger_name in list(logging.Logger.manager.loggerDict.keys()):
            if logger_name.startswith(ROOT_LOGGER_NAME):
                log_instance = logging.getLogger(logger_name)
                for handler in log_instance.handlers[:]:
                    handler.close()
                    log_instance.removeHandler(handler)
