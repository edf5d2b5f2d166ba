"""Logging utilities for livecheck.

Architecture:
    Application -> QueueHandler -> Queue -> QueueListener Thread
                                                 |
                                     Console (+ optional File) Handlers

Rules for contributors:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Use %-formatting in log calls, never f-strings

Environment Variables:
    LIVECHECK_LOG_DIR: Enables file logging to $LIVECHECK_LOG_DIR/livecheck.log
"""

from livecheck.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from livecheck.logger.logger import (
    clear_logger_state,
    configure_logging,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from livecheck.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "configure_logging",
    "flush_all_handlers",
    "get_logger",
    "get_state",
    "setup_logging",
]
