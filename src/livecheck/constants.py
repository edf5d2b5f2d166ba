"""Centralized constants module for livecheck.

Single source of truth for shared defaults. Values here are only defaults:
anything that varies per deployment is carried by ``LivecheckConfig`` and
injected where it is needed.

Usage:
    from livecheck.constants import DEFAULT_GITHUB_API_URL
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "settings.conf"
CONFIG_DIR_NAME: Final[str] = ".config"
DEFAULT_CONFIG_SUBDIR: Final[str] = "livecheck"

# Environment overrides
ENV_CONFIG_PATH: Final[str] = "LIVECHECK_CONFIG"
ENV_LOG_DIR: Final[str] = "LIVECHECK_LOG_DIR"
ENV_GITHUB_TOKEN: Final[str] = "LIVECHECK_GITHUB_TOKEN"

# Config section and key names
SECTION_GITHUB: Final[str] = "github"
SECTION_NETWORK: Final[str] = "network"
SECTION_LOGGING: Final[str] = "logging"

KEY_API_URL: Final[str] = "api_url"
KEY_USER_AGENT: Final[str] = "user_agent"
KEY_TIMEOUT_SECONDS: Final[str] = "timeout_seconds"
KEY_RETRY_ATTEMPTS: Final[str] = "retry_attempts"
KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_LOG_FILE: Final[str] = "log_file"

# =============================================================================
# GitHub API Constants
# =============================================================================

DEFAULT_GITHUB_API_URL: Final[str] = "https://api.github.com"
GITHUB_API_VERSION: Final[str] = "2022-11-28"
GITHUB_ACCEPT_HEADER: Final[str] = "application/vnd.github+json"
DEFAULT_USER_AGENT: Final[str] = "livecheck"

KEYRING_SERVICE_NAME: Final[str] = "livecheck-github-token"
KEYRING_USERNAME: Final[str] = "token"

# Minimum remaining requests before the client waits for a reset
RATE_LIMIT_THRESHOLD: Final[int] = 10
RATE_LIMIT_MAX_WAIT_SECONDS: Final[int] = 3600
RATE_LIMIT_DEFAULT_WAIT_SECONDS: Final[int] = 60

# =============================================================================
# Network Constants
# =============================================================================

DEFAULT_TIMEOUT_SECONDS: Final[int] = 10
DEFAULT_RETRY_ATTEMPTS: Final[int] = 3
DEFAULT_CONNECTION_LIMIT: Final[int] = 10

# =============================================================================
# Logging Constants
# =============================================================================

ROOT_LOGGER_NAME: Final[str] = "livecheck"
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
VALID_LOG_LEVELS: Final[tuple[str, ...]] = (
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
)

LOG_FILE_NAME: Final[str] = "livecheck.log"
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB
LOG_BACKUP_COUNT: Final[int] = 3

LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
