"""Configuration loading for livecheck.

Settings live in an INI file (``~/.config/livecheck/settings.conf`` unless
``LIVECHECK_CONFIG`` points elsewhere) and are read once into an immutable
``LivecheckConfig`` that callers inject into the pieces that need it.

Example settings.conf:

    [github]
    api_url = https://api.github.com
    user_agent = livecheck

    [network]
    timeout_seconds = 10
    retry_attempts = 3

    [logging]
    log_level = INFO
    console_log_level = WARNING
    log_file = ~/.cache/livecheck/livecheck.log
"""

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from livecheck.constants import (
    CONFIG_DIR_NAME,
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_GITHUB_API_URL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RETRY_ATTEMPTS,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    ENV_CONFIG_PATH,
    KEY_API_URL,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_FILE,
    KEY_LOG_LEVEL,
    KEY_RETRY_ATTEMPTS,
    KEY_TIMEOUT_SECONDS,
    KEY_USER_AGENT,
    SECTION_GITHUB,
    SECTION_LOGGING,
    SECTION_NETWORK,
    VALID_LOG_LEVELS,
)
from livecheck.exceptions import ConfigurationError


@dataclass(frozen=True)
class LivecheckConfig:
    """Immutable livecheck settings."""

    github_api_url: str = DEFAULT_GITHUB_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    retry_attempts: int = DEFAULT_RETRY_ATTEMPTS
    log_level: str = DEFAULT_LOG_LEVEL
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    log_file: Path | None = None

    def __post_init__(self) -> None:
        for key in ("timeout_seconds", "retry_attempts"):
            value = getattr(self, key)
            if value < 1:
                msg = f"{key} must be at least 1, got {value}"
                raise ConfigurationError(msg)
        for key in ("log_level", "console_log_level"):
            level = getattr(self, key)
            if level not in VALID_LOG_LEVELS:
                msg = (
                    f"{key} must be one of {', '.join(VALID_LOG_LEVELS)}, "
                    f"got {level!r}"
                )
                raise ConfigurationError(msg)


def default_config_path() -> Path:
    """Return the settings file location, honouring ``LIVECHECK_CONFIG``."""
    env_path = os.getenv(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path).expanduser()
    return (
        Path.home() / CONFIG_DIR_NAME / DEFAULT_CONFIG_SUBDIR / CONFIG_FILE_NAME
    )


def _get_positive_int(
    parser: configparser.ConfigParser, section: str, key: str, default: int
) -> int:
    raw = parser.get(section, key, fallback=None)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        msg = f"{section}.{key} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from None
    if value < 1:
        msg = f"{section}.{key} must be at least 1, got {value}"
        raise ConfigurationError(msg)
    return value


def _get_log_level(
    parser: configparser.ConfigParser, key: str, default: str
) -> str:
    level = parser.get(SECTION_LOGGING, key, fallback=default).strip().upper()
    if level not in VALID_LOG_LEVELS:
        msg = (
            f"{SECTION_LOGGING}.{key} must be one of "
            f"{', '.join(VALID_LOG_LEVELS)}, got {level!r}"
        )
        raise ConfigurationError(msg)
    return level


def load_config(path: Path | None = None) -> LivecheckConfig:
    """Load settings from an INI file.

    A missing file is not an error: the defaults are returned.

    Args:
        path: Settings file; defaults to ``default_config_path()``

    Returns:
        Parsed configuration

    Raises:
        ConfigurationError: If the file is unreadable or holds invalid values

    """
    config_path = path if path is not None else default_config_path()
    parser = configparser.ConfigParser(interpolation=None)
    try:
        parser.read(config_path, encoding="utf-8")
    except (configparser.Error, UnicodeDecodeError) as e:
        msg = f"Cannot parse settings file: {e}"
        raise ConfigurationError(msg, target=str(config_path)) from e

    api_url = parser.get(
        SECTION_GITHUB, KEY_API_URL, fallback=DEFAULT_GITHUB_API_URL
    ).strip()
    if not api_url:
        msg = f"{SECTION_GITHUB}.{KEY_API_URL} must not be empty"
        raise ConfigurationError(msg, target=str(config_path))

    log_file_raw = parser.get(SECTION_LOGGING, KEY_LOG_FILE, fallback="")
    log_file = (
        Path(log_file_raw.strip()).expanduser()
        if log_file_raw.strip()
        else None
    )

    return LivecheckConfig(
        github_api_url=api_url.rstrip("/"),
        user_agent=parser.get(
            SECTION_GITHUB, KEY_USER_AGENT, fallback=DEFAULT_USER_AGENT
        ).strip()
        or DEFAULT_USER_AGENT,
        timeout_seconds=_get_positive_int(
            parser, SECTION_NETWORK, KEY_TIMEOUT_SECONDS, DEFAULT_TIMEOUT_SECONDS
        ),
        retry_attempts=_get_positive_int(
            parser, SECTION_NETWORK, KEY_RETRY_ATTEMPTS, DEFAULT_RETRY_ATTEMPTS
        ),
        log_level=_get_log_level(parser, KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL),
        console_log_level=_get_log_level(
            parser, KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL
        ),
        log_file=log_file,
    )
