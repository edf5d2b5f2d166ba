"""GitHub token lookup and storage.

Tokens come from the ``LIVECHECK_GITHUB_TOKEN`` environment variable when it
is set, otherwise from the system keyring (SecretService on Linux, Keychain
on macOS, Credential Manager on Windows).
"""

import os
import re

import keyring
from keyring.backends import fail
from keyring.errors import KeyringError as BackendKeyringError
from keyring.errors import PasswordDeleteError

from livecheck.constants import (
    ENV_GITHUB_TOKEN,
    KEYRING_SERVICE_NAME,
    KEYRING_USERNAME,
)
from livecheck.logger import get_logger

logger = get_logger(__name__)

MAX_TOKEN_LENGTH: int = 255

_PREFIXED_TOKEN_PATTERNS = (
    re.compile(r"^ghp_[A-Za-z0-9_]{36,251}$"),  # Personal Access Tokens
    re.compile(r"^gho_[A-Za-z0-9_]{36,251}$"),  # OAuth Access tokens
    re.compile(r"^ghu_[A-Za-z0-9_]{36,251}$"),  # App user-to-server
    re.compile(r"^ghs_[A-Za-z0-9_]{36,251}$"),  # App server-to-server
    re.compile(r"^ghr_[A-Za-z0-9_]{36,251}$"),  # App refresh tokens
    re.compile(r"^github_pat_[A-Za-z0-9_]{36,243}$"),  # Fine-grained PATs
)
_LEGACY_TOKEN_PATTERN = re.compile(r"^[a-f0-9]{40}$")


class KeyringError(Exception):
    """Base exception for keyring-related errors."""


class KeyringUnavailableError(KeyringError):
    """Raised when no usable keyring backend exists (e.g., headless)."""


def validate_github_token(token: str | None) -> bool:
    """Validate GitHub token format.

    Accepts classic 40-character hexadecimal tokens and the prefixed
    formats (``ghp_``, ``gho_``, ``ghu_``, ``ghs_``, ``ghr_``,
    ``github_pat_``).

    Args:
        token: The token to validate

    Returns:
        True if the token format is valid, False otherwise

    """
    if not token or not isinstance(token, str):
        return False

    token = token.strip()
    if not token:
        return False

    if len(token) > MAX_TOKEN_LENGTH:
        logger.warning("Token exceeds maximum allowed length")
        return False

    if _LEGACY_TOKEN_PATTERN.match(token):
        return True

    return any(pattern.match(token) for pattern in _PREFIXED_TOKEN_PATTERNS)


def setup_keyring() -> None:
    """Check that a real keyring backend is active.

    Raises:
        KeyringUnavailableError: If keyring resolved to its fail backend

    """
    backend = keyring.get_keyring()
    if isinstance(backend, fail.Keyring):
        msg = "No keyring backend available"
        raise KeyringUnavailableError(msg)
    logger.debug("Using keyring backend %s", type(backend).__name__)


class KeyringTokenStore:
    """Token storage backed by the system keyring."""

    def __init__(
        self,
        service: str = KEYRING_SERVICE_NAME,
        username: str = KEYRING_USERNAME,
    ) -> None:
        """Initialize the keyring token store.

        Args:
            service: The service name for keyring storage.
            username: The username for keyring storage.

        """
        self.service = service
        self.username = username
        self._initialized = False
        self._unavailable = False

    def _ensure_initialized(self) -> None:
        if self._initialized or self._unavailable:
            return
        try:
            setup_keyring()
            self._initialized = True
        except KeyringUnavailableError:
            self._unavailable = True
            logger.debug("Keyring unavailable (headless environment?)")

    def is_available(self) -> bool:
        """Return whether a keyring backend can be used."""
        self._ensure_initialized()
        return not self._unavailable

    def get(self) -> str | None:
        """Retrieve the stored token.

        Returns:
            The token, or None if not stored or keyring is unavailable

        """
        self._ensure_initialized()
        if self._unavailable:
            return None

        try:
            token = keyring.get_password(self.service, self.username)
        except BackendKeyringError:
            # Don't log exception details, they may echo secrets
            logger.debug("Keyring access failed")
            return None

        if token:
            logger.debug("GitHub token retrieved from keyring (value hidden)")
            return token
        logger.debug("No token stored in keyring")
        return None

    def set(self, token: str) -> None:
        """Store the token in the keyring.

        Raises:
            ValueError: If the token format is invalid
            KeyringUnavailableError: If no keyring backend is available

        """
        if not validate_github_token(token):
            msg = "Invalid GitHub token format"
            raise ValueError(msg)
        self._ensure_initialized()
        if self._unavailable:
            msg = "No keyring backend available"
            raise KeyringUnavailableError(msg)
        keyring.set_password(self.service, self.username, token.strip())
        logger.debug("Token saved to keyring")

    def delete(self) -> None:
        """Remove the token from the keyring.

        Raises:
            keyring.errors.PasswordDeleteError: If no token is stored

        """
        self._ensure_initialized()
        try:
            keyring.delete_password(self.service, self.username)
        except PasswordDeleteError:
            logger.debug("No token found in keyring to delete")
            raise
        logger.debug("Token removed from keyring")


class EnvironmentTokenStore:
    """Read-only token source backed by an environment variable."""

    def __init__(self, variable: str = ENV_GITHUB_TOKEN) -> None:
        self.variable = variable

    def get(self) -> str | None:
        token = os.getenv(self.variable, "").strip()
        return token or None
