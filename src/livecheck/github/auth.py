"""GitHub authentication and rate limiting management.

``GitHubAuthManager`` applies credentials to request headers and tracks
rate-limit information reported by the API so the client can wait before
exhausting its quota.
"""

from __future__ import annotations

import time
from collections.abc import Mapping
from typing import Protocol

from livecheck.constants import (
    RATE_LIMIT_DEFAULT_WAIT_SECONDS,
    RATE_LIMIT_MAX_WAIT_SECONDS,
    RATE_LIMIT_THRESHOLD,
)
from livecheck.github.token import (
    EnvironmentTokenStore,
    KeyringTokenStore,
    validate_github_token,
)
from livecheck.logger import get_logger

logger = get_logger(__name__)


class TokenSource(Protocol):
    def get(self) -> str | None: ...


class GitHubAuthManager:
    """Manage GitHub authentication and rate limiting."""

    RATE_LIMIT_THRESHOLD: int = RATE_LIMIT_THRESHOLD

    def __init__(self, token_sources: list[TokenSource] | None = None) -> None:
        """Initialize the auth manager.

        Args:
            token_sources: Token sources tried in order. Defaults to the
                environment variable, then the keyring.

        """
        self.token_sources: list[TokenSource] = (
            token_sources
            if token_sources is not None
            else [EnvironmentTokenStore(), KeyringTokenStore()]
        )
        self._rate_limit_reset: int | None = None
        self._remaining_requests: int | None = None
        self._user_notified: bool = False

    @classmethod
    def create_default(cls) -> GitHubAuthManager:
        """Create auth manager with environment and keyring token lookup."""
        return cls()

    def get_token(self) -> str | None:
        """Return the first token found across the token sources."""
        for source in self.token_sources:
            token = source.get()
            if token:
                return token
        return None

    def apply_auth(self, headers: dict[str, str]) -> dict[str, str]:
        """Apply GitHub authentication to the given request headers.

        Without a token the headers are returned untouched and the user is
        told once about the unauthenticated rate limit.

        Args:
            headers: HTTP headers to update

        Returns:
            The same headers mapping

        """
        token = self.get_token()

        if token:
            headers["Authorization"] = f"Bearer {token}"
            logger.debug("Applied GitHub authentication (token present)")
        elif not self._user_notified:
            self._user_notified = True
            logger.info(
                "No GitHub token configured. API rate limits apply "
                "(60 requests/hour). Set LIVECHECK_GITHUB_TOKEN or store a "
                "token in the keyring to raise the limit to 5000/hour."
            )

        return headers

    def update_rate_limit_info(self, headers: Mapping[str, str]) -> None:
        """Update rate-limit information from GitHub response headers."""
        remaining = headers.get("X-RateLimit-Remaining")
        reset = headers.get("X-RateLimit-Reset")
        if remaining is None or reset is None:
            return
        try:
            self._remaining_requests = int(remaining)
            self._rate_limit_reset = int(reset)
        except (ValueError, TypeError):
            logger.warning("Invalid rate limit headers received")

    def get_rate_limit_status(self) -> dict[str, int | None]:
        """Return the current rate limit status.

        Returns:
            Mapping with keys 'remaining', 'reset_time' and
            'reset_in_seconds'; values are None when unknown.

        """
        current_time = int(time.time())

        # Once the reset time has passed the previous numbers are stale
        if self._rate_limit_reset and current_time >= self._rate_limit_reset:
            self._remaining_requests = None
            self._rate_limit_reset = None

        return {
            "remaining": self._remaining_requests,
            "reset_time": self._rate_limit_reset,
            "reset_in_seconds": (
                self._rate_limit_reset - current_time
                if self._rate_limit_reset
                else None
            ),
        }

    def should_wait_for_rate_limit(self) -> bool:
        """Return True when fewer than the threshold requests remain."""
        if self._remaining_requests is None:
            return False
        return self._remaining_requests < self.RATE_LIMIT_THRESHOLD

    def get_wait_time(self) -> int:
        """Return the recommended wait time in seconds.

        Reset time plus a 10 second buffer, capped at one hour; 60 seconds
        when the reset time is unknown.
        """
        reset_in = self.get_rate_limit_status()["reset_in_seconds"]
        if reset_in and reset_in > 0:
            return min(reset_in + 10, RATE_LIMIT_MAX_WAIT_SECONDS)
        return RATE_LIMIT_DEFAULT_WAIT_SECONDS

    def is_authenticated(self) -> bool:
        """Return whether a non-empty token is available."""
        token = self.get_token()
        return token is not None and len(token.strip()) > 0

    def is_token_valid(self) -> bool:
        """Return whether the available token has a valid format."""
        return validate_github_token(self.get_token())
