"""Exception classes for livecheck operations."""


class LivecheckError(Exception):
    """Base exception for livecheck operations."""

    error_prefix: str = "Livecheck failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the target that failed (a URL, a
                strategy name or a version string).

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class InvalidUsageError(LivecheckError):
    """Raised when a strategy is called with an unusable configuration."""

    error_prefix = "Invalid usage"


class ConfigurationError(LivecheckError):
    """Raised when settings or logging configuration is invalid."""

    error_prefix = "Invalid configuration"


class VersionParseError(LivecheckError):
    """Raised when a matched string cannot be parsed as a version."""

    error_prefix = "Version parse failed"


class UpstreamFetchError(LivecheckError):
    """Raised when fetching or decoding upstream content fails."""

    error_prefix = "Upstream fetch failed"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        status: int | None = None,
    ) -> None:
        """Initialize error with an optional HTTP status.

        Args:
            message: Error message describing the failure.
            target: URL that was being fetched.
            status: HTTP status code when the server answered.

        """
        super().__init__(message, target)
        self.status = status


class AuthenticationFailedError(UpstreamFetchError):
    """Raised when GitHub rejects the configured credentials."""

    error_prefix = "GitHub authentication failed"


class RateLimitExceededError(UpstreamFetchError):
    """Raised when the GitHub API rate limit is exhausted."""

    error_prefix = "GitHub API rate limit exceeded"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        status: int | None = None,
        reset_time: int | None = None,
    ) -> None:
        """Initialize error with the rate-limit reset timestamp.

        Args:
            message: Error message describing the failure.
            target: URL that was being fetched.
            status: HTTP status code returned by GitHub.
            reset_time: Epoch seconds at which the limit resets, if known.

        """
        super().__init__(message, target, status)
        self.reset_time = reset_time


class HTTPNotFoundError(UpstreamFetchError):
    """Raised when the requested API resource does not exist."""

    error_prefix = "GitHub resource not found"
