"""GitHub infrastructure - authenticated REST client and credentials."""

from livecheck.github.auth import GitHubAuthManager
from livecheck.github.client import GitHubAPIClient
from livecheck.github.session import create_http_session
from livecheck.github.token import (
    EnvironmentTokenStore,
    KeyringTokenStore,
    validate_github_token,
)

__all__ = [
    "EnvironmentTokenStore",
    "GitHubAPIClient",
    "GitHubAuthManager",
    "KeyringTokenStore",
    "create_http_session",
    "validate_github_token",
]
