"""Low-level GitHub REST client.

Performs authenticated GET requests against the GitHub API and decodes the
JSON body. Transport failures are retried with exponential backoff; HTTP
error statuses are mapped onto the ``UpstreamFetchError`` hierarchy and
raised immediately.
"""

import asyncio
from typing import Any

import aiohttp
import orjson

from livecheck.config import LivecheckConfig
from livecheck.constants import GITHUB_ACCEPT_HEADER, GITHUB_API_VERSION
from livecheck.exceptions import (
    AuthenticationFailedError,
    HTTPNotFoundError,
    RateLimitExceededError,
    UpstreamFetchError,
)
from livecheck.github.auth import GitHubAuthManager
from livecheck.logger import get_logger

logger = get_logger(__name__)

HTTP_UNAUTHORIZED = 401
HTTP_FORBIDDEN = 403
HTTP_NOT_FOUND = 404
HTTP_TOO_MANY_REQUESTS = 429
HTTP_ERROR_THRESHOLD = 400


class GitHubAPIClient:
    """Fetches and decodes JSON from GitHub REST API URLs."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        auth_manager: GitHubAuthManager | None = None,
        config: LivecheckConfig | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            session: aiohttp session for making requests
            auth_manager: GitHub authentication manager
                         (creates default if not provided)
            config: Network settings (defaults if not provided)

        """
        self.session = session
        self.auth_manager = auth_manager or GitHubAuthManager.create_default()
        self.config = config or LivecheckConfig()

    def _build_headers(self) -> dict[str, str]:
        headers = {
            "Accept": GITHUB_ACCEPT_HEADER,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": self.config.user_agent,
        }
        return self.auth_manager.apply_auth(headers)

    async def _wait_for_rate_limit(self) -> None:
        if not self.auth_manager.should_wait_for_rate_limit():
            return
        wait_time = self.auth_manager.get_wait_time()
        logger.warning(
            "GitHub API rate limit low (%s remaining). Waiting %s s",
            self.auth_manager.get_rate_limit_status()["remaining"],
            wait_time,
        )
        await asyncio.sleep(wait_time)

    def _raise_for_status(
        self, url: str, status: int, headers: Any, body: bytes
    ) -> None:
        """Map an HTTP error status onto the fetch error hierarchy."""
        if status < HTTP_ERROR_THRESHOLD:
            return

        message = _error_message(body) or f"HTTP {status}"

        if status == HTTP_UNAUTHORIZED:
            raise AuthenticationFailedError(message, target=url, status=status)

        if status in (HTTP_FORBIDDEN, HTTP_TOO_MANY_REQUESTS) and (
            headers.get("X-RateLimit-Remaining") == "0"
        ):
            reset = headers.get("X-RateLimit-Reset")
            raise RateLimitExceededError(
                message,
                target=url,
                status=status,
                reset_time=int(reset) if reset and reset.isdigit() else None,
            )

        if status == HTTP_NOT_FOUND:
            raise HTTPNotFoundError(message, target=url, status=status)

        raise UpstreamFetchError(message, target=url, status=status)

    async def open_rest(self, url: str) -> Any:
        """GET a GitHub API URL and return the decoded JSON body.

        Args:
            url: Full GitHub API URL

        Returns:
            Decoded JSON value (dict, list or scalar)

        Raises:
            AuthenticationFailedError: Credentials were rejected (401)
            RateLimitExceededError: Rate limit exhausted (403/429)
            HTTPNotFoundError: Resource does not exist (404)
            UpstreamFetchError: Any other HTTP error, transport failure
                after all retries, or an undecodable body

        """
        await self._wait_for_rate_limit()
        headers = self._build_headers()
        retry_attempts = self.config.retry_attempts

        for attempt in range(1, retry_attempts + 1):
            try:
                async with self.session.get(url, headers=headers) as response:
                    body = await response.read()
                    self.auth_manager.update_rate_limit_info(response.headers)
                    self._raise_for_status(
                        url, response.status, response.headers, body
                    )
                    break
            except (aiohttp.ClientError, TimeoutError) as e:
                logger.warning(
                    "Attempt %d/%d for %s failed: %s",
                    attempt,
                    retry_attempts,
                    url,
                    e,
                )
                if attempt == retry_attempts:
                    logger.error(
                        "API fetch failed after %d attempts: %s - %s",
                        attempt,
                        url,
                        e,
                    )
                    msg = f"request failed after {attempt} attempts: {e}"
                    raise UpstreamFetchError(msg, target=url) from e
                await asyncio.sleep(2**attempt)

        try:
            return orjson.loads(body)
        except orjson.JSONDecodeError as e:
            msg = f"failed to parse JSON: {e}"
            raise UpstreamFetchError(msg, target=url) from e


def _error_message(body: bytes) -> str | None:
    """Extract GitHub's ``message`` field from an error body, if any."""
    try:
        data = orjson.loads(body)
    except orjson.JSONDecodeError:
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return None
