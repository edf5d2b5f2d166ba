"""GitHub API strategy.

Fetches content at a GitHub API URL, parses it as JSON and hands the parsed
data to a caller-supplied extractor. It behaves like a plain JSON strategy
but goes through ``GitHubAPIClient`` so requests are authenticated.

It is never applied automatically: it should only be requested when the
tag or release based checks are not sufficient (for example a repository
with too many tags to page through), and always together with an
extractor.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, ClassVar

from livecheck.constants import DEFAULT_GITHUB_API_URL
from livecheck.exceptions import InvalidUsageError
from livecheck.logger import get_logger
from livecheck.strategy.base import (
    Extractor,
    MatchResult,
    Strategy,
    handle_block_return,
    is_blank,
)
from livecheck.version import Version, parse_version

if TYPE_CHECKING:
    from livecheck.github.client import GitHubAPIClient

logger = get_logger(__name__)


class GithubApiStrategy(Strategy):
    """Find versions in GitHub API JSON responses using an extractor."""

    NICE_NAME: ClassVar[str] = "GitHub API"
    requires_explicit_invocation: ClassVar[bool] = True

    def __init__(
        self,
        client: GitHubAPIClient,
        api_url: str = DEFAULT_GITHUB_API_URL,
    ) -> None:
        """Initialize the strategy.

        Args:
            client: Authenticated GitHub REST client
            api_url: GitHub API base URL used for matching

        """
        self.client = client
        self.api_url = api_url.rstrip("/")
        self.url_match_regex = re.compile(
            rf"^{re.escape(self.api_url)}/", re.IGNORECASE
        )

    def match(self, url: str) -> bool:
        """Whether the strategy can be applied to the provided URL."""
        return bool(self.url_match_regex.match(url))

    def versions_from_content(
        self,
        content: Any,
        pattern: re.Pattern[str] | None,
        extractor: Extractor | None,
    ) -> list[str]:
        """Identify versions in parsed JSON using the extractor.

        If a pattern is provided it is passed to the extractor along with
        the content.

        Args:
            content: Parsed JSON to check
            pattern: Pattern used for matching versions in the content
            extractor: Caller-supplied extraction routine

        Returns:
            Candidate version strings

        Raises:
            InvalidUsageError: If a ``PatternExtractor`` gets no pattern

        """
        if is_blank(content) or extractor is None:
            return []

        return handle_block_return(extractor.extract(content, pattern))

    async def find_versions(
        self,
        url: str,
        pattern: re.Pattern[str] | str | None = None,
        extractor: Extractor | None = None,
    ) -> MatchResult:
        """Check the JSON response at a GitHub API URL for versions.

        Args:
            url: URL of the content to check
            pattern: Pattern used for matching versions
            extractor: Extraction routine; required

        Returns:
            Matched version strings mapped to parsed versions

        Raises:
            InvalidUsageError: If no extractor is given
            UpstreamFetchError: From the client, unchanged
            VersionParseError: If an extracted string is not a version

        """
        if extractor is None:
            msg = "an extractor is required"
            raise InvalidUsageError(msg, target=self.NICE_NAME)

        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        if not url:
            return MatchResult(url=url, regex=regex)

        logger.debug("Fetching %s", url)
        content = await self.client.open_rest(url)

        matches: dict[str, Version] = {}
        for match_text in self.versions_from_content(content, regex, extractor):
            matches[match_text] = parse_version(match_text)

        logger.debug("Found %d version(s) at %s", len(matches), url)
        return MatchResult(url=url, regex=regex, matches=matches)
