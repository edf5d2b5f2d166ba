"""HTTP session utilities for livecheck."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import aiohttp

from livecheck.config import LivecheckConfig
from livecheck.constants import DEFAULT_CONNECTION_LIMIT


@asynccontextmanager
async def create_http_session(
    config: LivecheckConfig,
) -> AsyncIterator[aiohttp.ClientSession]:
    """Create a configured HTTP session.

    Args:
        config: Loaded livecheck configuration

    Yields:
        Configured aiohttp.ClientSession

    """
    timeout = aiohttp.ClientTimeout(
        total=config.timeout_seconds * 3,
        sock_read=config.timeout_seconds * 2,
        sock_connect=config.timeout_seconds,
    )
    connector = aiohttp.TCPConnector(limit=DEFAULT_CONNECTION_LIMIT)

    async with aiohttp.ClientSession(
        timeout=timeout,
        connector=connector,
        headers={"User-Agent": config.user_agent},
    ) as session:
        yield session
