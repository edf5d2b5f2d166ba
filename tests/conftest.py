"""Pytest configuration and fixtures for livecheck tests."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from livecheck.logger import clear_logger_state


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for livecheck loggers during tests.

    The root ``livecheck`` logger is created with propagate=False; turning
    it on lets pytest's caplog fixture see records.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("livecheck"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Keep tests away from real tokens, settings and log directories."""
    monkeypatch.delenv("LIVECHECK_GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("LIVECHECK_CONFIG", raising=False)
    monkeypatch.delenv("LIVECHECK_LOG_DIR", raising=False)


@pytest.fixture
def fresh_logger_state():
    """Reset logger state before and after a test that reconfigures it."""
    clear_logger_state()
    yield
    clear_logger_state()


@pytest.fixture
def make_response():
    """Factory for mock aiohttp responses usable with ``async with``."""

    def _make(
        status: int = 200,
        body: bytes = b"{}",
        headers: dict[str, str] | None = None,
    ) -> AsyncMock:
        response = AsyncMock()
        response.__aenter__.return_value = response
        response.__aexit__.return_value = False
        response.status = status
        response.headers = headers or {}
        response.read = AsyncMock(return_value=body)
        return response

    return _make


@pytest.fixture
def mock_session():
    """Provide a mock aiohttp.ClientSession."""
    return MagicMock()
