"""Tests for GitHubAuthManager: token lookup and rate limit logic."""

import logging
import time

import pytest

from livecheck.github.auth import GitHubAuthManager

VALID_PAT = "ghp_" + "a" * 36


class StaticTokenSource:
    """Token source returning a fixed value."""

    def __init__(self, token):
        self.token = token
        self.calls = 0

    def get(self):
        self.calls += 1
        return self.token


@pytest.fixture
def auth_manager():
    """Auth manager with an authenticated token source."""
    return GitHubAuthManager(token_sources=[StaticTokenSource(VALID_PAT)])


@pytest.fixture
def anonymous_manager():
    """Auth manager with no token available."""
    return GitHubAuthManager(token_sources=[StaticTokenSource(None)])


def test_get_token_first_source_wins():
    """Test token sources are tried in order."""
    first = StaticTokenSource(None)
    second = StaticTokenSource(VALID_PAT)
    third = StaticTokenSource("a" * 40)
    manager = GitHubAuthManager(token_sources=[first, second, third])

    assert manager.get_token() == VALID_PAT
    assert third.calls == 0


def test_apply_auth_with_token(auth_manager):
    """Test apply_auth sets a bearer Authorization header."""
    headers = auth_manager.apply_auth({"Accept": "x"})
    assert headers["Authorization"] == f"Bearer {VALID_PAT}"
    assert headers["Accept"] == "x"


def test_apply_auth_without_token_notifies_once(anonymous_manager, caplog):
    """Test missing token leaves headers untouched and logs once."""
    with caplog.at_level(logging.INFO, logger="livecheck"):
        first = anonymous_manager.apply_auth({})
        anonymous_manager.apply_auth({})

    assert "Authorization" not in first
    notices = [r for r in caplog.records if "No GitHub token" in r.message]
    assert len(notices) == 1


def test_default_sources_read_environment(monkeypatch):
    """Test the default manager picks up LIVECHECK_GITHUB_TOKEN."""
    monkeypatch.setenv("LIVECHECK_GITHUB_TOKEN", VALID_PAT)
    manager = GitHubAuthManager.create_default()
    assert manager.get_token() == VALID_PAT
    assert manager.is_authenticated() is True
    assert manager.is_token_valid() is True


def test_update_rate_limit_info(auth_manager):
    """Test rate limit headers are recorded."""
    reset = int(time.time()) + 100
    auth_manager.update_rate_limit_info(
        {"X-RateLimit-Remaining": "42", "X-RateLimit-Reset": str(reset)}
    )
    status = auth_manager.get_rate_limit_status()
    assert status["remaining"] == 42
    assert status["reset_time"] == reset
    assert 0 < status["reset_in_seconds"] <= 100


def test_update_rate_limit_info_missing_headers(auth_manager):
    """Test responses without rate limit headers change nothing."""
    auth_manager.update_rate_limit_info({})
    assert auth_manager.get_rate_limit_status()["remaining"] is None
    assert auth_manager.should_wait_for_rate_limit() is False


def test_update_rate_limit_info_invalid(auth_manager, caplog):
    """Test malformed headers are ignored with a warning."""
    with caplog.at_level(logging.WARNING, logger="livecheck"):
        auth_manager.update_rate_limit_info(
            {"X-RateLimit-Remaining": "many", "X-RateLimit-Reset": "soon"}
        )
    assert "Invalid rate limit headers" in caplog.text


def test_should_wait_and_wait_time(auth_manager):
    """Test low remaining count triggers a bounded wait."""
    reset = int(time.time()) + 30
    auth_manager.update_rate_limit_info(
        {"X-RateLimit-Remaining": "3", "X-RateLimit-Reset": str(reset)}
    )
    assert auth_manager.should_wait_for_rate_limit() is True
    assert 30 <= auth_manager.get_wait_time() <= 40


def test_wait_time_capped(auth_manager):
    """Test the wait time never exceeds one hour."""
    reset = int(time.time()) + 10_000
    auth_manager.update_rate_limit_info(
        {"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": str(reset)}
    )
    assert auth_manager.get_wait_time() == 3600


def test_wait_time_default(auth_manager):
    """Test the default wait when reset time is unknown."""
    assert auth_manager.get_wait_time() == 60


def test_expired_reset_clears_status(auth_manager):
    """Test stale rate limit info is discarded after reset time."""
    auth_manager.update_rate_limit_info(
        {"X-RateLimit-Remaining": "0", "X-RateLimit-Reset": "1"}
    )
    status = auth_manager.get_rate_limit_status()
    assert status["remaining"] is None
    assert auth_manager.should_wait_for_rate_limit() is False


def test_anonymous_is_not_authenticated(anonymous_manager):
    """Test is_authenticated and is_token_valid without a token."""
    assert anonymous_manager.is_authenticated() is False
    assert anonymous_manager.is_token_valid() is False
