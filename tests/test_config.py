"""Tests for settings loading."""

from pathlib import Path

import pytest

from livecheck.config import LivecheckConfig, default_config_path, load_config
from livecheck.exceptions import ConfigurationError


def write_settings(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.conf"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_file_returns_defaults(tmp_path):
    """Test a missing settings file yields default configuration."""
    config = load_config(tmp_path / "missing.conf")
    assert config == LivecheckConfig()
    assert config.github_api_url == "https://api.github.com"
    assert config.timeout_seconds == 10
    assert config.retry_attempts == 3
    assert config.log_file is None


def test_values_are_read(tmp_path):
    """Test all sections are read into the config."""
    path = write_settings(
        tmp_path,
        "[github]\n"
        "api_url = https://ghe.example.com/api/v3/\n"
        "user_agent = my-agent\n"
        "[network]\n"
        "timeout_seconds = 5\n"
        "retry_attempts = 1\n"
        "[logging]\n"
        "log_level = debug\n"
        "console_log_level = ERROR\n"
        "log_file = ~/logs/livecheck.log\n",
    )

    config = load_config(path)

    assert config.github_api_url == "https://ghe.example.com/api/v3"
    assert config.user_agent == "my-agent"
    assert config.timeout_seconds == 5
    assert config.retry_attempts == 1
    assert config.log_level == "DEBUG"
    assert config.console_log_level == "ERROR"
    assert config.log_file == Path.home() / "logs" / "livecheck.log"


@pytest.mark.parametrize(
    "text",
    [
        "[network]\ntimeout_seconds = soon\n",
        "[network]\nretry_attempts = 0\n",
        "[logging]\nlog_level = LOUD\n",
        "[github]\napi_url =\n",
        "not an ini file",
    ],
)
def test_invalid_values_raise(tmp_path, text):
    """Test invalid settings raise ConfigurationError."""
    path = write_settings(tmp_path, text)
    with pytest.raises(ConfigurationError):
        load_config(path)


def test_config_is_immutable():
    """Test LivecheckConfig cannot be modified."""
    config = LivecheckConfig()
    with pytest.raises(AttributeError):
        config.github_api_url = "https://other"  # type: ignore[misc]


def test_default_config_path_env_override(monkeypatch, tmp_path):
    """Test LIVECHECK_CONFIG overrides the settings location."""
    monkeypatch.setenv("LIVECHECK_CONFIG", str(tmp_path / "custom.conf"))
    assert default_config_path() == tmp_path / "custom.conf"


def test_default_config_path(monkeypatch):
    """Test the default settings location."""
    assert default_config_path() == (
        Path.home() / ".config" / "livecheck" / "settings.conf"
    )


def test_load_config_uses_env_path(monkeypatch, tmp_path):
    """Test load_config without a path reads LIVECHECK_CONFIG."""
    path = write_settings(tmp_path, "[network]\nretry_attempts = 7\n")
    monkeypatch.setenv("LIVECHECK_CONFIG", str(path))
    assert load_config().retry_attempts == 7


@pytest.mark.parametrize(
    "kwargs",
    [
        {"retry_attempts": 0},
        {"retry_attempts": -1},
        {"timeout_seconds": 0},
        {"log_level": "LOUD"},
        {"console_log_level": "info"},
    ],
)
def test_config_rejects_invalid_values(kwargs):
    """Test LivecheckConfig validates values given directly."""
    with pytest.raises(ConfigurationError):
        LivecheckConfig(**kwargs)
