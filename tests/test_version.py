"""Tests for version parsing."""

import pytest
from packaging.version import Version

from livecheck.exceptions import VersionParseError
from livecheck.version import parse_version


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("1.2.3", Version("1.2.3")),
        ("v2.0", Version("2.0")),
        ("1.0rc1", Version("1.0rc1")),
    ],
)
def test_parse_version(text, expected):
    """Test valid version strings parse."""
    assert parse_version(text) == expected


def test_parse_version_invalid():
    """Test invalid text raises VersionParseError naming the text."""
    with pytest.raises(VersionParseError) as exc_info:
        parse_version("not-a-version")
    assert exc_info.value.target == "not-a-version"
    assert "not-a-version" in str(exc_info.value)
