"""Version values produced from matched version strings."""

from packaging.version import InvalidVersion, Version

from livecheck.exceptions import VersionParseError

__all__ = ["Version", "parse_version"]


def parse_version(text: str) -> Version:
    """Parse a matched string into a comparable version.

    Args:
        text: Version text, e.g. ``"1.2.3"`` or ``"v2.0rc1"``

    Returns:
        Parsed version

    Raises:
        VersionParseError: If the text is not a valid version

    """
    try:
        return Version(text)
    except InvalidVersion as e:
        msg = "not a valid version string"
        raise VersionParseError(msg, target=text) from e
