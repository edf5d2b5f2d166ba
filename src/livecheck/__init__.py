"""Top-level package for livecheck.

Upstream version detection strategies for package managers.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("livecheck")
except PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"
