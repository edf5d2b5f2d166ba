"""Shared strategy types.

- ``Strategy``: abstract base every livecheck strategy implements
- ``MatchResult``: outcome of one version check
- ``PlainExtractor`` / ``PatternExtractor``: caller-supplied extraction
  routines, tagged by whether they need the pattern
- ``handle_block_return``: flattens an extractor's return value into a list
  of version strings
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar

from livecheck.exceptions import InvalidUsageError
from livecheck.version import Version

ExtractorReturn = (
    str | list[str] | tuple[str, ...] | set[str] | Mapping[str, Any] | None
)

INVALID_RETURN_MSG = (
    "Return value of an extractor must be a string, a sequence of strings "
    "or a mapping keyed by strings"
)


@dataclass(frozen=True)
class MatchResult:
    """Versions found at a URL.

    Attributes:
        matches: Matched text mapped to its parsed version (read-only)
        regex: Pattern that was supplied to the extractor, if any
        url: URL that was checked

    """

    url: str
    regex: re.Pattern[str] | None = None
    matches: Mapping[str, Version] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not isinstance(self.matches, MappingProxyType):
            object.__setattr__(
                self, "matches", MappingProxyType(dict(self.matches))
            )


@dataclass(frozen=True)
class PlainExtractor:
    """Extractor called with the fetched content only."""

    func: Callable[[Any], ExtractorReturn]

    def extract(
        self, content: Any, pattern: re.Pattern[str] | None
    ) -> ExtractorReturn:
        return self.func(content)


@dataclass(frozen=True)
class PatternExtractor:
    """Extractor called with the fetched content and the pattern."""

    func: Callable[[Any, re.Pattern[str]], ExtractorReturn]

    def extract(
        self, content: Any, pattern: re.Pattern[str] | None
    ) -> ExtractorReturn:
        if pattern is None:
            msg = "two arguments expected but no pattern supplied"
            raise InvalidUsageError(msg)
        return self.func(content, pattern)


Extractor = PlainExtractor | PatternExtractor


def handle_block_return(value: Any) -> list[str]:
    """Normalize an extractor's return value into a list of strings.

    A string becomes a one-item list, a mapping contributes its keys, and a
    sequence is used as-is. ``None`` entries are dropped and duplicates are
    removed, keeping first-seen order.

    Raises:
        TypeError: For any other return type or non-string entries

    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Mapping):
        items = list(value.keys())
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
    else:
        raise TypeError(INVALID_RETURN_MSG)

    versions: list[str] = []
    for item in items:
        if item is None:
            continue
        if not isinstance(item, str):
            raise TypeError(INVALID_RETURN_MSG)
        if item not in versions:
            versions.append(item)
    return versions


def is_blank(value: Any) -> bool:
    """Return True for None, False, blank strings and empty collections."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (Mapping, list, tuple, set, frozenset, bytes)):
        return len(value) == 0
    return False


class Strategy(ABC):
    """Base class for livecheck strategies.

    Attributes:
        NICE_NAME: Human readable strategy name
        requires_explicit_invocation: When True, automatic strategy
            selection must skip this strategy; it only runs when requested
            by name.

    """

    NICE_NAME: ClassVar[str] = ""
    requires_explicit_invocation: ClassVar[bool] = False

    @abstractmethod
    def match(self, url: str) -> bool:
        """Return whether the strategy can be applied to ``url``."""

    @abstractmethod
    async def find_versions(
        self,
        url: str,
        pattern: re.Pattern[str] | str | None = None,
        extractor: Extractor | None = None,
    ) -> MatchResult:
        """Check ``url`` for versions."""
