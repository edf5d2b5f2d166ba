"""Livecheck strategies."""

from livecheck.strategy.base import (
    Extractor,
    MatchResult,
    PatternExtractor,
    PlainExtractor,
    Strategy,
    handle_block_return,
)
from livecheck.strategy.github_api import GithubApiStrategy

__all__ = [
    "Extractor",
    "GithubApiStrategy",
    "MatchResult",
    "PatternExtractor",
    "PlainExtractor",
    "Strategy",
    "handle_block_return",
]
