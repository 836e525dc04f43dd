"""Matching strategies and the interface every engine exposes to the lexicon."""

from enum import Enum
from typing import List, Protocol


class Strategy(str, Enum):
    """Closed set of matching strategies."""

    TRIE = "trie"
    KDTREE = "kdtree"
    ASTAR = "astar"


class SuggestionEngine(Protocol):
    """Anything that can rank stored words against a query."""

    def suggest(self, word: str, max_dist: int, limit: int) -> List[str]:
        ...
