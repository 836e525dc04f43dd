"""A*-style edit search over the prefix tree."""

import heapq
import itertools
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from rapidfuzz.distance import Levenshtein

from .prefix_index import PrefixIndex, PrefixNode


@dataclass
class SearchFrontierState:
    """One open state of a guided search. Lives for a single query only."""

    node: PrefixNode
    path: str
    target_index: int
    g_cost: int
    f_cost: int


class GuidedEditSearch:
    """
    Treats fuzzy matching as a shortest-path problem.

    Graph nodes are (prefix node, target index) pairs. Moving along a trie
    edge either consumes a target character (match, or substitution at
    cost 1) or leaves the target index in place (an extra dictionary letter,
    cost 1). Skipping a target character without moving in the trie costs 1.

    The heuristic only counts unconsumed target characters, so it is
    admissible but loose. Every terminal word reached is therefore verified
    with an exact Levenshtein computation before it is accepted.
    """

    def __init__(self, index: PrefixIndex) -> None:
        self._index = index

    @staticmethod
    def heuristic(target: str, target_index: int) -> int:
        """Lower bound on the remaining cost: characters left to consume."""
        return len(target) - target_index

    def find_similar_words(self, target: str, max_dist: int) -> List[Tuple[int, str]]:
        """
        Find stored words within `max_dist` edits of `target`.

        Args:
            target: Query word
            max_dist: Maximum edit distance (inclusive)

        Returns:
            List of (verified distance, word) sorted by distance, then word
        """
        if max_dist < 0:
            return []

        open_set: List[Tuple[int, int, SearchFrontierState]] = []
        counter = itertools.count()
        expanded: Dict[Tuple[int, int], int] = {}
        verified: Dict[str, int] = {}

        root = self._index.root
        self._push(open_set, counter, target, max_dist, root, "", 0, 0)

        while open_set:
            _f, _seq, state = heapq.heappop(open_set)

            if state.g_cost > max_dist:
                continue

            key = (id(state.node), state.target_index)
            best = expanded.get(key)
            if best is not None and best <= state.g_cost:
                continue
            expanded[key] = state.g_cost

            node = state.node
            if node.is_terminal and node.word not in verified:
                verified[node.word] = Levenshtein.distance(node.word, target)

            index = state.target_index
            target_left = index < len(target)

            for ch, child in node.children.items():
                path = state.path + ch
                if target_left:
                    cost = 0 if ch == target[index] else 1
                    self._push(
                        open_set, counter, target, max_dist,
                        child, path, index + 1, state.g_cost + cost,
                    )
                self._push(
                    open_set, counter, target, max_dist,
                    child, path, index, state.g_cost + 1,
                )

            if target_left:
                self._push(
                    open_set, counter, target, max_dist,
                    node, state.path, index + 1, state.g_cost + 1,
                )

        results = [(distance, word) for word, distance in verified.items() if distance <= max_dist]
        results.sort()
        return results

    def find_best_match(self, target: str, max_dist: int) -> Optional[str]:
        """Return the closest word within `max_dist`, or None."""
        similar = self.find_similar_words(target, max_dist)
        if not similar:
            return None
        return similar[0][1]

    def word_exists(self, word: str) -> bool:
        return self._index.contains(word)

    def suggest(self, word: str, max_dist: int, limit: int) -> List[str]:
        if limit <= 0:
            return []
        return [w for _distance, w in self.find_similar_words(word, max_dist)[:limit]]

    def _push(
        self,
        open_set: List[Tuple[int, int, SearchFrontierState]],
        counter: Iterator[int],
        target: str,
        max_dist: int,
        node: PrefixNode,
        path: str,
        target_index: int,
        g_cost: int,
    ) -> None:
        if g_cost > max_dist:
            return
        f_cost = g_cost + self.heuristic(target, target_index)
        state = SearchFrontierState(
            node=node,
            path=path,
            target_index=target_index,
            g_cost=g_cost,
            f_cost=f_cost,
        )
        heapq.heappush(open_set, (f_cost, next(counter), state))
