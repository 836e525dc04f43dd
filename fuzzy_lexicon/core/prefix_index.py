"""Prefix tree (trie) index for exact membership and bounded edit-distance search."""

from typing import Dict, List, Optional, Tuple


class PrefixNode:
    """
    A single node in the prefix tree.

    children: char -> PrefixNode, owned exclusively by this node
    is_terminal: True if the path from the root spells a stored word
    word: the stored word for terminal nodes, None otherwise
    """

    __slots__ = ("children", "is_terminal", "word")

    def __init__(self) -> None:
        self.children: Dict[str, "PrefixNode"] = {}
        self.is_terminal = False
        self.word: Optional[str] = None

    def is_dead(self) -> bool:
        """A node with no word and no children can be pruned."""
        return not self.is_terminal and not self.children


class PrefixIndex:
    """Prefix tree over dictionary words."""

    def __init__(self) -> None:
        """Initialize an empty prefix index."""
        self._root = PrefixNode()
        self._size = 0

    @property
    def root(self) -> PrefixNode:
        return self._root

    def insert(self, word: str) -> None:
        """
        Insert a word into the index.

        Missing path segments are created on the way down. Inserting the
        empty string marks the root itself as terminal.

        Args:
            word: Cleaned word to store
        """
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = PrefixNode()
                node.children[ch] = child
            node = child

        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1
        node.word = word

    def contains(self, word: str) -> bool:
        """
        Check whether a word is stored in the index.

        Args:
            word: Word to look up

        Returns:
            True if the exact word was inserted and not removed
        """
        node = self._find_node(word)
        return node is not None and node.is_terminal

    def remove(self, word: str) -> bool:
        """
        Remove a word and prune nodes that no longer lead anywhere.

        Args:
            word: Word to remove

        Returns:
            True if the word was present, False if removal was a no-op
        """
        removed = self._remove(self._root, word, 0)
        if removed:
            self._size -= 1
        return removed

    def fuzzy_search(self, word: str, max_dist: int) -> List[Tuple[int, str]]:
        """
        Find every stored word within `max_dist` edits of `word`.

        Each node carries one row of the Levenshtein table: the cost of
        turning the node's prefix into every prefix of `word`. A child's row is
        derived from its parent's row, and a subtree is skipped as soon as the
        smallest value in its row exceeds `max_dist`.

        Args:
            word: Query word
            max_dist: Maximum edit distance (inclusive)

        Returns:
            List of (distance, word) sorted by distance, then word
        """
        if max_dist < 0:
            return []

        first_row = list(range(len(word) + 1))
        results: List[Tuple[int, str]] = []

        if self._root.is_terminal and first_row[-1] <= max_dist:
            results.append((first_row[-1], self._root.word))

        for ch, child in self._root.children.items():
            self._search_recursive(child, ch, word, first_row, max_dist, results)

        results.sort()
        return results

    def suggest(self, word: str, max_dist: int, limit: int) -> List[str]:
        """Closest stored words by edit distance, at most `limit` of them."""
        if limit <= 0:
            return []
        return [w for _distance, w in self.fuzzy_search(word, max_dist)[:limit]]

    def words(self) -> List[str]:
        """Return all stored words in lexicographic order."""
        out: List[str] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.is_terminal:
                out.append(node.word)
            stack.extend(node.children.values())
        out.sort()
        return out

    def clear(self) -> None:
        """Drop every stored word."""
        self._root = PrefixNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    # internal helpers ---------------------------------------------------------
    def _find_node(self, word: str) -> Optional[PrefixNode]:
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def _remove(self, node: PrefixNode, word: str, depth: int) -> bool:
        if depth == len(word):
            if not node.is_terminal:
                return False
            node.is_terminal = False
            node.word = None
            return True

        ch = word[depth]
        child = node.children.get(ch)
        if child is None:
            return False

        removed = self._remove(child, word, depth + 1)
        if removed and child.is_dead():
            del node.children[ch]
        return removed

    def _search_recursive(
        self,
        node: PrefixNode,
        letter: str,
        target: str,
        prev_row: List[int],
        max_dist: int,
        results: List[Tuple[int, str]],
    ) -> None:
        columns = len(target) + 1
        current_row = [prev_row[0] + 1]
        row_min = current_row[0]

        for i in range(1, columns):
            insert_cost = current_row[i - 1] + 1
            delete_cost = prev_row[i] + 1
            replace_cost = prev_row[i - 1] + (0 if target[i - 1] == letter else 1)

            value = min(insert_cost, delete_cost, replace_cost)
            current_row.append(value)
            if value < row_min:
                row_min = value

        # every deeper row is bounded below by this row's minimum
        if row_min > max_dist:
            return

        if node.is_terminal and current_row[-1] <= max_dist:
            results.append((current_row[-1], node.word))

        for ch, child in node.children.items():
            self._search_recursive(child, ch, target, current_row, max_dist, results)
