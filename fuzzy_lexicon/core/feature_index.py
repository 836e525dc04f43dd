"""kd-tree over word embeddings for nearest-neighbour suggestions."""

import bisect
import math
from typing import List, Optional, Tuple

import structlog

from .embedding import DIMENSIONS, WordEmbedding

logger = structlog.get_logger(__name__)

# (squared distance, word, insertion serial, embedding)
_Candidate = Tuple[float, str, int, WordEmbedding]


class FeatureTreeNode:
    """kd-tree node holding one embedding and up to two owned children."""

    __slots__ = ("embedding", "serial", "left", "right")

    def __init__(self, embedding: WordEmbedding, serial: int) -> None:
        self.embedding = embedding
        self.serial = serial
        self.left: Optional["FeatureTreeNode"] = None
        self.right: Optional["FeatureTreeNode"] = None


class FeatureSpaceIndex:
    """
    Append-only kd-tree of word embeddings.

    The splitting axis at depth d is d mod dimensions. The tree is never
    rebalanced, so insertion order decides its shape.
    """

    def __init__(self, dimensions: int = DIMENSIONS) -> None:
        """
        Initialize an empty index.

        Args:
            dimensions: Expected embedding dimensionality
        """
        self.dimensions = dimensions
        self._root: Optional[FeatureTreeNode] = None
        self._size = 0

    def insert(self, word: str) -> bool:
        """Embed a word and insert it. Returns False if the insert was skipped."""
        return self.insert_embedding(WordEmbedding.from_word(word))

    def insert_embedding(self, embedding: WordEmbedding) -> bool:
        """
        Insert a precomputed embedding.

        Args:
            embedding: Embedding to store

        Returns:
            True if stored, False if its dimensionality does not match the index
        """
        if len(embedding.coords) != self.dimensions:
            logger.warning(
                "Embedding dimensionality mismatch, skipping insertion",
                word=embedding.word,
                expected=self.dimensions,
                actual=len(embedding.coords),
            )
            return False

        new_node = FeatureTreeNode(embedding, self._size)
        self._size += 1

        if self._root is None:
            self._root = new_node
            return True

        node = self._root
        depth = 0
        while True:
            axis = depth % self.dimensions
            if embedding.coords[axis] < node.embedding.coords[axis]:
                if node.left is None:
                    node.left = new_node
                    return True
                node = node.left
            else:
                if node.right is None:
                    node.right = new_node
                    return True
                node = node.right
            depth += 1

    def find_k_nearest(self, word: str, k: int) -> List[str]:
        """
        Find the k stored words closest to `word` in feature space.

        Args:
            word: Query word
            k: Number of neighbours to return

        Returns:
            Up to k words sorted by ascending Euclidean distance
        """
        return [w for _distance, w in self.find_k_nearest_with_distances(word, k)]

    def find_k_nearest_with_distances(self, word: str, k: int) -> List[Tuple[float, str]]:
        """Same as `find_k_nearest` but keeps the distances."""
        if self._root is None:
            logger.debug("Nearest-neighbour query on empty feature index", word=word)
            return []
        if k <= 0:
            return []

        target = WordEmbedding.from_word(word)
        candidates = self._search(target, k)
        return [(math.sqrt(sq), w) for sq, w, _serial, _embedding in candidates]

    def suggest(self, word: str, max_dist: int, limit: int) -> List[str]:
        """Nearest words in feature space; edit distance does not apply here."""
        return self.find_k_nearest(word, limit)

    def depth(self) -> int:
        """Height of the tree (0 when empty)."""
        if self._root is None:
            return 0
        deepest = 0
        stack = [(self._root, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in (node.left, node.right):
                if child is not None:
                    stack.append((child, level + 1))
        return deepest

    def clear(self) -> None:
        """Drop every stored embedding."""
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    # branch and bound ---------------------------------------------------------
    def _search(self, target: WordEmbedding, k: int) -> List[_Candidate]:
        """
        Best-first descent with an explicit stack.

        A "far" entry is pushed below its sibling's subtree, so the pruning
        test runs only after the near side has been fully explored, exactly as
        in the recursive formulation.
        """
        candidates: List[_Candidate] = []
        stack: List[tuple] = [("visit", self._root, 0, 0.0)]

        while stack:
            kind, node, depth, axis_gap = stack.pop()

            if kind == "far":
                if len(candidates) < k or axis_gap < candidates[-1][0]:
                    stack.append(("visit", node, depth, 0.0))
                continue

            embedding = node.embedding
            bisect.insort(
                candidates,
                (target.squared_distance(embedding), embedding.word, node.serial, embedding),
            )
            if len(candidates) > k:
                candidates.pop()

            axis = depth % self.dimensions
            diff = target.coords[axis] - embedding.coords[axis]
            if diff < 0:
                near, far = node.left, node.right
            else:
                near, far = node.right, node.left

            if far is not None:
                stack.append(("far", far, depth + 1, diff * diff))
            if near is not None:
                stack.append(("visit", near, depth + 1, 0.0))

        return candidates
