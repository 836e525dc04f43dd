"""Deterministic 5-dimensional feature embedding of words."""

import math
from dataclasses import dataclass
from typing import Tuple

DIMENSIONS = 5
MAX_LENGTH = 20.0
VOWELS = frozenset("aeiou")
COMMON_LETTERS = frozenset("etaino")


def _is_letter(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


@dataclass(frozen=True)
class WordEmbedding:
    """A word and its position in feature space."""

    word: str
    coords: Tuple[float, ...]

    @classmethod
    def from_word(cls, word: str) -> "WordEmbedding":
        """
        Embed a word using letter statistics.

        Coordinates, in order:
            0: letter count / 20, capped at 1.0
            1: vowel ratio
            2: ratio of common letters (e, t, a, i, n, o)
            3: (a-m letters - n-z letters) / letter count
            4: alphabet position of the first letter / 26

        Words without any letters map to the origin.
        """
        letters = [ch.lower() for ch in word if _is_letter(ch)]
        total = len(letters)
        if total == 0:
            return cls(word=word, coords=(0.0,) * DIMENSIONS)

        vowels = sum(1 for ch in letters if ch in VOWELS)
        common = sum(1 for ch in letters if ch in COMMON_LETTERS)
        first_half = sum(1 for ch in letters if ch <= "m")
        second_half = total - first_half

        coords = (
            min(1.0, total / MAX_LENGTH),
            vowels / total,
            common / total,
            (first_half - second_half) / total,
            (ord(letters[0]) - ord("a") + 1) / 26.0,
        )
        return cls(word=word, coords=coords)

    def squared_distance(self, other: "WordEmbedding") -> float:
        return sum((a - b) ** 2 for a, b in zip(self.coords, other.coords))

    def distance(self, other: "WordEmbedding") -> float:
        """Euclidean distance between two embeddings."""
        return math.sqrt(self.squared_distance(other))


def embed(word: str) -> WordEmbedding:
    """Shorthand for `WordEmbedding.from_word`."""
    return WordEmbedding.from_word(word)
