"""Text normalization utilities for dictionary words and free text."""

import re
import unicodedata
from typing import List, Tuple


class TextNormalizer:
    """Turns raw tokens into the cleaned, lowercase words the indexes store."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        # Anything that is not an ASCII letter is dropped from a word
        self.non_letter_regex = re.compile(r"[^a-z]+")

    def clean_word(self, word: str) -> str:
        """
        Normalize a single token.

        Args:
            word: Raw token, possibly with punctuation, digits or accents

        Returns:
            Lowercase letters only; empty if nothing alphabetic remains
        """
        if not word:
            return ""

        # Decompose accented characters so the base letter survives
        normalized = unicodedata.normalize("NFKD", word.lower())

        return self.non_letter_regex.sub("", normalized)

    def tokenize(self, text: str) -> List[str]:
        """
        Split whitespace-separated text into cleaned tokens.

        Args:
            text: Input text

        Returns:
            List of non-empty cleaned tokens
        """
        if not text:
            return []

        tokens = []
        for raw in text.split():
            cleaned = self.clean_word(raw)
            if cleaned:
                tokens.append(cleaned)
        return tokens

    def tokenize_with_lines(self, text: str) -> List[Tuple[str, int]]:
        """
        Tokenize text keeping the 1-based line number of every token.

        Args:
            text: Input text

        Returns:
            List of (token, line_number) tuples
        """
        if not text:
            return []

        tokens = []
        for line_number, line in enumerate(text.splitlines(), start=1):
            for token in self.tokenize(line):
                tokens.append((token, line_number))
        return tokens
