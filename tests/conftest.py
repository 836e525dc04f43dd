"""Shared fixtures for the test suite."""

import pytest


def reference_levenshtein(a: str, b: str) -> int:
    """Plain O(mn) Levenshtein table used as the oracle in tests."""
    rows, cols = len(a) + 1, len(b) + 1
    table = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        table[i][0] = i
    for j in range(cols):
        table[0][j] = j
    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,
                table[i][j - 1] + 1,
                table[i - 1][j - 1] + cost,
            )
    return table[-1][-1]


@pytest.fixture
def scenario_words():
    """Small vocabulary with one clear outlier."""
    return ["hello", "hallo", "help", "world"]


@pytest.fixture
def vocabulary():
    """Mid-sized vocabulary with many shared prefixes and near neighbours."""
    return [
        "a", "an", "and", "ant", "anthem", "apple", "apply", "applied",
        "bat", "bath", "bathe", "bake", "baker", "bar", "barn", "born",
        "cat", "cart", "care", "car", "card", "chart", "chat", "that",
        "the", "then", "them", "there", "these", "three", "tree", "trie",
        "hello", "hallo", "help", "helm", "held", "hell", "yellow", "fellow",
        "world", "word", "words", "sword", "lord", "load", "road", "read",
        "spell", "spelling", "spelt", "smell", "shell", "spill", "still",
        "distance", "instance", "substance", "dictionary", "fiction",
        "quick", "quack", "quirk", "brown", "crown", "frown", "grown",
    ]


@pytest.fixture
def queries():
    """Misspellings, exact hits, and words far from everything."""
    return [
        "helo", "wrold", "spel", "dictionery", "aple", "thre", "bak",
        "crwn", "zzzz", "a", "the", "qiuck", "instnce", "ab", "",
    ]


@pytest.fixture
def levenshtein():
    """Reference edit distance function."""
    return reference_levenshtein
