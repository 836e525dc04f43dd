"""Unit tests for the guided (A*-style) edit search."""

import pytest

from fuzzy_lexicon.core.guided_search import GuidedEditSearch
from fuzzy_lexicon.core.prefix_index import PrefixIndex


def build_search(words):
    index = PrefixIndex()
    for word in words:
        index.insert(word)
    return GuidedEditSearch(index)


class TestGuidedEditSearch:
    """Test cases for the GuidedEditSearch class."""

    @pytest.fixture
    def search(self, vocabulary):
        """Guided search over the shared vocabulary."""
        return build_search(vocabulary)

    def test_heuristic(self):
        """Test the heuristic counts unconsumed characters."""
        assert GuidedEditSearch.heuristic("hello", 0) == 5
        assert GuidedEditSearch.heuristic("hello", 3) == 2
        assert GuidedEditSearch.heuristic("hello", 5) == 0

    def test_scenario(self, scenario_words):
        """Test the hello/hallo/help/world scenario."""
        search = build_search(scenario_words)

        assert search.find_similar_words("helo", 2) == [(1, "hello"), (1, "help"), (2, "hallo")]

    def test_extra_dictionary_letter(self):
        """Test words longer than the query in the middle are found."""
        search = build_search(["spelling", "spewing"])

        assert search.find_similar_words("speling", 1) == [(1, "spelling"), (1, "spewing")]

    def test_matches_prefix_index(self, search, vocabulary, queries):
        """Test the same word set as the dynamic programming search."""
        index = PrefixIndex()
        for word in vocabulary:
            index.insert(word)

        for query in queries:
            for max_dist in range(4):
                assert search.find_similar_words(query, max_dist) == index.fuzzy_search(query, max_dist), (
                    query, max_dist,
                )

    def test_completeness(self, search, vocabulary, queries, levenshtein):
        """Test every word within the bound is returned with its true distance."""
        for query in queries:
            for max_dist in range(4):
                results = search.find_similar_words(query, max_dist)
                expected = sorted(
                    (levenshtein(query, word), word)
                    for word in vocabulary
                    if levenshtein(query, word) <= max_dist
                )
                assert results == expected, (query, max_dist)

    def test_empty_query(self):
        """Test an empty query matches short words by insertions only."""
        search = build_search(["ab", "abc", "hello"])

        assert search.find_similar_words("", 2) == [(2, "ab")]

    def test_empty_index(self):
        """Test searching an empty index."""
        search = build_search([])

        assert search.find_similar_words("hello", 3) == []
        assert search.find_best_match("hello", 3) is None

    def test_negative_distance(self, search):
        """Test a negative bound matches nothing."""
        assert search.find_similar_words("hello", -1) == []

    def test_find_best_match(self, scenario_words):
        """Test the closest word wins, ties broken alphabetically."""
        search = build_search(scenario_words)

        assert search.find_best_match("helo", 2) == "hello"
        assert search.find_best_match("wrld", 1) == "world"
        assert search.find_best_match("zzzzzz", 2) is None

    def test_word_exists(self, scenario_words):
        """Test exact membership goes through the prefix index."""
        search = build_search(scenario_words)

        assert search.word_exists("hello") is True
        assert search.word_exists("hel") is False

    def test_sees_index_updates(self):
        """Test the search reads the live prefix index."""
        index = PrefixIndex()
        search = GuidedEditSearch(index)
        index.insert("hello")

        assert search.find_similar_words("helo", 1) == [(1, "hello")]

        index.remove("hello")

        assert search.find_similar_words("helo", 1) == []

    def test_suggest_limit(self, search):
        """Test the suggestion interface caps results."""
        suggestions = search.suggest("hel", 2, 2)

        assert suggestions == [w for _d, w in search.find_similar_words("hel", 2)[:2]]

    def test_suggest_non_positive_limit(self, search):
        """Test a cap of zero or less returns nothing."""
        assert search.suggest("hel", 2, 0) == []
        assert search.suggest("hel", 2, -1) == []
