"""Performance benchmarks for the Fuzzy Lexicon."""

import random
import string

import pytest

from fuzzy_lexicon.core.batch import BatchSuggester
from fuzzy_lexicon.core.lexicon import Lexicon
from fuzzy_lexicon.core.strategy import Strategy


class TestPerformanceBenchmarks:
    """Performance benchmark tests."""

    @pytest.fixture(scope="class")
    def large_lexicon(self):
        """Create a lexicon with a large random vocabulary."""
        rng = random.Random(42)
        words = {
            "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 10)))
            for _ in range(5000)
        }
        words.update(["hello", "world", "spelling", "dictionary", "distance"])

        lexicon = Lexicon()
        lexicon.load_vocabulary(sorted(words))
        return lexicon

    def test_trie_performance(self, large_lexicon, benchmark):
        """Benchmark the trie strategy on a single typo."""
        result = benchmark(large_lexicon.suggest, "spelin", Strategy.TRIE, 2)
        assert "spelling" in result

    def test_astar_performance(self, large_lexicon, benchmark):
        """Benchmark the guided search on a single typo."""
        result = benchmark(large_lexicon.suggest, "helo", Strategy.ASTAR, 1)
        assert "hello" in result

    def test_kdtree_performance(self, large_lexicon, benchmark):
        """Benchmark nearest-neighbour lookup."""
        result = benchmark(large_lexicon.suggest, "dictionary", Strategy.KDTREE, 0, 10)
        assert len(result) == 10

    def test_exact_lookup_performance(self, large_lexicon, benchmark):
        """Benchmark exact membership checks."""
        assert benchmark(large_lexicon.contains, "distance") is True

    def test_batch_performance(self, large_lexicon, benchmark):
        """Benchmark parallel suggestions for a batch of misspellings."""
        batch = BatchSuggester(large_lexicon, max_workers=4)
        queries = ["helo", "wrold", "speling", "dictonary", "distanse"] * 10

        results = benchmark(batch.suggest_many, queries, Strategy.TRIE)
        assert len(results) == len(queries)

    def test_load_performance(self, benchmark):
        """Benchmark building both indexes."""
        rng = random.Random(7)
        words = [
            "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(3, 10)))
            for _ in range(2000)
        ]

        def build():
            lexicon = Lexicon()
            lexicon.load_vocabulary(words)
            return lexicon

        lexicon = benchmark(build)
        assert lexicon.vocabulary_size == lexicon.feature_space_size
