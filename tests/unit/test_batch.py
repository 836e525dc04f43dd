"""Unit tests for parallel batch suggestions."""

import pytest

from fuzzy_lexicon.core.batch import BatchSuggester
from fuzzy_lexicon.core.lexicon import Lexicon
from fuzzy_lexicon.core.strategy import Strategy


class TestBatchSuggester:
    """Test cases for the BatchSuggester class."""

    @pytest.fixture
    def lexicon(self, vocabulary):
        lexicon = Lexicon()
        lexicon.load_vocabulary(vocabulary)
        return lexicon

    @pytest.fixture
    def batch(self, lexicon):
        """Batch suggester with a small pool."""
        return BatchSuggester(lexicon, max_workers=4)

    def test_worker_count(self, lexicon):
        """Test non-positive worker counts fall back to the executor default."""
        assert BatchSuggester(lexicon, max_workers=3).max_workers == 3
        assert BatchSuggester(lexicon, max_workers=0).max_workers is None

    def test_matches_sequential(self, batch, lexicon, queries):
        """Test parallel results equal one-by-one queries, in input order."""
        for strategy in Strategy:
            expected = [lexicon.suggest(q, strategy) for q in queries]

            assert batch.suggest_many(queries, strategy) == expected

    def test_empty_batch(self, batch):
        """Test an empty batch."""
        assert batch.suggest_many([]) == []

    def test_custom_bounds(self, batch, lexicon):
        """Test distance and cap are passed through."""
        results = batch.suggest_many(["helo", "wrold"], Strategy.TRIE, max_dist=1, max_suggestions=1)

        assert results == [
            lexicon.suggest("helo", Strategy.TRIE, 1, 1),
            lexicon.suggest("wrold", Strategy.TRIE, 1, 1),
        ]

    def test_stats_counted(self, batch, lexicon, queries):
        """Test every batched query is recorded once."""
        batch.suggest_many(queries, Strategy.ASTAR)

        assert lexicon.get_stats()["queries_by_strategy"]["astar"] == len(queries)

    def test_check_text_parallel(self, batch, lexicon):
        """Test the parallel spell check matches the sequential one."""
        text = "the quik brown fox\njumps ovr the lazzy dog"

        parallel = batch.check_text_parallel(text)
        sequential = lexicon.check_text(text)

        assert parallel.total_words == sequential.total_words == 9
        assert parallel.incorrect_words == sequential.incorrect_words
        assert [e.model_dump() for e in parallel.errors] == [e.model_dump() for e in sequential.errors]

    def test_check_file_parallel(self, batch, lexicon, tmp_path):
        """Test checking a file in parallel matches the sequential file check."""
        path = tmp_path / "essay.txt"
        path.write_text("the quik brown fox\njumps ovr the lazzy dog\n", encoding="utf-8")

        parallel = batch.check_file_parallel(str(path))
        sequential = lexicon.check_file(str(path))

        assert parallel.total_words == 9
        assert [e.model_dump() for e in parallel.errors] == [e.model_dump() for e in sequential.errors]

    def test_check_file_parallel_missing(self, batch, tmp_path):
        """Test a missing file raises."""
        with pytest.raises(FileNotFoundError):
            batch.check_file_parallel(str(tmp_path / "missing.txt"))
