"""Lexicon: owns the indexes and dispatches suggestion queries."""

import threading
import time
from typing import Any, Dict, Iterable, List, Optional

import structlog

from ..models.response import (
    ComparisonResponse,
    SpellCheckResponse,
    SpellingError,
    StrategyComparison,
    SuggestionResponse,
)
from .feature_index import FeatureSpaceIndex
from .guided_search import GuidedEditSearch
from .normalizer import TextNormalizer
from .prefix_index import PrefixIndex
from .strategy import Strategy, SuggestionEngine

logger = structlog.get_logger(__name__)


def _empty_stats() -> Dict[str, Any]:
    return {
        "total_queries": 0,
        "queries_by_strategy": {strategy.value: 0 for strategy in Strategy},
        "queries_with_suggestions": 0,
        "queries_without_suggestions": 0,
        "total_execution_time": 0.0,
    }


class Lexicon:
    """
    Vocabulary shared by the three matching strategies.

    Build first, then query: loading and removal are not synchronized against
    concurrent queries. Queries never touch index nodes, so any number of
    them may run at once against a frozen lexicon.
    """

    def __init__(self, max_edit_distance: int = 2, max_suggestions: int = 5) -> None:
        """
        Initialize an empty lexicon.

        Args:
            max_edit_distance: Default edit distance bound for trie and astar
            max_suggestions: Default cap on returned suggestions
        """
        self.max_edit_distance = max_edit_distance
        self.max_suggestions = max_suggestions
        self.normalizer = TextNormalizer()
        self.prefix_index = PrefixIndex()
        self.feature_index = FeatureSpaceIndex()
        self.guided_search = GuidedEditSearch(self.prefix_index)

        self._engines: Dict[Strategy, SuggestionEngine] = {
            Strategy.TRIE: self.prefix_index,
            Strategy.KDTREE: self.feature_index,
            Strategy.ASTAR: self.guided_search,
        }

        self._stats_lock = threading.Lock()
        self._stats = _empty_stats()

    # vocabulary ---------------------------------------------------------------
    def load_vocabulary(self, words: Iterable[str]) -> int:
        """
        Insert cleaned words into both indexes.

        Words already present in the prefix index are skipped so repeated
        loads do not duplicate points in the kd-tree.

        Args:
            words: Already-cleaned words

        Returns:
            Number of words inserted
        """
        added = 0
        for word in words:
            if not word or self.prefix_index.contains(word):
                continue
            self.prefix_index.insert(word)
            self.feature_index.insert(word)
            added += 1
        return added

    def add_word(self, word: str) -> bool:
        """Clean a raw word and insert it. Returns True if it was new."""
        cleaned = self.normalizer.clean_word(word)
        return self.load_vocabulary([cleaned]) == 1

    def load_dictionary_file(self, path: str, min_length: int = 2) -> int:
        """
        Load a whitespace-separated word list.

        Args:
            path: Dictionary file path
            min_length: Cleaned tokens shorter than this are dropped

        Returns:
            Number of words inserted
        """
        with open(path, "r", encoding="utf-8") as f:
            tokens = self.normalizer.tokenize(f.read())

        added = self.load_vocabulary(t for t in tokens if len(t) >= min_length)
        logger.info("Dictionary loaded", path=path, words_added=added, vocabulary_size=len(self.prefix_index))
        return added

    def remove_word(self, word: str) -> bool:
        """
        Remove a word from the prefix index.

        The kd-tree is append-only and keeps the word's embedding, so the
        kdtree strategy may still suggest it after removal.

        Args:
            word: Word to remove

        Returns:
            True if the word was present
        """
        removed = self.prefix_index.remove(word)
        if removed:
            logger.debug("Word removed from prefix index", word=word)
        return removed

    def contains(self, word: str) -> bool:
        return self.prefix_index.contains(word)

    def is_valid_word(self, word: str) -> bool:
        """Membership check for raw, uncleaned input."""
        return self.prefix_index.contains(self.normalizer.clean_word(word))

    @property
    def vocabulary_size(self) -> int:
        return len(self.prefix_index)

    @property
    def feature_space_size(self) -> int:
        return len(self.feature_index)

    # queries ------------------------------------------------------------------
    def suggest(
        self,
        word: str,
        strategy: Strategy = Strategy.ASTAR,
        max_dist: Optional[int] = None,
        max_suggestions: Optional[int] = None,
    ) -> List[str]:
        """
        Rank vocabulary words against a query with the chosen strategy.

        The query is cleaned the same way dictionary words are, so case and
        punctuation do not affect the result.

        Args:
            word: Raw query word
            strategy: Engine to dispatch to
            max_dist: Edit distance bound (ignored by kdtree)
            max_suggestions: Cap on returned suggestions; 0 or less returns nothing

        Returns:
            Suggestions, best first
        """
        start_time = time.perf_counter()
        strategy = Strategy(strategy)
        max_dist = self.max_edit_distance if max_dist is None else max_dist
        limit = self.max_suggestions if max_suggestions is None else max_suggestions

        if limit <= 0:
            suggestions = []
        else:
            query = self.normalizer.clean_word(word)
            suggestions = self._engines[strategy].suggest(query, max_dist, limit)[:limit]

        self._record_query(strategy, bool(suggestions), (time.perf_counter() - start_time) * 1000)
        return suggestions

    def lookup(
        self,
        word: str,
        strategy: Strategy = Strategy.ASTAR,
        max_dist: Optional[int] = None,
        max_suggestions: Optional[int] = None,
    ) -> SuggestionResponse:
        """Suggestions for a word wrapped with validity and timing details."""
        start_time = time.perf_counter()
        strategy = Strategy(strategy)
        max_dist = self.max_edit_distance if max_dist is None else max_dist

        suggestions = self.suggest(word, strategy, max_dist, max_suggestions)

        return SuggestionResponse(
            word=word,
            strategy=strategy.value,
            is_valid=self.is_valid_word(word),
            suggestions=suggestions,
            total_suggestions=len(suggestions),
            max_distance=max_dist,
            execution_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    def check_text(self, text: str, strategy: Strategy = Strategy.ASTAR) -> SpellCheckResponse:
        """
        Spell check free text.

        Args:
            text: Text to check
            strategy: Strategy used for suggestions on unknown tokens

        Returns:
            SpellCheckResponse listing every unknown token
        """
        start_time = time.perf_counter()
        strategy = Strategy(strategy)
        tokens = self.normalizer.tokenize_with_lines(text)

        errors = []
        for position, (token, line_number) in enumerate(tokens):
            if self.prefix_index.contains(token):
                continue
            errors.append(
                SpellingError(
                    original_word=token,
                    position=position,
                    line_number=line_number,
                    suggestions=self.suggest(token, strategy),
                    strategy=strategy.value,
                )
            )

        return self.build_check_response(tokens, errors, strategy, start_time)

    def check_file(self, path: str, strategy: Strategy = Strategy.ASTAR) -> SpellCheckResponse:
        """
        Spell check the contents of a text file.

        Args:
            path: Path of a UTF-8 text file
            strategy: Strategy used for suggestions on unknown tokens

        Returns:
            SpellCheckResponse for the whole file, with 1-based line numbers
        """
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()

        report = self.check_text(text, strategy)
        logger.info("File checked", path=path, total_words=report.total_words, errors=report.incorrect_words)
        return report

    def build_check_response(
        self,
        tokens: List[Any],
        errors: List[SpellingError],
        strategy: Strategy,
        start_time: float,
    ) -> SpellCheckResponse:
        """Assemble a spell check report from tokens and the errors found."""
        return SpellCheckResponse(
            errors=errors,
            total_words=len(tokens),
            correct_words=len(tokens) - len(errors),
            incorrect_words=len(errors),
            strategy=strategy.value,
            processing_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    def compare_strategies(self, word: str) -> ComparisonResponse:
        """Run every strategy on the same word and time each one."""
        comparisons = []
        for strategy in Strategy:
            start_time = time.perf_counter()
            suggestions = self.suggest(word, strategy)
            comparisons.append(
                StrategyComparison(
                    strategy=strategy.value,
                    suggestions=suggestions,
                    execution_time_ms=(time.perf_counter() - start_time) * 1000,
                )
            )

        return ComparisonResponse(
            word=word,
            is_valid=self.is_valid_word(word),
            comparisons=comparisons,
        )

    # statistics ---------------------------------------------------------------
    def _record_query(self, strategy: Strategy, found: bool, execution_time_ms: float) -> None:
        with self._stats_lock:
            self._stats["total_queries"] += 1
            self._stats["queries_by_strategy"][strategy.value] += 1
            if found:
                self._stats["queries_with_suggestions"] += 1
            else:
                self._stats["queries_without_suggestions"] += 1
            self._stats["total_execution_time"] += execution_time_ms

    def get_stats(self) -> Dict[str, Any]:
        """Get lexicon statistics."""
        with self._stats_lock:
            stats = dict(self._stats)
            stats["queries_by_strategy"] = dict(self._stats["queries_by_strategy"])

        if stats["total_queries"] > 0:
            stats["average_execution_time_ms"] = (
                stats["total_execution_time"] / stats["total_queries"]
            )
        else:
            stats["average_execution_time_ms"] = 0.0

        stats["vocabulary_size"] = len(self.prefix_index)
        stats["feature_space_size"] = len(self.feature_index)
        stats["feature_tree_depth"] = self.feature_index.depth()
        return stats

    def clear(self) -> None:
        """Clear all words and reset statistics."""
        self.prefix_index.clear()
        self.feature_index.clear()
        with self._stats_lock:
            self._stats = _empty_stats()
