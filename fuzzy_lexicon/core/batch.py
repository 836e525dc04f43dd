"""Parallel fan-out of independent suggestion queries over a built lexicon."""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import structlog

from ..models.response import SpellCheckResponse, SpellingError
from .lexicon import Lexicon
from .strategy import Strategy

logger = structlog.get_logger(__name__)


class BatchSuggester:
    """
    Runs many lexicon queries on a thread pool.

    Each query builds its own search state, so no locking is needed as long
    as nobody mutates the lexicon while a batch is running.
    """

    def __init__(self, lexicon: Lexicon, max_workers: int = 4) -> None:
        """
        Args:
            lexicon: Built lexicon to query
            max_workers: Thread pool size; 0 or less uses the executor default
        """
        self.lexicon = lexicon
        self.max_workers = max_workers if max_workers > 0 else None

    def suggest_many(
        self,
        words: List[str],
        strategy: Strategy = Strategy.ASTAR,
        max_dist: Optional[int] = None,
        max_suggestions: Optional[int] = None,
    ) -> List[List[str]]:
        """
        Suggestions for every word, in the same order as `words`.

        Args:
            words: Query words
            strategy: Strategy used for all words
            max_dist: Edit distance bound (ignored by kdtree)
            max_suggestions: Cap per word

        Returns:
            One suggestion list per input word
        """
        if not words:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            return list(
                executor.map(
                    lambda word: self.lexicon.suggest(word, strategy, max_dist, max_suggestions),
                    words,
                )
            )

    def check_text_parallel(self, text: str, strategy: Strategy = Strategy.ASTAR) -> SpellCheckResponse:
        """Spell check text, generating suggestions for unknown tokens in parallel."""
        start_time = time.perf_counter()
        strategy = Strategy(strategy)
        tokens = self.lexicon.normalizer.tokenize_with_lines(text)

        unknown = [
            (position, token, line_number)
            for position, (token, line_number) in enumerate(tokens)
            if not self.lexicon.contains(token)
        ]
        suggestions = self.suggest_many([token for _pos, token, _line in unknown], strategy)

        errors = [
            SpellingError(
                original_word=token,
                position=position,
                line_number=line_number,
                suggestions=token_suggestions,
                strategy=strategy.value,
            )
            for (position, token, line_number), token_suggestions in zip(unknown, suggestions)
        ]

        logger.debug(
            "Parallel spell check finished",
            total_words=len(tokens),
            errors=len(errors),
            workers=self.max_workers,
        )
        return self.lexicon.build_check_response(tokens, errors, strategy, start_time)

    def check_file_parallel(self, path: str, strategy: Strategy = Strategy.ASTAR) -> SpellCheckResponse:
        """Read a UTF-8 text file and spell check it with `check_text_parallel`."""
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
        return self.check_text_parallel(text, strategy)
