"""Suggestion API endpoints."""

import time
from typing import Optional

from fastapi import APIRouter, HTTPException, Path, Query

from ..config import get_settings
from ..core.strategy import Strategy
from ..models.request import BatchSuggestRequest, SuggestRequest
from ..models.response import ComparisonResponse, SuggestionResponse

router = APIRouter(prefix="/api/v1", tags=["suggest"])
settings = get_settings()

# Import the global lexicon instance
from ..engine_instance import batch_suggester, lexicon


@router.get(
    "/suggest/{word}",
    response_model=SuggestionResponse,
    summary="Suggest corrections for a word",
    description="Rank vocabulary words against a possibly misspelled word",
)
async def suggest_word(
    word: str = Path(..., description="The word to correct", min_length=1, max_length=100),
    strategy: Optional[Strategy] = Query(None, description="Matching strategy (trie, kdtree, astar)"),
    max_distance: Optional[int] = Query(
        None, ge=0, le=5, description="Maximum edit distance (trie and astar only)"
    ),
    max_suggestions: Optional[int] = Query(
        None, ge=1, le=50, description="Maximum number of suggestions to return"
    ),
) -> SuggestionResponse:
    """
    Suggest corrections for a single word.

    The strategy defaults to the configured one. The kdtree strategy ignores
    the edit distance bound and returns nearest neighbours in feature space.
    """
    if len(word) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Word too long. Maximum length is {settings.max_query_length} characters",
        )

    try:
        return lexicon.lookup(
            word,
            strategy=strategy or settings.default_strategy,
            max_dist=max_distance,
            max_suggestions=max_suggestions,
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Suggestion failed: {str(e)}")


@router.post(
    "/suggest",
    response_model=SuggestionResponse,
    summary="Suggest with request body",
    description="Suggest corrections using a structured request body",
)
async def suggest_with_body(request: SuggestRequest) -> SuggestionResponse:
    """Suggest corrections for a word described by a JSON body."""
    try:
        return lexicon.lookup(
            request.word,
            strategy=request.strategy,
            max_dist=request.max_distance,
            max_suggestions=request.max_suggestions,
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Suggestion failed: {str(e)}")


@router.post(
    "/suggest/batch",
    response_model=list[SuggestionResponse],
    summary="Batch suggestions",
    description="Suggest corrections for many words in a single request",
)
async def batch_suggest(request: BatchSuggestRequest) -> list[SuggestionResponse]:
    """
    Suggest corrections for multiple words.

    With `parallel` set, the words are fanned out over the batch thread pool.
    Results keep the order of the request.
    """
    try:
        if not request.parallel:
            return [
                lexicon.lookup(
                    word,
                    strategy=request.strategy,
                    max_dist=request.max_distance,
                    max_suggestions=request.max_suggestions,
                )
                for word in request.words
            ]

        max_dist = lexicon.max_edit_distance if request.max_distance is None else request.max_distance
        start_time = time.perf_counter()
        all_suggestions = batch_suggester.suggest_many(
            request.words,
            strategy=request.strategy,
            max_dist=max_dist,
            max_suggestions=request.max_suggestions,
        )
        # parallel queries overlap, so report the mean wall time per word
        per_word_ms = (time.perf_counter() - start_time) * 1000 / len(request.words)
        return [
            SuggestionResponse(
                word=word,
                strategy=request.strategy.value,
                is_valid=lexicon.is_valid_word(word),
                suggestions=suggestions,
                total_suggestions=len(suggestions),
                max_distance=max_dist,
                execution_time_ms=per_word_ms,
            )
            for word, suggestions in zip(request.words, all_suggestions)
        ]
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Batch suggestion failed: {str(e)}")


@router.get(
    "/compare/{word}",
    response_model=ComparisonResponse,
    summary="Compare strategies",
    description="Run every strategy on the same word and report suggestions and timings",
)
async def compare_strategies(
    word: str = Path(..., description="The word to compare strategies on", min_length=1, max_length=100),
) -> ComparisonResponse:
    """Side-by-side comparison of the trie, kdtree and astar strategies."""
    try:
        return lexicon.compare_strategies(word)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Comparison failed: {str(e)}")
