"""Data models for the fuzzy lexicon."""

from .response import (
    SuggestionResponse,
    WordExistsResponse,
    SpellingError,
    SpellCheckResponse,
    StrategyComparison,
    ComparisonResponse,
    VocabularyUpdateResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
)
from .request import (
    SuggestRequest,
    BatchSuggestRequest,
    VocabularyLoadRequest,
    CheckTextRequest,
)

__all__ = [
    "SuggestionResponse",
    "WordExistsResponse",
    "SpellingError",
    "SpellCheckResponse",
    "StrategyComparison",
    "ComparisonResponse",
    "VocabularyUpdateResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
    "SuggestRequest",
    "BatchSuggestRequest",
    "VocabularyLoadRequest",
    "CheckTextRequest",
]
