"""Response models for the engine and API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class SuggestionResponse(BaseModel):
    """Suggestions for a single word."""

    word: str = Field(..., description="Original query word")
    strategy: str = Field(..., description="Strategy used (trie, kdtree or astar)")
    is_valid: bool = Field(..., description="Whether the word is in the vocabulary")
    suggestions: List[str] = Field(..., description="Ranked suggestions, best first")
    total_suggestions: int = Field(..., description="Number of suggestions returned")
    max_distance: int = Field(..., description="Edit distance bound used for the query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class WordExistsResponse(BaseModel):
    """Exact membership check result."""

    word: str = Field(..., description="Word that was looked up")
    exists: bool = Field(..., description="Whether the word is in the vocabulary")


class SpellingError(BaseModel):
    """A token of checked text that is not in the vocabulary."""

    original_word: str = Field(..., description="The unknown token")
    position: int = Field(..., description="Index of the token in the text")
    line_number: int = Field(..., description="1-based line of the token")
    suggestions: List[str] = Field(..., description="Suggested corrections")
    strategy: str = Field(..., description="Strategy used for the suggestions")


class SpellCheckResponse(BaseModel):
    """Result of spell checking a piece of text."""

    errors: List[SpellingError] = Field(..., description="Unknown tokens with suggestions")
    total_words: int = Field(..., description="Number of tokens checked")
    correct_words: int = Field(..., description="Tokens found in the vocabulary")
    incorrect_words: int = Field(..., description="Tokens not found in the vocabulary")
    strategy: str = Field(..., description="Strategy used for the suggestions")
    processing_time_ms: float = Field(..., description="Processing time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class StrategyComparison(BaseModel):
    """Suggestions and timing of a single strategy."""

    strategy: str = Field(..., description="Strategy name")
    suggestions: List[str] = Field(..., description="Suggestions from this strategy")
    execution_time_ms: float = Field(..., description="Execution time in milliseconds")


class ComparisonResponse(BaseModel):
    """Side-by-side results of every strategy for one word."""

    word: str = Field(..., description="Query word")
    is_valid: bool = Field(..., description="Whether the word is in the vocabulary")
    comparisons: List[StrategyComparison] = Field(..., description="Per-strategy results")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")


class VocabularyUpdateResponse(BaseModel):
    """Result of a vocabulary mutation."""

    message: str = Field(..., description="Human-readable outcome")
    added: int = Field(0, description="Words inserted into both indexes")
    vocabulary_size: int = Field(..., description="Words currently in the prefix index")
    feature_space_size: int = Field(..., description="Embeddings currently in the kd-tree")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Component status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total suggestion queries processed")
    queries_by_strategy: Dict[str, int] = Field(..., description="Queries per strategy")
    average_response_time_ms: float = Field(..., description="Average query time")
    vocabulary_size: int = Field(..., description="Words in the prefix index")
    feature_space_size: int = Field(..., description="Embeddings in the kd-tree")
    memory_usage_mb: float = Field(..., description="Resident memory of the process in MB")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
