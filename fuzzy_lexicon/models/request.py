"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.strategy import Strategy


class SuggestRequest(BaseModel):
    """Request model for a single suggestion query."""

    word: str = Field(..., min_length=1, max_length=100, description="Word to correct")
    strategy: Strategy = Field(default=Strategy.ASTAR, description="Matching strategy")
    max_distance: Optional[int] = Field(
        None, ge=0, le=5, description="Maximum edit distance (trie and astar only)"
    )
    max_suggestions: Optional[int] = Field(
        None, ge=1, le=50, description="Maximum number of suggestions to return"
    )

    @field_validator("word")
    @classmethod
    def validate_word(cls, v: str) -> str:
        """Reject blank words and strip surrounding whitespace."""
        if not v or not v.strip():
            raise ValueError("Word cannot be empty")
        return v.strip()


class BatchSuggestRequest(BaseModel):
    """Request model for batch suggestion queries."""

    words: List[str] = Field(..., min_length=1, max_length=100, description="Words to correct")
    strategy: Strategy = Field(default=Strategy.ASTAR, description="Matching strategy")
    max_distance: Optional[int] = Field(
        None, ge=0, le=5, description="Maximum edit distance (trie and astar only)"
    )
    max_suggestions: Optional[int] = Field(
        None, ge=1, le=50, description="Maximum number of suggestions per word"
    )
    parallel: bool = Field(default=True, description="Whether to process words in parallel")

    @field_validator("words")
    @classmethod
    def validate_words(cls, v: List[str]) -> List[str]:
        """Validate and normalize the word list."""
        normalized_words = []
        for word in v:
            if not word or not word.strip():
                raise ValueError("Word cannot be empty")
            normalized_words.append(word.strip())
        return normalized_words


class VocabularyLoadRequest(BaseModel):
    """Request model for adding words to the vocabulary."""

    words: List[str] = Field(..., min_length=1, description="Raw words to clean and insert")


class CheckTextRequest(BaseModel):
    """Request model for spell checking free text."""

    text: str = Field(..., min_length=1, max_length=100_000, description="Text to check")
    strategy: Strategy = Field(default=Strategy.ASTAR, description="Matching strategy")
    parallel: bool = Field(default=False, description="Generate suggestions in parallel")
