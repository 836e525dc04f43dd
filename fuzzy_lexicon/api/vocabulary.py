"""Vocabulary management API endpoints."""

from fastapi import APIRouter, HTTPException, Path

from ..models.request import VocabularyLoadRequest
from ..models.response import VocabularyUpdateResponse, WordExistsResponse

router = APIRouter(prefix="/api/v1", tags=["vocabulary"])

# Import the global lexicon instance
from ..engine_instance import lexicon, settings


@router.get(
    "/words",
    response_model=list[str],
    summary="Get all indexed words",
    description="Get every word currently stored in the prefix index",
)
async def get_all_words() -> list[str]:
    """Get all words in the prefix index, sorted."""
    try:
        return lexicon.prefix_index.words()
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to get words: {str(e)}")


@router.get(
    "/words/{word}",
    response_model=WordExistsResponse,
    summary="Check a word",
    description="Check whether a word is in the vocabulary",
)
async def word_exists(
    word: str = Path(..., description="The word to look up", min_length=1, max_length=100),
) -> WordExistsResponse:
    """Exact membership check; the input is cleaned first."""
    return WordExistsResponse(word=word, exists=lexicon.is_valid_word(word))


@router.post(
    "/words",
    response_model=VocabularyUpdateResponse,
    summary="Add words",
    description="Clean raw words and insert them into both indexes",
)
async def add_words(request: VocabularyLoadRequest) -> VocabularyUpdateResponse:
    """
    Add words to the vocabulary.

    Words are cleaned the same way dictionary files are; tokens shorter than
    the configured minimum length are ignored.
    """
    try:
        cleaned = [lexicon.normalizer.clean_word(word) for word in request.words]
        added = lexicon.load_vocabulary(w for w in cleaned if len(w) >= settings.min_word_length)

        return VocabularyUpdateResponse(
            message="Words loaded successfully",
            added=added,
            vocabulary_size=lexicon.vocabulary_size,
            feature_space_size=lexicon.feature_space_size,
        )
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to add words: {str(e)}")


@router.delete(
    "/words/{word}",
    response_model=VocabularyUpdateResponse,
    summary="Remove a word",
    description="Remove a word from the prefix index",
)
async def remove_word(
    word: str = Path(..., description="The word to remove from the vocabulary"),
) -> VocabularyUpdateResponse:
    """
    Remove a word from the prefix index.

    The kd-tree is append-only, so the word's embedding stays behind and the
    kdtree strategy can still suggest it.
    """
    try:
        removed = lexicon.remove_word(lexicon.normalizer.clean_word(word))
        if not removed:
            raise HTTPException(status_code=404, detail=f"Word '{word}' not found in vocabulary")

        return VocabularyUpdateResponse(
            message=f"Word '{word}' removed successfully",
            vocabulary_size=lexicon.vocabulary_size,
            feature_space_size=lexicon.feature_space_size,
        )
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Failed to remove word: {str(e)}")
