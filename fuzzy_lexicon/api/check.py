"""Text spell checking API endpoints."""

from fastapi import APIRouter, HTTPException

from ..models.request import CheckTextRequest
from ..models.response import SpellCheckResponse

router = APIRouter(prefix="/api/v1", tags=["check"])

# Import the global lexicon instance
from ..engine_instance import batch_suggester, lexicon


@router.post(
    "/check",
    response_model=SpellCheckResponse,
    summary="Spell check text",
    description="Find every unknown word in a text and suggest corrections",
)
async def check_text(request: CheckTextRequest) -> SpellCheckResponse:
    """
    Spell check free text.

    Tokens are cleaned before lookup, so punctuation and case do not count as
    errors. With `parallel` set, suggestions are generated on the batch pool.
    """
    try:
        if request.parallel:
            return batch_suggester.check_text_parallel(request.text, request.strategy)
        return lexicon.check_text(request.text, request.strategy)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Spell check failed: {str(e)}")
