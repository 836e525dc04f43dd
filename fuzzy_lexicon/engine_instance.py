"""Global lexicon instance to avoid circular imports."""

from .core.batch import BatchSuggester
from .core.lexicon import Lexicon
from .config import get_settings

# Global lexicon instance
settings = get_settings()
lexicon = Lexicon(
    max_edit_distance=settings.max_edit_distance,
    max_suggestions=settings.max_suggestions,
)
batch_suggester = BatchSuggester(lexicon, max_workers=settings.batch_workers)
