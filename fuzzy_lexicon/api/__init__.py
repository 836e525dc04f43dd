"""API endpoints for the fuzzy lexicon."""

from .suggest import router as suggest_router
from .vocabulary import router as vocabulary_router
from .check import router as check_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "suggest_router",
    "vocabulary_router",
    "check_router",
    "health_router",
    "metrics_router",
]
