"""
Fuzzy Lexicon - approximate string matching for spelling suggestions.

Three strategies share one vocabulary: bounded edit-distance search over a
prefix tree, nearest-neighbour search over a word feature embedding, and an
A*-style guided edit search. A FastAPI service exposes them over HTTP.
"""

__version__ = "1.0.0"

from .core.lexicon import Lexicon
from .core.strategy import Strategy

__all__ = [
    "Lexicon",
    "Strategy",
]
