"""Core approximate matching engine."""

from .batch import BatchSuggester
from .embedding import WordEmbedding, embed
from .feature_index import FeatureSpaceIndex, FeatureTreeNode
from .guided_search import GuidedEditSearch, SearchFrontierState
from .lexicon import Lexicon
from .normalizer import TextNormalizer
from .prefix_index import PrefixIndex, PrefixNode
from .strategy import Strategy

__all__ = [
    "BatchSuggester",
    "WordEmbedding",
    "embed",
    "FeatureSpaceIndex",
    "FeatureTreeNode",
    "GuidedEditSearch",
    "SearchFrontierState",
    "Lexicon",
    "TextNormalizer",
    "PrefixIndex",
    "PrefixNode",
    "Strategy",
]
