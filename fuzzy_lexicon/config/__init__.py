"""Configuration management for the fuzzy lexicon."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
