"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.strategy import Strategy


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Fuzzy Lexicon")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)

    # Matching
    max_edit_distance: int = Field(default=2, ge=0)
    max_suggestions: int = Field(default=5, ge=1)
    default_strategy: Strategy = Field(default=Strategy.ASTAR)
    max_query_length: int = Field(default=100)

    # Vocabulary loading
    dictionary_path: Optional[str] = Field(default=None)
    min_word_length: int = Field(default=2)  # single letters are dropped

    # Batch processing
    batch_workers: int = Field(default=4)  # 0 = executor default

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # "json" or "console"

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
