"""Configuration settings for the classroom assistant."""

from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General Configuration
    DEBUG: bool = Field(default=False, description="Debug mode")
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_DIRECTORY: Path = Field(
        default=Path("./logs"), description="Directory for the log file"
    )

    # Preferences Configuration
    PREFERENCES_BACKEND: str = Field(
        default="sqlite", description="Preferences backend: 'sqlite' or 'memory'"
    )
    PREFERENCES_DATABASE_PATH: Path = Field(
        default=Path("./data/preferences.db"), description="SQLite preferences database path"
    )

    # Embeddings Configuration
    DEFAULT_EMBEDDING_PROVIDER: str = Field(
        default="google", description="Embedding provider used until the user picks one"
    )
    EMBEDDING_HTTP_TIMEOUT_SECONDS: float = Field(
        default=30.0, gt=0, description="Total timeout for one embeddings HTTP call"
    )
    OPENAI_EMBEDDING_MODEL: Optional[str] = Field(
        default=None, description="Override for the OpenAI embedding model"
    )
    OPENAI_EMBEDDINGS_URL: Optional[str] = Field(
        default=None, description="Override for the OpenAI embeddings endpoint"
    )
    GOOGLE_EMBEDDING_MODEL: Optional[str] = Field(
        default=None, description="Override for the Google embedding model"
    )
    GOOGLE_EMBEDDINGS_URL: Optional[str] = Field(
        default=None, description="Override for the Google embedContent endpoint"
    )
    META_EMBEDDING_MODEL: Optional[str] = Field(
        default=None, description="Override for the Meta embedding model"
    )
    META_EMBEDDINGS_URL: Optional[str] = Field(
        default=None, description="Override for the Meta embeddings endpoint"
    )

    # Document Index Configuration
    DOCUMENT_CHUNK_SIZE: int = Field(
        default=1000, ge=1, description="Characters per document chunk"
    )
    DOCUMENT_CHUNK_OVERLAP: int = Field(
        default=200, ge=0, description="Characters shared by consecutive chunks"
    )
    DOCUMENT_MAX_INDEXED_CHARS: int = Field(
        default=20000, ge=1, description="Maximum characters kept per indexed document"
    )
    INDEX_BATCH_SIZE: int = Field(
        default=16, ge=1, description="Chunks embedded per provider call"
    )
    INDEX_MAX_RETRIES: int = Field(
        default=4, ge=0, description="Retries for a failed embed or upsert batch"
    )
    INDEX_RETRY_BASE_DELAY: float = Field(
        default=0.5, ge=0, description="Initial backoff delay in seconds"
    )

    @model_validator(mode="after")
    def _check_chunking(self) -> "Settings":
        if self.DOCUMENT_CHUNK_OVERLAP >= self.DOCUMENT_CHUNK_SIZE:
            raise ValueError("DOCUMENT_CHUNK_OVERLAP must be smaller than DOCUMENT_CHUNK_SIZE")
        return self

    def create_directories(self) -> None:
        """Create necessary directories."""
        self.LOG_DIRECTORY.mkdir(parents=True, exist_ok=True)
        if self.PREFERENCES_BACKEND == "sqlite":
            self.PREFERENCES_DATABASE_PATH.parent.mkdir(parents=True, exist_ok=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()

    def __repr__(self) -> str:
        """String representation of settings."""
        return (
            f"Settings(preferences={self.PREFERENCES_BACKEND}, "
            f"default_provider={self.DEFAULT_EMBEDDING_PROVIDER}, debug={self.DEBUG})"
        )
