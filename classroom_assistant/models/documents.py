"""Document chunk and vector store models."""

import hashlib
from typing import Any, Dict, List, Optional

from pydantic import Field

from .base import AssistantBaseModel


class DocumentChunk(AssistantBaseModel):
    """A chunk of lecture material kept in memory and indexed for retrieval."""

    id: str = Field(description="Stable chunk identifier used by the vector store")
    content: str = Field(description="Chunk text")
    page_number: int = Field(ge=1, description="Page or slide number (1-based)")
    source: str = Field(description="Source document name")
    chunk_index: int = Field(ge=0, description="Chunk position within its page")

    @property
    def length(self) -> int:
        """Character length of the chunk."""
        return len(self.content)

    @staticmethod
    def make_id(source: str, page_number: int, chunk_index: int, content: str) -> str:
        """Stable id from source, position and the leading content."""
        raw = f"{source}|{page_number}|{chunk_index}|{content[:64]}"
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()


class VectorItem(AssistantBaseModel):
    """A vector with its id and metadata, as stored in a vector store."""

    id: str = Field(description="Item identifier; upserts replace by id")
    vector: List[float] = Field(description="Embedding vector")
    metadata: Optional[Dict[str, Any]] = Field(default=None, description="Item metadata")


class VectorSearchResult(AssistantBaseModel):
    """A scored vector store hit."""

    id: str = Field(description="Item identifier")
    score: float = Field(description="Cosine similarity to the query")
    metadata: Optional[Dict[str, Any]] = Field(default=None, description="Item metadata")
