"""Retrieval over lecture documents."""

from .documents import DocumentIndex
from .vector_store import InMemoryVectorStore, VectorStore

__all__ = ["DocumentIndex", "InMemoryVectorStore", "VectorStore"]
