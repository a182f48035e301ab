"""Classroom assistant domain models."""

from .base import AssistantBaseModel, TimestampedModel
from .content import ContentType, ExtractedContentItem
from .documents import DocumentChunk, VectorItem, VectorSearchResult
from .embeddings import CredentialNamespace, ProviderKind

__all__ = [
    # Base models
    "AssistantBaseModel",
    "TimestampedModel",

    # Content models
    "ContentType",
    "ExtractedContentItem",

    # Embedding selection
    "ProviderKind",
    "CredentialNamespace",

    # Document models
    "DocumentChunk",
    "VectorItem",
    "VectorSearchResult",
]
