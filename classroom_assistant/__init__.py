"""
Classroom Assistant - embeddings and note classification core.

This package provides:
- Pluggable text embeddings over OpenAI, Google and Meta APIs
- Provider selection from user preferences with a cached instance
- Classification of AI-generated notes into topics and questions
- A small document index for retrieval over lecture material
"""

__version__ = "0.1.0"

from .config.settings import Settings
from .content import ContentTypeDetector, ExtractedContentProcessor
from .embeddings import EmbeddingsFactory, EmbeddingsProvider, EmbeddingsService

__all__ = [
    "Settings",
    "ContentTypeDetector",
    "ExtractedContentProcessor",
    "EmbeddingsFactory",
    "EmbeddingsProvider",
    "EmbeddingsService",
]
