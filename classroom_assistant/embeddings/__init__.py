"""
Text embeddings for lecture material.

This package hides three remote embeddings APIs behind one interface:

- **OpenAI**: one request per batch
- **Google**: one request per text, sent sequentially (no batch endpoint)
- **Meta**: one request per batch, OpenAI-compatible shape

Architecture:
- EmbeddingsProvider: abstract base class for all providers
- EmbeddingsFactory: maps a provider kind and API key to an instance
- EmbeddingsService: resolves the user's configured provider and caches it

Every provider returns one vector per input text, in input order, and raises
ProviderError with the HTTP status and body when the remote call fails.
"""

from .base import EmbeddingsProvider
from .factory import EmbeddingsFactory, credential_namespace_for
from .google import GoogleEmbeddingsProvider
from .meta import MetaEmbeddingsProvider
from .openai import OpenAIEmbeddingsProvider
from .service import EmbeddingsService

__all__ = [
    "EmbeddingsProvider",
    "EmbeddingsFactory",
    "EmbeddingsService",
    "OpenAIEmbeddingsProvider",
    "GoogleEmbeddingsProvider",
    "MetaEmbeddingsProvider",
    "credential_namespace_for",
]
