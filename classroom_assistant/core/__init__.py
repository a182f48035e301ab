"""Core error types for the classroom assistant."""

from .exceptions import (
    ClassroomAssistantError,
    ConfigurationError,
    EmbeddingError,
    ProviderError,
)

__all__ = ["ClassroomAssistantError", "ConfigurationError", "EmbeddingError", "ProviderError"]
