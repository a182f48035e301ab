"""Embedding provider selection types."""

from enum import Enum


class ProviderKind(str, Enum):
    """External embeddings vendors a request can target."""

    OPENAI = "openai"
    GOOGLE = "google"
    META = "meta"


class CredentialNamespace(str, Enum):
    """Namespaces API keys are stored under.

    Google embeddings share the Gemini chat key, so there is no ``google``
    namespace.
    """

    GEMINI = "gemini"
    OPENAI = "openai"
    META = "meta"
