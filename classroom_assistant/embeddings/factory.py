"""Factory for creating embeddings provider instances."""

from typing import Dict, Optional, Tuple, Type

from ..config.logging import embeddings_logger
from ..config.settings import Settings
from ..core.exceptions import ConfigurationError
from ..models.embeddings import CredentialNamespace, ProviderKind
from .base import EmbeddingsProvider
from .google import GoogleEmbeddingsProvider
from .meta import MetaEmbeddingsProvider
from .openai import OpenAIEmbeddingsProvider

PROVIDER_CLASSES: Dict[ProviderKind, Type[EmbeddingsProvider]] = {
    ProviderKind.OPENAI: OpenAIEmbeddingsProvider,
    ProviderKind.GOOGLE: GoogleEmbeddingsProvider,
    ProviderKind.META: MetaEmbeddingsProvider,
}

CREDENTIAL_NAMESPACES: Dict[ProviderKind, CredentialNamespace] = {
    ProviderKind.OPENAI: CredentialNamespace.OPENAI,
    # Google embeddings use the same API key as Gemini
    ProviderKind.GOOGLE: CredentialNamespace.GEMINI,
    ProviderKind.META: CredentialNamespace.META,
}


def credential_namespace_for(kind: ProviderKind) -> CredentialNamespace:
    """Namespace holding the API key for ``kind``."""
    try:
        return CREDENTIAL_NAMESPACES[ProviderKind(kind)]
    except (KeyError, ValueError):
        raise ConfigurationError(f"Unknown embedding provider: {kind}", "embedding_provider")


def _overrides(kind: ProviderKind, settings: Optional[Settings]) -> Tuple[Optional[str], Optional[str]]:
    if settings is None:
        return None, None
    prefix = kind.value.upper()
    return (
        getattr(settings, f"{prefix}_EMBEDDING_MODEL", None),
        getattr(settings, f"{prefix}_EMBEDDINGS_URL", None),
    )


class EmbeddingsFactory:
    """Maps a provider kind and credentials to a provider instance.

    Construction only: no network calls, no caching. The key is checked for
    presence; whether it is accepted is found out on first use.
    """

    @staticmethod
    def create_provider(
        kind: ProviderKind,
        api_key: str,
        project_id: Optional[str] = None,
        settings: Optional[Settings] = None,
    ) -> EmbeddingsProvider:
        """Create an embeddings provider.

        Args:
            kind: Which vendor to target.
            api_key: Credential for that vendor.
            project_id: Accepted for compatibility, not used by any provider.
            settings: Optional settings carrying model, URL and timeout overrides.

        Returns:
            A ready-to-use provider.
        """
        try:
            provider_class = PROVIDER_CLASSES[ProviderKind(kind)]
        except (KeyError, ValueError):
            raise ConfigurationError(f"Unknown embedding provider: {kind}", "embedding_provider")

        if not api_key:
            raise ConfigurationError(f"API key required for {ProviderKind(kind).value} embeddings", "api_key")

        model, base_url = _overrides(ProviderKind(kind), settings)
        kwargs = {"model": model, "base_url": base_url}
        if settings is not None:
            kwargs["timeout_seconds"] = settings.EMBEDDING_HTTP_TIMEOUT_SECONDS

        embeddings_logger.debug("Creating embeddings provider", provider=ProviderKind(kind).value, model=model)
        return provider_class(api_key, **kwargs)
