"""Embeddings provider selection and caching."""

from typing import Any, Optional, Tuple

from ..config.logging import LoggerMixin
from ..config.settings import Settings
from ..models.embeddings import ProviderKind
from ..preferences.service import PreferencesService
from .base import EmbeddingsProvider
from .factory import EmbeddingsFactory, credential_namespace_for


class EmbeddingsService(LoggerMixin):
    """Resolves the user's embeddings provider and caches the built instance.

    Create one per application and pass it to whoever needs embeddings. The
    cache holds a single ``(kind, provider)`` pair that is always replaced as
    a whole, so the cached kind never disagrees with the cached instance.

    Embeddings are optional: a missing key or a failing preferences store
    yields ``None`` instead of an exception.
    """

    def __init__(
        self,
        preferences: PreferencesService,
        settings: Optional[Settings] = None,
        factory: Optional[EmbeddingsFactory] = None,
        downstream: Optional[Any] = None,
    ) -> None:
        self.preferences = preferences
        self.settings = settings
        self.factory = factory or EmbeddingsFactory()
        self.downstream = downstream
        self._cached: Optional[Tuple[ProviderKind, EmbeddingsProvider]] = None

    @property
    def cached_provider(self) -> Optional[EmbeddingsProvider]:
        """The cached provider instance, if any."""
        return self._cached[1] if self._cached else None

    @property
    def cached_kind(self) -> Optional[ProviderKind]:
        """The kind the cached provider was built for, if any."""
        return self._cached[0] if self._cached else None

    async def resolve_provider(self) -> Optional[EmbeddingsProvider]:
        """Get the provider matching the user's current settings.

        Returns the cached instance when the configured kind is unchanged,
        without looking up credentials again. Returns ``None`` when no key is
        configured for the selected kind.
        """
        try:
            kind = ProviderKind(await self.preferences.get_embedding_provider())

            cached = self._cached
            if cached is not None and cached[0] == kind:
                return cached[1]

            namespace = credential_namespace_for(kind)
            api_key = await self.preferences.get_api_key(namespace)
            if not api_key or not api_key.strip():
                self.logger.info(
                    "No API key configured for embeddings provider",
                    provider=kind.value,
                    namespace=namespace.value,
                )
                return None

            provider = self.factory.create_provider(kind, api_key, settings=self.settings)
            self._cached = (kind, provider)

            self.logger.info("Embeddings provider built", provider=kind.value, model=provider.model)
            return provider

        except Exception as e:
            self.logger.warning("Failed to resolve embeddings provider", error=str(e))
            return None

    def invalidate_cache(self) -> None:
        """Forget the cached provider; call whenever provider settings or keys change."""
        self._cached = None
        self.logger.debug("Embeddings provider cache cleared")

    async def refresh_downstream(self, consumer: Optional[Any] = None) -> None:
        """Re-resolve the provider and push it into ``consumer.embeddings_provider``.

        Best effort: failures are logged, never raised.
        """
        target = consumer if consumer is not None else self.downstream
        if target is None:
            self.logger.debug("No downstream consumer to refresh")
            return

        try:
            provider = await self.resolve_provider()
            target.embeddings_provider = provider
            self.logger.info(
                "Downstream embeddings provider refreshed",
                consumer=type(target).__name__,
                provider=provider.provider_kind.value if provider else None,
            )
        except Exception as e:
            self.logger.error("Failed to refresh embeddings provider", error=str(e))
