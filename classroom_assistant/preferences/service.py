"""User preferences: embedding provider choice, API keys and flags."""

from typing import Optional, Union

from ..config.logging import LoggerMixin
from ..config.settings import Settings
from ..core.exceptions import ConfigurationError, ValidationError
from ..models.embeddings import CredentialNamespace, ProviderKind
from .base import PreferenceStorage
from .memory import InMemoryPreferenceStorage
from .sqlite import SQLitePreferenceStorage

EMBEDDING_PROVIDER_KEY = "embedding_provider"
EDUCATION_LEVEL_KEY = "education_level"
DEFAULT_EDUCATION_LEVEL = "Undergraduate"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def create_preference_storage(settings: Settings) -> PreferenceStorage:
    """Build the storage backend named by ``PREFERENCES_BACKEND``."""
    backend = settings.PREFERENCES_BACKEND.lower()
    if backend == "sqlite":
        return SQLitePreferenceStorage(settings)
    if backend == "memory":
        return InMemoryPreferenceStorage()
    raise ConfigurationError(f"Unknown preferences backend: {settings.PREFERENCES_BACKEND}", "PREFERENCES_BACKEND")


def api_key_name(namespace: Union[CredentialNamespace, str]) -> str:
    """Storage key for a namespace's API key."""
    return f"{CredentialNamespace(namespace).value}_api_key"


class PreferencesService(LoggerMixin):
    """Typed access to persisted user preferences.

    API key values are never logged.
    """

    def __init__(self, storage: PreferenceStorage, settings: Optional[Settings] = None) -> None:
        self.storage = storage
        self.settings = settings or Settings()

    @property
    def default_embedding_provider(self) -> ProviderKind:
        try:
            return ProviderKind(self.settings.DEFAULT_EMBEDDING_PROVIDER.lower())
        except ValueError:
            return ProviderKind.GOOGLE

    # Embedding provider

    async def get_embedding_provider(self) -> ProviderKind:
        """The user's embedding provider, or the configured default."""
        stored = await self.storage.get(EMBEDDING_PROVIDER_KEY)
        if stored is None:
            return self.default_embedding_provider
        try:
            return ProviderKind(stored)
        except ValueError:
            self.logger.warning("Ignoring unknown stored embedding provider", value=stored)
            return self.default_embedding_provider

    async def set_embedding_provider(self, kind: Union[ProviderKind, str]) -> None:
        try:
            kind = ProviderKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown embedding provider: {kind}", "embedding_provider")
        await self.storage.set(EMBEDDING_PROVIDER_KEY, kind.value)
        self.logger.info("Embedding provider saved", provider=kind.value)

    # API keys

    async def get_api_key(self, namespace: Union[CredentialNamespace, str]) -> Optional[str]:
        return await self.storage.get(api_key_name(namespace))

    async def save_api_key(self, namespace: Union[CredentialNamespace, str], key: str) -> None:
        if not key or not key.strip():
            raise ValidationError("API key must not be empty", "api_key")
        await self.storage.set(api_key_name(namespace), key.strip())
        self.logger.info("API key saved", namespace=CredentialNamespace(namespace).value)

    async def delete_api_key(self, namespace: Union[CredentialNamespace, str]) -> bool:
        deleted = await self.storage.delete(api_key_name(namespace))
        self.logger.info("API key deleted", namespace=CredentialNamespace(namespace).value, deleted=deleted)
        return deleted

    # Flags and plain values

    async def get_flag(self, name: str, default: bool = False) -> bool:
        stored = await self.storage.get(name)
        if stored is None:
            return default
        return stored.lower() in _TRUE_VALUES

    async def set_flag(self, name: str, value: bool) -> None:
        await self.storage.set(name, "true" if value else "false")

    async def get_education_level(self) -> str:
        return await self.storage.get(EDUCATION_LEVEL_KEY) or DEFAULT_EDUCATION_LEVEL

    async def set_education_level(self, level: str) -> None:
        if not level.strip():
            raise ValidationError("Education level must not be empty", "education_level")
        await self.storage.set(EDUCATION_LEVEL_KEY, level.strip())
