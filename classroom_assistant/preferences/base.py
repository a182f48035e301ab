"""Abstract base class for preference storage implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from ..config.logging import LoggerMixin


class PreferenceStorage(ABC, LoggerMixin):
    """Async string key-value store for user preferences and API keys."""

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the storage backend."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the storage backend."""
        pass

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Read a value, or None when the key is absent."""
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Write a value, replacing any previous one."""
        pass

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key. Returns True if deleted, False if not found."""
        pass
