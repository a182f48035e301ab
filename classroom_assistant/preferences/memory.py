"""In-memory preference storage."""

from typing import Dict, Optional

from .base import PreferenceStorage


class InMemoryPreferenceStorage(PreferenceStorage):
    """Dictionary-backed storage; nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    async def initialize(self) -> None:
        self.logger.debug("In-memory preference storage initialized", keys=len(self._values))

    async def close(self) -> None:
        pass

    async def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._values[key] = value

    async def delete(self, key: str) -> bool:
        return self._values.pop(key, None) is not None
