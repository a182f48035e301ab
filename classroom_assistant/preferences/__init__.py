"""User preferences package.

- base: abstract key-value storage interface
- memory: in-process dictionary storage
- sqlite: SQLite-based storage for local persistence
- service: typed access to provider choice, API keys and flags
"""

from .base import PreferenceStorage
from .memory import InMemoryPreferenceStorage
from .service import PreferencesService, api_key_name, create_preference_storage
from .sqlite import SQLitePreferenceStorage

__all__ = [
    "PreferenceStorage",
    "InMemoryPreferenceStorage",
    "SQLitePreferenceStorage",
    "PreferencesService",
    "api_key_name",
    "create_preference_storage",
]
