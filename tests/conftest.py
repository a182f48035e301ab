"""Pytest configuration and shared fixtures for classroom assistant tests."""

import os
import tempfile
from pathlib import Path
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio

from classroom_assistant.config.settings import Settings
from classroom_assistant.preferences import (
    InMemoryPreferenceStorage,
    PreferencesService,
    SQLitePreferenceStorage,
)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def test_settings(temp_dir: Path) -> Settings:
    """Create test settings with temporary directories."""
    return Settings(
        DEBUG=True,
        LOG_DIRECTORY=temp_dir / "logs",

        # Preferences (in memory unless a test asks for SQLite)
        PREFERENCES_BACKEND="memory",
        PREFERENCES_DATABASE_PATH=temp_dir / "preferences.db",
        DEFAULT_EMBEDDING_PROVIDER="google",

        # Small chunks and no backoff delay keep index tests fast
        DOCUMENT_CHUNK_SIZE=60,
        DOCUMENT_CHUNK_OVERLAP=10,
        DOCUMENT_MAX_INDEXED_CHARS=1000,
        INDEX_BATCH_SIZE=2,
        INDEX_MAX_RETRIES=2,
        INDEX_RETRY_BASE_DELAY=0.0,
    )


@pytest.fixture
def preferences(test_settings: Settings) -> PreferencesService:
    """Preferences service over in-memory storage."""
    return PreferencesService(InMemoryPreferenceStorage(), test_settings)


@pytest_asyncio.fixture
async def sqlite_storage(test_settings: Settings) -> AsyncGenerator[SQLitePreferenceStorage, None]:
    """Create and initialize a SQLite preference storage."""
    storage = SQLitePreferenceStorage(test_settings)
    await storage.initialize()
    yield storage
    await storage.close()


@pytest.fixture
def sample_ai_response() -> list[str]:
    """Raw note-extraction output as a model typically returns it."""
    return [
        "Here's an analysis of the provided classroom transcription",
        "TOPIC: Quantum Mechanics",
        "- QUESTION: What is wave-particle duality?",
        "",
        "Based on the transcription for a student",
        "- TOPIC: Photons and Energy",
        "How does the photoelectric effect work?",
        "Planck's constant",
    ]


# Environment cleanup
@pytest.fixture(autouse=True)
def cleanup_env():
    """Clean up environment variables before/after tests."""
    original_env = dict(os.environ)

    yield

    os.environ.clear()
    os.environ.update(original_env)
