"""Test utilities and helper functions for classroom assistant tests."""

import string
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

from classroom_assistant.core.exceptions import ProviderError
from classroom_assistant.embeddings.base import EmbeddingsProvider
from classroom_assistant.models.embeddings import ProviderKind


class FakeResponse:
    """Stand-in for an aiohttp response used inside ``async with``."""

    def __init__(self, status: int = 200, json_data: Any = None, text: str = "", json_error: Optional[Exception] = None):
        self.status = status
        self._json_data = json_data
        self._text = text
        self._json_error = json_error

    async def json(self, content_type: Optional[str] = "application/json") -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._json_data

    async def text(self) -> str:
        return self._text


class _ResponseContext:
    def __init__(self, response: FakeResponse):
        self.response = response

    async def __aenter__(self) -> FakeResponse:
        return self.response

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        return None


class RecordingSession:
    """Fake aiohttp session that records POSTs and answers through a handler.

    ``handler(url, payload, headers, params)`` returns a FakeResponse or
    raises to simulate a transport failure.
    """

    def __init__(self, handler: Callable[[str, Dict[str, Any], Dict[str, str], Optional[Dict[str, str]]], FakeResponse]):
        self.handler = handler
        self.calls: List[Dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, json: Any = None, headers: Optional[Dict[str, str]] = None, params: Optional[Dict[str, str]] = None):
        self.calls.append({"url": url, "json": json, "headers": headers or {}, "params": params})
        return _ResponseContext(self.handler(url, json, headers or {}, params))

    async def __aenter__(self) -> "RecordingSession":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.closed = True

    async def close(self) -> None:
        self.closed = True


class MockFactory:
    """Factory for creating various mocks used in tests."""

    @staticmethod
    def create_aiohttp_session_mock(response_data: Any = None, status: int = 200, text: str = "") -> MagicMock:
        """Create a mock aiohttp session answering every POST the same way."""
        response_mock = AsyncMock()
        response_mock.status = status
        response_mock.json = AsyncMock(return_value=response_data)
        response_mock.text = AsyncMock(return_value=text)

        session_mock = MagicMock()
        session_mock.post = MagicMock(return_value=_ResponseContext(response_mock))
        session_mock.close = AsyncMock()
        return session_mock

    @staticmethod
    def openai_style_session(dimension: int = 3) -> RecordingSession:
        """Session answering ``{model, input}`` requests with one vector per input.

        Vectors are keyed by input text so ordering can be checked.
        """
        def handler(url, payload, headers, params):
            data = [{"embedding": vector_for(text, dimension)} for text in payload["input"]]
            return FakeResponse(json_data={"data": data})

        return RecordingSession(handler)

    @staticmethod
    def google_style_session(dimension: int = 3, fail_on: Optional[str] = None) -> RecordingSession:
        """Session answering ``embedContent`` requests, optionally failing for one text."""
        def handler(url, payload, headers, params):
            text = payload["content"]["parts"][0]["text"]
            if text == fail_on:
                return FakeResponse(status=429, text='{"error": "quota exceeded"}')
            return FakeResponse(json_data={"embedding": {"values": vector_for(text, dimension)}})

        return RecordingSession(handler)


def vector_for(text: str, dimension: int = 3) -> List[float]:
    """Deterministic, text-specific vector."""
    base = float(sum(ord(c) for c in text) % 97)
    return [base + i / 10 for i in range(dimension)]


class FakeEmbeddingsProvider(EmbeddingsProvider):
    """Offline provider producing letter-frequency vectors.

    ``fail_times`` makes the first N batch calls raise ProviderError.
    """

    DEFAULT_MODEL = "letter-frequency"
    DEFAULT_BASE_URL = "memory://fake"

    def __init__(self, fail_times: int = 0, kind: ProviderKind = ProviderKind.OPENAI):
        super().__init__(api_key="fake-key")
        self.fail_times = fail_times
        self.kind = kind
        self.batches: List[List[str]] = []

    @property
    def provider_kind(self) -> ProviderKind:
        return self.kind

    async def embed_text_batch(self, texts: List[str]) -> List[List[float]]:
        self.batches.append(list(texts))
        if self.fail_times > 0:
            self.fail_times -= 1
            raise ProviderError("Embeddings API error: 503", status_code=503, body="unavailable")
        return [self._letters(text) for text in texts]

    @staticmethod
    def _letters(text: str) -> List[float]:
        lower = text.lower()
        return [float(lower.count(letter)) for letter in string.ascii_lowercase]


class FailingStorage:
    """Preference storage whose reads always fail."""

    async def initialize(self) -> None:
        pass

    async def close(self) -> None:
        pass

    async def get(self, key: str) -> Optional[str]:
        raise RuntimeError("secure storage unavailable")

    async def set(self, key: str, value: str) -> None:
        raise RuntimeError("secure storage unavailable")

    async def delete(self, key: str) -> bool:
        raise RuntimeError("secure storage unavailable")
