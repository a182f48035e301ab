"""Abstract base class for embeddings providers."""

import asyncio
import json
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

import aiohttp

from ..config.logging import LoggerMixin
from ..core.exceptions import ProviderError
from ..models.embeddings import ProviderKind

DEFAULT_TIMEOUT_SECONDS = 30.0


class EmbeddingsProvider(ABC, LoggerMixin):
    """Capability contract: embed one text, embed a batch of texts.

    Subclasses implement :meth:`embed_text_batch`; :meth:`embed_text` is the
    batch call with a single-element input, so both entry points behave the
    same for every provider.

    A session passed to the constructor is used as-is and never closed here.
    Without one, every embed call opens and closes its own session.
    """

    DEFAULT_MODEL: str = ""
    DEFAULT_BASE_URL: str = ""

    def __init__(
        self,
        api_key: str,
        model: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        self._api_key = api_key
        self.model = model or self.DEFAULT_MODEL
        self.base_url = base_url or self.default_base_url(self.model)
        self.timeout_seconds = timeout_seconds
        self._session = session

    @property
    @abstractmethod
    def provider_kind(self) -> ProviderKind:
        """The vendor this provider talks to."""
        pass

    @abstractmethod
    async def embed_text_batch(self, texts: List[str]) -> List[List[float]]:
        """Embed texts, returning one vector per input in input order."""
        pass

    async def embed_text(self, text: str) -> List[float]:
        """Embed a single text."""
        vectors = await self.embed_text_batch([text])
        return vectors[0]

    @classmethod
    def default_base_url(cls, model: str) -> str:
        """Endpoint used when no URL override is given."""
        return cls.DEFAULT_BASE_URL

    @asynccontextmanager
    async def _session_scope(self) -> AsyncIterator[aiohttp.ClientSession]:
        """Yield the injected session or a short-lived one."""
        if self._session is not None:
            yield self._session
            return

        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            yield session

    async def _post_json(
        self,
        session: aiohttp.ClientSession,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> Any:
        """POST ``payload`` to the endpoint and return the decoded JSON body."""
        request_headers = {"Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)

        try:
            async with session.post(
                self.base_url, json=payload, headers=request_headers, params=params
            ) as response:
                if response.status != 200:
                    error_text = await response.text()
                    raise ProviderError(
                        f"Embeddings API error: {response.status} {error_text}",
                        status_code=response.status,
                        body=error_text,
                        provider=self.provider_kind.value,
                    )

                try:
                    return await response.json(content_type=None)
                except (aiohttp.ContentTypeError, ValueError) as e:
                    error_text = await response.text()
                    raise ProviderError(
                        f"Embeddings API returned invalid JSON: {e}",
                        status_code=response.status,
                        body=error_text,
                        provider=self.provider_kind.value,
                    ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ProviderError(
                f"Embeddings API request error: {e}",
                provider=self.provider_kind.value,
            ) from e

    def _to_vector(self, values: Any, response_data: Any) -> List[float]:
        """Convert a JSON number list into a vector, or fail with the body attached."""
        if not isinstance(values, list) or not values:
            raise self._shape_error("embedding is not a non-empty list", response_data)
        try:
            return [float(x) for x in values]
        except (TypeError, ValueError) as e:
            raise self._shape_error(f"embedding contains non-numeric values: {e}", response_data) from e

    def _vectors_from_data(self, response_data: Any, expected_count: int) -> List[List[float]]:
        """Read ``{"data": [{"embedding": [...]}, ...]}`` positionally."""
        if not isinstance(response_data, dict) or not isinstance(response_data.get("data"), list):
            raise self._shape_error("missing 'data' list", response_data)

        items = response_data["data"]
        if len(items) != expected_count:
            raise self._shape_error(
                f"expected {expected_count} embeddings, got {len(items)}", response_data
            )

        vectors = []
        for item in items:
            if not isinstance(item, dict):
                raise self._shape_error("data item is not an object", response_data)
            vectors.append(self._to_vector(item.get("embedding"), response_data))
        return vectors

    def _shape_error(self, reason: str, response_data: Any) -> ProviderError:
        try:
            body = json.dumps(response_data)
        except (TypeError, ValueError):
            body = repr(response_data)
        return ProviderError(
            f"Unexpected embeddings response: {reason}",
            status_code=200,
            body=body,
            provider=self.provider_kind.value,
        )

    def get_model_info(self) -> Dict[str, Any]:
        """Describe the provider without exposing the API key."""
        return {
            "provider": self.provider_kind.value,
            "model_name": self.model,
            "base_url": self.base_url,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(model={self.model!r}, base_url={self.base_url!r})"
