"""OpenAI embeddings provider."""

from typing import List

from ..models.embeddings import ProviderKind
from .base import EmbeddingsProvider


class OpenAIEmbeddingsProvider(EmbeddingsProvider):
    """OpenAI ``/v1/embeddings``: the whole batch goes out in one request."""

    DEFAULT_MODEL = "text-embedding-3-small"
    DEFAULT_BASE_URL = "https://api.openai.com/v1/embeddings"

    @property
    def provider_kind(self) -> ProviderKind:
        return ProviderKind.OPENAI

    async def embed_text_batch(self, texts: List[str]) -> List[List[float]]:
        """Generate embeddings for all texts with a single API call."""
        if not texts:
            return []

        payload = {"model": self.model, "input": list(texts)}
        headers = {"Authorization": f"Bearer {self._api_key}"}

        async with self._session_scope() as session:
            data = await self._post_json(session, payload, headers=headers)

        vectors = self._vectors_from_data(data, len(texts))
        self.logger.debug(
            "Texts embedded via OpenAI",
            count=len(texts),
            model=self.model,
            embedding_dim=len(vectors[0]),
        )
        return vectors
