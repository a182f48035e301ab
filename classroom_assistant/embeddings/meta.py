"""Meta (Llama API) embeddings provider."""

from typing import List

from ..models.embeddings import ProviderKind
from .base import EmbeddingsProvider


class MetaEmbeddingsProvider(EmbeddingsProvider):
    """Meta Llama API embeddings.

    Same request and response shape as OpenAI, with its own endpoint and
    default model.
    """

    DEFAULT_MODEL = "llama-embed-v1"
    DEFAULT_BASE_URL = "https://api.llama.com/v1/embeddings"

    @property
    def provider_kind(self) -> ProviderKind:
        return ProviderKind.META

    async def embed_text_batch(self, texts: List[str]) -> List[List[float]]:
        if not texts:
            return []

        payload = {"model": self.model, "input": list(texts)}
        headers = {"Authorization": f"Bearer {self._api_key}"}

        async with self._session_scope() as session:
            data = await self._post_json(session, payload, headers=headers)

        vectors = self._vectors_from_data(data, len(texts))
        self.logger.debug("Texts embedded via Meta", count=len(texts), model=self.model)
        return vectors
