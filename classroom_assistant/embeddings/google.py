"""Google Generative Language embeddings provider."""

from typing import Any, List

from ..models.embeddings import ProviderKind
from .base import EmbeddingsProvider


class GoogleEmbeddingsProvider(EmbeddingsProvider):
    """Google ``embedContent``.

    The API has no batch endpoint, so a batch is one request per text, sent
    strictly one after another. The first failure aborts the batch; callers
    never get partial results. The key travels as the ``key`` query
    parameter instead of an Authorization header.
    """

    DEFAULT_MODEL = "text-embedding-004"
    URL_TEMPLATE = "https://generativelanguage.googleapis.com/v1beta/models/{model}:embedContent"
    TASK_TYPE = "RETRIEVAL_DOCUMENT"

    @property
    def provider_kind(self) -> ProviderKind:
        return ProviderKind.GOOGLE

    @classmethod
    def default_base_url(cls, model: str) -> str:
        return cls.URL_TEMPLATE.format(model=model)

    async def embed_text_batch(self, texts: List[str]) -> List[List[float]]:
        if not texts:
            return []

        vectors: List[List[float]] = []
        async with self._session_scope() as session:
            for text in texts:
                payload = {
                    "content": {"parts": [{"text": text}]},
                    "taskType": self.TASK_TYPE,
                }
                data = await self._post_json(session, payload, params={"key": self._api_key})
                vectors.append(self._parse_embedding(data))

        self.logger.debug("Texts embedded via Google", count=len(texts), model=self.model)
        return vectors

    def _parse_embedding(self, data: Any) -> List[float]:
        embedding = data.get("embedding") if isinstance(data, dict) else None
        if not isinstance(embedding, dict):
            raise self._shape_error("missing 'embedding' object", data)
        return self._to_vector(embedding.get("values"), data)
