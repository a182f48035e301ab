"""Vector store interface and in-memory cosine implementation."""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence

import numpy as np

from ..config.logging import LoggerMixin
from ..models.documents import VectorItem, VectorSearchResult


class VectorStore(ABC, LoggerMixin):
    """Abstract base class for vector stores."""

    @abstractmethod
    async def upsert(self, items: List[VectorItem]) -> None:
        """Insert items, replacing any existing item with the same id."""
        pass

    @abstractmethod
    async def query_by_vector(self, vector: Sequence[float], top_k: int = 5) -> List[VectorSearchResult]:
        """Return the ``top_k`` nearest items, best first."""
        pass


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine similarity over the common prefix of ``a`` and ``b``.

    Returns 0.0 when either side has zero norm.
    """
    n = min(len(a), len(b))
    if n == 0:
        return 0.0

    va = np.asarray(a[:n], dtype=float)
    vb = np.asarray(b[:n], dtype=float)
    norm_a = np.linalg.norm(va)
    norm_b = np.linalg.norm(vb)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(va, vb) / (norm_a * norm_b))


class InMemoryVectorStore(VectorStore):
    """Dictionary-backed store with brute-force cosine search. No persistence."""

    def __init__(self) -> None:
        self._items: Dict[str, VectorItem] = {}

    def __len__(self) -> int:
        return len(self._items)

    async def upsert(self, items: List[VectorItem]) -> None:
        for item in items:
            self._items[item.id] = item
        self.logger.debug("Vectors upserted", count=len(items), total=len(self._items))

    async def query_by_vector(self, vector: Sequence[float], top_k: int = 5) -> List[VectorSearchResult]:
        if not self._items or top_k <= 0:
            return []

        results = [
            VectorSearchResult(
                id=item.id,
                score=cosine_similarity(vector, item.vector),
                metadata=item.metadata,
            )
            for item in self._items.values()
        ]
        results.sort(key=lambda r: r.score, reverse=True)
        return results[:top_k]

    async def clear(self) -> None:
        self._items.clear()
