"""Lecture document chunking, indexing and retrieval."""

import re
from typing import Any, Dict, List, Optional, Sequence

from ..config.logging import LoggerMixin
from ..config.settings import Settings
from ..core.exceptions import RAGError
from ..embeddings.base import EmbeddingsProvider
from ..embeddings.service import EmbeddingsService
from ..models.documents import DocumentChunk, VectorItem
from ..utils.async_utils import retry_with_backoff
from .vector_store import VectorStore

PREVIEW_LENGTH = 200

_WHITESPACE = re.compile(r"\s+")


def clean_text(text: str) -> str:
    """Collapse runs of whitespace into single spaces."""
    return _WHITESPACE.sub(" ", text).strip()


def chunk_text(text: str, size: int, overlap: int) -> List[str]:
    """Split ``text`` into windows of ``size`` chars sharing ``overlap`` chars."""
    if overlap >= size:
        raise ValueError("overlap must be smaller than size")
    if len(text) <= size:
        return [text]

    parts = []
    start = 0
    while start < len(text):
        end = min(start + size, len(text))
        chunk = text[start:end].strip()
        if chunk:
            parts.append(chunk)
        if end == len(text):
            break
        start = end - overlap
    return parts


def jaccard_similarity(a: str, b: str) -> float:
    """Word-set Jaccard similarity of two strings."""
    sa = set(a.split())
    sb = set(b.split())
    if not sa or not sb:
        return 0.0
    return len(sa & sb) / len(sa | sb)


class DocumentIndex(LoggerMixin):
    """Keeps the current document's chunks and indexes them for retrieval.

    ``embeddings_provider`` is a plain mutable slot;
    :meth:`EmbeddingsService.refresh_downstream` writes into it when the
    user changes provider settings. When the slot is empty the index asks
    ``embeddings_service`` (if given) for a provider.

    Without a provider or a vector store, chunks are still kept in memory and
    retrieval falls back to keyword similarity.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        vector_store: Optional[VectorStore] = None,
        embeddings_provider: Optional[EmbeddingsProvider] = None,
        embeddings_service: Optional[EmbeddingsService] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.vector_store = vector_store
        self.embeddings_provider = embeddings_provider
        self.embeddings_service = embeddings_service
        self._chunks: List[DocumentChunk] = []
        self._current_document: Optional[str] = None

    @property
    def chunks(self) -> List[DocumentChunk]:
        return list(self._chunks)

    @property
    def current_document(self) -> Optional[str]:
        return self._current_document

    @property
    def has_document(self) -> bool:
        return bool(self._chunks)

    async def _provider(self, override: Optional[EmbeddingsProvider] = None) -> Optional[EmbeddingsProvider]:
        if override is not None:
            return override
        if self.embeddings_provider is not None:
            return self.embeddings_provider
        if self.embeddings_service is not None:
            return await self.embeddings_service.resolve_provider()
        return None

    def _build_chunks(self, source: str, pages: Sequence[str]) -> List[DocumentChunk]:
        chunks: List[DocumentChunk] = []
        for page_index, page_text in enumerate(pages):
            cleaned = clean_text(page_text)
            if not cleaned:
                continue

            page_number = page_index + 1
            pieces = chunk_text(
                cleaned,
                self.settings.DOCUMENT_CHUNK_SIZE,
                self.settings.DOCUMENT_CHUNK_OVERLAP,
            )
            for chunk_index, content in enumerate(pieces):
                chunks.append(
                    DocumentChunk(
                        id=DocumentChunk.make_id(source, page_number, chunk_index, content),
                        content=content,
                        page_number=page_number,
                        source=source,
                        chunk_index=chunk_index,
                    )
                )
        return chunks

    def _limit_total_chars(self, chunks: List[DocumentChunk]) -> List[DocumentChunk]:
        """Keep the earliest chunks that fit in the indexed-characters budget."""
        limit = self.settings.DOCUMENT_MAX_INDEXED_CHARS
        kept = []
        running = 0
        for chunk in chunks:
            if running + chunk.length > limit:
                break
            kept.append(chunk)
            running += chunk.length

        if len(kept) < len(chunks):
            self.logger.info(
                "Document truncated to indexing limit",
                kept_chunks=len(kept),
                total_chunks=len(chunks),
                max_chars=limit,
            )
        return kept

    async def index_document(
        self,
        source: str,
        pages: Sequence[str],
        embeddings_provider: Optional[EmbeddingsProvider] = None,
        vector_store: Optional[VectorStore] = None,
    ) -> bool:
        """Chunk a document's pages and index them.

        Args:
            source: Document name, stored with every chunk.
            pages: Extracted text per page or slide, in order.
            embeddings_provider: Overrides the provider slot for this call.
            vector_store: Overrides the configured store for this call.

        Returns:
            True when the chunks were kept (and indexed, if a backend exists).

        Raises:
            RAGError: If embedding or upserting fails after retries.
        """
        self._current_document = source
        self._chunks = self._limit_total_chars(self._build_chunks(source, pages))

        provider = await self._provider(embeddings_provider)
        store = vector_store if vector_store is not None else self.vector_store
        if provider is None or store is None:
            self.logger.info(
                "Embeddings provider or vector store not configured; skipping vector index",
                source=source,
                chunks=len(self._chunks),
            )
            return True

        batch_size = self.settings.INDEX_BATCH_SIZE
        try:
            for start in range(0, len(self._chunks), batch_size):
                batch = self._chunks[start:start + batch_size]
                texts = [chunk.content for chunk in batch]

                vectors = await retry_with_backoff(
                    lambda: provider.embed_text_batch(texts),
                    max_retries=self.settings.INDEX_MAX_RETRIES,
                    base_delay=self.settings.INDEX_RETRY_BASE_DELAY,
                )

                items = [
                    VectorItem(id=chunk.id, vector=vector, metadata=self._chunk_metadata(chunk))
                    for chunk, vector in zip(batch, vectors)
                ]
                await retry_with_backoff(
                    lambda: store.upsert(items),
                    max_retries=self.settings.INDEX_MAX_RETRIES,
                    base_delay=self.settings.INDEX_RETRY_BASE_DELAY,
                )

        except Exception as e:
            self.logger.error("Failed to index document", source=source, error=str(e))
            raise RAGError(f"Failed to index document: {e}") from e

        self.logger.info(
            "Document indexed",
            source=source,
            chunks=len(self._chunks),
            provider=provider.provider_kind.value,
        )
        return True

    @staticmethod
    def _chunk_metadata(chunk: DocumentChunk) -> Dict[str, Any]:
        preview = chunk.content
        if len(preview) > PREVIEW_LENGTH:
            preview = preview[:PREVIEW_LENGTH] + "..."
        return {
            "id": chunk.id,
            "source": chunk.source,
            "page_number": chunk.page_number,
            "chunk_index": chunk.chunk_index,
            "length": chunk.length,
            "text_preview": preview,
        }

    async def retrieve_relevant_chunks(self, query: str, top_k: int = 5) -> List[DocumentChunk]:
        """Chunks most relevant to ``query``.

        Uses vector search when a provider and a store are available and
        keyword similarity otherwise, or when vector search fails.
        """
        try:
            provider = await self._provider()
            if provider is not None and self.vector_store is not None:
                query_vector = await provider.embed_text(query)
                results = await self.vector_store.query_by_vector(query_vector, top_k=top_k)

                by_id = {chunk.id: chunk for chunk in self._chunks}
                found = []
                for result in results:
                    meta = result.metadata
                    if meta is None:
                        continue
                    chunk_id = meta.get("id", result.id)
                    local = by_id.get(chunk_id)
                    if local is None:
                        local = DocumentChunk(
                            id=chunk_id,
                            content=meta.get("text_preview", ""),
                            page_number=meta.get("page_number", 1),
                            source=meta.get("source") or self._current_document or "document",
                            chunk_index=meta.get("chunk_index", 0),
                        )
                    found.append(local)
                return found

        except Exception as e:
            self.logger.warning("Vector retrieval failed; using keyword search", error=str(e))

        return self._keyword_search(query, top_k)

    def _keyword_search(self, query: str, top_k: int) -> List[DocumentChunk]:
        q = query.lower()
        scored = [(chunk, jaccard_similarity(chunk.content.lower(), q)) for chunk in self._chunks]
        scored.sort(key=lambda pair: pair[1], reverse=True)
        return [chunk for chunk, _ in scored[:top_k]]

    def clear(self) -> None:
        """Forget the current document."""
        self._chunks.clear()
        self._current_document = None

    def get_status(self) -> Dict[str, Any]:
        """Debug snapshot of the index configuration and contents."""
        return {
            "has_embeddings_provider": self.embeddings_provider is not None,
            "has_vector_store": self.vector_store is not None,
            "embeddings_provider_type": type(self.embeddings_provider).__name__ if self.embeddings_provider is not None else None,
            "vector_store_type": type(self.vector_store).__name__ if self.vector_store is not None else None,
            "document_chunks_count": len(self._chunks),
            "current_document": self._current_document,
        }
