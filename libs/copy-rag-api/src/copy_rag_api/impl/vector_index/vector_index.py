"""Two-tier vector index: in-process cache in front of the persisted chunk embeddings."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from copy_core_lib.errors import InvalidEmbeddingError, PersistenceUnavailableError
from copy_rag_api.models.knowledge_chunk import KnowledgeChunk
from copy_rag_api.persistence.knowledge_repository import KnowledgeRepository
from copy_rag_api.vector_index.vector_cache import VectorCache

logger = logging.getLogger(__name__)


class VectorIndex:
    """
    Resolve chunk vectors, preferring the cache and backfilling it from the store.

    The repository stays the source of truth: any vector missing from the cache is read
    from persisted storage, and a cache that was never loaded only costs extra reads.
    """

    def __init__(self, cache: VectorCache, repository: KnowledgeRepository, dimension: int | None = None):
        """
        Initialize the index.

        Parameters
        ----------
        cache : VectorCache
            Shared, read-mostly cache.
        repository : KnowledgeRepository
            Store holding the persisted embeddings.
        dimension : int, optional
            Expected vector length; vectors of another length are treated as invalid.
        """
        self._cache = cache
        self._repository = repository
        self._dimension = dimension

    def __len__(self) -> int:
        return len(self._cache)

    def upsert(self, chunk_id: int, vector: Sequence[float]) -> None:
        """Cache ``vector`` for ``chunk_id``."""
        self._check_dimension(chunk_id, vector)
        self._cache.put(chunk_id, vector)

    def discard(self, chunk_ids: Iterable[int]) -> None:
        """Forget cached vectors, e.g. for chunks deleted by a re-index."""
        self._cache.discard(chunk_ids)

    def get(self, chunk_id: int) -> tuple[float, ...] | None:
        """Return the vector of ``chunk_id`` from the cache or the store, None if unavailable."""
        cached = self._cache.get(chunk_id)
        if cached is not None:
            return cached
        try:
            stored = self._repository.get_chunk_embedding(chunk_id)
            if stored is None:
                return None
            self.upsert(chunk_id, stored)
        except InvalidEmbeddingError as exc:
            logger.warning("Skipping chunk %s with invalid embedding: %s", chunk_id, exc)
            return None
        except PersistenceUnavailableError:
            logger.exception("Could not read embedding of chunk %s", chunk_id)
            return None
        return self._cache.get(chunk_id)

    def vector_for(self, chunk: KnowledgeChunk) -> tuple[float, ...] | None:
        """
        Return the vector of an already loaded chunk without another store round trip.

        The embedding read with the chunk wins over the cache, since another process may have
        re-indexed the chunk after it was cached. The cache only answers for chunks loaded
        without their embedding.
        """
        if chunk.embedding is None:
            return self._cache.get(chunk.id)
        try:
            self.upsert(chunk.id, chunk.embedding)
        except InvalidEmbeddingError as exc:
            logger.warning("Skipping chunk %s with invalid embedding: %s", chunk.id, exc)
            self._cache.discard([chunk.id])
            return None
        return self._cache.get(chunk.id)

    def load_all(self) -> int:
        """Populate the cache from every persisted embedding and return how many were loaded."""
        loaded = 0
        try:
            for chunk_id, vector in self._repository.iter_chunk_embeddings():
                try:
                    self.upsert(chunk_id, vector)
                except InvalidEmbeddingError as exc:
                    logger.warning("Skipping chunk %s with invalid embedding: %s", chunk_id, exc)
                    continue
                loaded += 1
        except PersistenceUnavailableError:
            logger.exception("Could not load embeddings from the store")
        logger.info("Loaded %d embeddings into memory", loaded)
        return loaded

    def _check_dimension(self, chunk_id: int, vector: Sequence[float]) -> None:
        if self._dimension is not None and len(vector) != self._dimension:
            raise InvalidEmbeddingError(
                f"Embedding of chunk {chunk_id} has {len(vector)} dimensions, expected {self._dimension}."
            )
