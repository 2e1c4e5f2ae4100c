"""Dictionary backed vector cache."""

import threading
from collections.abc import Iterable, Sequence

from copy_rag_api.vector_index.vector_cache import VectorCache


class InMemoryVectorCache(VectorCache):
    """Thread-safe dict cache; vectors are stored as immutable tuples."""

    def __init__(self):
        self._vectors: dict[int, tuple[float, ...]] = {}
        self._lock = threading.Lock()

    def get(self, chunk_id: int) -> tuple[float, ...] | None:
        return self._vectors.get(chunk_id)

    def put(self, chunk_id: int, vector: Sequence[float]) -> None:
        frozen = tuple(float(value) for value in vector)
        with self._lock:
            self._vectors[chunk_id] = frozen

    def discard(self, chunk_ids: Iterable[int]) -> None:
        with self._lock:
            for chunk_id in chunk_ids:
                self._vectors.pop(chunk_id, None)

    def clear(self) -> None:
        with self._lock:
            self._vectors.clear()

    def __len__(self) -> int:
        return len(self._vectors)
