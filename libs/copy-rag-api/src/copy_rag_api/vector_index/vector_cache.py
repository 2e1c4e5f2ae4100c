"""Module for the VectorCache base class."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence


class VectorCache(ABC):
    """In-process cache of chunk id to embedding; never the source of truth."""

    @abstractmethod
    def get(self, chunk_id: int) -> tuple[float, ...] | None:
        """Return the cached vector or None on a miss."""

    @abstractmethod
    def put(self, chunk_id: int, vector: Sequence[float]) -> None:
        """Store ``vector`` under ``chunk_id``; readers see either the old or the new vector."""

    def put_many(self, items: Iterable[tuple[int, Sequence[float]]]) -> int:
        """Store several vectors and return how many were written."""
        count = 0
        for chunk_id, vector in items:
            self.put(chunk_id, vector)
            count += 1
        return count

    @abstractmethod
    def discard(self, chunk_ids: Iterable[int]) -> None:
        """Drop the given ids; unknown ids are ignored."""

    @abstractmethod
    def clear(self) -> None:
        """Drop every cached vector."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of cached vectors."""
