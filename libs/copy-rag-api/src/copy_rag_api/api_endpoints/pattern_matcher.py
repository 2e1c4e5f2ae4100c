"""Module for the PatternMatcher base class."""

from abc import ABC, abstractmethod

from copy_rag_api.models.copy_pattern import ComponentType, CopyPattern


class PatternMatcher(ABC):
    """Look up verified copy of one user, most used first."""

    @abstractmethod
    async def afind(
        self, user_id: int, component_type: ComponentType, limit: int | None = None
    ) -> list[CopyPattern]:
        """Return approved patterns of ``component_type`` owned by ``user_id``."""

    @abstractmethod
    async def asearch(
        self,
        user_id: int,
        query: str,
        component_type: ComponentType | None = None,
        limit: int | None = None,
    ) -> list[CopyPattern]:
        """Return patterns of ``user_id`` whose text contains ``query``, approved or not."""

    @abstractmethod
    async def arecord_usage(self, pattern_id: int) -> None:
        """Count one use of a pattern. Never raises."""
