"""Module for the PatternLibrary base class."""

from abc import ABC, abstractmethod

from copy_rag_api.models.copy_pattern import (
    ComponentType,
    CopyPattern,
    CopyPatternUpdate,
    NewCopyPattern,
    PatternStats,
)


class PatternLibrary(ABC):
    """Manage the copy patterns of a user."""

    @abstractmethod
    async def acreate_pattern(self, pattern: NewCopyPattern) -> CopyPattern:
        """Store one pattern."""

    @abstractmethod
    async def aimport_patterns(self, patterns: list[NewCopyPattern]) -> list[CopyPattern]:
        """Store several patterns at once, marking them as imported."""

    @abstractmethod
    async def aupdate_pattern(self, user_id: int, pattern_id: int, update: CopyPatternUpdate) -> CopyPattern:
        """Change a pattern owned by ``user_id``."""

    @abstractmethod
    async def adelete_pattern(self, user_id: int, pattern_id: int) -> None:
        """Remove a pattern owned by ``user_id``."""

    @abstractmethod
    async def alist_patterns(
        self,
        user_id: int,
        component_type: ComponentType | None = None,
        project_id: int | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CopyPattern]:
        """Page through the patterns of ``user_id``, most used first."""

    @abstractmethod
    async def astats(self, user_id: int) -> PatternStats:
        """Aggregate counts over the patterns of ``user_id``."""
