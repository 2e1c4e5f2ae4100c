"""Persistence port for the copy pattern library."""

from abc import ABC, abstractmethod
from datetime import datetime

from copy_rag_api.models.copy_pattern import ComponentType, CopyPattern, CopyPatternUpdate, NewCopyPattern


class PatternRepository(ABC):
    """Storage operations for copy patterns. Ranking and text matching live in the matcher."""

    @abstractmethod
    def create_patterns(self, patterns: list[NewCopyPattern]) -> list[CopyPattern]:
        """Persist patterns and return them with ids, in input order."""

    @abstractmethod
    def get_pattern(self, pattern_id: int) -> CopyPattern | None:
        """Return the pattern or None."""

    @abstractmethod
    def update_pattern(self, pattern_id: int, update: CopyPatternUpdate) -> CopyPattern:
        """Apply the fields set on ``update``."""

    @abstractmethod
    def delete_pattern(self, pattern_id: int) -> None:
        """Remove a pattern."""

    @abstractmethod
    def select_patterns(
        self,
        user_id: int,
        component_type: ComponentType | None = None,
        project_id: int | None = None,
    ) -> list[CopyPattern]:
        """Return every pattern owned by ``user_id`` matching the optional filters."""

    @abstractmethod
    def select_approved_patterns(self, user_id: int, component_type: ComponentType) -> list[CopyPattern]:
        """Return approved patterns of ``user_id`` for ``component_type``."""

    @abstractmethod
    def increment_usage(self, pattern_id: int, used_at: datetime) -> bool:
        """Add one to the usage counter and stamp ``last_used_at``; False if the pattern is missing."""
