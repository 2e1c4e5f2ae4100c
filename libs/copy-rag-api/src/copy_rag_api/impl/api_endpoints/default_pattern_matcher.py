"""Module for the DefaultPatternMatcher class."""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timezone

from copy_core_lib.errors import PersistenceUnavailableError
from copy_rag_api.api_endpoints.pattern_matcher import PatternMatcher
from copy_rag_api.impl.settings.pattern_matcher_settings import PatternMatcherSettings
from copy_rag_api.models.copy_pattern import ComponentType, CopyPattern
from copy_rag_api.persistence.pattern_repository import PatternRepository

logger = logging.getLogger(__name__)

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def rank_patterns(patterns: list[CopyPattern]) -> list[CopyPattern]:
    """Order by usage count, then creation time, then id, all descending."""
    return sorted(
        patterns,
        key=lambda pattern: (pattern.usage_count, pattern.created_at or _EPOCH, pattern.id),
        reverse=True,
    )


class DefaultPatternMatcher(PatternMatcher):
    """Rank and filter one user's pattern library in memory."""

    def __init__(
        self,
        repository: PatternRepository,
        settings: PatternMatcherSettings,
        clock: Callable[[], datetime] = utcnow,
    ):
        self._repository = repository
        self._settings = settings
        self._clock = clock

    async def afind(
        self, user_id: int, component_type: ComponentType, limit: int | None = None
    ) -> list[CopyPattern]:
        limit = self._resolve_limit(limit)
        if limit <= 0:
            return []
        try:
            patterns = await asyncio.to_thread(self._repository.select_approved_patterns, user_id, component_type)
        except PersistenceUnavailableError:
            logger.exception("Pattern lookup for user %s failed", user_id)
            return []
        return rank_patterns(self._owned_by(user_id, patterns))[:limit]

    async def asearch(
        self,
        user_id: int,
        query: str,
        component_type: ComponentType | None = None,
        limit: int | None = None,
    ) -> list[CopyPattern]:
        limit = self._resolve_limit(limit)
        if limit <= 0:
            return []
        try:
            patterns = await asyncio.to_thread(self._repository.select_patterns, user_id, component_type)
        except PersistenceUnavailableError:
            logger.exception("Pattern search for user %s failed", user_id)
            return []
        matches = [pattern for pattern in self._owned_by(user_id, patterns) if self._contains(pattern.text, query)]
        return rank_patterns(matches)[:limit]

    async def arecord_usage(self, pattern_id: int) -> None:
        try:
            found = await asyncio.to_thread(self._repository.increment_usage, pattern_id, self._clock())
        except Exception:
            logger.exception("Failed to record usage of pattern %s", pattern_id)
            return
        if not found:
            logger.warning("Cannot record usage of missing pattern %s", pattern_id)

    def _resolve_limit(self, limit: int | None) -> int:
        return self._settings.default_limit if limit is None else limit

    def _contains(self, text: str, query: str) -> bool:
        if self._settings.case_sensitive_search:
            return query in text
        return query.casefold() in text.casefold()

    @staticmethod
    def _owned_by(user_id: int, patterns: list[CopyPattern]) -> list[CopyPattern]:
        return [pattern for pattern in patterns if pattern.user_id == user_id]
