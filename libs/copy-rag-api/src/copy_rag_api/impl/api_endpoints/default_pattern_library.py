"""Module for the DefaultPatternLibrary class."""

import asyncio
import logging
from collections import Counter

from copy_core_lib.errors import PatternNotFoundError, PersistenceUnavailableError
from copy_rag_api.api_endpoints.pattern_library import PatternLibrary
from copy_rag_api.impl.api_endpoints.default_pattern_matcher import rank_patterns
from copy_rag_api.models.copy_pattern import (
    ComponentType,
    CopyPattern,
    CopyPatternUpdate,
    NewCopyPattern,
    PatternSource,
    PatternStats,
)
from copy_rag_api.persistence.pattern_repository import PatternRepository

logger = logging.getLogger(__name__)


class DefaultPatternLibrary(PatternLibrary):
    """Pattern CRUD scoped to the owning user."""

    def __init__(self, repository: PatternRepository):
        self._repository = repository

    async def acreate_pattern(self, pattern: NewCopyPattern) -> CopyPattern:
        (created,) = await asyncio.to_thread(self._repository.create_patterns, [pattern])
        return created

    async def aimport_patterns(self, patterns: list[NewCopyPattern]) -> list[CopyPattern]:
        imported = [pattern.model_copy(update={"source": PatternSource.IMPORTED}) for pattern in patterns]
        created = await asyncio.to_thread(self._repository.create_patterns, imported)
        logger.info("Imported %d patterns", len(created))
        return created

    async def aupdate_pattern(self, user_id: int, pattern_id: int, update: CopyPatternUpdate) -> CopyPattern:
        await self._aget_owned(user_id, pattern_id)
        return await asyncio.to_thread(self._repository.update_pattern, pattern_id, update)

    async def adelete_pattern(self, user_id: int, pattern_id: int) -> None:
        await self._aget_owned(user_id, pattern_id)
        await asyncio.to_thread(self._repository.delete_pattern, pattern_id)

    async def alist_patterns(
        self,
        user_id: int,
        component_type: ComponentType | None = None,
        project_id: int | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[CopyPattern]:
        try:
            patterns = await asyncio.to_thread(self._repository.select_patterns, user_id, component_type, project_id)
        except PersistenceUnavailableError:
            logger.exception("Listing patterns of user %s failed", user_id)
            return []
        ranked = rank_patterns([pattern for pattern in patterns if pattern.user_id == user_id])
        return ranked[offset : offset + limit]

    async def astats(self, user_id: int) -> PatternStats:
        try:
            patterns = await asyncio.to_thread(self._repository.select_patterns, user_id)
        except PersistenceUnavailableError:
            logger.exception("Computing pattern stats of user %s failed", user_id)
            return PatternStats()
        patterns = [pattern for pattern in patterns if pattern.user_id == user_id]
        return PatternStats(
            total=len(patterns),
            by_type=dict(Counter(pattern.component_type.value for pattern in patterns)),
            ab_test_winners=sum(1 for pattern in patterns if pattern.metadata.ab_test_winner),
            user_research_validated=sum(1 for pattern in patterns if pattern.metadata.user_research_validated),
        )

    async def _aget_owned(self, user_id: int, pattern_id: int) -> CopyPattern:
        pattern = await asyncio.to_thread(self._repository.get_pattern, pattern_id)
        if pattern is None or pattern.user_id != user_id:
            raise PatternNotFoundError(pattern_id)
        return pattern
