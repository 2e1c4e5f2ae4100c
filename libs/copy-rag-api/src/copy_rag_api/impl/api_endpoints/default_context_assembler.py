"""Module for the DefaultContextAssembler class."""

import asyncio
import logging

from copy_rag_api.api_endpoints.context_assembler import ContextAssembler
from copy_rag_api.api_endpoints.knowledge_searcher import KnowledgeSearcher
from copy_rag_api.api_endpoints.pattern_matcher import PatternMatcher
from copy_rag_api.impl.settings.context_assembler_settings import ContextAssemblerSettings
from copy_rag_api.models.copy_pattern import ComponentType, CopyPattern
from copy_rag_api.models.generation import AssembledContext
from copy_rag_api.models.knowledge_search_result import KnowledgeSearchResult

logger = logging.getLogger(__name__)


def format_pattern_line(position: int, pattern: CopyPattern) -> str:
    """Render ``1. "text" (context) [A/B winner] [UXR validated]``, omitting absent parts."""
    line = f'{position}. "{pattern.text}"'
    if pattern.context:
        line += f" ({pattern.context})"
    for tag in pattern.metadata.tags:
        line += f" [{tag}]"
    return line


class DefaultContextAssembler(ContextAssembler):
    """
    Merge relevant knowledge passages and existing copy patterns into one block of text.

    Knowledge comes first and only passages above the relevance floor are kept. A section
    without entries is left out, so nothing to show yields an empty string.
    """

    def __init__(
        self,
        knowledge_searcher: KnowledgeSearcher,
        pattern_matcher: PatternMatcher,
        settings: ContextAssemblerSettings,
    ):
        self._knowledge_searcher = knowledge_searcher
        self._pattern_matcher = pattern_matcher
        self._settings = settings

    async def aassemble_context(
        self,
        query: str,
        workspace_id: int | None,
        user_id: int,
        component_type: ComponentType | None,
    ) -> AssembledContext:
        passages, patterns = await asyncio.gather(
            self._arelevant_passages(query, workspace_id),
            self._apatterns(user_id, component_type),
        )

        sections = []
        if passages:
            sections.append(self._knowledge_section(passages))
        if patterns:
            sections.append(self._pattern_section(component_type, patterns))

        return AssembledContext(text="\n\n".join(sections), passages=passages, patterns=patterns)

    async def _arelevant_passages(self, query: str, workspace_id: int | None) -> list[KnowledgeSearchResult]:
        if workspace_id is None or self._settings.knowledge_limit == 0:
            return []
        results = await self._knowledge_searcher.asearch(query, workspace_id, self._settings.knowledge_limit)
        relevant = [result for result in results if result.similarity > self._settings.relevance_floor]
        logger.debug("%d of %d passages above the relevance floor", len(relevant), len(results))
        return relevant

    async def _apatterns(self, user_id: int, component_type: ComponentType | None) -> list[CopyPattern]:
        if component_type is None or self._settings.pattern_limit == 0:
            return []
        return await self._pattern_matcher.afind(user_id, component_type, self._settings.pattern_limit)

    def _knowledge_section(self, passages: list[KnowledgeSearchResult]) -> str:
        blocks = [self._settings.knowledge_header]
        for passage in passages:
            blocks.append(f"[{passage.document_category.upper()}: {passage.document_title}]\n{passage.content}")
        return "\n\n".join(blocks)

    def _pattern_section(self, component_type: ComponentType, patterns: list[CopyPattern]) -> str:
        header = self._settings.pattern_header_template.format(component_type=component_type.value)
        lines = [format_pattern_line(position, pattern) for position, pattern in enumerate(patterns, start=1)]
        return "\n".join([header, *lines])
