"""Module for the ContextAssembler base class."""

from abc import ABC, abstractmethod

from copy_rag_api.models.copy_pattern import ComponentType
from copy_rag_api.models.generation import AssembledContext


class ContextAssembler(ABC):
    """Build the grounding text injected into the generation prompt."""

    @abstractmethod
    async def aassemble_context(
        self,
        query: str,
        workspace_id: int | None,
        user_id: int,
        component_type: ComponentType | None,
    ) -> AssembledContext:
        """Return the context text together with the passages and patterns it contains."""

    async def aassemble(
        self,
        query: str,
        workspace_id: int | None,
        user_id: int,
        component_type: ComponentType | None,
    ) -> str:
        """Return only the context text; empty when nothing relevant was found."""
        context = await self.aassemble_context(query, workspace_id, user_id, component_type)
        return context.text
