"""Module for the CopyGenerator base class."""

from abc import ABC, abstractmethod

from copy_rag_api.models.generation import CopyGenerationRequest, CopyGenerationResponse


class CopyGenerator(ABC):
    """Draft UX copy grounded in the knowledge base and the pattern library."""

    @abstractmethod
    async def agenerate(self, request: CopyGenerationRequest) -> CopyGenerationResponse:
        """Generate copy for ``request``."""

    async def aflush_usage(self) -> None:
        """Wait for usage recording scheduled by earlier generations."""
