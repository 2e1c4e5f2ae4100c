"""Module for the KnowledgeSearcher base class."""

from abc import ABC, abstractmethod

from copy_rag_api.models.knowledge_search_result import KnowledgeSearchResult


class KnowledgeSearcher(ABC):
    """Rank knowledge passages of a workspace and its ancestors against a query."""

    @abstractmethod
    async def asearch(self, query: str, workspace_id: int, limit: int | None = None) -> list[KnowledgeSearchResult]:
        """
        Return the ``limit`` most similar passages, most similar first.

        Parameters
        ----------
        query : str
            Free text to match.
        workspace_id : int
            Workspace whose ancestor chain is searched.
        limit : int, optional
            Maximum number of results; the configured default when omitted.

        Returns
        -------
        list[KnowledgeSearchResult]
            Ranked passages, ties broken by ascending chunk id. No relevance floor is applied.
        """
