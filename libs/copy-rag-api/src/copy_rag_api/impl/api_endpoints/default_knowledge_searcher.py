"""Module for the DefaultKnowledgeSearcher class."""

import asyncio
import logging

from copy_core_lib.errors import PersistenceUnavailableError
from copy_rag_api.api_endpoints.knowledge_searcher import KnowledgeSearcher
from copy_rag_api.embeddings.embedder import Embedder
from copy_rag_api.impl.embeddings.similarity import cosine_similarity
from copy_rag_api.impl.settings.knowledge_search_settings import KnowledgeSearchSettings
from copy_rag_api.impl.vector_index.vector_index import VectorIndex
from copy_rag_api.models.knowledge_chunk import KnowledgeChunk
from copy_rag_api.models.knowledge_document import DocumentCategory
from copy_rag_api.models.knowledge_search_result import KnowledgeSearchResult
from copy_rag_api.persistence.knowledge_repository import KnowledgeRepository
from copy_rag_api.workspaces.hierarchy_resolver import WorkspaceHierarchyResolver

logger = logging.getLogger(__name__)

UNKNOWN_DOCUMENT_TITLE = "Unknown"


class DefaultKnowledgeSearcher(KnowledgeSearcher):
    """Brute-force cosine ranking over every active chunk in the workspace ancestor chain."""

    def __init__(
        self,
        repository: KnowledgeRepository,
        hierarchy_resolver: WorkspaceHierarchyResolver,
        embedder: Embedder,
        vector_index: VectorIndex,
        settings: KnowledgeSearchSettings,
    ):
        """
        Initialize the searcher.

        Parameters
        ----------
        repository : KnowledgeRepository
            Source of documents and chunks.
        hierarchy_resolver : WorkspaceHierarchyResolver
            Expands a workspace into its ancestor chain.
        embedder : Embedder
            Embeds the query; must match the embedder used at indexing time.
        vector_index : VectorIndex
            Resolves chunk vectors.
        settings : KnowledgeSearchSettings
            Search defaults.
        """
        self._repository = repository
        self._hierarchy_resolver = hierarchy_resolver
        self._embedder = embedder
        self._vector_index = vector_index
        self._settings = settings

    async def asearch(self, query: str, workspace_id: int, limit: int | None = None) -> list[KnowledgeSearchResult]:
        limit = self._settings.default_limit if limit is None else limit
        if limit <= 0:
            return []
        try:
            return await asyncio.to_thread(self._search, query, workspace_id, limit)
        except PersistenceUnavailableError:
            logger.exception("Knowledge search in workspace %s failed", workspace_id)
            return []

    def _search(self, query: str, workspace_id: int, limit: int) -> list[KnowledgeSearchResult]:
        workspace_ids = self._hierarchy_resolver.ancestors(workspace_id)
        documents = {
            document.id: document for document in self._repository.select_active_documents(workspace_ids)
        }
        if not documents:
            return []
        chunks = self._repository.select_chunks_by_document_ids(documents.keys())
        if not chunks:
            return []

        query_vector = self._embedder.embed_query(query)
        scored: list[tuple[float, KnowledgeChunk]] = []
        for chunk in chunks:
            vector = self._vector_index.vector_for(chunk)
            if vector is None:
                continue
            try:
                similarity = cosine_similarity(query_vector, vector)
            except ValueError:
                logger.warning("Skipping chunk %s: vector does not match the query dimension", chunk.id)
                continue
            scored.append((similarity, chunk))

        scored.sort(key=lambda item: (-item[0], item[1].id))

        results = []
        for similarity, chunk in scored[:limit]:
            document = documents.get(chunk.document_id)
            results.append(
                KnowledgeSearchResult(
                    content=chunk.content,
                    document_title=document.title if document else UNKNOWN_DOCUMENT_TITLE,
                    document_category=(document.category if document else DocumentCategory.OTHER).value,
                    similarity=similarity,
                    chunk_id=chunk.id,
                    document_id=chunk.document_id,
                )
            )
        logger.debug("Knowledge search over workspaces %s returned %d results", workspace_ids, len(results))
        return results
