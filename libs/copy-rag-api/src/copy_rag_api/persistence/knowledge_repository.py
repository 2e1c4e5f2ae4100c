"""Persistence port for workspaces, knowledge documents and their chunks."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from copy_core_lib.impl.data_types.embedding import Embedding
from copy_rag_api.models.knowledge_chunk import KnowledgeChunk, NewKnowledgeChunk
from copy_rag_api.models.knowledge_document import KnowledgeDocument, NewKnowledgeDocument
from copy_rag_api.models.workspace import NewWorkspace, Workspace


class KnowledgeRepository(ABC):
    """
    Semantic storage operations used by the retrieval core.

    Implementations raise ``PersistenceUnavailableError`` when the store cannot be reached
    and ``NotFoundError`` subclasses when a write references a missing parent.
    """

    @abstractmethod
    def create_workspace(self, workspace: NewWorkspace) -> Workspace:
        """Persist a workspace; a given ``parent_id`` must exist."""

    @abstractmethod
    def get_workspace(self, workspace_id: int) -> Workspace | None:
        """Return the workspace or None."""

    @abstractmethod
    def archive_workspace(self, workspace_id: int) -> None:
        """Soft-delete a workspace."""

    @abstractmethod
    def select_workspace_parent(self, workspace_id: int) -> int | None:
        """Return the parent id, or None for a root or a missing workspace."""

    @abstractmethod
    def create_document(self, document: NewKnowledgeDocument) -> KnowledgeDocument:
        """Persist a document for an existing workspace."""

    @abstractmethod
    def get_document(self, document_id: int) -> KnowledgeDocument | None:
        """Return the document or None."""

    @abstractmethod
    def update_document(
        self,
        document_id: int,
        *,
        content: str | None = None,
        is_active: bool | None = None,
        chunk_count: int | None = None,
    ) -> KnowledgeDocument:
        """Update the given fields of a document and return it."""

    @abstractmethod
    def select_active_documents(self, workspace_ids: Iterable[int]) -> list[KnowledgeDocument]:
        """Return active documents that belong to any of ``workspace_ids``."""

    @abstractmethod
    def insert_chunks(self, document_id: int, chunks: list[NewKnowledgeChunk]) -> list[KnowledgeChunk]:
        """Insert chunks for an existing document and return them with their ids."""

    @abstractmethod
    def delete_chunks_for_document(self, document_id: int) -> list[int]:
        """Delete every chunk of a document and return the deleted chunk ids."""

    @abstractmethod
    def select_chunks_by_document_ids(self, document_ids: Iterable[int]) -> list[KnowledgeChunk]:
        """Return chunks of the given documents ordered by document and chunk index."""

    @abstractmethod
    def get_chunk_embedding(self, chunk_id: int) -> Embedding | None:
        """Return the persisted embedding of a chunk, None when absent."""

    @abstractmethod
    def iter_chunk_embeddings(self) -> Iterator[tuple[int, Embedding]]:
        """Yield every readable persisted ``(chunk_id, embedding)`` pair."""
