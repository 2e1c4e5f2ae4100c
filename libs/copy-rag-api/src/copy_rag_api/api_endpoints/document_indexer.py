"""Module for the DocumentIndexer base class."""

from abc import ABC, abstractmethod

from copy_rag_api.models.knowledge_document import KnowledgeDocument, NewKnowledgeDocument


class DocumentIndexer(ABC):
    """Keep the chunks and vectors of knowledge documents in sync with their content."""

    @abstractmethod
    async def acreate_document(self, document: NewKnowledgeDocument) -> KnowledgeDocument:
        """Store a document and index it."""

    @abstractmethod
    async def aupdate_content(self, document_id: int, content: str) -> KnowledgeDocument:
        """Replace the content of a document and re-index it."""

    @abstractmethod
    async def adeactivate(self, document_id: int) -> KnowledgeDocument:
        """Exclude a document from search without deleting it."""

    @abstractmethod
    async def areindex(self, document_id: int) -> KnowledgeDocument:
        """Rebuild every chunk and vector of a document."""

    @abstractmethod
    async def aload_embeddings(self) -> int:
        """Warm the vector cache from the store and return how many vectors were loaded."""
