"""Module for the DefaultDocumentIndexer class."""

import asyncio
import logging
import weakref

from copy_core_lib.errors import DocumentNotFoundError
from copy_rag_api.api_endpoints.document_indexer import DocumentIndexer
from copy_rag_api.chunkers.chunker import Chunker
from copy_rag_api.embeddings.embedder import Embedder
from copy_rag_api.impl.vector_index.vector_index import VectorIndex
from copy_rag_api.models.knowledge_chunk import NewKnowledgeChunk
from copy_rag_api.models.knowledge_document import KnowledgeDocument, NewKnowledgeDocument
from copy_rag_api.persistence.knowledge_repository import KnowledgeRepository

logger = logging.getLogger(__name__)


class DefaultDocumentIndexer(DocumentIndexer):
    """
    Chunk, embed and store knowledge documents.

    Re-indexing a document replaces all of its chunks. Runs for the same document are
    serialized; a search running meanwhile may see the document with only part of its
    chunks.
    """

    def __init__(
        self,
        repository: KnowledgeRepository,
        chunker: Chunker,
        embedder: Embedder,
        vector_index: VectorIndex,
    ):
        self._repository = repository
        self._chunker = chunker
        self._embedder = embedder
        self._vector_index = vector_index
        self._locks: weakref.WeakValueDictionary[int, asyncio.Lock] = weakref.WeakValueDictionary()

    async def acreate_document(self, document: NewKnowledgeDocument) -> KnowledgeDocument:
        created = await asyncio.to_thread(self._repository.create_document, document)
        logger.info("Created document %s in workspace %s", created.id, created.workspace_id)
        async with self._lock_for(created.id):
            return await asyncio.to_thread(self._reindex, created.id)

    async def aupdate_content(self, document_id: int, content: str) -> KnowledgeDocument:
        async with self._lock_for(document_id):
            await asyncio.to_thread(self._repository.update_document, document_id, content=content)
            return await asyncio.to_thread(self._reindex, document_id)

    async def adeactivate(self, document_id: int) -> KnowledgeDocument:
        async with self._lock_for(document_id):
            document = await asyncio.to_thread(self._repository.update_document, document_id, is_active=False)
        logger.info("Deactivated document %s", document_id)
        return document

    async def areindex(self, document_id: int) -> KnowledgeDocument:
        async with self._lock_for(document_id):
            return await asyncio.to_thread(self._reindex, document_id)

    async def aload_embeddings(self) -> int:
        return await asyncio.to_thread(self._vector_index.load_all)

    def _lock_for(self, document_id: int) -> asyncio.Lock:
        # Entries vanish once no holder or waiter references the lock.
        lock = self._locks.get(document_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[document_id] = lock
        return lock

    def _reindex(self, document_id: int) -> KnowledgeDocument:
        document = self._repository.get_document(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)

        removed = self._repository.delete_chunks_for_document(document_id)
        self._vector_index.discard(removed)

        texts = self._chunker.chunk(document.content)
        embeddings = self._embedder.embed_documents(texts)
        new_chunks = [
            NewKnowledgeChunk(chunk_index=index, content=text, embedding=embedding)
            for index, (text, embedding) in enumerate(zip(texts, embeddings))
        ]
        inserted = self._repository.insert_chunks(document_id, new_chunks) if new_chunks else []
        for chunk in inserted:
            self._vector_index.upsert(chunk.id, chunk.embedding)

        document = self._repository.update_document(document_id, chunk_count=len(inserted))
        logger.info("Indexed document %s into %d chunks (%d removed)", document_id, len(inserted), len(removed))
        return document
