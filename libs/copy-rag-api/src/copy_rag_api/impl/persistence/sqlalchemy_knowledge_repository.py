"""SQLAlchemy implementation of the knowledge repository."""

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime, timezone

from sqlalchemy import delete, select

from copy_core_lib.errors import DocumentNotFoundError, InvalidEmbeddingError, WorkspaceNotFoundError
from copy_core_lib.impl.data_types.embedding import Embedding, dump_embedding, parse_embedding
from copy_rag_api.impl.persistence.database import Database
from copy_rag_api.impl.persistence.orm_models import KnowledgeChunkRow, KnowledgeDocumentRow, WorkspaceRow
from copy_rag_api.models.knowledge_chunk import KnowledgeChunk, NewKnowledgeChunk
from copy_rag_api.models.knowledge_document import KnowledgeDocument, NewKnowledgeDocument
from copy_rag_api.models.workspace import NewWorkspace, Workspace
from copy_rag_api.persistence.knowledge_repository import KnowledgeRepository

logger = logging.getLogger(__name__)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive timestamps, which is how SQLite hands them back."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SqlAlchemyKnowledgeRepository(KnowledgeRepository):
    """Workspaces, documents and chunks stored in a relational database."""

    def __init__(self, database: Database):
        self._database = database

    def create_workspace(self, workspace: NewWorkspace) -> Workspace:
        with self._database.session_scope() as session:
            if workspace.parent_id is not None and session.get(WorkspaceRow, workspace.parent_id) is None:
                raise WorkspaceNotFoundError(workspace.parent_id)
            row = WorkspaceRow(**workspace.model_dump())
            session.add(row)
            session.flush()
            return self._to_workspace(row)

    def get_workspace(self, workspace_id: int) -> Workspace | None:
        with self._database.session_scope() as session:
            row = session.get(WorkspaceRow, workspace_id)
            return self._to_workspace(row) if row is not None else None

    def archive_workspace(self, workspace_id: int) -> None:
        with self._database.session_scope() as session:
            row = session.get(WorkspaceRow, workspace_id)
            if row is None:
                raise WorkspaceNotFoundError(workspace_id)
            row.is_archived = True

    def select_workspace_parent(self, workspace_id: int) -> int | None:
        with self._database.session_scope() as session:
            return session.scalar(select(WorkspaceRow.parent_id).where(WorkspaceRow.id == workspace_id))

    def create_document(self, document: NewKnowledgeDocument) -> KnowledgeDocument:
        with self._database.session_scope() as session:
            if session.get(WorkspaceRow, document.workspace_id) is None:
                raise WorkspaceNotFoundError(document.workspace_id)
            row = KnowledgeDocumentRow(**document.model_dump(mode="json"))
            session.add(row)
            session.flush()
            return self._to_document(row)

    def get_document(self, document_id: int) -> KnowledgeDocument | None:
        with self._database.session_scope() as session:
            row = session.get(KnowledgeDocumentRow, document_id)
            return self._to_document(row) if row is not None else None

    def update_document(
        self,
        document_id: int,
        *,
        content: str | None = None,
        is_active: bool | None = None,
        chunk_count: int | None = None,
    ) -> KnowledgeDocument:
        with self._database.session_scope() as session:
            row = session.get(KnowledgeDocumentRow, document_id)
            if row is None:
                raise DocumentNotFoundError(document_id)
            if content is not None:
                row.content = content
            if is_active is not None:
                row.is_active = is_active
            if chunk_count is not None:
                row.chunk_count = chunk_count
            session.flush()
            return self._to_document(row)

    def select_active_documents(self, workspace_ids: Iterable[int]) -> list[KnowledgeDocument]:
        workspace_ids = list(workspace_ids)
        if not workspace_ids:
            return []
        with self._database.session_scope() as session:
            rows = session.scalars(
                select(KnowledgeDocumentRow)
                .where(KnowledgeDocumentRow.workspace_id.in_(workspace_ids))
                .where(KnowledgeDocumentRow.is_active.is_(True))
                .order_by(KnowledgeDocumentRow.id)
            ).all()
            return [self._to_document(row) for row in rows]

    def insert_chunks(self, document_id: int, chunks: list[NewKnowledgeChunk]) -> list[KnowledgeChunk]:
        with self._database.session_scope() as session:
            if session.get(KnowledgeDocumentRow, document_id) is None:
                raise DocumentNotFoundError(document_id)
            rows = [
                KnowledgeChunkRow(
                    document_id=document_id,
                    chunk_index=chunk.chunk_index,
                    content=chunk.content,
                    embedding=dump_embedding(chunk.embedding) if chunk.embedding is not None else None,
                )
                for chunk in chunks
            ]
            session.add_all(rows)
            session.flush()
            return [self._to_chunk(row) for row in rows]

    def delete_chunks_for_document(self, document_id: int) -> list[int]:
        with self._database.session_scope() as session:
            chunk_ids = list(
                session.scalars(select(KnowledgeChunkRow.id).where(KnowledgeChunkRow.document_id == document_id))
            )
            if chunk_ids:
                session.execute(delete(KnowledgeChunkRow).where(KnowledgeChunkRow.document_id == document_id))
            return chunk_ids

    def select_chunks_by_document_ids(self, document_ids: Iterable[int]) -> list[KnowledgeChunk]:
        document_ids = list(document_ids)
        if not document_ids:
            return []
        with self._database.session_scope() as session:
            rows = session.scalars(
                select(KnowledgeChunkRow)
                .where(KnowledgeChunkRow.document_id.in_(document_ids))
                .order_by(KnowledgeChunkRow.document_id, KnowledgeChunkRow.chunk_index)
            ).all()
            return [self._to_chunk(row) for row in rows]

    def get_chunk_embedding(self, chunk_id: int) -> Embedding | None:
        with self._database.session_scope() as session:
            raw = session.scalar(select(KnowledgeChunkRow.embedding).where(KnowledgeChunkRow.id == chunk_id))
        if raw is None:
            return None
        return parse_embedding(raw)

    def iter_chunk_embeddings(self) -> Iterator[tuple[int, Embedding]]:
        with self._database.session_scope() as session:
            rows = session.execute(
                select(KnowledgeChunkRow.id, KnowledgeChunkRow.embedding)
                .where(KnowledgeChunkRow.embedding.is_not(None))
                .order_by(KnowledgeChunkRow.id)
            ).all()
        for chunk_id, raw in rows:
            try:
                yield chunk_id, parse_embedding(raw)
            except InvalidEmbeddingError as exc:
                logger.warning("Skipping chunk %s with invalid embedding: %s", chunk_id, exc)

    @staticmethod
    def _to_workspace(row: WorkspaceRow) -> Workspace:
        return Workspace(
            id=row.id,
            name=row.name,
            slug=row.slug,
            description=row.description,
            parent_id=row.parent_id,
            owner_id=row.owner_id,
            is_public=row.is_public,
            is_archived=row.is_archived,
            created_at=as_utc(row.created_at),
        )

    @staticmethod
    def _to_document(row: KnowledgeDocumentRow) -> KnowledgeDocument:
        return KnowledgeDocument(
            id=row.id,
            workspace_id=row.workspace_id,
            title=row.title,
            description=row.description,
            category=row.category,
            content=row.content,
            source_url=row.source_url,
            source_type=row.source_type,
            version=row.version,
            is_active=row.is_active,
            chunk_count=row.chunk_count,
            created_at=as_utc(row.created_at),
            updated_at=as_utc(row.updated_at),
        )

    @staticmethod
    def _to_chunk(row: KnowledgeChunkRow) -> KnowledgeChunk:
        embedding = None
        if row.embedding is not None:
            try:
                embedding = parse_embedding(row.embedding)
            except InvalidEmbeddingError as exc:
                logger.warning("Chunk %s has an unreadable embedding: %s", row.id, exc)
        return KnowledgeChunk(
            id=row.id,
            document_id=row.document_id,
            chunk_index=row.chunk_index,
            content=row.content,
            embedding=embedding,
        )
