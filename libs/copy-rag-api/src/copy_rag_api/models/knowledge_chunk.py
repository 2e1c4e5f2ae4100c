"""Knowledge chunk domain models."""

from __future__ import annotations

from pydantic import BaseModel

from copy_core_lib.impl.data_types.embedding import Embedding


class NewKnowledgeChunk(BaseModel):
    """A chunk about to be inserted for a document."""

    chunk_index: int
    content: str
    embedding: Embedding | None = None


class KnowledgeChunk(NewKnowledgeChunk):
    """A persisted chunk; ``embedding`` is None when absent or unreadable in the store."""

    id: int
    document_id: int
