"""Knowledge search result model."""

from pydantic import BaseModel


class KnowledgeSearchResult(BaseModel):
    """A ranked passage labeled with its source document."""

    content: str
    document_title: str
    document_category: str
    similarity: float
    chunk_id: int
    document_id: int
