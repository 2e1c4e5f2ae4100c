"""Persistence ports of the retrieval core."""

from copy_rag_api.persistence.knowledge_repository import KnowledgeRepository
from copy_rag_api.persistence.pattern_repository import PatternRepository

__all__ = [
    "KnowledgeRepository",
    "PatternRepository",
]
