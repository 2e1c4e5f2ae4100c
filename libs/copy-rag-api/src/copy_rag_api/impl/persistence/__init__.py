"""SQLAlchemy persistence adapters."""

from copy_rag_api.impl.persistence.database import Database
from copy_rag_api.impl.persistence.sqlalchemy_knowledge_repository import SqlAlchemyKnowledgeRepository
from copy_rag_api.impl.persistence.sqlalchemy_pattern_repository import SqlAlchemyPatternRepository

__all__ = ["Database", "SqlAlchemyKnowledgeRepository", "SqlAlchemyPatternRepository"]
