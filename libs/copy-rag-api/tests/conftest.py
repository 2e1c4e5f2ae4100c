from datetime import datetime, timedelta, timezone

import pytest

from copy_rag_api.impl.api_endpoints.default_document_indexer import DefaultDocumentIndexer
from copy_rag_api.impl.api_endpoints.default_knowledge_searcher import DefaultKnowledgeSearcher
from copy_rag_api.impl.api_endpoints.default_pattern_matcher import DefaultPatternMatcher
from copy_rag_api.impl.chunkers.sentence_chunker import SentenceChunker
from copy_rag_api.impl.embeddings.hashed_token_embedder import HashedTokenEmbedder
from copy_rag_api.impl.persistence.database import Database
from copy_rag_api.impl.persistence.sqlalchemy_knowledge_repository import SqlAlchemyKnowledgeRepository
from copy_rag_api.impl.persistence.sqlalchemy_pattern_repository import SqlAlchemyPatternRepository
from copy_rag_api.impl.settings.chunker_settings import ChunkerSettings
from copy_rag_api.impl.settings.database_settings import DatabaseSettings
from copy_rag_api.impl.settings.embedder_settings import EmbedderSettings
from copy_rag_api.impl.settings.knowledge_search_settings import KnowledgeSearchSettings
from copy_rag_api.impl.settings.pattern_matcher_settings import PatternMatcherSettings
from copy_rag_api.impl.vector_index.in_memory_vector_cache import InMemoryVectorCache
from copy_rag_api.impl.vector_index.vector_index import VectorIndex
from copy_rag_api.models.workspace import NewWorkspace
from copy_rag_api.workspaces.hierarchy_resolver import WorkspaceHierarchyResolver


class StepClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2025, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def database():
    db = Database(DatabaseSettings(url="sqlite://"))
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def knowledge_repository(database):
    return SqlAlchemyKnowledgeRepository(database)


@pytest.fixture
def pattern_repository(database):
    return SqlAlchemyPatternRepository(database)


@pytest.fixture
def embedder():
    return HashedTokenEmbedder(EmbedderSettings())


@pytest.fixture
def vector_index(knowledge_repository, embedder):
    return VectorIndex(InMemoryVectorCache(), knowledge_repository, dimension=embedder.dimension)


@pytest.fixture
def search_settings():
    return KnowledgeSearchSettings()


@pytest.fixture
def hierarchy_resolver(knowledge_repository, search_settings):
    return WorkspaceHierarchyResolver(knowledge_repository, search_settings)


@pytest.fixture
def knowledge_searcher(knowledge_repository, hierarchy_resolver, embedder, vector_index, search_settings):
    return DefaultKnowledgeSearcher(knowledge_repository, hierarchy_resolver, embedder, vector_index, search_settings)


@pytest.fixture
def document_indexer(knowledge_repository, embedder, vector_index):
    return DefaultDocumentIndexer(knowledge_repository, SentenceChunker(ChunkerSettings()), embedder, vector_index)


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def pattern_matcher(pattern_repository, clock):
    return DefaultPatternMatcher(pattern_repository, PatternMatcherSettings(), clock=clock)


@pytest.fixture
def meta_hierarchy(knowledge_repository):
    """Meta > Reality Labs > Horizon, plus Quest as a sibling of Horizon."""
    meta = knowledge_repository.create_workspace(NewWorkspace(name="Meta", slug="meta", owner_id=1))
    reality_labs = knowledge_repository.create_workspace(
        NewWorkspace(name="Reality Labs", slug="reality-labs", owner_id=1, parent_id=meta.id)
    )
    horizon = knowledge_repository.create_workspace(
        NewWorkspace(name="Horizon", slug="horizon", owner_id=1, parent_id=reality_labs.id)
    )
    quest = knowledge_repository.create_workspace(
        NewWorkspace(name="Quest", slug="quest", owner_id=1, parent_id=reality_labs.id)
    )
    return {"meta": meta.id, "reality_labs": reality_labs.id, "horizon": horizon.id, "quest": quest.id}
