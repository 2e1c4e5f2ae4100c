"""Wire the default implementations together."""

from __future__ import annotations

from dataclasses import dataclass

from langchain_core.language_models import BaseLanguageModel
from langchain_core.runnables import Runnable

from copy_core_lib.impl.mlflow_manager.mlflow_manager import MlflowManager
from copy_core_lib.impl.settings.mlflow_settings import MlflowSettings
from copy_core_lib.impl.tracers.mlflow_traced_runnable import MlflowTracedRunnable
from copy_rag_api.api_endpoints.context_assembler import ContextAssembler
from copy_rag_api.api_endpoints.copy_generator import CopyGenerator
from copy_rag_api.api_endpoints.document_indexer import DocumentIndexer
from copy_rag_api.api_endpoints.knowledge_searcher import KnowledgeSearcher
from copy_rag_api.api_endpoints.pattern_library import PatternLibrary
from copy_rag_api.api_endpoints.pattern_matcher import PatternMatcher
from copy_rag_api.impl.api_endpoints.default_context_assembler import DefaultContextAssembler
from copy_rag_api.impl.api_endpoints.default_copy_generator import DefaultCopyGenerator
from copy_rag_api.impl.api_endpoints.default_document_indexer import DefaultDocumentIndexer
from copy_rag_api.impl.api_endpoints.default_knowledge_searcher import DefaultKnowledgeSearcher
from copy_rag_api.impl.api_endpoints.default_pattern_library import DefaultPatternLibrary
from copy_rag_api.impl.api_endpoints.default_pattern_matcher import DefaultPatternMatcher
from copy_rag_api.impl.chunkers.sentence_chunker import SentenceChunker
from copy_rag_api.impl.embeddings.hashed_token_embedder import HashedTokenEmbedder
from copy_rag_api.impl.generation_chains.copy_generation_chain import CopyGenerationChain
from copy_rag_api.impl.persistence.database import Database
from copy_rag_api.impl.persistence.sqlalchemy_knowledge_repository import SqlAlchemyKnowledgeRepository
from copy_rag_api.impl.persistence.sqlalchemy_pattern_repository import SqlAlchemyPatternRepository
from copy_rag_api.impl.settings.chunker_settings import ChunkerSettings
from copy_rag_api.impl.settings.context_assembler_settings import ContextAssemblerSettings
from copy_rag_api.impl.settings.database_settings import DatabaseSettings
from copy_rag_api.impl.settings.embedder_settings import EmbedderSettings
from copy_rag_api.impl.settings.knowledge_search_settings import KnowledgeSearchSettings
from copy_rag_api.impl.settings.pattern_matcher_settings import PatternMatcherSettings
from copy_rag_api.impl.vector_index.in_memory_vector_cache import InMemoryVectorCache
from copy_rag_api.impl.vector_index.vector_index import VectorIndex
from copy_rag_api.persistence.knowledge_repository import KnowledgeRepository
from copy_rag_api.persistence.pattern_repository import PatternRepository
from copy_rag_api.prompt_templates.copy_generation_prompt import COPY_GENERATION_PROMPT
from copy_rag_api.workspaces.hierarchy_resolver import WorkspaceHierarchyResolver


@dataclass
class CopyAssistContainer:
    """Every service of the application, built once per process."""

    database: Database
    knowledge_repository: KnowledgeRepository
    pattern_repository: PatternRepository
    vector_index: VectorIndex
    hierarchy_resolver: WorkspaceHierarchyResolver
    knowledge_searcher: KnowledgeSearcher
    pattern_matcher: PatternMatcher
    pattern_library: PatternLibrary
    context_assembler: ContextAssembler
    document_indexer: DocumentIndexer
    knowledge_search_settings: KnowledgeSearchSettings
    database_settings: DatabaseSettings
    mlflow_manager: MlflowManager | None = None
    copy_generator: CopyGenerator | None = None


def build_container(
    llm: BaseLanguageModel | None = None,
    database_settings: DatabaseSettings | None = None,
    mlflow_settings: MlflowSettings | None = None,
) -> CopyAssistContainer:
    """
    Build the application services from environment settings.

    Parameters
    ----------
    llm : BaseLanguageModel, optional
        Chat model used for copy generation. Without one only retrieval is available.
    database_settings : DatabaseSettings, optional
        Overrides the settings read from the environment.
    mlflow_settings : MlflowSettings, optional
        Overrides the settings read from the environment.

    Returns
    -------
    CopyAssistContainer
        The wired services.
    """
    database_settings = database_settings or DatabaseSettings()
    knowledge_search_settings = KnowledgeSearchSettings()
    embedder_settings = EmbedderSettings()

    database = Database(database_settings)
    knowledge_repository = SqlAlchemyKnowledgeRepository(database)
    pattern_repository = SqlAlchemyPatternRepository(database)

    embedder = HashedTokenEmbedder(embedder_settings)
    vector_index = VectorIndex(InMemoryVectorCache(), knowledge_repository, dimension=embedder_settings.dimension)
    hierarchy_resolver = WorkspaceHierarchyResolver(knowledge_repository, knowledge_search_settings)

    knowledge_searcher = DefaultKnowledgeSearcher(
        knowledge_repository, hierarchy_resolver, embedder, vector_index, knowledge_search_settings
    )
    pattern_matcher = DefaultPatternMatcher(pattern_repository, PatternMatcherSettings())
    context_assembler = DefaultContextAssembler(knowledge_searcher, pattern_matcher, ContextAssemblerSettings())
    document_indexer = DefaultDocumentIndexer(
        knowledge_repository, SentenceChunker(ChunkerSettings()), embedder, vector_index
    )

    container = CopyAssistContainer(
        database=database,
        knowledge_repository=knowledge_repository,
        pattern_repository=pattern_repository,
        vector_index=vector_index,
        hierarchy_resolver=hierarchy_resolver,
        knowledge_searcher=knowledge_searcher,
        pattern_matcher=pattern_matcher,
        pattern_library=DefaultPatternLibrary(pattern_repository),
        context_assembler=context_assembler,
        document_indexer=document_indexer,
        knowledge_search_settings=knowledge_search_settings,
        database_settings=database_settings,
    )

    if llm is not None:
        mlflow_settings = mlflow_settings or MlflowSettings()
        mlflow_manager = MlflowManager(
            mlflow_settings,
            managed_prompts={CopyGenerationChain.__name__: COPY_GENERATION_PROMPT},
            llm=llm,
        )
        generation_chain: Runnable = MlflowTracedRunnable(CopyGenerationChain(mlflow_manager), mlflow_settings)
        container.mlflow_manager = mlflow_manager
        container.copy_generator = DefaultCopyGenerator(context_assembler, pattern_matcher, generation_chain)

    return container
