"""Settings package exports for copy_rag_api."""

from .chunker_settings import ChunkerSettings
from .context_assembler_settings import ContextAssemblerSettings
from .database_settings import DatabaseSettings
from .embedder_settings import EmbedderSettings
from .knowledge_search_settings import KnowledgeSearchSettings
from .pattern_matcher_settings import PatternMatcherSettings

__all__ = [
    "ChunkerSettings",
    "ContextAssemblerSettings",
    "DatabaseSettings",
    "EmbedderSettings",
    "KnowledgeSearchSettings",
    "PatternMatcherSettings",
]
