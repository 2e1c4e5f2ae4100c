"""Service interfaces exposed by the API."""

from copy_rag_api.api_endpoints.context_assembler import ContextAssembler
from copy_rag_api.api_endpoints.copy_generator import CopyGenerator
from copy_rag_api.api_endpoints.document_indexer import DocumentIndexer
from copy_rag_api.api_endpoints.knowledge_searcher import KnowledgeSearcher
from copy_rag_api.api_endpoints.pattern_library import PatternLibrary
from copy_rag_api.api_endpoints.pattern_matcher import PatternMatcher

__all__ = [
    "ContextAssembler",
    "CopyGenerator",
    "DocumentIndexer",
    "KnowledgeSearcher",
    "PatternLibrary",
    "PatternMatcher",
]
