"""Domain models of the retrieval core."""

from copy_rag_api.models.copy_pattern import (
    ComponentType,
    CopyPattern,
    CopyPatternUpdate,
    NewCopyPattern,
    PatternSource,
    PatternStats,
)
from copy_rag_api.models.generation import (
    AssembledContext,
    ChatTurn,
    CopyGenerationRequest,
    CopyGenerationResponse,
)
from copy_rag_api.models.knowledge_chunk import KnowledgeChunk, NewKnowledgeChunk
from copy_rag_api.models.knowledge_document import (
    DocumentCategory,
    DocumentSourceType,
    KnowledgeDocument,
    NewKnowledgeDocument,
)
from copy_rag_api.models.knowledge_search_result import KnowledgeSearchResult
from copy_rag_api.models.requests import (
    ContextRequest,
    DocumentContentUpdate,
    KnowledgeSearchRequest,
    PatternImportRequest,
)
from copy_rag_api.models.workspace import NewWorkspace, Workspace

__all__ = [
    "AssembledContext",
    "ChatTurn",
    "ComponentType",
    "ContextRequest",
    "CopyGenerationRequest",
    "CopyGenerationResponse",
    "CopyPattern",
    "CopyPatternUpdate",
    "DocumentCategory",
    "DocumentContentUpdate",
    "DocumentSourceType",
    "KnowledgeChunk",
    "KnowledgeDocument",
    "KnowledgeSearchRequest",
    "KnowledgeSearchResult",
    "NewCopyPattern",
    "NewKnowledgeChunk",
    "NewKnowledgeDocument",
    "NewWorkspace",
    "PatternImportRequest",
    "PatternSource",
    "PatternStats",
    "Workspace",
]
