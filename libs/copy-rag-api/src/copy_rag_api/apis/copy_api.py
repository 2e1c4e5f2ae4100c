"""REST endpoints of the copy assistant."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request, status
from fastapi.responses import JSONResponse

from copy_core_lib.errors import NotFoundError, PersistenceUnavailableError
from copy_rag_api.dependency_container import CopyAssistContainer
from copy_rag_api.models.copy_pattern import (
    ComponentType,
    CopyPattern,
    CopyPatternUpdate,
    NewCopyPattern,
    PatternStats,
)
from copy_rag_api.models.generation import AssembledContext, CopyGenerationRequest, CopyGenerationResponse
from copy_rag_api.models.knowledge_document import KnowledgeDocument, NewKnowledgeDocument
from copy_rag_api.models.knowledge_search_result import KnowledgeSearchResult
from copy_rag_api.models.requests import (
    ContextRequest,
    DocumentContentUpdate,
    KnowledgeSearchRequest,
    PatternImportRequest,
)
from copy_rag_api.models.workspace import NewWorkspace, Workspace

logger = logging.getLogger(__name__)

router = APIRouter()


def get_container(request: Request) -> CopyAssistContainer:
    """Return the services attached to the application."""
    return request.app.state.container


def register_exception_handlers(app: FastAPI) -> None:
    """Translate domain errors into HTTP responses."""

    @app.exception_handler(NotFoundError)
    async def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})

    @app.exception_handler(PersistenceUnavailableError)
    async def _unavailable(request: Request, exc: PersistenceUnavailableError) -> JSONResponse:
        logger.error("Store unavailable while handling %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "The knowledge store is currently unavailable."},
        )


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.post("/workspaces", response_model=Workspace, status_code=status.HTTP_201_CREATED, tags=["workspaces"])
async def create_workspace(
    workspace: NewWorkspace, container: CopyAssistContainer = Depends(get_container)
) -> Workspace:
    return await asyncio.to_thread(container.knowledge_repository.create_workspace, workspace)


@router.get("/workspaces/{workspace_id}", response_model=Workspace, tags=["workspaces"])
async def get_workspace(workspace_id: int, container: CopyAssistContainer = Depends(get_container)) -> Workspace:
    workspace = await asyncio.to_thread(container.knowledge_repository.get_workspace, workspace_id)
    if workspace is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Workspace {workspace_id} not found.")
    return workspace


@router.post("/workspaces/{workspace_id}/archive", status_code=status.HTTP_204_NO_CONTENT, tags=["workspaces"])
async def archive_workspace(workspace_id: int, container: CopyAssistContainer = Depends(get_container)) -> None:
    await asyncio.to_thread(container.knowledge_repository.archive_workspace, workspace_id)


@router.get("/workspaces/{workspace_id}/ancestors", response_model=list[int], tags=["workspaces"])
async def workspace_ancestors(
    workspace_id: int, container: CopyAssistContainer = Depends(get_container)
) -> list[int]:
    return await asyncio.to_thread(container.hierarchy_resolver.ancestors, workspace_id)


@router.post(
    "/documents", response_model=KnowledgeDocument, status_code=status.HTTP_201_CREATED, tags=["knowledge"]
)
async def create_document(
    document: NewKnowledgeDocument, container: CopyAssistContainer = Depends(get_container)
) -> KnowledgeDocument:
    return await container.document_indexer.acreate_document(document)


@router.put("/documents/{document_id}/content", response_model=KnowledgeDocument, tags=["knowledge"])
async def update_document_content(
    document_id: int, update: DocumentContentUpdate, container: CopyAssistContainer = Depends(get_container)
) -> KnowledgeDocument:
    return await container.document_indexer.aupdate_content(document_id, update.content)


@router.post("/documents/{document_id}/deactivate", response_model=KnowledgeDocument, tags=["knowledge"])
async def deactivate_document(
    document_id: int, container: CopyAssistContainer = Depends(get_container)
) -> KnowledgeDocument:
    return await container.document_indexer.adeactivate(document_id)


@router.post("/documents/{document_id}/reindex", response_model=KnowledgeDocument, tags=["knowledge"])
async def reindex_document(
    document_id: int, container: CopyAssistContainer = Depends(get_container)
) -> KnowledgeDocument:
    return await container.document_indexer.areindex(document_id)


@router.post("/knowledge/search", response_model=list[KnowledgeSearchResult], tags=["knowledge"])
async def search_knowledge(
    search: KnowledgeSearchRequest, container: CopyAssistContainer = Depends(get_container)
) -> list[KnowledgeSearchResult]:
    return await container.knowledge_searcher.asearch(search.query, search.workspace_id, search.limit)


@router.post("/patterns", response_model=CopyPattern, status_code=status.HTTP_201_CREATED, tags=["patterns"])
async def create_pattern(
    pattern: NewCopyPattern, container: CopyAssistContainer = Depends(get_container)
) -> CopyPattern:
    return await container.pattern_library.acreate_pattern(pattern)


@router.post(
    "/patterns/import", response_model=list[CopyPattern], status_code=status.HTTP_201_CREATED, tags=["patterns"]
)
async def import_patterns(
    body: PatternImportRequest, container: CopyAssistContainer = Depends(get_container)
) -> list[CopyPattern]:
    return await container.pattern_library.aimport_patterns(body.patterns)


@router.get("/users/{user_id}/patterns", response_model=list[CopyPattern], tags=["patterns"])
async def list_patterns(
    user_id: int,
    component_type: ComponentType | None = None,
    project_id: int | None = None,
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    container: CopyAssistContainer = Depends(get_container),
) -> list[CopyPattern]:
    return await container.pattern_library.alist_patterns(user_id, component_type, project_id, limit, offset)


@router.get("/users/{user_id}/patterns/search", response_model=list[CopyPattern], tags=["patterns"])
async def search_patterns(
    user_id: int,
    q: str = Query(min_length=1, max_length=500),
    component_type: ComponentType | None = None,
    limit: int | None = Query(default=None, ge=1, le=100),
    container: CopyAssistContainer = Depends(get_container),
) -> list[CopyPattern]:
    return await container.pattern_matcher.asearch(user_id, q, component_type, limit)


@router.get("/users/{user_id}/patterns/find", response_model=list[CopyPattern], tags=["patterns"])
async def find_patterns(
    user_id: int,
    component_type: ComponentType,
    limit: int | None = Query(default=None, ge=1, le=100),
    container: CopyAssistContainer = Depends(get_container),
) -> list[CopyPattern]:
    return await container.pattern_matcher.afind(user_id, component_type, limit)


@router.get("/users/{user_id}/patterns/stats", response_model=PatternStats, tags=["patterns"])
async def pattern_stats(user_id: int, container: CopyAssistContainer = Depends(get_container)) -> PatternStats:
    return await container.pattern_library.astats(user_id)


@router.patch("/users/{user_id}/patterns/{pattern_id}", response_model=CopyPattern, tags=["patterns"])
async def update_pattern(
    user_id: int,
    pattern_id: int,
    update: CopyPatternUpdate,
    container: CopyAssistContainer = Depends(get_container),
) -> CopyPattern:
    return await container.pattern_library.aupdate_pattern(user_id, pattern_id, update)


@router.delete(
    "/users/{user_id}/patterns/{pattern_id}", status_code=status.HTTP_204_NO_CONTENT, tags=["patterns"]
)
async def delete_pattern(
    user_id: int, pattern_id: int, container: CopyAssistContainer = Depends(get_container)
) -> None:
    await container.pattern_library.adelete_pattern(user_id, pattern_id)


@router.post("/context", response_model=AssembledContext, tags=["generation"])
async def assemble_context(
    body: ContextRequest, container: CopyAssistContainer = Depends(get_container)
) -> AssembledContext:
    return await container.context_assembler.aassemble_context(
        body.query, body.workspace_id, body.user_id, body.component_type
    )


@router.post("/generate", response_model=CopyGenerationResponse, tags=["generation"])
async def generate_copy(
    body: CopyGenerationRequest, container: CopyAssistContainer = Depends(get_container)
) -> CopyGenerationResponse:
    if container.copy_generator is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="No language model is configured."
        )
    return await container.copy_generator.agenerate(body)
