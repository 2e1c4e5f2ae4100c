"""Request bodies accepted by the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from copy_rag_api.models.copy_pattern import ComponentType, NewCopyPattern


class KnowledgeSearchRequest(BaseModel):
    """Search the knowledge of a workspace and its ancestors."""

    query: str = Field(min_length=1, max_length=4000)
    workspace_id: int
    limit: int | None = Field(default=None, ge=1, le=100)


class ContextRequest(BaseModel):
    """Assemble the grounding context for a request without calling the LLM."""

    query: str = Field(min_length=1, max_length=4000)
    user_id: int
    workspace_id: int | None = None
    component_type: ComponentType | None = None


class DocumentContentUpdate(BaseModel):
    """New content of a knowledge document."""

    content: str


class PatternImportRequest(BaseModel):
    """Patterns to add to a library in one go."""

    patterns: list[NewCopyPattern] = Field(min_length=1, max_length=1000)
