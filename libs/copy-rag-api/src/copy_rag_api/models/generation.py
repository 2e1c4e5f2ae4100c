"""Request and response models for context assembly and copy generation."""

from __future__ import annotations

from pydantic import BaseModel, Field

from copy_rag_api.models.copy_pattern import ComponentType, CopyPattern
from copy_rag_api.models.knowledge_search_result import KnowledgeSearchResult


class AssembledContext(BaseModel):
    """Prompt context together with the passages and patterns it was built from."""

    text: str = ""
    passages: list[KnowledgeSearchResult] = Field(default_factory=list)
    patterns: list[CopyPattern] = Field(default_factory=list)


class ChatTurn(BaseModel):
    """A prior message of the conversation."""

    role: str = Field(pattern="^(user|assistant)$")
    content: str


class CopyGenerationRequest(BaseModel):
    """A request to draft copy for a component."""

    message: str = Field(min_length=1, max_length=4000)
    user_id: int
    workspace_id: int | None = None
    component_type: ComponentType | None = None
    history: list[ChatTurn] = Field(default_factory=list)
    session_id: str | None = None


class CopyGenerationResponse(BaseModel):
    """LLM output plus what grounded it."""

    text: str
    component_type: ComponentType | None = None
    context: str = ""
    pattern_ids: list[int] = Field(default_factory=list)
