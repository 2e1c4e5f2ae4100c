"""Knowledge document domain models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class DocumentCategory(StrEnum):
    """Kinds of guidance a knowledge document can hold."""

    STYLE_GUIDE = "style_guide"
    VOICE_TONE = "voice_tone"
    TERMINOLOGY = "terminology"
    RESEARCH = "research"
    BEST_PRACTICES = "best_practices"
    COMPONENT_GUIDELINES = "component_guidelines"
    ACCESSIBILITY = "accessibility"
    OTHER = "other"


class DocumentSourceType(StrEnum):
    """Where the document content came from."""

    UPLOAD = "upload"
    URL = "url"
    MANUAL = "manual"


class NewKnowledgeDocument(BaseModel):
    """Fields required to create a knowledge document."""

    workspace_id: int
    title: str = Field(min_length=1, max_length=255)
    description: str | None = None
    category: DocumentCategory
    content: str
    source_url: str | None = None
    source_type: DocumentSourceType = DocumentSourceType.MANUAL
    version: str | None = None


class KnowledgeDocument(NewKnowledgeDocument):
    """A persisted knowledge document."""

    id: int
    is_active: bool = True
    chunk_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None
