"""Copy pattern domain models."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from copy_core_lib.impl.data_types.pattern_metadata import PatternMetadata


class ComponentType(StrEnum):
    """UI components a piece of copy can belong to."""

    BUTTON = "button"
    ERROR = "error"
    SUCCESS = "success"
    EMPTY_STATE = "empty_state"
    FORM_LABEL = "form_label"
    TOOLTIP = "tooltip"
    NAVIGATION = "navigation"
    HEADING = "heading"
    DESCRIPTION = "description"
    PLACEHOLDER = "placeholder"
    MODAL_TITLE = "modal_title"
    MODAL_BODY = "modal_body"
    NOTIFICATION = "notification"
    ONBOARDING = "onboarding"
    CTA = "cta"


class PatternSource(StrEnum):
    """Provenance of a copy pattern."""

    MANUAL = "manual"
    IMPORTED = "imported"
    ACCEPTED_SUGGESTION = "accepted_suggestion"
    CODEBASE = "codebase"


class NewCopyPattern(BaseModel):
    """Fields required to create a copy pattern."""

    user_id: int
    project_id: int | None = None
    workspace_id: int | None = None
    component_type: ComponentType
    text: str
    context: str | None = None
    source: PatternSource = PatternSource.MANUAL
    is_approved: bool = True
    metadata: PatternMetadata = Field(default_factory=PatternMetadata)
    notes: str | None = None

    @field_validator("text")
    @classmethod
    def _validate_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Pattern text must not be empty.")
        return value


class CopyPatternUpdate(BaseModel):
    """Partial update of a copy pattern; unset fields are left untouched."""

    project_id: int | None = None
    workspace_id: int | None = None
    component_type: ComponentType | None = None
    text: str | None = None
    context: str | None = None
    source: PatternSource | None = None
    is_approved: bool | None = None
    metadata: PatternMetadata | None = None
    notes: str | None = None

    @field_validator("text")
    @classmethod
    def _validate_text(cls, value: str | None) -> str | None:
        if value is not None and not value.strip():
            raise ValueError("Pattern text must not be empty.")
        return value


class CopyPattern(NewCopyPattern):
    """A persisted copy pattern with its usage counters."""

    id: int
    usage_count: int = 0
    last_used_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PatternStats(BaseModel):
    """Aggregate counts over one user's pattern library."""

    total: int = 0
    by_type: dict[str, int] = Field(default_factory=dict)
    ab_test_winners: int = 0
    user_research_validated: int = 0
