"""Settings for assembling prompt context."""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ContextAssemblerSettings(BaseSettings):
    """How many passages and patterns are injected and how relevant passages must be."""

    model_config = SettingsConfigDict(case_sensitive=False, populate_by_name=True)

    relevance_floor: float = Field(default=0.1, validation_alias="CONTEXT_RELEVANCE_FLOOR")
    knowledge_limit: int = Field(default=3, ge=0, validation_alias="CONTEXT_KNOWLEDGE_LIMIT")
    pattern_limit: int = Field(default=5, ge=0, validation_alias="CONTEXT_PATTERN_LIMIT")
    knowledge_header: str = Field(
        default="--- RELEVANT KNOWLEDGE FROM YOUR STYLE GUIDE ---",
        validation_alias="CONTEXT_KNOWLEDGE_HEADER",
    )
    pattern_header_template: str = Field(
        default="Existing {component_type} patterns from this product:",
        validation_alias="CONTEXT_PATTERN_HEADER_TEMPLATE",
    )

    @field_validator("relevance_floor")
    @classmethod
    def _validate_floor(cls, value: float) -> float:
        if not -1.0 <= value <= 1.0:
            raise ValueError("CONTEXT_RELEVANCE_FLOOR must be within [-1, 1].")
        return value

    @field_validator("pattern_header_template")
    @classmethod
    def _validate_header_template(cls, template: str) -> str:
        try:
            template.format(component_type="button")
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError("CONTEXT_PATTERN_HEADER_TEMPLATE may only reference {component_type}.") from exc
        return template
