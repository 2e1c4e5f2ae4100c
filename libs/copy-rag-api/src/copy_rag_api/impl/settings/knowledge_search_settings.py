"""Settings for knowledge search and workspace inheritance."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class KnowledgeSearchSettings(BaseSettings):
    """Configuration for ranked passage retrieval over a workspace hierarchy."""

    model_config = SettingsConfigDict(case_sensitive=False, populate_by_name=True)

    default_limit: int = Field(default=5, gt=0, validation_alias="KNOWLEDGE_SEARCH_DEFAULT_LIMIT")
    max_hierarchy_depth: int = Field(default=32, gt=0, validation_alias="KNOWLEDGE_MAX_HIERARCHY_DEPTH")
    preload_embeddings: bool = Field(default=True, validation_alias="KNOWLEDGE_PRELOAD_EMBEDDINGS")
