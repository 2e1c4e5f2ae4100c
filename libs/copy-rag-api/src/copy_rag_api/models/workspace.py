"""Workspace domain models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class NewWorkspace(BaseModel):
    """Fields required to create a workspace."""

    name: str = Field(min_length=1, max_length=255)
    slug: str = Field(min_length=1, max_length=100)
    description: str | None = None
    parent_id: int | None = None
    owner_id: int
    is_public: bool = False


class Workspace(NewWorkspace):
    """A named knowledge container; ``parent_id`` links it into an inheritance tree."""

    id: int
    is_archived: bool = False
    created_at: datetime | None = None
