from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy import update
from sqlalchemy.exc import OperationalError

from copy_core_lib.errors import (
    DocumentNotFoundError,
    InvalidEmbeddingError,
    PatternNotFoundError,
    PersistenceUnavailableError,
    WorkspaceNotFoundError,
)
from copy_core_lib.impl.data_types.pattern_metadata import PatternMetadata
from copy_rag_api.impl.persistence.orm_models import KnowledgeChunkRow
from copy_rag_api.models.copy_pattern import ComponentType, CopyPatternUpdate, NewCopyPattern
from copy_rag_api.models.knowledge_chunk import NewKnowledgeChunk
from copy_rag_api.models.knowledge_document import DocumentCategory, NewKnowledgeDocument
from copy_rag_api.models.workspace import NewWorkspace


def _document(workspace_id: int, title: str = "Voice guide") -> NewKnowledgeDocument:
    return NewKnowledgeDocument(
        workspace_id=workspace_id,
        title=title,
        category=DocumentCategory.VOICE_TONE,
        content="Be direct.",
    )


def test_workspace_parent_lookup(knowledge_repository, meta_hierarchy):
    assert knowledge_repository.select_workspace_parent(meta_hierarchy["horizon"]) == meta_hierarchy["reality_labs"]
    assert knowledge_repository.select_workspace_parent(meta_hierarchy["meta"]) is None
    assert knowledge_repository.select_workspace_parent(999) is None


def test_workspace_requires_existing_parent(knowledge_repository):
    with pytest.raises(WorkspaceNotFoundError):
        knowledge_repository.create_workspace(NewWorkspace(name="Orphan", slug="orphan", owner_id=1, parent_id=42))


def test_archive_keeps_the_workspace(knowledge_repository, meta_hierarchy):
    knowledge_repository.archive_workspace(meta_hierarchy["quest"])

    workspace = knowledge_repository.get_workspace(meta_hierarchy["quest"])
    assert workspace.is_archived is True
    assert workspace.created_at.tzinfo is not None
    with pytest.raises(WorkspaceNotFoundError):
        knowledge_repository.archive_workspace(999)


def test_document_requires_existing_workspace(knowledge_repository):
    with pytest.raises(WorkspaceNotFoundError):
        knowledge_repository.create_document(_document(123))


def test_active_documents_and_ordered_chunks(knowledge_repository, meta_hierarchy):
    active = knowledge_repository.create_document(_document(meta_hierarchy["meta"]))
    inactive = knowledge_repository.create_document(_document(meta_hierarchy["meta"], "Old guide"))
    knowledge_repository.update_document(inactive.id, is_active=False)
    knowledge_repository.insert_chunks(
        active.id,
        [
            NewKnowledgeChunk(chunk_index=1, content="second", embedding=[0.0, 1.0]),
            NewKnowledgeChunk(chunk_index=0, content="first", embedding=[1.0, 0.0]),
        ],
    )

    documents = knowledge_repository.select_active_documents([meta_hierarchy["meta"], meta_hierarchy["horizon"]])
    chunks = knowledge_repository.select_chunks_by_document_ids([active.id])

    assert [document.id for document in documents] == [active.id]
    assert documents[0].category == DocumentCategory.VOICE_TONE
    assert [chunk.content for chunk in chunks] == ["first", "second"]
    assert chunks[0].embedding == [1.0, 0.0]
    assert knowledge_repository.select_active_documents([]) == []


def test_insert_chunks_requires_existing_document(knowledge_repository):
    with pytest.raises(DocumentNotFoundError):
        knowledge_repository.insert_chunks(5, [NewKnowledgeChunk(chunk_index=0, content="text")])
    with pytest.raises(DocumentNotFoundError):
        knowledge_repository.update_document(5, chunk_count=1)


def test_delete_chunks_returns_removed_ids(knowledge_repository, meta_hierarchy):
    document = knowledge_repository.create_document(_document(meta_hierarchy["meta"]))
    inserted = knowledge_repository.insert_chunks(
        document.id, [NewKnowledgeChunk(chunk_index=index, content=f"chunk {index}") for index in range(3)]
    )

    removed = knowledge_repository.delete_chunks_for_document(document.id)

    assert sorted(removed) == sorted(chunk.id for chunk in inserted)
    assert knowledge_repository.select_chunks_by_document_ids([document.id]) == []
    assert knowledge_repository.delete_chunks_for_document(document.id) == []


def test_corrupt_embeddings_are_isolated(knowledge_repository, database, meta_hierarchy):
    document = knowledge_repository.create_document(_document(meta_hierarchy["meta"]))
    good, bad = knowledge_repository.insert_chunks(
        document.id,
        [
            NewKnowledgeChunk(chunk_index=0, content="good", embedding=[1.0, 0.0]),
            NewKnowledgeChunk(chunk_index=1, content="bad", embedding=[0.0, 1.0]),
        ],
    )
    with database.session_scope() as session:
        session.execute(update(KnowledgeChunkRow).where(KnowledgeChunkRow.id == bad.id).values(embedding="[1.0, oops"))

    chunks = knowledge_repository.select_chunks_by_document_ids([document.id])

    assert [chunk.embedding for chunk in chunks] == [[1.0, 0.0], None]
    assert list(knowledge_repository.iter_chunk_embeddings()) == [(good.id, [1.0, 0.0])]
    assert knowledge_repository.get_chunk_embedding(good.id) == [1.0, 0.0]
    with pytest.raises(InvalidEmbeddingError):
        knowledge_repository.get_chunk_embedding(bad.id)
    assert knowledge_repository.get_chunk_embedding(999) is None


def test_connectivity_errors_become_persistence_unavailable(database):
    with pytest.raises(PersistenceUnavailableError):
        with database.session_scope():
            raise OperationalError("SELECT 1", {}, Exception("database is gone"))


def test_pattern_round_trip_and_updates(pattern_repository):
    (created,) = pattern_repository.create_patterns(
        [
            NewCopyPattern(
                user_id=1,
                component_type=ComponentType.BUTTON,
                text="Save",
                context="Primary save action",
                metadata=PatternMetadata(ab_test_winner=True, conversion_lift=Decimal("12.50")),
            )
        ]
    )

    assert created.usage_count == 0
    assert created.metadata.conversion_lift == Decimal("12.50")
    assert created.created_at.tzinfo is not None

    updated = pattern_repository.update_pattern(
        created.id,
        CopyPatternUpdate(text="Save changes", metadata=PatternMetadata(user_research_validated=True)),
    )
    assert updated.text == "Save changes"
    assert updated.context == "Primary save action"
    assert updated.metadata.tags == ["UXR validated"]

    with pytest.raises(PatternNotFoundError):
        pattern_repository.update_pattern(999, CopyPatternUpdate(text="x"))


def test_pattern_selection_filters(pattern_repository):
    pattern_repository.create_patterns(
        [
            NewCopyPattern(user_id=1, component_type=ComponentType.BUTTON, text="Save", project_id=10),
            NewCopyPattern(user_id=1, component_type=ComponentType.BUTTON, text="Draft", is_approved=False),
            NewCopyPattern(user_id=1, component_type=ComponentType.ERROR, text="Something broke"),
            NewCopyPattern(user_id=2, component_type=ComponentType.BUTTON, text="Save"),
        ]
    )

    approved = pattern_repository.select_approved_patterns(1, ComponentType.BUTTON)
    by_project = pattern_repository.select_patterns(1, project_id=10)
    all_buttons = pattern_repository.select_patterns(1, ComponentType.BUTTON)

    assert [pattern.text for pattern in approved] == ["Save"]
    assert [pattern.text for pattern in by_project] == ["Save"]
    assert {pattern.text for pattern in all_buttons} == {"Save", "Draft"}
    assert all(pattern.user_id == 1 for pattern in all_buttons)


def test_increment_usage(pattern_repository):
    (pattern,) = pattern_repository.create_patterns(
        [NewCopyPattern(user_id=1, component_type=ComponentType.CTA, text="Get started")]
    )
    used_at = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)

    assert pattern_repository.increment_usage(pattern.id, used_at) is True
    assert pattern_repository.increment_usage(999, used_at) is False

    stored = pattern_repository.get_pattern(pattern.id)
    assert stored.usage_count == 1
    assert stored.last_used_at == used_at


def test_delete_pattern(pattern_repository):
    (pattern,) = pattern_repository.create_patterns(
        [NewCopyPattern(user_id=1, component_type=ComponentType.CTA, text="Get started")]
    )
    pattern_repository.delete_pattern(pattern.id)

    assert pattern_repository.get_pattern(pattern.id) is None
    with pytest.raises(PatternNotFoundError):
        pattern_repository.delete_pattern(pattern.id)
