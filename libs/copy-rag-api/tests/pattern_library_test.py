from decimal import Decimal

import pytest

from copy_core_lib.errors import PatternNotFoundError
from copy_core_lib.impl.data_types.pattern_metadata import PatternMetadata
from copy_rag_api.impl.api_endpoints.default_pattern_library import DefaultPatternLibrary
from copy_rag_api.models.copy_pattern import ComponentType, CopyPatternUpdate, NewCopyPattern, PatternSource


@pytest.fixture
def library(pattern_repository):
    return DefaultPatternLibrary(pattern_repository)


def _new(user_id: int, text: str, component_type=ComponentType.BUTTON, **kwargs) -> NewCopyPattern:
    return NewCopyPattern(user_id=user_id, component_type=component_type, text=text, **kwargs)


@pytest.mark.asyncio
async def test_import_marks_patterns_as_imported(library):
    imported = await library.aimport_patterns([_new(1, "Save"), _new(1, "Cancel")])

    assert [pattern.text for pattern in imported] == ["Save", "Cancel"]
    assert all(pattern.source == PatternSource.IMPORTED for pattern in imported)


@pytest.mark.asyncio
async def test_updates_are_scoped_to_the_owner(library):
    pattern = await library.acreate_pattern(_new(1, "Save"))

    updated = await library.aupdate_pattern(1, pattern.id, CopyPatternUpdate(is_approved=False))
    assert updated.is_approved is False

    with pytest.raises(PatternNotFoundError):
        await library.aupdate_pattern(2, pattern.id, CopyPatternUpdate(text="Hijacked"))
    with pytest.raises(PatternNotFoundError):
        await library.adelete_pattern(2, pattern.id)

    await library.adelete_pattern(1, pattern.id)
    assert await library.alist_patterns(1) == []


@pytest.mark.asyncio
async def test_list_pages_through_ranked_patterns(library, pattern_matcher):
    created = [await library.acreate_pattern(_new(1, f"Label {index}")) for index in range(4)]
    await library.acreate_pattern(_new(2, "Other user"))
    await pattern_matcher.arecord_usage(created[2].id)

    first_page = await library.alist_patterns(1, limit=2)
    second_page = await library.alist_patterns(1, limit=2, offset=2)

    assert first_page[0].id == created[2].id
    assert len(first_page) == 2 and len(second_page) == 2
    assert {pattern.id for pattern in first_page + second_page} == {pattern.id for pattern in created}


@pytest.mark.asyncio
async def test_list_filters_by_type_and_project(library):
    await library.acreate_pattern(_new(1, "Save", project_id=3))
    await library.acreate_pattern(_new(1, "Oops", component_type=ComponentType.ERROR))

    assert [pattern.text for pattern in await library.alist_patterns(1, component_type=ComponentType.ERROR)] == [
        "Oops"
    ]
    assert [pattern.text for pattern in await library.alist_patterns(1, project_id=3)] == ["Save"]


@pytest.mark.asyncio
async def test_stats_summarize_one_library(library):
    await library.aimport_patterns(
        [
            _new(1, "Save", metadata=PatternMetadata(ab_test_winner=True, conversion_lift=Decimal("4.20"))),
            _new(1, "Continue", metadata=PatternMetadata(user_research_validated=True)),
            _new(1, "Oops", component_type=ComponentType.ERROR),
            _new(2, "Not mine", metadata=PatternMetadata(ab_test_winner=True)),
        ]
    )

    stats = await library.astats(1)

    assert stats.total == 3
    assert stats.by_type == {"button": 2, "error": 1}
    assert stats.ab_test_winners == 1
    assert stats.user_research_validated == 1
    assert (await library.astats(99)).total == 0
