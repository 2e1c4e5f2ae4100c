import pytest

from copy_rag_api.impl.utils.component_types import CONTENT_TYPE_GUIDELINES, detect_component_type, guidelines_for
from copy_rag_api.models.copy_pattern import ComponentType


@pytest.mark.parametrize(
    "message, expected",
    [
        ("Write a label for the submit button", ComponentType.BUTTON),
        ("Need a better CTA for the pricing page", ComponentType.CTA),
        ("Rewrite this error message", ComponentType.ERROR),
        ("Show a warning before deleting", ComponentType.ERROR),
        ("Copy for when there are no results", ComponentType.EMPTY_STATE),
        ("Tooltip for the share icon", ComponentType.TOOLTIP),
        ("Toast after upload finishes", ComponentType.NOTIFICATION),
        ("Welcome screen for new users", ComponentType.ONBOARDING),
        ("Make this friendlier please", None),
    ],
)
def test_detect_component_type(message, expected):
    assert detect_component_type(message) == expected


def test_earlier_keywords_win():
    # "button" is checked before "form".
    assert detect_component_type("Form button text") == ComponentType.BUTTON


def test_guidelines_lookup():
    assert guidelines_for(ComponentType.BUTTON) == CONTENT_TYPE_GUIDELINES[ComponentType.BUTTON]
    assert guidelines_for(ComponentType.MODAL_BODY) == ""
    assert guidelines_for(None) == ""
