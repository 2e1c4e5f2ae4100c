"""Infer the UI component a request is about and look up writing guidelines for it."""

from copy_rag_api.models.copy_pattern import ComponentType

# Checked in order; the first keyword contained in the message wins.
COMPONENT_KEYWORDS: tuple[tuple[str, ComponentType], ...] = (
    ("button", ComponentType.BUTTON),
    ("btn", ComponentType.BUTTON),
    ("cta", ComponentType.CTA),
    ("call to action", ComponentType.CTA),
    ("error", ComponentType.ERROR),
    ("error message", ComponentType.ERROR),
    ("warning", ComponentType.ERROR),
    ("success", ComponentType.SUCCESS),
    ("confirmation", ComponentType.SUCCESS),
    ("empty", ComponentType.EMPTY_STATE),
    ("empty state", ComponentType.EMPTY_STATE),
    ("no results", ComponentType.EMPTY_STATE),
    ("form", ComponentType.FORM_LABEL),
    ("label", ComponentType.FORM_LABEL),
    ("field", ComponentType.FORM_LABEL),
    ("tooltip", ComponentType.TOOLTIP),
    ("hint", ComponentType.TOOLTIP),
    ("help", ComponentType.TOOLTIP),
    ("nav", ComponentType.NAVIGATION),
    ("menu", ComponentType.NAVIGATION),
    ("link", ComponentType.NAVIGATION),
    ("heading", ComponentType.HEADING),
    ("title", ComponentType.HEADING),
    ("header", ComponentType.HEADING),
    ("description", ComponentType.DESCRIPTION),
    ("desc", ComponentType.DESCRIPTION),
    ("body", ComponentType.DESCRIPTION),
    ("placeholder", ComponentType.PLACEHOLDER),
    ("input", ComponentType.PLACEHOLDER),
    ("modal", ComponentType.MODAL_TITLE),
    ("dialog", ComponentType.MODAL_TITLE),
    ("popup", ComponentType.MODAL_TITLE),
    ("notification", ComponentType.NOTIFICATION),
    ("toast", ComponentType.NOTIFICATION),
    ("alert", ComponentType.NOTIFICATION),
    ("onboarding", ComponentType.ONBOARDING),
    ("welcome", ComponentType.ONBOARDING),
    ("intro", ComponentType.ONBOARDING),
)

CONTENT_TYPE_GUIDELINES: dict[ComponentType, str] = {
    ComponentType.BUTTON: (
        "Button labels should be action-oriented, concise (1-3 words), and clearly indicate what will happen "
        "when clicked. Use verbs that describe the action (Save, Delete, Continue). Avoid generic labels like "
        "'OK' or 'Submit' when more specific alternatives exist."
    ),
    ComponentType.ERROR: (
        "Error messages should be clear, specific, and helpful. Explain what went wrong and how to fix it. "
        "Avoid technical jargon and blame. Use a supportive tone that helps users recover from the error."
    ),
    ComponentType.SUCCESS: (
        "Success messages should be positive, specific, and confirm what action was completed. Keep them brief "
        "but celebratory when appropriate. Help users understand what happens next."
    ),
    ComponentType.EMPTY_STATE: (
        "Empty state messages should be encouraging and guide users toward their first action. Explain why the "
        "space is empty and what they can do to fill it. Use a friendly, supportive tone."
    ),
    ComponentType.FORM_LABEL: (
        "Form labels should be clear, concise, and descriptive. Use sentence case. Avoid redundant words like "
        "'Enter' or 'Type'. Make it obvious what information is expected."
    ),
    ComponentType.TOOLTIP: (
        "Tooltips should provide brief, helpful context without repeating visible text. Keep them under 100 "
        "characters. Use them to clarify, not to provide essential information."
    ),
    ComponentType.NAVIGATION: (
        "Navigation labels should be clear, scannable, and predictable. Use familiar terms that match user "
        "mental models. Keep them short (1-2 words) and consistent across the interface."
    ),
    ComponentType.HEADING: (
        "Headings should be clear, descriptive, and hierarchical. Use them to organize content and help users "
        "scan. Front-load important words. Use sentence case unless it's a proper noun."
    ),
    ComponentType.DESCRIPTION: (
        "Descriptions should provide clear context and value. Use plain language and active voice. Break up "
        "long descriptions into shorter sentences. Focus on benefits, not just features."
    ),
    ComponentType.PLACEHOLDER: (
        "Placeholder text should provide helpful examples or formatting guidance. Don't use it for essential "
        "instructions. Keep it brief and use a lighter tone than labels."
    ),
}


def detect_component_type(message: str) -> ComponentType | None:
    """Return the component type of the first keyword contained in ``message``, if any."""
    lowered = message.lower()
    for keyword, component_type in COMPONENT_KEYWORDS:
        if keyword in lowered:
            return component_type
    return None


def guidelines_for(component_type: ComponentType | None) -> str:
    """Return the writing guidelines of ``component_type`` or an empty string."""
    if component_type is None:
        return ""
    return CONTENT_TYPE_GUIDELINES.get(component_type, "")
