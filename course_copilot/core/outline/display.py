"""
Display message derivation.

Removes machine-readable JSON from the assistant's reply before it is
shown to the author, substituting a readable summary when nothing else
is left.
"""

import re
from typing import Any

from course_copilot.core.outline.extractor import (
    FENCED_JSON_PATTERN,
    OutlineExtraction,
    RawBraceJsonStrategy,
)

BARE_JSON_PATTERN = re.compile(r"^\s*\{[\s\S]*\}\s*$")
BRACE_PATTERN = re.compile(r"\{[\s\S]*\}")

GENERATED_FALLBACK_MESSAGE = (
    "I've generated a course structure for you. You can preview it on the "
    "right side of the screen and make any adjustments needed."
)
ACKNOWLEDGEMENT_MESSAGE = (
    "I've updated the conversation. Let me know what you'd like to do next."
)


def outline_summary_message(outline: dict[str, Any]) -> str:
    """Canned summary for a reply that consisted only of an outline."""
    return (
        f"I've created a course structure for \"{outline.get('title', '')}\". "
        f"This course includes {len(outline.get('sections') or [])} sections "
        "covering all the essential topics. You can preview the course structure "
        "on the right, edit individual lessons, or create the course when you're ready."
    )


def build_display_message(
    response_text: str,
    extraction: OutlineExtraction,
    is_new_outline: bool,
) -> str:
    """
    Derive the author-facing message from a raw model reply.

    Args:
        response_text: Raw model output
        extraction: Result of running the extractor on response_text
        is_new_outline: Whether the extracted outline differs from the prior one

    Returns:
        str: Non-empty message suitable for the chat transcript
    """
    display = response_text
    if (
        extraction.found
        and extraction.strategy == RawBraceJsonStrategy.name
        and extraction.span is not None
    ):
        start, end = extraction.span
        display = display[:start] + display[end:]
    display = FENCED_JSON_PATTERN.sub("", display).strip()

    if BARE_JSON_PATTERN.match(response_text):
        display = ""

    if not display:
        if is_new_outline and extraction.outline is not None:
            display = outline_summary_message(extraction.outline)
        elif BRACE_PATTERN.search(response_text):
            display = GENERATED_FALLBACK_MESSAGE

    return display or ACKNOWLEDGEMENT_MESSAGE
