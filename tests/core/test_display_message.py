"""
Test suite for display message derivation.

System role: Verification of assistant reply clean-up
"""

import json

from course_copilot.core.outline.display import (
    ACKNOWLEDGEMENT_MESSAGE,
    GENERATED_FALLBACK_MESSAGE,
    build_display_message,
    outline_summary_message,
)
from course_copilot.core.outline.extractor import OutlineExtraction, OutlineExtractor


def derive(text: str, prior: dict | None = None) -> str:
    extraction = OutlineExtractor().run(text, prior)
    is_new = extraction.found and extraction.outline != prior
    return build_display_message(text, extraction, is_new)


class TestBuildDisplayMessage:
    """Test suite for build_display_message()."""

    def test_should_strip_fenced_block_and_keep_prose(self, sample_outline: dict) -> None:
        # Arrange
        text = "Here is the outline.\n```json\n" + json.dumps(sample_outline) + "\n```"

        # Act
        message = derive(text)

        # Assert
        assert message == "Here is the outline."

    def test_should_use_summary_when_only_json_was_sent(self, sample_outline: dict) -> None:
        """Test canned summary replaces a reply that was only an outline."""
        # Act
        message = derive("```json\n" + json.dumps(sample_outline) + "\n```")

        # Assert
        assert message == outline_summary_message(sample_outline)
        assert 'for "Intro to X"' in message
        assert "includes 2 sections" in message

    def test_bare_json_reply_should_use_summary(self, sample_outline: dict) -> None:
        # Act
        message = derive(json.dumps(sample_outline))

        # Assert
        assert message.startswith("I've created a course structure for \"Intro to X\".")

    def test_raw_json_inside_prose_should_be_removed(self) -> None:
        # Arrange
        outline = {"title": "Raw", "sections": []}
        text = "Updated it: " + json.dumps(outline)

        # Act
        message = derive(text)

        # Assert
        assert message == "Updated it:"

    def test_unparseable_json_only_reply_should_use_generic_fallback(self) -> None:
        # Act
        message = derive('{"title": "Broken", "sections": [}')

        # Assert
        assert message == GENERATED_FALLBACK_MESSAGE

    def test_empty_reply_should_use_acknowledgement(self) -> None:
        # Act
        message = build_display_message("   ", OutlineExtraction(outline=None), False)

        # Assert
        assert message == ACKNOWLEDGEMENT_MESSAGE

    def test_same_outline_again_should_not_use_summary(self, sample_outline: dict) -> None:
        """Test an unchanged outline echoed back gets the generic fallback."""
        # Act
        message = derive("```json\n" + json.dumps(sample_outline) + "\n```", prior=sample_outline)

        # Assert
        assert message == GENERATED_FALLBACK_MESSAGE

    def test_prose_should_pass_through(self) -> None:
        assert derive("Let's talk about the audience first.") == "Let's talk about the audience first."
