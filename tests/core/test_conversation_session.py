"""
Test suite for the ConversationSession entity.

System role: Verification of session state transitions
"""

import re
from datetime import timedelta

import pytest

from course_copilot.core.session import (
    DRAFT_TITLE,
    MAX_MESSAGE_HISTORY,
    MAX_TITLE_LENGTH,
    ConversationSession,
    create_session,
    generate_session_id,
    outline_title,
)


@pytest.fixture
def session() -> ConversationSession:
    """Provide an empty session with a fixed id."""
    return ConversationSession(session_id="mpcc_session_test_1")


class TestGenerateSessionId:
    """Test suite for generate_session_id()."""

    def test_should_match_documented_format(self) -> None:
        assert re.fullmatch(r"mpcc_session_[0-9a-f]{32}_\d+", generate_session_id())

    def test_should_be_unique(self) -> None:
        assert generate_session_id() != generate_session_id()


class TestOutlineTitle:
    """Test suite for outline_title()."""

    def test_course_structure_should_win_over_course_data(self) -> None:
        context = {"course_structure": {"title": "A"}, "course_data": {"title": "B"}}
        assert outline_title(context) == "A"

    def test_should_fall_back_to_course_data(self) -> None:
        assert outline_title({"course_data": {"title": "B"}}) == "B"

    @pytest.mark.parametrize("context", [None, {}, {"course_structure": {"title": ""}}, {"course_structure": "x"}])
    def test_should_return_none_without_title(self, context) -> None:
        assert outline_title(context) is None


class TestAddMessage:
    """Test suite for add_message()."""

    def test_should_append_in_order(self, session: ConversationSession) -> None:
        # Act
        session.add_message("user", "hi")
        session.add_message("assistant", "hello")

        # Assert
        assert [m.type for m in session.messages] == ["user", "assistant"]
        assert session.has_user_messages()

    def test_should_accumulate_tokens_used(self, session: ConversationSession) -> None:
        # Act
        session.add_message("assistant", "a", {"tokens_used": 10})
        session.add_message("assistant", "b", {"tokens_used": 5})
        session.add_message("assistant", "c", {"tokens_used": "7"})

        # Assert
        assert session.total_tokens == 15

    def test_should_drop_oldest_beyond_cap(self, session: ConversationSession) -> None:
        """Test history is capped at MAX_MESSAGE_HISTORY entries."""
        # Act
        for index in range(MAX_MESSAGE_HISTORY + 3):
            session.add_message("user", f"m{index}")

        # Assert
        assert len(session.messages) == MAX_MESSAGE_HISTORY
        assert session.messages[0].content == "m3"
        assert session.messages[-1].content == f"m{MAX_MESSAGE_HISTORY + 2}"


class TestReplaceMessages:
    """Test suite for replace_messages()."""

    def test_should_map_roles_and_keep_client_timestamp(self, session: ConversationSession) -> None:
        # Arrange
        session.add_message("user", "stale")
        history = [
            {"role": "user", "content": "Make a course", "timestamp": "2024-01-01T00:00:00Z"},
            {"role": "bot", "content": "Sure"},
            {"role": "system", "content": "note"},
        ]

        # Act
        session.replace_messages(history)

        # Assert
        assert [m.type for m in session.messages] == ["user", "assistant", "system"]
        assert session.messages[0].metadata["timestamp"] == "2024-01-01T00:00:00Z"
        assert "stale" not in [m.content for m in session.messages]

    def test_should_skip_entries_missing_role_or_content(self, session: ConversationSession) -> None:
        # Act
        session.replace_messages([{"content": "no role"}, {"role": "user"}, {"role": "user", "content": "ok"}])

        # Assert
        assert [m.content for m in session.messages] == ["ok"]


class TestContextAndTitle:
    """Test suite for context replacement and title derivation."""

    def test_replace_context_should_drop_previous_keys(self, session: ConversationSession) -> None:
        # Arrange
        session.replace_context({"a": 1, "course_structure": {"title": "T", "sections": []}})

        # Act
        session.replace_context({"b": 2})

        # Assert
        assert session.context == {"b": 2}
        assert session.outline is None

    def test_apply_course_title_should_prefix_outline_title(
        self, session: ConversationSession, sample_outline: dict
    ) -> None:
        # Arrange
        session.set_outline(sample_outline)

        # Act
        changed = session.apply_course_title()

        # Assert
        assert changed is True
        assert session.title == "Course: Intro to X"
        assert session.apply_course_title() is False

    def test_apply_course_title_without_outline_should_keep_title(self, session: ConversationSession) -> None:
        assert session.apply_course_title() is False
        assert session.title == DRAFT_TITLE

    def test_apply_course_title_should_bound_long_titles(self, session: ConversationSession) -> None:
        """Test an over-long outline title still fits the title column."""
        # Arrange
        session.set_outline({"title": "x" * 400, "sections": []})

        # Act
        session.apply_course_title()

        # Assert
        assert len(session.title) == MAX_TITLE_LENGTH
        assert session.title.startswith("Course: xxx")


class TestIsEmpty:
    """Test suite for is_empty()."""

    def test_new_session_should_be_empty(self, session: ConversationSession) -> None:
        assert session.is_empty()

    def test_assistant_only_should_be_empty(self, session: ConversationSession) -> None:
        session.add_message("assistant", "hello")
        assert session.is_empty()

    def test_outline_should_make_session_non_empty(
        self, session: ConversationSession, sample_outline: dict
    ) -> None:
        session.set_outline(sample_outline)
        assert not session.is_empty()


class TestStatistics:
    """Test suite for statistics()."""

    def test_should_count_messages_by_type(self, session: ConversationSession) -> None:
        # Arrange
        session.add_message("user", "q")
        session.add_message("assistant", "a", {"tokens_used": 4})
        session.add_message("system", "s")
        session.last_updated_at = session.created_at + timedelta(seconds=30)

        # Act
        stats = session.statistics()

        # Assert
        assert stats["total_messages"] == 3
        assert stats["user_messages"] == 1
        assert stats["assistant_messages"] == 1
        assert stats["system_messages"] == 1
        assert stats["duration_seconds"] == 30
        assert stats["average_response_time"] == 30
        assert stats["total_tokens"] == 4


class TestCreateSession:
    """Test suite for create_session()."""

    def test_without_outline_should_use_draft_title(self) -> None:
        # Act
        session = create_session(user_id=7)

        # Assert
        assert session.title == DRAFT_TITLE
        assert session.user_id == 7
        assert session.session_id.startswith("mpcc_session_")

    def test_course_data_should_seed_outline_and_title(self, sample_outline: dict) -> None:
        # Act
        session = create_session({"course_data": sample_outline}, session_id="given")

        # Assert
        assert session.session_id == "given"
        assert session.outline == sample_outline
        assert session.title == "Course: Intro to X"

    def test_context_outline_should_win(self, sample_outline: dict) -> None:
        # Act
        session = create_session(
            {"context": {"course_structure": sample_outline}, "course_data": {"title": "Other", "sections": []}}
        )

        # Assert
        assert session.outline == sample_outline
