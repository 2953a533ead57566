"""
Test suite for SessionService.

System role: Verification of session use case orchestration
"""

from unittest.mock import MagicMock

import pytest

from course_copilot.application.services.lesson_draft_service import LessonDraftService
from course_copilot.application.services.session_service import SessionService
from course_copilot.application.services.session_store import SessionStore
from course_copilot.core.exceptions import SessionNotFoundError, ValidationError
from course_copilot.core.session import DRAFT_TITLE, MAX_TITLE_LENGTH, ConversationSession, SaveResult


@pytest.fixture
def mock_store() -> MagicMock:
    """Provide mock session store."""
    store = MagicMock(spec=SessionStore)
    store.get.return_value = None
    store.save.side_effect = lambda session: SaveResult(
        saved=not session.is_empty(), message="ok", session_id=session.session_id
    )
    return store


@pytest.fixture
def mock_drafts() -> MagicMock:
    """Provide mock lesson draft service."""
    drafts = MagicMock(spec=LessonDraftService)
    drafts.copy_session_drafts.return_value = 0
    return drafts


@pytest.fixture
def service(mock_store: MagicMock, mock_drafts: MagicMock) -> SessionService:
    return SessionService(store=mock_store, drafts=mock_drafts)


class TestStartConversation:
    """Test suite for start_conversation()."""

    def test_without_outline_should_not_persist(self, service: SessionService) -> None:
        # Act
        result = service.start_conversation({}, user_id=1)

        # Assert
        assert result.saved is False
        assert result.title == DRAFT_TITLE
        assert result.session_id.startswith("mpcc_session_")

    def test_with_course_data_should_persist_and_title(
        self, service: SessionService, sample_outline: dict
    ) -> None:
        result = service.start_conversation({"course_data": sample_outline}, user_id=1)
        assert result.saved is True
        assert result.title == "Course: Intro to X"
        assert result.outline == sample_outline

    def test_known_session_id_should_return_existing(
        self, service: SessionService, mock_store: MagicMock
    ) -> None:
        # Arrange
        mock_store.get.return_value = ConversationSession(session_id="s1", title="Mine")

        # Act
        result = service.start_conversation({"session_id": "s1"}, user_id=1)

        # Assert
        assert result.session_id == "s1"
        assert result.title == "Mine"
        mock_store.save.assert_not_called()


class TestSaveConversation:
    """Test suite for save_conversation()."""

    def test_blank_session_id_should_raise(self, service: SessionService) -> None:
        with pytest.raises(ValidationError, match="Session ID is required"):
            service.save_conversation("", [], {}, None)

    def test_empty_conversation_should_not_save(self, service: SessionService, mock_store: MagicMock) -> None:
        # Act
        result = service.save_conversation("s1", [{"role": "assistant", "content": "hi"}], {}, None)

        # Assert
        assert result.saved is False
        assert result.message == "No content to save"
        mock_store.save.assert_not_called()

    def test_unknown_session_should_be_created_with_state(
        self, service: SessionService, mock_store: MagicMock, sample_outline: dict
    ) -> None:
        # Act
        result = service.save_conversation(
            "s1",
            [{"role": "user", "content": "make it"}],
            {"course_structure": sample_outline, "step": 2},
            user_id=5,
        )

        # Assert
        assert result.saved is True
        session = mock_store.save.call_args.args[0]
        assert session.session_id == "s1"
        assert session.user_id == 5
        assert session.title == "Course: Intro to X"
        assert session.context == {"course_structure": sample_outline, "step": 2}

    def test_state_should_replace_context(self, service: SessionService, mock_store: MagicMock) -> None:
        # Arrange
        existing = ConversationSession(session_id="s1", context={"old": True})
        mock_store.get.return_value = existing

        # Act
        service.save_conversation("s1", [{"role": "user", "content": "x"}], {"new": True}, None)

        # Assert
        assert mock_store.save.call_args.args[0].context == {"new": True}


class TestLoadAndList:
    """Test suite for load_session_view() and list_sessions()."""

    def test_load_missing_should_raise(self, service: SessionService) -> None:
        with pytest.raises(SessionNotFoundError, match="Session not found: nope"):
            service.load_session_view("nope")

    def test_load_should_project_transcript(self, service: SessionService, mock_store: MagicMock) -> None:
        # Arrange
        session = ConversationSession(session_id="s1")
        session.add_message("user", "hi")
        session.set_metadata("published_course_id", 9)
        mock_store.get.return_value = session

        # Act
        view = service.load_session_view("s1")

        # Assert
        assert view.conversation_history[0].role == "user"
        assert view.conversation_history[0].content == "hi"
        assert view.published_course_id == 9
        assert view.statistics["user_messages"] == 1

    def test_list_should_delegate_paging(self, service: SessionService, mock_store: MagicMock) -> None:
        # Arrange
        mock_store.list_for_user.return_value = [ConversationSession(session_id="a")]

        # Act
        summaries = service.list_sessions(4, limit=10, offset=5)

        # Assert
        mock_store.list_for_user.assert_called_once_with(4, 10, 5)
        assert [s.session_id for s in summaries] == ["a"]
        assert summaries[0].has_outline is False


class TestDeleteAndRename:
    """Test suite for delete_session() and update_title()."""

    def test_delete_should_remove_drafts_when_deleted(
        self, service: SessionService, mock_store: MagicMock, mock_drafts: MagicMock
    ) -> None:
        mock_store.delete.return_value = True
        assert service.delete_session("s1") is True
        mock_drafts.delete_session_drafts.assert_called_once_with("s1")

    def test_delete_missing_should_skip_drafts(
        self, service: SessionService, mock_store: MagicMock, mock_drafts: MagicMock
    ) -> None:
        mock_store.delete.return_value = False
        assert service.delete_session("s1") is False
        mock_drafts.delete_session_drafts.assert_not_called()

    def test_update_title_should_save(self, service: SessionService, mock_store: MagicMock) -> None:
        # Arrange
        mock_store.get.return_value = ConversationSession(session_id="s1")

        # Act
        view = service.update_title("s1", "  Renamed  ")

        # Assert
        assert view.title == "Renamed"
        mock_store.save.assert_called_once()

    def test_update_title_should_bound_length(self, service: SessionService, mock_store: MagicMock) -> None:
        mock_store.get.return_value = ConversationSession(session_id="s1")
        view = service.update_title("s1", "y" * 300)
        assert len(view.title) == MAX_TITLE_LENGTH

    def test_update_title_blank_should_raise(self, service: SessionService) -> None:
        with pytest.raises(ValidationError, match="Session ID and title are required"):
            service.update_title("s1", " ")


class TestDuplicateSession:
    """Test suite for duplicate_session()."""

    def test_should_copy_outline_with_suffix_and_drafts(
        self,
        service: SessionService,
        mock_store: MagicMock,
        mock_drafts: MagicMock,
        sample_outline: dict,
    ) -> None:
        # Arrange
        original = ConversationSession(session_id="s1", user_id=2)
        original.set_outline(sample_outline)
        mock_store.get.return_value = original

        # Act
        result = service.duplicate_session("s1", None, None)

        # Assert
        assert result.course_title == "Intro to X (Draft Copy)"
        assert result.new_session_id != "s1"
        duplicate = mock_store.save.call_args.args[0]
        assert duplicate.user_id == 2
        assert duplicate.title == "Course: Intro to X (Draft Copy)"
        mock_drafts.copy_session_drafts.assert_called_once_with("s1", result.new_session_id)
        assert sample_outline["title"] == "Intro to X"

    def test_without_outline_should_raise(self, service: SessionService, mock_store: MagicMock) -> None:
        mock_store.get.return_value = ConversationSession(session_id="s1")
        with pytest.raises(ValidationError, match="Course data is required"):
            service.duplicate_session("s1", None, None)

    def test_missing_source_should_raise(self, service: SessionService) -> None:
        with pytest.raises(SessionNotFoundError):
            service.duplicate_session("s1", {"title": "T", "sections": []}, None)
