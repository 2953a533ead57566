"""
Test suite for ChatService.

Tests one chat turn end to end over mocked persistence and a mocked
language model: outline extraction, display message, title derivation
and error propagation.

System role: Verification of chat turn orchestration layer
"""

import json
from unittest.mock import MagicMock

import pytest

from course_copilot.application.services.chat_service import ChatService
from course_copilot.application.services.session_store import SessionStore
from course_copilot.boundary.llm.llm_client import LLMResponse
from course_copilot.core.exceptions import LLMServiceError, ValidationError
from course_copilot.core.session import ConversationSession, SaveResult


@pytest.fixture
def mock_store() -> MagicMock:
    """Provide mock session store that knows no sessions."""
    store = MagicMock(spec=SessionStore)
    store.get.return_value = None
    store.save.side_effect = lambda session: SaveResult(
        saved=not session.is_empty(), message="ok", session_id=session.session_id
    )
    return store


@pytest.fixture
def chat_service(mock_store: MagicMock, mock_llm_client: MagicMock) -> ChatService:
    """Provide ChatService with mocked dependencies."""
    return ChatService(store=mock_store, llm_client=mock_llm_client)


def saved_session(store: MagicMock) -> ConversationSession:
    return store.save.call_args.args[0]


class TestProcessTurnValidation:
    """Test suite for input validation."""

    @pytest.mark.parametrize("session_id,message", [("", "hi"), ("s1", ""), ("s1", "   ")])
    def test_blank_input_should_raise(self, chat_service: ChatService, session_id: str, message: str) -> None:
        with pytest.raises(ValidationError):
            chat_service.process_turn(session_id, message)

    def test_blank_input_should_not_call_model(
        self, chat_service: ChatService, mock_llm_client: MagicMock
    ) -> None:
        with pytest.raises(ValidationError):
            chat_service.process_turn("s1", "")
        mock_llm_client.generate.assert_not_called()


class TestProcessTurnOutline:
    """Test suite for outline handling during a turn."""

    def test_first_outline_should_update_title_and_context(
        self,
        chat_service: ChatService,
        mock_store: MagicMock,
        mock_llm_client: MagicMock,
        sample_outline: dict,
    ) -> None:
        """Test a fenced outline becomes the session's course structure."""
        # Arrange
        reply = "Here you go.\n```json\n" + json.dumps(sample_outline) + "\n```"
        mock_llm_client.generate.return_value = LLMResponse(content=reply, tokens_used=40)

        # Act
        result = chat_service.process_turn("s1", "Create a course on X", user_id=3)

        # Assert
        assert result.outline_updated is True
        assert result.outline == sample_outline
        assert result.title == "Course: Intro to X"
        assert result.display_message == "Here you go."
        assert result.saved is True
        session = saved_session(mock_store)
        assert session.user_id == 3
        assert session.total_tokens == 40
        assert [m.type for m in session.messages] == ["user", "assistant"]

    def test_prose_reply_should_keep_prior_outline(
        self,
        chat_service: ChatService,
        mock_store: MagicMock,
        mock_llm_client: MagicMock,
        sample_outline: dict,
    ) -> None:
        """Test a reply without JSON leaves the stored outline untouched."""
        # Arrange
        existing = ConversationSession(session_id="s1", title="Course: Intro to X")
        existing.set_outline(sample_outline)
        mock_store.get.return_value = existing

        # Act
        result = chat_service.process_turn("s1", "What do you think?")

        # Assert
        assert result.outline_updated is False
        assert result.outline == sample_outline
        assert result.title == "Course: Intro to X"
        assert result.display_message == "Sounds good, tell me more."

    def test_untitled_outline_should_keep_prior_outline(
        self,
        chat_service: ChatService,
        mock_store: MagicMock,
        mock_llm_client: MagicMock,
        sample_outline: dict,
    ) -> None:
        """Test a reply whose JSON has a null title does not replace the stored outline."""
        # Arrange
        existing = ConversationSession(session_id="s1", title="Course: Intro to X")
        existing.set_outline(sample_outline)
        mock_store.get.return_value = existing
        reply = 'Updated.\n```json\n{"title": null, "sections": []}\n```'
        mock_llm_client.generate.return_value = LLMResponse(content=reply, tokens_used=5)

        # Act
        result = chat_service.process_turn("s1", "Rework the course")

        # Assert
        assert result.outline_updated is False
        assert result.outline == sample_outline
        assert result.title == "Course: Intro to X"
        assert saved_session(mock_store).outline == sample_outline

    def test_prompt_should_embed_prior_outline_and_history(
        self,
        chat_service: ChatService,
        mock_store: MagicMock,
        mock_llm_client: MagicMock,
        sample_outline: dict,
    ) -> None:
        # Arrange
        existing = ConversationSession(session_id="s1")
        existing.set_outline(sample_outline)
        existing.add_message("user", "earlier question")
        mock_store.get.return_value = existing

        # Act
        chat_service.process_turn("s1", "next")

        # Assert
        prompt = mock_llm_client.generate.call_args.args[0]
        assert "Current course structure" in prompt
        assert "user: earlier question" in prompt
        assert prompt.count("User: next") == 1

    def test_client_history_should_replace_transcript(
        self, chat_service: ChatService, mock_store: MagicMock
    ) -> None:
        # Arrange
        existing = ConversationSession(session_id="s1")
        existing.add_message("user", "server copy")
        mock_store.get.return_value = existing
        history = [{"role": "user", "content": "client copy"}, {"role": "assistant", "content": "ack"}]

        # Act
        chat_service.process_turn("s1", "hello", client_history=history)

        # Assert
        contents = [m.content for m in saved_session(mock_store).messages]
        assert contents == ["client copy", "ack", "hello", "Sounds good, tell me more."]


class TestProcessTurnErrors:
    """Test suite for model failures."""

    def test_llm_error_should_propagate_without_saving(
        self, chat_service: ChatService, mock_store: MagicMock, mock_llm_client: MagicMock
    ) -> None:
        # Arrange
        mock_llm_client.generate.side_effect = LLMServiceError("quota exceeded", model_id="m")

        # Act & Assert
        with pytest.raises(LLMServiceError, match="quota exceeded"):
            chat_service.process_turn("s1", "Create a course")
        mock_store.save.assert_not_called()
