"""
Test suite for GoogleLLMClient.

Uses an injected chat model mock; no provider calls are made.

System role: Verification of the language model boundary
"""

from unittest.mock import MagicMock

import pytest
from langchain_core.messages import AIMessage, HumanMessage

from course_copilot.boundary.llm.llm_client import GoogleLLMClient
from course_copilot.core.exceptions import LLMServiceError


@pytest.fixture
def chat_model() -> MagicMock:
    """Provide mock LangChain chat model."""
    return MagicMock()


@pytest.fixture
def client(chat_model: MagicMock) -> GoogleLLMClient:
    return GoogleLLMClient(model_id="test-model", model=chat_model)


class TestGenerate:
    """Test suite for GoogleLLMClient.generate()."""

    def test_should_send_prompt_as_human_message(self, client: GoogleLLMClient, chat_model: MagicMock) -> None:
        # Arrange
        chat_model.invoke.return_value = AIMessage(content="reply")

        # Act
        client.generate("Outline a course")

        # Assert
        messages = chat_model.invoke.call_args.args[0]
        assert isinstance(messages[0], HumanMessage)
        assert messages[0].content == "Outline a course"

    def test_should_report_total_tokens(self, client: GoogleLLMClient, chat_model: MagicMock) -> None:
        # Arrange
        chat_model.invoke.return_value = AIMessage(
            content="reply",
            usage_metadata={"input_tokens": 10, "output_tokens": 5, "total_tokens": 15},
        )

        # Act
        response = client.generate("p")

        # Assert
        assert response.content == "reply"
        assert response.tokens_used == 15

    def test_list_content_should_be_flattened(self, client: GoogleLLMClient, chat_model: MagicMock) -> None:
        chat_model.invoke.return_value = AIMessage(content=[{"type": "text", "text": "a"}, "b"])
        response = client.generate("p")
        assert response.content == "ab"
        assert response.tokens_used is None

    def test_provider_failure_should_raise_llm_service_error(
        self, client: GoogleLLMClient, chat_model: MagicMock
    ) -> None:
        # Arrange
        chat_model.invoke.side_effect = RuntimeError("quota")

        # Act & Assert
        with pytest.raises(LLMServiceError) as exc_info:
            client.generate("p")
        assert exc_info.value.details == {"model_id": "test-model"}
        assert isinstance(exc_info.value.__cause__, RuntimeError)
