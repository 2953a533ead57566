"""
Language model client.

Single-prompt text completion over Google Generative AI through
LangChain. The call blocks; retries and timeouts are left to the
provider SDK.

Dependencies: langchain_google_genai, langchain_core
System role: Boundary adapter for every model call in the application
"""

import logging
from typing import Any, Protocol

from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import BaseModel, Field

from course_copilot.core.exceptions import LLMServiceError

logger = logging.getLogger(__name__)


class LLMResponse(BaseModel):
    """Text completion returned by the model."""

    content: str = Field(description="Completion text")
    tokens_used: int | None = Field(default=None, description="Total tokens reported by the provider")


class LLMClient(Protocol):
    """Anything that turns a prompt into a completion."""

    def generate(self, prompt: str) -> LLMResponse:
        ...


def _message_text(content: Any) -> str:
    """Flatten LangChain message content (str or list of parts) to text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return str(content or "")


class GoogleLLMClient:
    """
    LLM client backed by ChatGoogleGenerativeAI.

    Usage:
        client = GoogleLLMClient(model_id="gemini-3-flash-preview")
        response = client.generate("Outline a course on Python")
    """

    def __init__(
        self,
        model_id: str = "gemini-3-flash-preview",
        temperature: float = 0.7,
        max_output_tokens: int | None = None,
        model: Any | None = None,
    ) -> None:
        """
        Initialize LLM client.

        Args:
            model_id: Google Generative AI model identifier
            temperature: Sampling temperature
            max_output_tokens: Optional completion length cap
            model: Pre-built chat model (tests inject a mock here)
        """
        self.model_id = model_id
        if model is None:
            kwargs: dict[str, Any] = {"model": model_id, "temperature": temperature}
            if max_output_tokens is not None:
                kwargs["max_output_tokens"] = max_output_tokens
            model = ChatGoogleGenerativeAI(**kwargs)
        self.model = model
        logger.info("Initialized LLM client", extra={"model_id": model_id})

    def generate(self, prompt: str) -> LLMResponse:
        """
        Generate a completion for a single prompt.

        Args:
            prompt: Full prompt text

        Returns:
            LLMResponse: Completion text and token usage when reported

        Raises:
            LLMServiceError: If the provider call fails for any reason
        """
        try:
            response = self.model.invoke([HumanMessage(content=prompt)])
        except Exception as e:
            logger.error(
                "LLM call failed",
                extra={"model_id": self.model_id, "error_type": type(e).__name__, "error_msg": str(e)},
            )
            raise LLMServiceError(
                f"Language model request failed: {e}",
                model_id=self.model_id,
            ) from e

        usage = getattr(response, "usage_metadata", None) or {}
        tokens_used = usage.get("total_tokens") if isinstance(usage, dict) else None
        content = _message_text(response.content)

        logger.info(
            "LLM call completed",
            extra={"model_id": self.model_id, "response_length": len(content), "tokens_used": tokens_used},
        )
        return LLMResponse(content=content, tokens_used=tokens_used)
