"""Language model boundary."""

from course_copilot.boundary.llm.llm_client import GoogleLLMClient, LLMClient, LLMResponse

__all__ = ["GoogleLLMClient", "LLMClient", "LLMResponse"]
