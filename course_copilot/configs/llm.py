"""
LLM configuration settings.

Model selection for the course-authoring assistant.

Dependencies: pydantic, pydantic_settings
System role: LLM client configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from course_copilot.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Chat model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(
        default="gemini-3-flash-preview",
        description="Google Generative AI model identifier",
    )
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for course generation",
    )
    max_output_tokens: int | None = Field(
        default=None,
        description="Optional cap on completion length",
    )
