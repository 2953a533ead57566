"""
Conversation configuration settings.

Tunables for the course-authoring conversation engine.

Dependencies: pydantic, pydantic_settings
System role: Conversation prompt and listing limits
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from course_copilot.configs.base import BaseSettings


class ConversationSettings(BaseSettings):
    """Conversation session defaults."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CONVERSATION_",
        case_sensitive=False,
        extra="ignore",
    )

    history_window: int = Field(
        default=5,
        ge=0,
        description="Number of recent turns included in the LLM prompt",
    )
    list_limit: int = Field(
        default=20,
        ge=1,
        description="Default page size when listing a user's sessions",
    )
