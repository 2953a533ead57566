"""
Chat request/response schemas.

Dependencies: pydantic
System role: Chat turn API contracts
"""

from typing import Any

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """One author message, optionally with the client's full transcript."""

    message: str = Field(description="Author's message")
    conversation_history: list[dict[str, Any]] | None = Field(
        default=None,
        description="Full client transcript; replaces the stored one when present",
    )


class ChatTurnResult(BaseModel):
    """Outcome of one chat turn."""

    session_id: str
    display_message: str = Field(description="Assistant reply with machine JSON removed")
    outline: dict[str, Any] | None = Field(default=None, description="Current course outline")
    outline_updated: bool = Field(default=False, description="Whether this turn produced a new outline")
    title: str
    saved: bool
