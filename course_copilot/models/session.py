"""
Session domain models and schemas.

Request/response schemas for conversation session operations.

Dependencies: pydantic
System role: Session API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class HistoryEntry(BaseModel):
    """One transcript entry as the client submits and displays it."""

    role: str = Field(description="user, assistant or system")
    content: str
    timestamp: Any | None = Field(default=None, description="Client or server timestamp")


class StartConversationRequest(BaseModel):
    """Request schema for starting a conversation."""

    session_id: str | None = Field(default=None, description="Client-generated id; generated when omitted")
    context: dict[str, Any] = Field(default_factory=dict, description="Initial context, may hold course_structure")
    course_data: dict[str, Any] | None = Field(default=None, description="Older spelling of an initial outline")


class StartConversationResult(BaseModel):
    """Result of starting a conversation."""

    session_id: str
    title: str
    outline: dict[str, Any] | None = None
    saved: bool = False


class SaveConversationRequest(BaseModel):
    """Client autosave: full transcript plus full conversation state."""

    conversation_history: list[dict[str, Any]] = Field(default_factory=list)
    conversation_state: dict[str, Any] = Field(default_factory=dict)


class UpdateTitleRequest(BaseModel):
    title: str = Field(description="New session title")


class DuplicateSessionRequest(BaseModel):
    """Request schema for duplicating a session's course."""

    course_data: dict[str, Any] | None = Field(
        default=None,
        description="Outline to duplicate; defaults to the session's current outline",
    )


class DuplicateSessionResult(BaseModel):
    new_session_id: str
    course_title: str


class SessionPublicView(BaseModel):
    """Session as exposed to clients; internal bookkeeping omitted."""

    session_id: str
    title: str
    user_id: int | None = None
    conversation_history: list[HistoryEntry] = Field(default_factory=list)
    context: dict[str, Any] = Field(default_factory=dict)
    course_structure: dict[str, Any] | None = None
    created_at: datetime
    last_updated: datetime
    published_course_id: Any | None = None
    published_course_url: str | None = None
    published_at: datetime | None = None
    statistics: dict[str, Any] = Field(default_factory=dict)


class SessionSummary(BaseModel):
    """Session entry in a user's session list."""

    session_id: str
    title: str
    message_count: int
    has_outline: bool
    created_at: datetime
    last_updated: datetime
    published_course_id: Any | None = None
