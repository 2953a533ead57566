"""
Conversation session domain model.

In-progress course-authoring conversation: transcript, context (holding
the current outline), metadata and derived title.
"""

from course_copilot.core.session.conversation_session import (
    DRAFT_TITLE,
    MAX_MESSAGE_HISTORY,
    MAX_TITLE_LENGTH,
    ConversationSession,
    SaveResult,
    SessionMessage,
    clamp_title,
    create_session,
    generate_session_id,
    outline_title,
)

__all__ = [
    "DRAFT_TITLE",
    "MAX_MESSAGE_HISTORY",
    "MAX_TITLE_LENGTH",
    "ConversationSession",
    "SaveResult",
    "SessionMessage",
    "clamp_title",
    "create_session",
    "generate_session_id",
    "outline_title",
]
