"""
Conversation session entity.

Holds the state of one course-authoring conversation. Messages are
appended within a turn and rebuilt wholesale when the client resubmits
its full transcript; context is always replaced, never merged.

Dependencies: pydantic
System role: Central domain entity of the chat turn pipeline
"""

from datetime import datetime, timezone
import time
from typing import Any, Literal
import uuid

from pydantic import BaseModel, Field

DRAFT_TITLE = "New Course (Draft)"
MAX_MESSAGE_HISTORY = 1000
TITLE_PREFIX = "Course: "
# Matches the conversations.title column width
MAX_TITLE_LENGTH = 255

MessageType = Literal["user", "assistant", "system"]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def clamp_title(title: str) -> str:
    """Cut a title to MAX_TITLE_LENGTH characters."""
    return title[:MAX_TITLE_LENGTH]


def generate_session_id() -> str:
    """
    Generate a new opaque session identifier.

    Returns:
        str: Identifier of the form mpcc_session_<uuid4 hex>_<unix seconds>
    """
    return f"mpcc_session_{uuid.uuid4().hex}_{int(time.time())}"


def outline_title(context: dict[str, Any] | None) -> str | None:
    """
    Read the outline title from a context map.

    course_structure wins; course_data is the older client key.

    Args:
        context: Session context or client-supplied state

    Returns:
        str | None: Non-empty outline title, if any
    """
    if not context:
        return None
    for key in ("course_structure", "course_data"):
        outline = context.get(key)
        if isinstance(outline, dict) and outline.get("title"):
            return str(outline["title"])
    return None


class SessionMessage(BaseModel):
    """One entry of the conversation transcript."""

    type: MessageType = Field(description="Author of the message")
    content: str = Field(description="Message text as shown to the author")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Side-channel data (tokens_used, client timestamp)")
    timestamp: datetime = Field(default_factory=_utcnow, description="Server time the message was recorded (UTC)")


class SaveResult(BaseModel):
    """Outcome of a save request; saved=False is a no-op, not a failure."""

    saved: bool
    message: str
    session_id: str | None = None


class ConversationSession(BaseModel):
    """In-progress course-authoring conversation."""

    session_id: str = Field(default_factory=generate_session_id, description="Opaque, immutable identifier")
    user_id: int | None = Field(default=None, description="Owning user")
    title: str = Field(default=DRAFT_TITLE, description="Human-readable label")
    messages: list[SessionMessage] = Field(default_factory=list)
    context: dict[str, Any] = Field(default_factory=dict, description="Free-form state; course_structure once an outline exists")
    metadata: dict[str, Any] = Field(default_factory=dict, description="Publish facts and other side-channel data")
    total_tokens: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=_utcnow)
    last_updated_at: datetime = Field(default_factory=_utcnow)

    # Transcript

    def add_message(
        self,
        message_type: MessageType,
        content: str,
        metadata: dict[str, Any] | None = None,
    ) -> SessionMessage:
        """
        Append a message, dropping the oldest beyond the history cap.

        Args:
            message_type: user, assistant or system
            content: Message text
            metadata: Optional side-channel data; tokens_used is accumulated

        Returns:
            SessionMessage: The appended message
        """
        message = SessionMessage(type=message_type, content=content, metadata=dict(metadata or {}))
        self.messages.append(message)
        if len(self.messages) > MAX_MESSAGE_HISTORY:
            self.messages = self.messages[-MAX_MESSAGE_HISTORY:]

        tokens = message.metadata.get("tokens_used")
        if isinstance(tokens, int) and not isinstance(tokens, bool) and tokens > 0:
            self.total_tokens += tokens
        return message

    def clear_messages(self) -> None:
        self.messages = []

    def replace_messages(self, history: list[dict[str, Any]]) -> None:
        """
        Rebuild the transcript from a client-supplied history.

        Role "user" maps to user, "system" to system, anything else to
        assistant. A client timestamp is kept in message metadata. Entries
        missing role or content are skipped.

        Args:
            history: Ordered [{role, content, timestamp?}] entries
        """
        self.clear_messages()
        for entry in history:
            if not isinstance(entry, dict):
                continue
            role = entry.get("role")
            content = entry.get("content")
            if not role or content is None:
                continue
            if role == "user":
                message_type = "user"
            elif role == "system":
                message_type = "system"
            else:
                message_type = "assistant"
            metadata = {}
            if entry.get("timestamp") is not None:
                metadata["timestamp"] = entry["timestamp"]
            self.add_message(message_type, str(content), metadata)

    def messages_by_type(self, message_type: MessageType) -> list[SessionMessage]:
        return [message for message in self.messages if message.type == message_type]

    def has_user_messages(self) -> bool:
        return any(message.type == "user" for message in self.messages)

    def history_for_prompt(self) -> list[dict[str, str]]:
        """Transcript as [{role, content}] pairs for prompt building."""
        return [{"role": message.type, "content": message.content} for message in self.messages]

    # Context and metadata

    def replace_context(self, context: dict[str, Any] | None) -> None:
        """
        Replace the context wholesale; the last full context wins.

        Args:
            context: Complete context the caller wants retained
        """
        self.context = dict(context or {})

    def set_outline(self, outline: dict[str, Any]) -> None:
        self.context["course_structure"] = outline

    @property
    def outline(self) -> dict[str, Any] | None:
        """Current course outline, if one exists."""
        outline = self.context.get("course_structure")
        return outline if isinstance(outline, dict) else None

    @property
    def course_title(self) -> str | None:
        return outline_title(self.context)

    def set_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = value

    def apply_course_title(self) -> bool:
        """
        Rewrite the title from the outline title when it differs.

        Returns:
            bool: True when the title changed
        """
        title = self.course_title
        if not title:
            return False
        derived = clamp_title(f"{TITLE_PREFIX}{title}")
        if self.title == derived:
            return False
        self.title = derived
        return True

    # State

    def is_empty(self) -> bool:
        """A session with no user messages and no outline title is never persisted."""
        return not self.has_user_messages() and not self.course_title

    def touch(self) -> None:
        self.last_updated_at = _utcnow()

    def statistics(self) -> dict[str, Any]:
        """
        Summarize the conversation.

        Returns:
            dict: Message counts by type, duration and token usage
        """
        assistant_count = len(self.messages_by_type("assistant"))
        duration = max((self.last_updated_at - self.created_at).total_seconds(), 0.0)
        return {
            "total_messages": len(self.messages),
            "user_messages": len(self.messages_by_type("user")),
            "assistant_messages": assistant_count,
            "system_messages": len(self.messages_by_type("system")),
            "duration_seconds": int(duration),
            "average_response_time": duration / assistant_count if assistant_count else 0,
            "total_tokens": self.total_tokens,
        }


def create_session(
    initial: dict[str, Any] | None = None,
    user_id: int | None = None,
    session_id: str | None = None,
) -> ConversationSession:
    """
    Create a new, unsaved session.

    Args:
        initial: Optional initial data with context and/or course_data
        user_id: Owning user
        session_id: Caller-supplied id; generated when omitted

    Returns:
        ConversationSession: Session titled from the outline, else the draft title
    """
    initial = initial or {}
    context = dict(initial.get("context") or {})
    if "course_structure" not in context:
        for key in ("course_structure", "course_data"):
            if isinstance(initial.get(key), dict):
                context["course_structure"] = initial[key]
                break

    session = ConversationSession(
        session_id=session_id or generate_session_id(),
        user_id=user_id,
        context=context,
    )
    title = outline_title(context) or outline_title(initial)
    if title:
        session.title = clamp_title(f"{TITLE_PREFIX}{title}")
    return session
