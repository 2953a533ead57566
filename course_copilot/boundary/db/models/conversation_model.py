"""
Conversation ORM model.

Persists one course-authoring conversation: transcript, context (holding
the course outline), metadata and derived title.

Dependencies: sqlalchemy, course_copilot.boundary.db.base
System role: Conversation session persistence
"""

from sqlalchemy import Index, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from course_copilot.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ConversationModel(Base, UUIDMixin, TimestampMixin):
    """
    Conversation ORM model.

    session_id is the public, opaque identifier; id is the internal
    primary key. Listing by owner is ordered by updated_at then
    session_id, both descending, so the composite index covers it.

    Attributes:
        id: UUID primary key (auto-generated)
        session_id: Opaque session identifier (unique)
        user_id: Owning user
        title: Human-readable label
        messages: Transcript as a JSON list of message dicts
        context: Free-form state including course_structure
        session_metadata: Side-channel facts (publish info)
        total_tokens: Accumulated token usage
        created_at: Creation timestamp (UTC)
        updated_at: Last save timestamp (UTC)
    """

    __tablename__ = "conversations"
    __table_args__ = (
        Index("ix_conversations_user_updated", "user_id", "updated_at", "session_id"),
    )

    session_id: Mapped[str] = mapped_column(
        String(128),
        unique=True,
        index=True,
        nullable=False,
    )
    user_id: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        default=None,
    )
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    messages: Mapped[list] = mapped_column(
        JSON,
        nullable=False,
        default=list,
    )
    context: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
    )
    session_metadata: Mapped[dict] = mapped_column(
        JSON,
        nullable=False,
        default=dict,
        doc="Publish info and other side-channel data",
    )
    total_tokens: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
    )
