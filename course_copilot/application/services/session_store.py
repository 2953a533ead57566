"""
Session store.

Persists and retrieves conversation sessions by id and by owner. Empty
sessions (no user messages, no outline title) are never written: save
reports saved=False instead of raising.

Concurrent saves of one session id are not coordinated; the last writer
wins. There is no version column.

Dependencies: sqlalchemy, course_copilot.boundary.db.CRUD
System role: Conversation session persistence for the application layer
"""

import logging

from sqlalchemy.orm import Session

from course_copilot.boundary.db.base import ensure_utc
from course_copilot.boundary.db.CRUD.conversation_crud import conversation_crud
from course_copilot.boundary.db.models.conversation_model import ConversationModel
from course_copilot.core.session.conversation_session import (
    ConversationSession,
    SaveResult,
    SessionMessage,
)

logger = logging.getLogger(__name__)

NO_CONTENT_MESSAGE = "No content to save"
SAVED_MESSAGE = "Conversation saved successfully"


def to_session(row: ConversationModel) -> ConversationSession:
    """
    Rebuild a ConversationSession from its stored row.

    Args:
        row: Persisted ConversationModel

    Returns:
        ConversationSession: Domain entity
    """
    return ConversationSession(
        session_id=row.session_id,
        user_id=row.user_id,
        title=row.title,
        messages=[SessionMessage.model_validate(message) for message in row.messages or []],
        context=dict(row.context or {}),
        metadata=dict(row.session_metadata or {}),
        total_tokens=row.total_tokens or 0,
        created_at=ensure_utc(row.created_at),
        last_updated_at=ensure_utc(row.updated_at),
    )


class SessionStore:
    """Conversation session persistence over ConversationCRUD."""

    def __init__(self, db: Session, list_limit: int = 20) -> None:
        """
        Initialize session store.

        Args:
            db: SQLAlchemy session
            list_limit: Default page size for list_for_user
        """
        self.db = db
        self.list_limit = list_limit

    def get(self, session_id: str) -> ConversationSession | None:
        """
        Load a session by id.

        Args:
            session_id: Opaque session identifier

        Returns:
            ConversationSession if stored, None otherwise
        """
        row = conversation_crud.get_by_session_id(self.db, session_id)
        return to_session(row) if row is not None else None

    def list_for_user(
        self,
        user_id: int,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[ConversationSession]:
        """
        List a user's sessions, most recently updated first.

        Ties on last update are broken by session id, descending.

        Args:
            user_id: Owning user
            limit: Page size (defaults to list_limit)
            offset: Number of sessions to skip

        Returns:
            list[ConversationSession]: Sessions in deterministic order
        """
        rows = conversation_crud.list_by_user(
            self.db,
            user_id,
            limit=limit if limit is not None else self.list_limit,
            offset=offset,
        )
        return [to_session(row) for row in rows]

    def save(self, session: ConversationSession) -> SaveResult:
        """
        Persist a session unless it is empty.

        Bumps last_updated_at, then inserts or overwrites the stored row
        and commits.

        Args:
            session: Session to persist

        Returns:
            SaveResult: saved=False with "No content to save" for empty sessions

        Raises:
            SQLAlchemyError: If the write fails (transaction rolled back)
        """
        if session.is_empty():
            logger.info("Skipped saving empty session", extra={"session_id": session.session_id})
            return SaveResult(saved=False, message=NO_CONTENT_MESSAGE, session_id=session.session_id)

        session.touch()
        try:
            conversation_crud.upsert(
                self.db,
                session.session_id,
                user_id=session.user_id,
                title=session.title,
                messages=[message.model_dump(mode="json") for message in session.messages],
                context=session.context,
                session_metadata=session.metadata,
                total_tokens=session.total_tokens,
                created_at=session.created_at,
                updated_at=session.last_updated_at,
            )
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(
                "Failed to save session",
                extra={"session_id": session.session_id, "error": str(e)},
            )
            raise

        logger.info(
            "Session saved",
            extra={
                "session_id": session.session_id,
                "message_count": len(session.messages),
                "title": session.title,
            },
        )
        return SaveResult(saved=True, message=SAVED_MESSAGE, session_id=session.session_id)

    def delete(self, session_id: str) -> bool:
        """
        Delete a session.

        Args:
            session_id: Opaque session identifier

        Returns:
            bool: True if deleted, False if no such session
        """
        try:
            deleted = conversation_crud.delete_by_session_id(self.db, session_id)
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error("Failed to delete session", extra={"session_id": session_id, "error": str(e)})
            raise

        logger.info("Session delete requested", extra={"session_id": session_id, "deleted": deleted})
        return deleted
