"""
Session service orchestrator.

Conversation session use cases behind the session endpoints: start,
autosave, view, list, delete, rename and duplicate.

Dependencies: course_copilot.application.services.session_store, course_copilot.core.session
System role: Session use case orchestration
"""

import logging
from typing import Any

from course_copilot.application.services.lesson_draft_service import LessonDraftService
from course_copilot.application.services.session_store import SessionStore
from course_copilot.core.exceptions import SessionNotFoundError, ValidationError
from course_copilot.core.session.conversation_session import (
    ConversationSession,
    SaveResult,
    clamp_title,
    create_session,
    outline_title,
)
from course_copilot.models.session import (
    DuplicateSessionResult,
    HistoryEntry,
    SessionPublicView,
    SessionSummary,
    StartConversationResult,
)

logger = logging.getLogger(__name__)

DUPLICATE_SUFFIX = " (Draft Copy)"


def build_public_view(session: ConversationSession) -> SessionPublicView:
    """
    Project a session onto its client-facing view.

    Args:
        session: Loaded session

    Returns:
        SessionPublicView: Transcript as {role, content, timestamp}, outline and publish facts
    """
    return SessionPublicView(
        session_id=session.session_id,
        title=session.title,
        user_id=session.user_id,
        conversation_history=[
            HistoryEntry(
                role=message.type,
                content=message.content,
                timestamp=message.metadata.get("timestamp", message.timestamp),
            )
            for message in session.messages
        ],
        context=session.context,
        course_structure=session.outline,
        created_at=session.created_at,
        last_updated=session.last_updated_at,
        published_course_id=session.metadata.get("published_course_id"),
        published_course_url=session.metadata.get("published_course_url"),
        published_at=session.metadata.get("published_at"),
        statistics=session.statistics(),
    )


def build_summary(session: ConversationSession) -> SessionSummary:
    return SessionSummary(
        session_id=session.session_id,
        title=session.title,
        message_count=len(session.messages),
        has_outline=session.course_title is not None,
        created_at=session.created_at,
        last_updated=session.last_updated_at,
        published_course_id=session.metadata.get("published_course_id"),
    )


def _has_user_entry(history: list[dict[str, Any]]) -> bool:
    return any(isinstance(entry, dict) and entry.get("role") == "user" for entry in history)


class SessionService:
    """Session service orchestrator."""

    def __init__(self, store: SessionStore, drafts: LessonDraftService) -> None:
        """
        Initialize session service.

        Args:
            store: Session persistence
            drafts: Lesson draft use cases (deleted/copied with sessions)
        """
        self.store = store
        self.drafts = drafts

    def start_conversation(
        self,
        initial_data: dict[str, Any] | None,
        user_id: int | None,
    ) -> StartConversationResult:
        """
        Start a conversation.

        The session is only persisted when it already carries an outline;
        otherwise it is created on the first save that has content.

        Args:
            initial_data: Optional {session_id, context, course_data}
            user_id: Owning user

        Returns:
            StartConversationResult: Session id, title, outline and whether it was stored
        """
        initial_data = initial_data or {}
        session_id = initial_data.get("session_id") or None
        if session_id:
            existing = self.store.get(session_id)
            if existing is not None:
                return StartConversationResult(
                    session_id=existing.session_id,
                    title=existing.title,
                    outline=existing.outline,
                    saved=True,
                )

        session = create_session(initial_data, user_id=user_id, session_id=session_id)
        result = self.store.save(session)

        logger.info(
            "Conversation started",
            extra={"session_id": session.session_id, "user_id": user_id, "saved": result.saved},
        )
        return StartConversationResult(
            session_id=session.session_id,
            title=session.title,
            outline=session.outline,
            saved=result.saved,
        )

    def save_conversation(
        self,
        session_id: str,
        history: list[dict[str, Any]] | None,
        state: dict[str, Any] | None,
        user_id: int | None,
    ) -> SaveResult:
        """
        Persist the client's full transcript and state.

        An unknown session id is created on the spot. The stored transcript
        is rebuilt from history and the context replaced by state.

        Args:
            session_id: Client-held session identifier
            history: Full transcript [{role, content, timestamp?}]
            state: Full conversation state (context)
            user_id: Owning user for newly created sessions

        Returns:
            SaveResult: saved=False with "No content to save" for empty conversations

        Raises:
            ValidationError: If session_id is blank
        """
        if not session_id:
            raise ValidationError("Session ID is required", field="session_id")

        history = history or []
        state = state or {}
        if not _has_user_entry(history) and not outline_title(state):
            return SaveResult(saved=False, message="No content to save", session_id=session_id)

        session = self.store.get(session_id)
        if session is None:
            session = create_session({"context": state}, user_id=user_id, session_id=session_id)
            logger.info(
                "Created session from autosave",
                extra={"session_id": session_id, "title": session.title},
            )

        session.replace_messages(history)
        session.replace_context(state)
        session.apply_course_title()
        return self.store.save(session)

    def load_session_view(self, session_id: str) -> SessionPublicView:
        """
        Load a session's client-facing view.

        Args:
            session_id: Session identifier

        Returns:
            SessionPublicView: Public projection of the session

        Raises:
            SessionNotFoundError: If no such session exists
        """
        session = self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return build_public_view(session)

    def list_sessions(
        self,
        user_id: int,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[SessionSummary]:
        """
        List a user's sessions, most recently updated first.

        Args:
            user_id: Owning user
            limit: Page size
            offset: Number of sessions to skip

        Returns:
            list[SessionSummary]: Deterministically ordered summaries
        """
        return [build_summary(session) for session in self.store.list_for_user(user_id, limit, offset)]

    def delete_session(self, session_id: str) -> bool:
        """
        Delete a session and its lesson drafts.

        Args:
            session_id: Session identifier

        Returns:
            bool: False when the session did not exist
        """
        deleted = self.store.delete(session_id)
        if deleted:
            self.drafts.delete_session_drafts(session_id)
        return deleted

    def update_title(self, session_id: str, title: str) -> SessionPublicView:
        """
        Rename a session.

        Args:
            session_id: Session identifier
            title: New title

        Returns:
            SessionPublicView: Updated session

        Raises:
            ValidationError: If session_id or title is blank
            SessionNotFoundError: If no such session exists
        """
        title = (title or "").strip()
        if not session_id or not title:
            raise ValidationError("Session ID and title are required", field="title")

        session = self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)

        session.title = clamp_title(title)
        self.store.save(session)
        logger.info("Session title updated", extra={"session_id": session_id, "title": session.title})
        return build_public_view(session)

    def duplicate_session(
        self,
        session_id: str,
        course_data: dict[str, Any] | None,
        user_id: int | None,
    ) -> DuplicateSessionResult:
        """
        Start a new session holding a copy of a session's course.

        The copied outline is titled "<title> (Draft Copy)" and the
        source session's lesson drafts are copied along.

        Args:
            session_id: Session to duplicate
            course_data: Outline to copy; defaults to the source session's outline
            user_id: Owner of the new session

        Returns:
            DuplicateSessionResult: New session id and course title

        Raises:
            ValidationError: If there is no outline with a title to copy
            SessionNotFoundError: If the source session does not exist
        """
        if not session_id:
            raise ValidationError("Session ID is required", field="session_id")

        original = self.store.get(session_id)
        if original is None:
            raise SessionNotFoundError(session_id)

        outline = dict(course_data or original.outline or {})
        if not outline.get("title"):
            raise ValidationError("Course data is required", field="course_data")

        outline["title"] = f"{outline['title']}{DUPLICATE_SUFFIX}"
        duplicate = create_session(
            {"context": {"course_structure": outline}},
            user_id=user_id if user_id is not None else original.user_id,
        )
        self.store.save(duplicate)
        copied = self.drafts.copy_session_drafts(session_id, duplicate.session_id)

        logger.info(
            "Course duplicated",
            extra={
                "original_session_id": session_id,
                "new_session_id": duplicate.session_id,
                "course_title": outline["title"],
                "drafts_copied": copied,
            },
        )
        return DuplicateSessionResult(new_session_id=duplicate.session_id, course_title=outline["title"])
