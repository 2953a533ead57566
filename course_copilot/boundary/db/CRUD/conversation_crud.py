"""
Conversation CRUD operations.

Provides lookup by public session id, owner listing with deterministic
ordering, and upsert for ConversationModel.

Dependencies: sqlalchemy, course_copilot.boundary.db.models
System role: Conversation persistence operations
"""

from typing import Any, Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from course_copilot.boundary.db.CRUD.base_crud import BaseCRUD
from course_copilot.boundary.db.models.conversation_model import ConversationModel


class ConversationCRUD(BaseCRUD[ConversationModel]):
    """CRUD operations for ConversationModel keyed by session_id."""

    def __init__(self) -> None:
        """Initialize ConversationCRUD with ConversationModel."""
        super().__init__(ConversationModel)

    def get_by_session_id(self, session: Session, session_id: str) -> ConversationModel | None:
        """
        Retrieve a conversation by its public session id.

        Args:
            session: Database session
            session_id: Opaque session identifier

        Returns:
            ConversationModel if found, None otherwise
        """
        stmt = select(ConversationModel).where(ConversationModel.session_id == session_id)
        return session.execute(stmt).scalar_one_or_none()

    def list_by_user(
        self,
        session: Session,
        user_id: int,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ConversationModel]:
        """
        List a user's conversations, most recently updated first.

        Rows with identical updated_at are ordered by session_id descending.

        Args:
            session: Database session
            user_id: Owning user
            limit: Maximum number of rows
            offset: Number of rows to skip

        Returns:
            Sequence of ConversationModel rows
        """
        stmt = (
            select(ConversationModel)
            .where(ConversationModel.user_id == user_id)
            .order_by(ConversationModel.updated_at.desc(), ConversationModel.session_id.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        return session.execute(stmt).scalars().all()

    def upsert(self, session: Session, session_id: str, **values: Any) -> ConversationModel:
        """
        Insert or overwrite the conversation with this session id.

        No version check: the last writer wins.

        Args:
            session: Database session
            session_id: Opaque session identifier
            **values: Column values to write

        Returns:
            The persisted ConversationModel
        """
        existing = self.get_by_session_id(session, session_id)
        if existing is None:
            return self.create(session, session_id=session_id, **values)
        values.pop("created_at", None)
        return self.update(session, existing, **values)

    def delete_by_session_id(self, session: Session, session_id: str) -> bool:
        """
        Delete a conversation by session id.

        Args:
            session: Database session
            session_id: Opaque session identifier

        Returns:
            True if a row was deleted, False if not found
        """
        stmt = delete(ConversationModel).where(ConversationModel.session_id == session_id)
        return session.execute(stmt).rowcount > 0


conversation_crud = ConversationCRUD()
