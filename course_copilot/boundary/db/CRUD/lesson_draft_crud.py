"""
Lesson draft CRUD operations.

Dependencies: sqlalchemy, course_copilot.boundary.db.models
System role: Lesson draft persistence operations
"""

from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from course_copilot.boundary.db.CRUD.base_crud import BaseCRUD
from course_copilot.boundary.db.models.lesson_draft_model import LessonDraftModel


class LessonDraftCRUD(BaseCRUD[LessonDraftModel]):
    """CRUD operations for LessonDraftModel."""

    def __init__(self) -> None:
        """Initialize LessonDraftCRUD with LessonDraftModel."""
        super().__init__(LessonDraftModel)

    def get_draft(
        self,
        session: Session,
        session_id: str,
        section_id: str,
        lesson_id: str,
    ) -> LessonDraftModel | None:
        stmt = select(LessonDraftModel).where(
            LessonDraftModel.session_id == session_id,
            LessonDraftModel.section_id == section_id,
            LessonDraftModel.lesson_id == lesson_id,
        )
        return session.execute(stmt).scalar_one_or_none()

    def list_by_session(self, session: Session, session_id: str) -> Sequence[LessonDraftModel]:
        """
        List all drafts of a session in section/lesson order.

        Args:
            session: Database session
            session_id: Owning conversation session

        Returns:
            Sequence of LessonDraftModel rows
        """
        stmt = (
            select(LessonDraftModel)
            .where(LessonDraftModel.session_id == session_id)
            .order_by(
                LessonDraftModel.section_id,
                LessonDraftModel.order_index,
                LessonDraftModel.lesson_id,
            )
        )
        return session.execute(stmt).scalars().all()

    def upsert(
        self,
        session: Session,
        session_id: str,
        section_id: str,
        lesson_id: str,
        content: str,
        order_index: int = 0,
    ) -> LessonDraftModel:
        """
        Insert or overwrite the draft for (session, section, lesson).

        Args:
            session: Database session
            session_id: Owning conversation session
            section_id: Section key
            lesson_id: Lesson key
            content: Draft lesson body
            order_index: Position within the section

        Returns:
            The persisted LessonDraftModel
        """
        existing = self.get_draft(session, session_id, section_id, lesson_id)
        if existing is None:
            return self.create(
                session,
                session_id=session_id,
                section_id=section_id,
                lesson_id=lesson_id,
                content=content,
                order_index=order_index,
            )
        return self.update(session, existing, content=content, order_index=order_index)

    def delete_draft(
        self,
        session: Session,
        session_id: str,
        section_id: str,
        lesson_id: str,
    ) -> bool:
        stmt = delete(LessonDraftModel).where(
            LessonDraftModel.session_id == session_id,
            LessonDraftModel.section_id == section_id,
            LessonDraftModel.lesson_id == lesson_id,
        )
        return session.execute(stmt).rowcount > 0

    def delete_by_session(self, session: Session, session_id: str) -> int:
        """
        Delete every draft of a session.

        Args:
            session: Database session
            session_id: Owning conversation session

        Returns:
            int: Number of rows deleted
        """
        stmt = delete(LessonDraftModel).where(LessonDraftModel.session_id == session_id)
        return session.execute(stmt).rowcount


lesson_draft_crud = LessonDraftCRUD()
