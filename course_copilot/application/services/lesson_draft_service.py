"""
Lesson draft service.

Saves lesson content written before publishing and folds it back into
the outline when the course is materialized.

Dependencies: sqlalchemy, course_copilot.boundary.db.CRUD
System role: Lesson draft use case orchestration
"""

import copy
import logging
from typing import Any

from sqlalchemy.orm import Session

from course_copilot.boundary.db.CRUD.lesson_draft_crud import lesson_draft_crud
from course_copilot.boundary.db.models.lesson_draft_model import LessonDraftModel
from course_copilot.core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def section_key(section_index: int) -> str:
    """Key of the section at a 0-based position: section_<n>."""
    return f"section_{section_index + 1}"


def lesson_key(section_index: int, lesson_index: int) -> str:
    """Key of the lesson at 0-based positions: lesson_<s>_<n>."""
    return f"lesson_{section_index + 1}_{lesson_index + 1}"


def draft_to_dict(draft: LessonDraftModel) -> dict[str, Any]:
    return {
        "session_id": draft.session_id,
        "section_id": draft.section_id,
        "lesson_id": draft.lesson_id,
        "content": draft.content,
        "order_index": draft.order_index,
        "created_at": draft.created_at,
        "updated_at": draft.updated_at,
    }


class LessonDraftService:
    """Lesson draft use cases."""

    def __init__(self, db: Session) -> None:
        """
        Initialize lesson draft service.

        Args:
            db: SQLAlchemy session
        """
        self.db = db

    def save_draft(
        self,
        session_id: str,
        section_id: str,
        lesson_id: str,
        content: str,
        order_index: int = 0,
    ) -> dict[str, Any]:
        """
        Create or overwrite a lesson draft.

        Args:
            session_id: Owning conversation session
            section_id: Section key (section_<n>)
            lesson_id: Lesson key (lesson_<s>_<n>)
            content: Draft lesson body
            order_index: Position within the section

        Returns:
            dict: Stored draft

        Raises:
            ValidationError: If any key is blank
        """
        if not session_id or not section_id or not lesson_id:
            raise ValidationError("Session ID, section ID and lesson ID are required")

        try:
            draft = lesson_draft_crud.upsert(
                self.db,
                session_id,
                section_id,
                lesson_id,
                content=content,
                order_index=order_index,
            )
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.error(
                "Failed to save lesson draft",
                extra={"session_id": session_id, "lesson_id": lesson_id, "error": str(e)},
            )
            raise

        logger.info(
            "Lesson draft saved",
            extra={"session_id": session_id, "section_id": section_id, "lesson_id": lesson_id},
        )
        return draft_to_dict(draft)

    def get_draft(self, session_id: str, section_id: str, lesson_id: str) -> dict[str, Any] | None:
        draft = lesson_draft_crud.get_draft(self.db, session_id, section_id, lesson_id)
        return draft_to_dict(draft) if draft is not None else None

    def list_drafts(self, session_id: str) -> list[dict[str, Any]]:
        return [draft_to_dict(draft) for draft in lesson_draft_crud.list_by_session(self.db, session_id)]

    def delete_draft(self, session_id: str, section_id: str, lesson_id: str) -> bool:
        deleted = lesson_draft_crud.delete_draft(self.db, session_id, section_id, lesson_id)
        self.db.commit()
        return deleted

    def delete_session_drafts(self, session_id: str) -> int:
        """
        Delete every draft of a session.

        Args:
            session_id: Owning conversation session

        Returns:
            int: Number of drafts removed
        """
        count = lesson_draft_crud.delete_by_session(self.db, session_id)
        self.db.commit()
        if count:
            logger.info("Lesson drafts deleted", extra={"session_id": session_id, "count": count})
        return count

    def copy_session_drafts(self, source_session_id: str, target_session_id: str) -> int:
        """
        Copy every draft of one session to another.

        Args:
            source_session_id: Session to copy from
            target_session_id: Session to copy into

        Returns:
            int: Number of drafts copied
        """
        drafts = lesson_draft_crud.list_by_session(self.db, source_session_id)
        for draft in drafts:
            lesson_draft_crud.upsert(
                self.db,
                target_session_id,
                draft.section_id,
                draft.lesson_id,
                content=draft.content,
                order_index=draft.order_index,
            )
        self.db.commit()
        return len(drafts)

    def map_drafts_to_outline(self, session_id: str, outline: dict[str, Any]) -> dict[str, Any]:
        """
        Copy draft content into the matching lessons of an outline.

        Lessons are matched by position: section_<i+1> / lesson_<i+1>_<j+1>.

        Args:
            session_id: Owning conversation session
            outline: Course outline (not modified)

        Returns:
            dict: New outline with lesson content filled from drafts
        """
        drafts = lesson_draft_crud.list_by_session(self.db, session_id)
        if not drafts:
            return outline

        draft_map = {(draft.section_id, draft.lesson_id): draft.content for draft in drafts}
        mapped = copy.deepcopy(outline)
        for section_index, section in enumerate(mapped.get("sections") or []):
            if not isinstance(section, dict):
                continue
            for lesson_index, lesson in enumerate(section.get("lessons") or []):
                key = (section_key(section_index), lesson_key(section_index, lesson_index))
                if isinstance(lesson, dict) and key in draft_map:
                    lesson["content"] = draft_map[key]
        return mapped
