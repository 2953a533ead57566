"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from course_copilot.boundary.db.CRUD import conversation_crud

    row = conversation_crud.get_by_session_id(db, session_id)
"""

from course_copilot.boundary.db.CRUD.base_crud import BaseCRUD
from course_copilot.boundary.db.CRUD.conversation_crud import ConversationCRUD, conversation_crud
from course_copilot.boundary.db.CRUD.lesson_draft_crud import LessonDraftCRUD, lesson_draft_crud

__all__ = [
    "BaseCRUD",
    "ConversationCRUD",
    "conversation_crud",
    "LessonDraftCRUD",
    "lesson_draft_crud",
]
