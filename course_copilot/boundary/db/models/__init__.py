"""
Database models package.

Exports:
  - ConversationModel: Persisted course-authoring conversation
  - LessonDraftModel: Saved lesson content keyed by session/section/lesson

Dependencies: sqlalchemy, course_copilot.boundary.db.base
System role: Database model definitions for domain entities
"""

from course_copilot.boundary.db.models.conversation_model import ConversationModel
from course_copilot.boundary.db.models.lesson_draft_model import LessonDraftModel

__all__ = ["ConversationModel", "LessonDraftModel"]
