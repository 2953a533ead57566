"""
Application services.

Use-case orchestrators wired by the API dependency layer.
"""

from course_copilot.application.services.chat_service import ChatService
from course_copilot.application.services.course_service import CoursePublisher, CourseService
from course_copilot.application.services.lesson_draft_service import LessonDraftService
from course_copilot.application.services.quiz_service import QuizService
from course_copilot.application.services.session_service import SessionService
from course_copilot.application.services.session_store import SessionStore

__all__ = [
    "ChatService",
    "CoursePublisher",
    "CourseService",
    "LessonDraftService",
    "QuizService",
    "SessionService",
    "SessionStore",
]
