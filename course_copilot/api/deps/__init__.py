"""Dependency injection for API routes."""

from course_copilot.api.deps.dependencies import (
    ServiceCache,
    get_chat_service,
    get_course_service,
    get_current_user_id,
    get_lesson_draft_service,
    get_quiz_service,
    get_quiz_validation_service,
    get_service_cache,
    get_session_service,
    get_session_store,
)

__all__ = [
    "ServiceCache",
    "get_chat_service",
    "get_course_service",
    "get_current_user_id",
    "get_lesson_draft_service",
    "get_quiz_service",
    "get_quiz_validation_service",
    "get_service_cache",
    "get_session_service",
    "get_session_store",
]
