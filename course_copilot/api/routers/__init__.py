"""
API routers.

Each module exposes a `router` mounted by the application factory.
"""

from course_copilot.api.routers.chat import router as chat_router
from course_copilot.api.routers.courses import router as courses_router
from course_copilot.api.routers.drafts import router as drafts_router
from course_copilot.api.routers.health import router as health_router
from course_copilot.api.routers.quizzes import router as quizzes_router
from course_copilot.api.routers.sessions import router as sessions_router

__all__ = [
    "chat_router",
    "courses_router",
    "drafts_router",
    "health_router",
    "quizzes_router",
    "sessions_router",
]
