"""
Course API endpoints.

Routes:
- POST /sessions/{id}/publish - Publish the session's outline as a course
- POST /lessons/content - Generate a lesson's content

Dependencies: course_copilot.application.services.course_service
System role: Course publishing HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from course_copilot.api.deps.dependencies import get_course_service
from course_copilot.api.routers.router_utils import handle_copilot_errors, success
from course_copilot.application.services.course_service import CourseService
from course_copilot.models.common import SuccessResponse
from course_copilot.models.course import (
    LessonContentRequest,
    LessonContentResult,
    PublishCourseRequest,
    PublishResult,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["courses"])


@router.post("/sessions/{session_id}/publish", response_model=SuccessResponse[PublishResult])
@handle_copilot_errors
def publish_course(
    session_id: str,
    request: PublishCourseRequest,
    course_service: CourseService = Depends(get_course_service),
):
    """
    Publish a session's outline, with lesson drafts folded in.

    Args:
        session_id: Session identifier
        request: Optional outline overriding the stored one
        course_service: Injected CourseService

    Returns:
        SuccessResponse[PublishResult]: Created course id and edit URL
    """
    result = course_service.publish_course(session_id, request.course_data)
    return success(result)


@router.post("/lessons/content", response_model=SuccessResponse[LessonContentResult])
@handle_copilot_errors
def generate_lesson_content(
    request: LessonContentRequest,
    course_service: CourseService = Depends(get_course_service),
):
    """Generate a lesson's content from its title and course context."""
    return success(course_service.generate_lesson_content(request.lesson_title, request.course_context))
