"""
Course service orchestrator.

Materializes a session's outline into a real course through the host's
publisher, and drafts lesson content with the language model.

Dependencies: course_copilot.application.services, course_copilot.boundary.llm
System role: Course publishing and lesson content use cases
"""

from datetime import datetime, timezone
import logging
from typing import Any, Protocol

from course_copilot.application.services.lesson_draft_service import LessonDraftService
from course_copilot.application.services.session_store import SessionStore
from course_copilot.boundary.llm.llm_client import LLMClient
from course_copilot.core.exceptions import (
    CoursePublishError,
    SessionNotFoundError,
    ValidationError,
)
from course_copilot.core.prompts.course_prompt import build_lesson_content_prompt
from course_copilot.models.course import LessonContentResult, PublishResult

logger = logging.getLogger(__name__)


class CoursePublisher(Protocol):
    """Host service that turns an outline into course content."""

    def publish(self, outline: dict[str, Any]) -> PublishResult:
        ...


class CourseService:
    """Course publishing and lesson content orchestrator."""

    def __init__(
        self,
        store: SessionStore,
        drafts: LessonDraftService,
        llm_client: LLMClient,
        publisher: CoursePublisher | None = None,
    ) -> None:
        """
        Initialize course service.

        Args:
            store: Session persistence
            drafts: Lesson draft use cases
            llm_client: Language model client for lesson content
            publisher: Host course publisher; publishing fails without one
        """
        self.store = store
        self.drafts = drafts
        self.llm_client = llm_client
        self.publisher = publisher

    def publish_course(
        self,
        session_id: str,
        course_data: dict[str, Any] | None = None,
    ) -> PublishResult:
        """
        Publish a session's outline as a course.

        Lesson drafts are folded into the outline first. On success the
        session records the published course id, edit URL and time, and
        the drafts are deleted.

        Args:
            session_id: Session whose course is published
            course_data: Outline to publish; defaults to the session's outline

        Returns:
            PublishResult: Publisher's result

        Raises:
            SessionNotFoundError: If the session does not exist
            ValidationError: If the outline has no title
            CoursePublishError: If no publisher is configured or publishing fails
        """
        session = self.store.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)

        outline = course_data or session.outline or {}
        if not outline.get("title"):
            raise ValidationError("Course title is required", field="course_data")

        if self.publisher is None:
            raise CoursePublishError("No course publisher is configured", session_id=session_id)

        outline = self.drafts.map_drafts_to_outline(session_id, outline)
        try:
            result = self.publisher.publish(outline)
        except CoursePublishError:
            raise
        except Exception as e:
            logger.error(
                "Course publisher raised",
                extra={"session_id": session_id, "error_type": type(e).__name__, "error_msg": str(e)},
            )
            raise CoursePublishError(f"Failed to create course: {e}", session_id=session_id) from e

        if not result.success:
            raise CoursePublishError(result.error or "Failed to create course", session_id=session_id)

        session.set_outline(outline)
        session.apply_course_title()
        session.set_metadata("published_course_id", result.course_id)
        session.set_metadata("published_course_url", result.edit_url)
        session.set_metadata("published_at", datetime.now(timezone.utc).isoformat())
        self.store.save(session)
        self.drafts.delete_session_drafts(session_id)

        logger.info(
            "Course published",
            extra={"session_id": session_id, "course_id": str(result.course_id), "title": outline["title"]},
        )
        return result

    def generate_lesson_content(
        self,
        lesson_title: str,
        course_context: dict[str, Any] | None = None,
    ) -> LessonContentResult:
        """
        Draft the body of a single lesson.

        Args:
            lesson_title: Lesson to write
            course_context: Optional parent course {title, description}

        Returns:
            LessonContentResult: Generated content

        Raises:
            ValidationError: If lesson_title is blank
            LLMServiceError: If the model call fails
        """
        if not lesson_title or not lesson_title.strip():
            raise ValidationError("Lesson title is required", field="lesson_title")

        response = self.llm_client.generate(build_lesson_content_prompt(lesson_title, course_context))
        logger.info(
            "Lesson content generated",
            extra={"lesson_title": lesson_title, "content_length": len(response.content)},
        )
        return LessonContentResult(content=response.content)
