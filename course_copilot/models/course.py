"""
Course publishing and lesson content schemas.

Outlines travel as plain dicts so unknown keys round-trip unchanged.

Dependencies: pydantic
System role: Course API contracts
"""

from typing import Any

from pydantic import BaseModel, Field


class PublishCourseRequest(BaseModel):
    course_data: dict[str, Any] | None = Field(
        default=None,
        description="Outline to publish; defaults to the session's current outline",
    )


class PublishResult(BaseModel):
    """Result reported by the content-materialization service."""

    success: bool
    course_id: Any | None = None
    edit_url: str | None = None
    error: str | None = None


class LessonContentRequest(BaseModel):
    lesson_title: str = Field(description="Lesson to write")
    course_context: dict[str, Any] = Field(default_factory=dict, description="Parent course title/description")


class LessonContentResult(BaseModel):
    content: str
