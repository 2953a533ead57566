"""Prompt templates and builders for the course-authoring assistant."""

from course_copilot.core.prompts.course_prompt import (
    COURSE_KEYWORDS,
    CoursePromptBuilder,
    build_lesson_content_prompt,
    build_quiz_generation_prompt,
)

__all__ = [
    "COURSE_KEYWORDS",
    "CoursePromptBuilder",
    "build_lesson_content_prompt",
    "build_quiz_generation_prompt",
]
